"""Anchor workspace scaffolding system.

Resolves a bundled template set for the selected options and writes it out
with project-specific names substituted in.
"""

from .catalog import AssetCatalog, get_catalog
from .core import ScaffoldManager, ScaffoldRequest
from .generator import TreeGenerator
from .resolver import TemplateResolver

__all__ = [
    "AssetCatalog",
    "ScaffoldManager",
    "ScaffoldRequest",
    "TemplateResolver",
    "TreeGenerator",
    "get_catalog",
]
