"""Data models for df-sol."""
from df_sol.models.assets import (
    AssetEntry,
    EntryType,
    GeneratedSummary,
    GenerationPlan,
    PlanEntry,
)
from df_sol.models.options import Language, Layout, ProgramTemplate, TemplateKind, TestFramework

__all__ = [
    'AssetEntry',
    'EntryType',
    'GeneratedSummary',
    'GenerationPlan',
    'PlanEntry',
    'Language',
    'Layout',
    'ProgramTemplate',
    'TemplateKind',
    'TestFramework',
]
