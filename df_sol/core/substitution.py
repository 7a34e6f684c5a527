"""Placeholder substitution for template content and paths.

Placeholders look like ``{{KEY}}``. Only keys from the fixed placeholder set
are recognized; any other ``{{...}}`` text is copied through untouched.
"""
import re
from typing import Mapping, Optional

from df_sol.core.context import PLACEHOLDER_KEYS
from df_sol.core.errors import MissingKeyError

_PLACEHOLDER_RE = re.compile(rb"\{\{([A-Z][A-Z0-9_]*)\}\}")


def substitute(content: bytes, context: Mapping[str, str],
               substitutable: bool = True, where: Optional[str] = None) -> bytes:
    """Replace known placeholders in ``content``.

    Args:
        content: Raw template bytes
        context: Placeholder values
        substitutable: When False the bytes are returned without scanning
        where: Label used in error messages (usually the template path)

    Returns:
        Content with every known placeholder replaced, single pass

    Raises:
        MissingKeyError: If a known placeholder has no value in the context
    """
    if not substitutable:
        return content

    def replace(match: "re.Match[bytes]") -> bytes:
        key = match.group(1).decode("ascii")
        if key not in PLACEHOLDER_KEYS:
            return match.group(0)
        if key not in context:
            raise MissingKeyError(key, where)
        return context[key].encode("utf-8")

    return _PLACEHOLDER_RE.sub(replace, content)


def substitute_text(text: str, context: Mapping[str, str],
                    where: Optional[str] = None) -> str:
    """Text flavour of substitute(), used for paths."""
    return substitute(text.encode("utf-8"), context, where=where).decode("utf-8")


def placeholders_in(content: bytes) -> set:
    """Known placeholder keys referenced by ``content``."""
    keys = {match.decode("ascii") for match in _PLACEHOLDER_RE.findall(content)}
    return keys & PLACEHOLDER_KEYS
