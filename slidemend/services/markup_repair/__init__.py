"""
Markup repair for generated slide decks.

Makes hybrid markdown/HTML acceptable to a strict template compiler:
- sanitize(): protect code, escape prose brackets, balance tags
- validate(): advisory structural pre-check
- strip_all(): lossy fallback that removes all markup outside frontmatter
"""

from slidemend.services.markup_repair.models import (
    BalanceReport,
    ProtectedDocument,
    TagKind,
    TagToken,
    ValidationReport,
    VerbatimRegion,
)
from slidemend.services.markup_repair.sanitizer import sanitize
from slidemend.services.markup_repair.stripper import strip_all
from slidemend.services.markup_repair.tag_balance import analyze, tokenize
from slidemend.services.markup_repair.validator import validate
from slidemend.services.markup_repair.verbatim import SentinelExhaustedError, protect, restore

__all__ = [
    "sanitize",
    "validate",
    "strip_all",
    "analyze",
    "tokenize",
    "protect",
    "restore",
    "SentinelExhaustedError",
    "BalanceReport",
    "ProtectedDocument",
    "TagKind",
    "TagToken",
    "ValidationReport",
    "VerbatimRegion",
]
