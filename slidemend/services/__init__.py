"""
Services layer for slidemend.

Separates the pure markup repair core (markup_repair) from the collaborators
that touch the outside world: the build process (SlideBuildService), file
storage (DocumentStore) and the fallback ladder tying them together
(BuildOrchestrator).
"""

from .models import BuildAttempt, BuildOutcome
from .build_service import (
    BuildResult,
    SlideBuildService,
    build_fallback_deck,
    extract_error_line,
    format_error_context,
)
from .document_store import DocumentStore
from .build_orchestrator import BuildOrchestrator

__all__ = [
    "BuildAttempt",
    "BuildOutcome",
    "BuildResult",
    "SlideBuildService",
    "build_fallback_deck",
    "extract_error_line",
    "format_error_context",
    "DocumentStore",
    "BuildOrchestrator",
]
