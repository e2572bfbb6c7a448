"""
Structural validator.

Cheap advisory pre-check. It never repairs anything; callers use the findings
to decide whether to run sanitize() or go straight to strip_all().
"""

import logging
import re
from typing import Dict, List, Tuple

from .models import ValidationReport
from .verbatim import remove_verbatim

logger = logging.getLogger(__name__)

ANGLE_MISMATCH_TOLERANCE = 2

_OPEN_ANGLE = re.compile(r"<(?![!-])")
_CLOSE_ANGLE = re.compile(r"(?<!-)>")

SUSPICIOUS_PATTERNS: List[Tuple["re.Pattern[str]", str]] = [
    (re.compile(r"[A-Z]\w*<[A-Z]\w*>(?!`)", re.ASCII), "Generic type outside code block"),
    (re.compile(r"</\s+\w+>"), "Space after </"),
]

UNCLOSED_AT_LINE_END = "Potentially unclosed tag at line end"

# <name attrs> ending a line, not self-closed; zero-width so overlapping starts are all seen
_LINE_END_OPENER = re.compile(r"(?=(<(\w+)\s+[^>]*[^/]>\s*$))", re.MULTILINE)
_CLOSER = re.compile(r"</(\w+)")


def _has_unclosed_line_end_tag(text: str) -> bool:
    """True if some line-ending opener has no `</name` anywhere after it.

    Closers are indexed once by their last position, so each candidate is a
    lookup instead of a rescan of the rest of the document.
    """
    last_close: Dict[str, int] = {}
    for match in _CLOSER.finditer(text):
        last_close[match.group(1)] = match.start()

    for match in _LINE_END_OPENER.finditer(text):
        name, end = match.group(2), match.end(1)
        # `</name` also matches a longer closer name that starts with name
        closed_later = any(
            closer.startswith(name) and position >= end
            for closer, position in last_close.items()
        )
        if not closed_later:
            return True
    return False


def validate(document: str) -> ValidationReport:
    """Flag likely-invalid markup outside code regions.

    Args:
        document: Raw document text.

    Returns:
        ValidationReport; errors are warnings for the caller, never raised.
    """
    errors: List[str] = []
    without_code = remove_verbatim(document)

    open_angles = len(_OPEN_ANGLE.findall(without_code))
    close_angles = len(_CLOSE_ANGLE.findall(without_code))
    if abs(open_angles - close_angles) > ANGLE_MISMATCH_TOLERANCE:
        errors.append(f"Angle bracket mismatch: {open_angles} opening vs {close_angles} closing")

    for pattern, description in SUSPICIOUS_PATTERNS:
        if pattern.search(without_code):
            errors.append(f"Suspicious pattern: {description}")

    if _has_unclosed_line_end_tag(without_code):
        errors.append(f"Suspicious pattern: {UNCLOSED_AT_LINE_END}")

    if errors:
        logger.debug(f"Validation found {len(errors)} issue(s)")
    return ValidationReport(valid=not errors, errors=errors)
