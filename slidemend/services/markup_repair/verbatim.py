"""
Verbatim region protection.

Fenced code blocks and inline code spans are swapped out for opaque
placeholders before any markup repair runs, then swapped back afterwards, so
nothing inside code is ever rewritten.

Placeholders are built around a sentinel character taken from the Unicode
private-use areas that does not occur anywhere in the input. Every sentinel in
the masked text therefore belongs to a placeholder we created, which is what
makes restoration exact.
"""

import logging
import re
from typing import Iterator

from .models import ProtectedDocument, RegionKind, VerbatimRegion

logger = logging.getLogger(__name__)

FENCED_PATTERN = re.compile(r"```[\s\S]*?```")
INLINE_PATTERN = re.compile(r"`[^`\n]+`")

# BMP private-use area, then supplementary planes 15 and 16
_SENTINEL_RANGES = (
    (0xE000, 0xF8FF),
    (0xF0000, 0xFFFFD),
    (0x100000, 0x10FFFD),
)


def _sentinel_candidates() -> Iterator[str]:
    for low, high in _SENTINEL_RANGES:
        for codepoint in range(low, high + 1):
            yield chr(codepoint)


class SentinelExhaustedError(ValueError):
    """Every private-use codepoint occurs in the document."""


def choose_marker(document: str) -> str:
    """Pick a sentinel character that does not appear in the document.

    The input domain of every markup repair operation is documents that leave
    at least one of the 137,468 private-use codepoints unused. Anything else
    is not slide text, and is rejected here before any rewriting starts.

    Raises:
        SentinelExhaustedError: The document uses every candidate.
    """
    present = set(document)
    for candidate in _sentinel_candidates():
        if candidate not in present:
            return candidate
    raise SentinelExhaustedError("No free private-use character available for placeholders")


def protect(document: str) -> ProtectedDocument:
    """Replace fenced blocks, then inline spans, with indexed placeholders.

    Args:
        document: Raw markdown/HTML text.

    Returns:
        ProtectedDocument with the masked text and the lifted regions in
        discovery order (fenced first, then inline).
    """
    document = document or ""
    marker = choose_marker(document)
    protected = ProtectedDocument(text=document, marker=marker)

    def _lift(kind: RegionKind):
        counter = [0]

        def _replace(match: "re.Match[str]") -> str:
            index = counter[0]
            counter[0] += 1
            placeholder = f"{marker}{kind.value}{index}{marker}"
            protected.regions.append(VerbatimRegion(
                kind=kind,
                index=index,
                text=match.group(0),
                placeholder=placeholder,
            ))
            return placeholder

        return _replace

    masked = FENCED_PATTERN.sub(_lift(RegionKind.FENCED), document)
    masked = INLINE_PATTERN.sub(_lift(RegionKind.INLINE), masked)
    protected.text = masked

    if protected.regions:
        logger.debug(f"Protected {len(protected.regions)} verbatim region(s)")
    return protected


def restore(text: str, protected: ProtectedDocument) -> str:
    """Substitute every placeholder in text with its original region.

    One left-to-right pass over both placeholder kinds, so the text between
    two adjacent placeholders (say `I1`) is never read as a placeholder of its
    own. An inline span can have swallowed a fenced placeholder, so the pass
    repeats until nothing more is substituted; fenced text never contains the
    marker, which bounds this to two passes.
    """
    if not protected.regions:
        return text

    lookup = protected.lookup()
    marker = re.escape(protected.marker)
    kinds = "".join(kind.value for kind in RegionKind)
    pattern = re.compile(f"{marker}[{kinds}]\\d+{marker}")

    def _swap(match: "re.Match[str]") -> str:
        region = lookup.get(match.group(0))
        return region.text if region else match.group(0)

    while True:
        restored = pattern.sub(_swap, text)
        if restored == text:
            return restored
        text = restored


def remove_verbatim(document: str) -> str:
    """Drop code regions outright, for checks that never need them back."""
    without_fenced = FENCED_PATTERN.sub("", document or "")
    return INLINE_PATTERN.sub("", without_fenced)
