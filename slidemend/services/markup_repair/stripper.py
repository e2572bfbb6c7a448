"""
Aggressive HTML stripping.

Last-resort normalization when structural repair is not enough to get a deck
through the compiler: every tag outside the frontmatter is deleted, keeping
only the text between tags. Code regions are protected exactly as in
sanitize(). Formatting is lost; structural validity is guaranteed.
"""

import logging
import re
from typing import List, Tuple

from .tag_balance import tag_pattern, tag_start_pattern
from .verbatim import protect, restore

logger = logging.getLogger(__name__)

FRONTMATTER_DELIMITER = "---"


def _frontmatter_span(lines: List[str]) -> Tuple[int, int]:
    """Line range [start, end) of the metadata block, delimiters included.

    The block runs from the first bare delimiter line to the second, or to the
    end of the document when the second never comes.
    """
    start = None
    for i, line in enumerate(lines):
        if line.strip() != FRONTMATTER_DELIMITER:
            continue
        if start is None:
            start = i
        else:
            return start, i + 1
    if start is None:
        return 0, 0
    return start, len(lines)


def _strip_body(body: str, marker: str) -> str:
    # Tags may span lines; stray <...> runs are only removed within a line
    body = tag_pattern(marker).sub("", body)
    stray = re.compile(f"<[^>\n{re.escape(marker)}]+>")
    body = stray.sub("", body)

    body = body.replace("&lt;", "<").replace("&gt;", ">")

    # Un-escaping must not leave a tag behind; every < that opens one stays escaped
    return tag_start_pattern(marker).sub("&lt;", body)


def strip_all(document: str) -> str:
    """Remove all markup outside the leading metadata block.

    The metadata block runs from the first bare `---` line to the second and
    is passed through untouched. Everywhere else tag-shaped sequences are
    deleted, including ones whose attributes run over several lines, and
    `&lt;` / `&gt;` entities are turned back into characters.

    Args:
        document: Raw slide markdown.

    Returns:
        Stripped document.
    """
    logger.info("Applying aggressive HTML stripping (fallback mode)...")

    protected = protect(document)
    lines = protected.text.split("\n")
    start, end = _frontmatter_span(lines)

    pieces = []
    if start > 0:
        pieces.append(_strip_body("\n".join(lines[:start]), protected.marker))
    pieces.extend(lines[start:end])
    if end < len(lines):
        pieces.append(_strip_body("\n".join(lines[end:]), protected.marker))

    result = restore("\n".join(pieces), protected)
    logger.info("Aggressive HTML stripping complete")
    return result
