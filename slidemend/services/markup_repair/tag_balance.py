"""
Tag balance analysis.

Single left-to-right scan over tag-shaped sequences with a nesting stack.
A closing tag matches the nearest open tag of the same name anywhere on the
stack (tag soup recovery): entries above the match stay open and are reported
as unclosed, they are not auto-closed.
"""

import logging
import re
from typing import Iterator, List

from .models import BalanceReport, TagKind, TagToken

logger = logging.getLogger(__name__)

VOID_ELEMENTS = frozenset({
    "br", "hr", "img", "input", "meta", "link",
    "area", "base", "col", "embed", "source", "track", "wbr",
})


def _tag_body(marker: str) -> str:
    excluded = ">" + re.escape(marker) if marker else ">"
    return f"(/?)([a-zA-Z][a-zA-Z0-9]*)\\b[^{excluded}]*/?>"


def tag_pattern(marker: str = "") -> "re.Pattern[str]":
    """Tag grammar: < /? name attrs /? >

    Attribute text never spans a placeholder marker, so a removed tag can
    never take a protected region with it.
    """
    return re.compile("<" + _tag_body(marker), re.ASCII)


def tag_start_pattern(marker: str = "") -> "re.Pattern[str]":
    """Match just the < of every tag-shaped sequence, overlapping ones included."""
    return re.compile(f"<(?={_tag_body(marker)})", re.ASCII)


def tokenize(text: str, marker: str = "") -> Iterator[TagToken]:
    """Yield a TagToken for every tag-shaped sequence in text."""
    for match in tag_pattern(marker).finditer(text):
        raw = match.group(0)
        name = match.group(2).lower()

        if raw.endswith("/>") or name in VOID_ELEMENTS:
            kind = TagKind.SELF_CLOSING
        elif match.group(1):
            kind = TagKind.CLOSE
        else:
            kind = TagKind.OPEN

        yield TagToken(name=name, kind=kind, start=match.start(), end=match.end(), raw=raw)


def analyze(text: str, marker: str = "") -> BalanceReport:
    """Classify closing tags as matched or orphan, and find unclosed openers.

    Args:
        text: Working text (verbatim regions already protected).
        marker: Placeholder sentinel from the verbatim protector, if any.

    Returns:
        BalanceReport with orphan closers in scan order and unclosed openers
        in stack order (innermost last).
    """
    stack: List[TagToken] = []
    report = BalanceReport()

    for token in tokenize(text, marker):
        if token.kind == TagKind.SELF_CLOSING:
            continue

        if token.kind == TagKind.OPEN:
            stack.append(token)
            continue

        for i in range(len(stack) - 1, -1, -1):
            if stack[i].name == token.name:
                del stack[i]
                break
        else:
            report.orphan_closers.append(token)

    report.unclosed_openers = stack
    return report
