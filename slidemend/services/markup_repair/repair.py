"""Structural repair from a BalanceReport: drop orphan closers, close what is left open."""

import logging

from .models import BalanceReport

logger = logging.getLogger(__name__)


def repair_structure(text: str, report: BalanceReport) -> str:
    """Apply the balance findings to text.

    Orphan closers are cut out back to front so earlier offsets stay valid.
    Unclosed openers then get synthetic closers appended at the very end,
    innermost first.

    Args:
        text: The exact text the report was computed from.
        report: Output of analyze().

    Returns:
        Repaired text.
    """
    if report.orphan_closers:
        logger.info(f"  Removing {len(report.orphan_closers)} orphan closing tag(s)")
        for orphan in sorted(report.orphan_closers, key=lambda t: t.start, reverse=True):
            logger.debug(f"    - Removing orphan </{orphan.name}>")
            text = text[:orphan.start] + text[orphan.end:]

    if report.unclosed_openers:
        logger.info(f"  Adding {len(report.unclosed_openers)} missing closing tag(s)")
        closers = []
        for unclosed in reversed(report.unclosed_openers):
            logger.debug(f"    - Adding </{unclosed.name}>")
            closers.append(f"</{unclosed.name}>")
        text += "".join(closers)

    return text
