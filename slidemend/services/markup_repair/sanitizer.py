"""
Full markup repair pipeline.

protect -> (escape prose brackets -> analyze tag balance -> repair)* -> restore

Every pass works on a fresh string and holds no state between calls, so
sanitize() can be called repeatedly and from anywhere.
"""

import logging

from .escaper import escape_prose_brackets
from .repair import repair_structure
from .tag_balance import analyze
from .verbatim import protect, restore

logger = logging.getLogger(__name__)


def _repair_pass(text: str, marker: str) -> str:
    working = escape_prose_brackets(text, marker)
    report = analyze(working, marker)
    return repair_structure(working, report)


def sanitize(document: str) -> str:
    """Repair generated markup so a strict template compiler accepts it.

    1. Lifts code blocks and inline code out of the way
    2. Escapes angle brackets that read as prose (generics, comparisons)
    3. Removes orphan closing tags and closes tags left open
    4. Repeats 2-3 until nothing changes
    5. Puts the code back verbatim

    Step 4 matters when removing a closer joins text into a new prose shape:
    `Foo</q><Bar>` becomes `Foo<Bar></bar>` after one pass, which a second
    pass escapes. Running to a fixpoint keeps sanitize(sanitize(x)) equal to
    sanitize(x).

    Args:
        document: Raw slide markdown with embedded HTML.

    Returns:
        Repaired document. Never raises for structural problems.
    """
    logger.info("Starting HTML sanitization...")

    protected = protect(document)
    working = protected.text

    # After the first pass, any pass that changes the text escapes at least one <
    max_passes = working.count("<") + 2
    for passes in range(1, max_passes + 1):
        repaired = _repair_pass(working, protected.marker)
        if repaired == working:
            break
        working = repaired
        if passes > 1:
            logger.info(f"  Repair pass {passes} changed the document")

    result = restore(working, protected)
    logger.info("HTML sanitization complete")
    return result
