"""
Prose angle-bracket escaping.

Generated slides often mention `Array<string>` or `a < b` in running text.
The template compiler reads those as broken tags, so anything that does not
look like real markup is turned into entities. Only local lexical context is
used: a bracket is judged by the characters right next to it.
"""

import logging
import re

logger = logging.getLogger(__name__)

# Element names commonly emitted into slide markdown
KNOWN_HTML_TAGS = frozenset({
    "div", "span", "p", "a", "img", "br", "hr",
    "h1", "h2", "h3", "h4", "h5", "h6",
    "ul", "ol", "li", "table", "tr", "td", "th", "thead", "tbody",
    "strong", "em", "b", "i", "u", "s", "code", "pre",
    "blockquote", "sup", "sub", "mark", "small",
    "details", "summary", "figure", "figcaption",
    "video", "audio", "source", "iframe",
})

# word<word> or word<word, word>
GENERIC_TYPE_PATTERN = re.compile(r"(\w+)<(\w+(?:,\s*\w+)*)>", re.ASCII)

# > not preceded by something that can end a tag
_STRAY_CLOSE_PATTERN = re.compile(r"(?<![a-zA-Z0-9\"'\-/])>")


def _escape_generic_type(match: "re.Match[str]") -> str:
    before, inside = match.group(1), match.group(2)
    if before.lower() in KNOWN_HTML_TAGS:
        return match.group(0)
    logger.info(f"  Escaping generic type: {match.group(0)}")
    return f"{before}&lt;{inside}&gt;"


def escape_prose_brackets(text: str, marker: str = "") -> str:
    """Entity-escape angle brackets that read as prose rather than markup.

    Rules, applied in order:
    1. identifier<identifier, ...> is escaped unless the leading identifier
       is a known tag name.
    2. A < not followed by a letter, /, ! or the placeholder marker is escaped.
    3. A > not preceded by a letter, digit, quote, hyphen or / is escaped.

    Args:
        text: Verbatim-protected working text.
        marker: Placeholder sentinel from the verbatim protector, if any.

    Returns:
        Text with prose brackets replaced by &lt; / &gt;.
    """
    text = GENERIC_TYPE_PATTERN.sub(_escape_generic_type, text)

    follow = "[a-zA-Z/!]"
    if marker:
        follow = f"[a-zA-Z/!]|{re.escape(marker)}"
    text = re.sub(f"<(?!{follow})", "&lt;", text)

    return _STRAY_CLOSE_PATTERN.sub("&gt;", text)
