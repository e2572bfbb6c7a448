"""
Unit tests for the aggressive HTML stripper.

Run with: pytest tests/services/markup_repair/test_stripper.py -v
"""

import pytest

from slidemend.services.markup_repair import strip_all
from slidemend.services.markup_repair.tag_balance import tag_pattern


def _body_after_frontmatter(text: str) -> str:
    parts = text.split("---\n", 2)
    return parts[2] if len(parts) == 3 else text


class TestStripAll:
    def test_frontmatter_kept_body_stripped(self):
        doc = (
            "---\n"
            "theme: default\n"
            "title: <b>Deck</b>\n"
            "---\n"
            "\n"
            "# Slide\n"
            '<div class="x">Hello <b>world</b></div>\n'
            "---\n"
            "<span>Next</span>"
        )
        assert strip_all(doc) == (
            "---\n"
            "theme: default\n"
            "title: <b>Deck</b>\n"
            "---\n"
            "\n"
            "# Slide\n"
            "Hello world\n"
            "---\n"
            "Next"
        )

    def test_no_frontmatter(self):
        assert strip_all("<p>drop</p> the tags") == "drop the tags"

    def test_fenced_code_preserved(self):
        doc = "```html\n<div>keep</div>\n```\n<p>drop</p>"
        assert strip_all(doc) == "```html\n<div>keep</div>\n```\ndrop"

    def test_inline_code_preserved(self):
        assert strip_all("Use `<br>` <i>here</i>") == "Use `<br>` here"

    def test_entities_unescaped(self):
        assert strip_all("a &lt; b and c &gt; d") == "a < b and c > d"

    def test_unescaping_never_creates_a_tag(self):
        result = strip_all("Write &lt;div&gt; tags")
        assert result == "Write &lt;div> tags"
        assert not tag_pattern().search(result)

    def test_crlf_frontmatter(self):
        doc = "---\r\ntitle: x\r\n---\r\n<b>hi</b>\r\n"
        assert strip_all(doc) == "---\r\ntitle: x\r\n---\r\nhi\r\n"

    @pytest.mark.parametrize("markup", [
        "<div><p>unclosed <span class='a'>x</div></p>",
        "<<b>> </ i> <br/> <Component :prop=\"v\" />",
        "&lt;script&gt;alert(1)&lt;/script&gt;",
        "<details>\n<summary>More</summary>\n",
        "Array<string> and Map<K, V>",
        "<div\n  class=\"x\">Hi</div>",
        "<Component\n  :items=\"list\"\n/>\ntext",
        "&lt;div\n  class=x&gt;",
        "&lt;a &lt;b&gt;",
        "<<b>b>",
        "slide one\n---\n<section\n  id=\"two\">two</section>",
    ])
    def test_no_tags_left_outside_frontmatter(self, markup):
        doc = f"---\ntitle: <em>T</em>\n---\n{markup}"
        result = strip_all(doc)
        assert result.startswith("---\ntitle: <em>T</em>\n---\n")
        assert not tag_pattern().search(_body_after_frontmatter(result))

    def test_tag_attributes_spanning_lines(self):
        doc = "---\ntitle: T\n---\n<div\n  class=\"x\">Hi</div>"
        assert strip_all(doc) == "---\ntitle: T\n---\nHi"

    def test_multiline_tag_before_frontmatter_delimiter(self):
        doc = "<p\n  class=\"lead\">Intro</p>\n---\ntitle: <b>x</b>\n---"
        assert strip_all(doc) == "Intro\n---\ntitle: <b>x</b>\n---"

    def test_nested_unescaped_brackets_stay_escaped(self):
        assert strip_all("&lt;a &lt;b&gt;") == "&lt;a &lt;b>"

    @pytest.mark.parametrize("doc", [
        "```x```I1```y``` <b>z</b>",
        "```\ncode\n```I5`y`",
    ])
    def test_index_text_between_code_regions_kept(self, doc):
        assert strip_all(doc) == doc.replace("<b>", "").replace("</b>", "")

    def test_no_placeholder_leakage(self):
        result = strip_all("```a``` `b` <i>c</i>")
        assert result == "```a``` `b` c"

    def test_empty(self):
        assert strip_all("") == ""
