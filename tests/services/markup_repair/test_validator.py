"""
Unit tests for the structural validator.

Run with: pytest tests/services/markup_repair/test_validator.py -v
"""

from slidemend.services.markup_repair import ValidationReport, validate


class TestValidate:
    def test_clean_markup_is_valid(self):
        report = validate("<div>ok</div>")
        assert isinstance(report, ValidationReport)
        assert report.valid
        assert report.errors == []

    def test_generic_type_outside_code(self):
        report = validate("Use Array<String> here")
        assert not report.valid
        assert report.errors == ["Suspicious pattern: Generic type outside code block"]

    def test_generic_type_inside_code_ignored(self):
        assert validate("Use `Array<String>` here").valid
        assert validate("```ts\nconst m: Map<String> = x;\n```").valid

    def test_space_after_closing_slash(self):
        report = validate("<div>x</ div>")
        assert report.errors == ["Suspicious pattern: Space after </"]

    def test_angle_mismatch_beyond_tolerance(self):
        report = validate("a < b < c < d")
        assert report.errors == ["Angle bracket mismatch: 3 opening vs 0 closing"]

    def test_angle_mismatch_within_tolerance(self):
        assert validate("a < b < c").valid

    def test_comments_and_arrows_not_counted(self):
        assert validate("<!-- a --> <!-- b --> <!-- c --> x -> y").valid

    def test_unclosed_tag_at_line_end(self):
        report = validate('<div class="x">\ntext')
        assert report.errors == ["Suspicious pattern: Potentially unclosed tag at line end"]

    def test_tag_at_line_end_closed_later(self):
        assert validate('<div class="x">\ntext\n</div>').valid

    def test_closer_before_opener_does_not_count(self):
        report = validate("</div>\n<div class=\"x\">\ntext")
        assert report.errors == ["Suspicious pattern: Potentially unclosed tag at line end"]

    def test_longer_closer_name_counts_as_close(self):
        assert validate("<div class=\"x\">\ntext</divider>").valid

    def test_every_line_end_opener_checked(self):
        report = validate("<div class=\"a\">\n<span class=\"b\">\n</div>")
        assert report.errors == ["Suspicious pattern: Potentially unclosed tag at line end"]

    def test_large_deck_of_closed_blocks(self):
        deck = "\n".join(['<div class="card">', "body", "</div>"] * 5000)
        assert validate(deck).valid

    def test_self_closed_tag_at_line_end(self):
        assert validate('<img src="a.png" />\ntext').valid

    def test_reports_every_finding(self):
        report = validate("Array<String> </ p> a < b < c < d")
        assert not report.valid
        assert len(report.errors) == 3
        assert report.errors[0].startswith("Angle bracket mismatch")

    def test_does_not_mutate_input(self):
        doc = "<div><p>unbalanced"
        validate(doc)
        assert doc == "<div><p>unbalanced"

    def test_empty(self):
        assert validate("").valid
