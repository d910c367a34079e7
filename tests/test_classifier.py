"""Tests for markup line classification."""

import pytest

from chord_layout.markup.classifier import classify_line, indent_for


class TestClassifyLine:
    @pytest.mark.parametrize("line", ["", "   ", "\t"])
    def test_blank(self, line: str) -> None:
        assert classify_line(line).kind == "blank"

    def test_comment(self) -> None:
        assert classify_line("# a comment").kind == "comment"

    def test_comment_after_whitespace(self) -> None:
        assert classify_line("   # indented comment").kind == "comment"

    def test_indent_directive(self) -> None:
        classified = classify_line("#***")
        assert classified.kind == "indent"
        assert classified.indent == 1.0

    @pytest.mark.parametrize(
        ("line", "kind"),
        [
            ("[title]Amazing Grace", "title"),
            ("[Title]Amazing Grace", "title"),
            ("[instruct]Slowly", "instruct"),
            ("[INSTRUCT]Slowly", "instruct"),
            ("[pagebreak]", "pagebreak"),
            ("[PageBreak]", "pagebreak"),
        ],
    )
    def test_keywords(self, line: str, kind: str) -> None:
        assert classify_line(line).kind == kind

    def test_keyword_token_removed(self) -> None:
        classified = classify_line("[title]Amazing Grace")
        assert [t.text for t in classified.tokens] == ["Amazing", " ", "Grace"]

    def test_keyword_only_at_line_start(self) -> None:
        assert classify_line("Go to [title]").kind == "chord_lyric"

    def test_lyric(self) -> None:
        assert classify_line("plain words").kind == "lyric"

    def test_chord_lyric(self) -> None:
        assert classify_line("[G]Amazing grace").kind == "chord_lyric"

    @pytest.mark.parametrize("line", ["[]", "]", "[[]]"])
    def test_stray_brackets_are_empty_lyric(self, line: str) -> None:
        classified = classify_line(line)
        assert classified.kind == "lyric"
        assert classified.tokens == ()

    def test_line_is_trimmed(self) -> None:
        classified = classify_line("   words  ")
        assert [t.text for t in classified.tokens] == ["words"]


class TestIndentFor:
    @pytest.mark.parametrize(
        ("line", "indent"),
        [
            ("#*", 0.0),
            ("#**", 0.5),
            ("#***", 1.0),
            ("#****", 1.5),
            ("#** chorus *", 0.5),
        ],
    )
    def test_consecutive_stars(self, line: str, indent: float) -> None:
        assert indent_for(line) == indent
