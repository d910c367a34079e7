"""Tests for the markup tokenizer."""

import pytest

from chord_layout.markup.tokenizer import join_tokens, split_line


class TestSplitLineBasic:
    def test_words_and_spaces(self) -> None:
        tokens = split_line("Amazing grace")
        assert [t.text for t in tokens] == ["Amazing", " ", "grace"]
        assert not any(t.is_chord for t in tokens)

    def test_chord_tokens(self) -> None:
        tokens = split_line("[C]Amazing [G]grace")
        assert [(t.text, t.is_chord) for t in tokens] == [
            ("C", True),
            ("Amazing", False),
            (" ", False),
            ("G", True),
            ("grace", False),
        ]

    def test_chord_mid_word(self) -> None:
        tokens = split_line("gra[D]ce")
        assert [t.text for t in tokens] == ["gra", "D", "ce"]

    def test_empty_line(self) -> None:
        assert split_line("") == []


class TestSplitLineSpaces:
    def test_each_space_is_a_token(self) -> None:
        tokens = split_line("a  b")
        assert [t.text for t in tokens] == ["a", " ", " ", "b"]
        assert tokens[1].is_space and tokens[2].is_space

    def test_spaces_inside_brackets_are_kept(self) -> None:
        tokens = split_line("[@key F#] x")
        assert tokens[0].text == "@key F#"
        assert tokens[0].is_chord


class TestSplitLineLeniency:
    def test_unterminated_bracket_is_a_chord(self) -> None:
        tokens = split_line("hello [Am")
        assert tokens[-1].text == "Am"
        assert tokens[-1].is_chord

    def test_empty_brackets_produce_nothing(self) -> None:
        assert [t.text for t in split_line("a[]b")] == ["a", "b"]


class TestReconstruction:
    @pytest.mark.parametrize(
        "line",
        [
            "[C]Amazing [G]grace",
            "Was [Em]blind, but [D]now I [G]see",
            "plain lyric line",
            "[title]Amazing Grace",
            "[!Repeat]'Twas [G7]grace  that",
            "[C] [F] [G]",
            " leading and trailing ",
        ],
    )
    def test_tokens_rebuild_line(self, line: str) -> None:
        assert join_tokens(split_line(line)) == line
