"""Tests for chord/lyric row pair layout."""

import pytest

from chord_layout.layout.dual_track import ChordLineLayout, layout_chord_line, split_words
from chord_layout.layout.pagination import PageController
from chord_layout.markup.tokenizer import split_line
from chord_layout.models import Token


def placed(controller: PageController) -> list[tuple[str, float, float, str]]:
    return [(run.text, run.x, run.y, run.weight) for run in controller.page]


def started(config) -> PageController:
    controller = PageController(config)
    controller.start()
    return controller


class TestSplitWords:
    def test_chords_stay_with_their_word(self) -> None:
        words = split_words(split_line("[C]Amazing [G]grace"))
        assert [[t.text for t in word] for word in words] == [["C", "Amazing"], ["G", "grace"]]

    def test_empty_chords_dropped(self) -> None:
        words = split_words([Token("", is_chord=True), Token("x")])
        assert [[t.text for t in word] for word in words] == [["x"]]

    def test_double_space_gives_empty_word(self) -> None:
        words = split_words(split_line("a  b"))
        assert [len(word) for word in words] == [1, 0, 1]


class TestChordRow:
    def test_chords_above_lyrics(self, measurer, config) -> None:
        controller = started(config)
        layout_chord_line(controller, measurer, split_line("[C]Amazing [G]grace"))
        runs = placed(controller)
        assert [r[0] for r in runs] == ["C", "Amazing", "G", "grace"]
        assert runs[0][1:] == (0.5, 0.5, "bold")
        assert runs[1][1:] == (0.5, 0.75, "regular")
        assert runs[2][1] == pytest.approx(1.3)
        assert runs[2][2] == 0.5
        assert runs[3][1] == pytest.approx(1.3)
        assert runs[3][2] == 0.75

    def test_cursor_left_on_lyric_row(self, measurer, config) -> None:
        controller = started(config)
        layout_chord_line(controller, measurer, split_line("[C]la"))
        assert controller.y == 0.75

    def test_chord_inside_word(self, measurer, config) -> None:
        controller = started(config)
        layout_chord_line(controller, measurer, split_line("gra[D]ce"))
        runs = placed(controller)
        assert [r[0] for r in runs] == ["gra", "D", "ce"]
        assert runs[1][1] == pytest.approx(0.8)
        assert runs[2][1] == pytest.approx(0.8)

    def test_indent_applies_to_both_rows(self, measurer, config) -> None:
        controller = started(config)
        controller.indent = 0.5
        layout_chord_line(controller, measurer, split_line("[C]la"))
        assert [r[1] for r in placed(controller)] == [1.0, 1.0]


class TestCollisions:
    def test_mid_word_collision_adds_dash(self, measurer, config) -> None:
        controller = started(config)
        layout_chord_line(controller, measurer, split_line("[Cmaj7]a[G]b"))
        runs = placed(controller)
        assert [r[0] for r in runs] == ["Cmaj7", "a", "-", "G", "b"]
        dash, chord, lyric = runs[2], runs[3], runs[4]
        assert dash[1] == pytest.approx(0.8)
        assert dash[2] == 0.75
        assert dash[3] == "regular"
        assert chord[1] == pytest.approx(1.1)
        assert chord[2] == 0.5
        assert lyric[1] == pytest.approx(1.1)

    def test_first_chord_of_word_shifts_word(self, measurer, config) -> None:
        controller = started(config)
        layout_chord_line(controller, measurer, split_line("[Cmaj7]a [G]b"))
        runs = placed(controller)
        assert "-" not in [r[0] for r in runs]
        assert runs[2][0] == "G"
        assert runs[2][1] == pytest.approx(1.1)
        assert runs[3][1] == pytest.approx(1.1)

    def test_chords_keep_a_dash_width_apart(self, measurer, config) -> None:
        controller = started(config)
        layout_chord_line(controller, measurer, split_line("[Am7]a[D7]b[G7]c"))
        chords = [run for run in controller.page if run.weight == "bold"]
        for left, right in zip(chords, chords[1:]):
            assert right.x >= left.x + measurer.measure(left.text, "bold", 12) + 0.1 - 1e-9

    def test_small_padding_has_no_dash(self, measurer, config) -> None:
        # "ab" is 0.2 wide, chord "Cm" is 0.2 wide: padding equals the dash width
        controller = started(config)
        layout_chord_line(controller, measurer, split_line("[Cm]ab[G]c"))
        assert "-" not in controller.page.texts


class TestPlanWord:
    def test_plan_does_not_emit(self, measurer, config) -> None:
        controller = started(config)
        layout = ChordLineLayout(controller, measurer)
        plan = layout.plan_word(split_line("[Cmaj7]a[G]b"), 0.5, 0.0)
        assert len(controller.page) == 0
        assert [c.text for c in plan.chords] == ["Cmaj7", "G"]
        assert plan.chords[1].padding == pytest.approx(0.5)
        assert plan.end_x == pytest.approx(1.2)
        assert plan.last_chord_x == pytest.approx(1.2)


class TestOverflow:
    def test_word_moves_to_new_row_pair(self, measurer, make_config) -> None:
        controller = started(make_config(page_width=2.0))
        layout_chord_line(controller, measurer, split_line("[C]hello [G]world"))
        runs = placed(controller)
        assert runs[2] == ("G", 0.5, 1.0, "bold")
        assert runs[3] == ("world", 0.5, 1.25, "regular")
        assert controller.y == 1.25

    def test_first_word_of_row_always_placed(self, measurer, make_config) -> None:
        controller = started(make_config(page_width=1.5))
        layout_chord_line(controller, measurer, split_line("[C]supercalifragilistic"))
        assert controller.page.texts == ["C", "supercalifragilistic"]
        assert controller.y == 0.75

    def test_no_word_is_dropped(self, measurer, make_config) -> None:
        controller = started(make_config(page_width=2.0))
        line = "[C]one [D]two [E]three [F]four [G]five"
        layout_chord_line(controller, measurer, split_line(line))
        lyrics = [run.text for run in controller.page if run.weight == "regular"]
        assert lyrics == ["one", "two", "three", "four", "five"]
