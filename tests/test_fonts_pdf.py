"""Tests for reportlab fonts and PDF output."""

import io

import pytest

from chord_layout import FontLoadError, FontSet, Layout
from chord_layout.models import TextRun
from chord_layout.pdf import PageRenderer, render_pdf


class TestFontSet:
    def test_standard_fonts(self) -> None:
        fonts = FontSet()
        assert fonts.font_name("regular") == "Helvetica"
        assert fonts.font_name("bold") == "Helvetica-Bold"

    def test_measure_in_inches(self) -> None:
        fonts = FontSet()
        # Helvetica "M" is 833/1000 em
        assert fonts.measure("M", "regular", 72) == pytest.approx(0.833)

    def test_bold_is_wider(self) -> None:
        fonts = FontSet()
        assert fonts.measure("chord", "bold", 12) > fonts.measure("chord", "regular", 12)

    def test_scales_with_size(self) -> None:
        fonts = FontSet()
        assert fonts.measure("abc", "regular", 24) == pytest.approx(2 * fonts.measure("abc", "regular", 12))

    def test_override_weight(self) -> None:
        fonts = FontSet({"bold": "Times-Bold"})
        assert fonts.font_name("bold") == "Times-Bold"
        assert fonts.font_name("regular") == "Helvetica"

    def test_missing_font_file(self, tmp_path) -> None:
        with pytest.raises(FontLoadError, match="Error loading font"):
            FontSet({"regular": str(tmp_path / "missing.ttf")})

    def test_unreadable_font_file(self, tmp_path) -> None:
        bogus = tmp_path / "bogus.ttf"
        bogus.write_bytes(b"not a font")
        with pytest.raises(FontLoadError):
            FontSet({"regular": str(bogus)})

    def test_session_fails_on_bad_font(self, tmp_path) -> None:
        with pytest.raises(FontLoadError):
            Layout("", {"fontFiles": {"regular": str(tmp_path / "missing.ttf")}})


class TestPageRenderer:
    def renderer(self) -> PageRenderer:
        return PageRenderer(canvas=None, fonts=FontSet(), page_height=11.0)

    def test_left_anchor(self) -> None:
        run = TextRun("Amazing", 1.0, 1.0, 12.0)
        assert self.renderer().anchor_x(run) == 1.0

    def test_center_anchor(self) -> None:
        renderer = self.renderer()
        run = TextRun("Amazing", 4.25, 1.0, 12.0, "bold", "center")
        width = renderer.fonts.measure("Amazing", "bold", 12.0)
        assert renderer.anchor_x(run) == pytest.approx(4.25 - width / 2)

    def test_right_anchor(self) -> None:
        renderer = self.renderer()
        run = TextRun("Page 2", 8.0, 0.5, 10.0, "regular", "right")
        width = renderer.fonts.measure("Page 2", "regular", 10.0)
        assert renderer.anchor_x(run) == pytest.approx(8.0 - width)

    def test_baseline_below_top(self) -> None:
        renderer = self.renderer()
        run = TextRun("x", 0.5, 0.5, 12.0)
        baseline = renderer.baseline_y(run)
        assert baseline < (11.0 - 0.5) * 72
        assert baseline > (11.0 - 0.5) * 72 - 12


class TestRenderPdf:
    def test_writes_pdf(self) -> None:
        session = Layout(
            "[title]Amazing Grace\n[G]Amazing [C]grace\n[pagebreak]\n[D]verse two",
            {
                "decorations": ["defaultheader", "defaultfooter"],
                "metadata": {"title": "Amazing Grace", "copyrightText": "Public domain"},
            },
        )
        buffer = io.BytesIO()
        assert render_pdf(session, buffer) == 2
        assert buffer.getvalue().startswith(b"%PDF")

    def test_lays_out_when_needed(self, tmp_path) -> None:
        session = Layout("[C]hello")
        output = tmp_path / "sheet.pdf"
        render_pdf(session, output)
        assert len(session.pages) == 1
        assert output.read_bytes().startswith(b"%PDF")

    def test_keeps_existing_pages(self) -> None:
        session = Layout("a")
        pages = session.layout()
        render_pdf(session, io.BytesIO())
        assert session.pages is pages
