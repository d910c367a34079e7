"""Font resources and text measurement.

This module maps the logical font weights used by the layout engine to
reportlab fonts and measures text widths in inches.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Protocol

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont

from chord_layout.config import DEFAULT_FONT_FILES
from chord_layout.errors import FontLoadError

logger = logging.getLogger(__name__)

PACKAGE_DIR = Path(__file__).parent
POINTS_PER_INCH = 72


class TextMeasurer(Protocol):
    """Anything that can report the width of a string."""

    def measure(self, text: str, weight: str, size: float) -> float:
        """Return the width of ``text`` in inches."""
        ...


def _resolve_font_file(path: str) -> Path:
    """Find a font file as given, falling back to the package directory."""
    candidate = Path(path)
    if candidate.is_file():
        return candidate
    fallback = PACKAGE_DIR / path
    if fallback.is_file():
        logger.warning("Font file %s not found, using %s", path, fallback)
        return fallback
    msg = f"Error loading font {path}"
    raise FontLoadError(msg)


class FontSet:
    """Reportlab fonts for each logical weight.

    Values of ``font_files`` that name a standard PDF font (such as
    "Helvetica-Bold") are used directly; anything else is treated as a
    TrueType file and registered with reportlab.

    Parameters
    ----------
    font_files : Mapping[str, str] | None
        Logical weight ("regular", "bold") to font name or file path.

    Raises
    ------
    FontLoadError
        If a font file cannot be found or parsed.

    Examples
    --------
    >>> fonts = FontSet()
    >>> fonts.font_name("bold")
    'Helvetica-Bold'
    >>> round(fonts.measure("Hi", "regular", 72), 3)
    0.944
    """

    def __init__(self, font_files: Mapping[str, str] | None = None) -> None:
        self.fonts: dict[str, str] = {}
        files = dict(DEFAULT_FONT_FILES)
        files.update(font_files or {})
        for weight, source in files.items():
            self.fonts[weight] = self._register(weight, source)

    def _register(self, weight: str, source: str) -> str:
        if source in pdfmetrics.standardFonts:
            return source

        path = _resolve_font_file(source)
        name = f"chord-layout-{weight}-{path.stem}"
        if name not in pdfmetrics.getRegisteredFontNames():
            try:
                pdfmetrics.registerFont(TTFont(name, str(path)))
            except Exception as exc:  # reportlab raises TTFError and friends
                msg = f"Error loading font {path}: {exc}"
                raise FontLoadError(msg) from exc
            logger.debug("Registered font %s from %s", name, path)
        return name

    def font_name(self, weight: str) -> str:
        """Return the reportlab font name for a logical weight."""
        return self.fonts[weight]

    def measure(self, text: str, weight: str, size: float) -> float:
        """Measure the width of text.

        Parameters
        ----------
        text : str
            The text to measure.
        weight : str
            Logical font weight.
        size : float
            Font size in points.

        Returns
        -------
        float
            Width in inches.
        """
        return pdfmetrics.stringWidth(text, self.fonts[weight], size) / POINTS_PER_INCH

    def ascent(self, weight: str, size: float) -> float:
        """Return the font ascent in inches."""
        return pdfmetrics.getAscent(self.fonts[weight], size) / POINTS_PER_INCH
