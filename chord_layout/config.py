"""Layout configuration.

This module defines the immutable option set that drives a layout session,
along with the defaults and the parser for loosely-typed option mappings
(e.g., loaded from JSON).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from chord_layout.errors import LayoutConfigError
from chord_layout.models import Margins

DEFAULT_FONT_FILES: dict[str, str] = {
    "regular": "Helvetica",
    "bold": "Helvetica-Bold",
}

# Option names as written in markup tooling, mapped to field names
OPTION_ALIASES: dict[str, str] = {
    "lineHeight": "line_height",
    "pageWidth": "page_width",
    "pageHeight": "page_height",
    "fontSize": "font_size",
    "fontFiles": "font_files",
    "autoFlats": "auto_flats",
    "transformAllChords": "transform_all_chords",
    "useFancySymbols": "use_fancy_symbols",
    "favorFlats": "favor_flats",
}


@dataclass(frozen=True)
class AutoFlats:
    """Key-tracking options.

    Parameters
    ----------
    enabled : bool
        Track ``@key`` directives and derive flat/sharp spelling from them.
    favor_flats : bool
        Spelling for the F#/Gb key, which has none of its own.
    """

    enabled: bool = False
    favor_flats: bool = False


@dataclass(frozen=True)
class LayoutConfig:
    """Options for one layout session.

    Lengths are in inches and font sizes in points.

    Examples
    --------
    >>> config = LayoutConfig(transpose=3, capo=1)
    >>> config.effective_transpose
    2
    >>> LayoutConfig().margin.left
    0.5
    """

    line_height: float = 1.2
    margin: Margins = field(default_factory=lambda: Margins.uniform(0.5))
    page_width: float = 8.5
    page_height: float = 11.0
    transpose: int = 0
    capo: int = 0
    flats: bool = False
    font_size: float = 14.0
    font_files: Mapping[str, str] = field(default_factory=lambda: dict(DEFAULT_FONT_FILES))
    metadata: Mapping[str, Any] = field(default_factory=dict)
    decorations: tuple[str, ...] = ()
    auto_flats: AutoFlats = field(default_factory=AutoFlats)
    transform_all_chords: bool = False
    use_fancy_symbols: bool = False

    @property
    def effective_transpose(self) -> int:
        """Net semitone shift applied to chord roots."""
        return self.transpose - self.capo

    @property
    def line_advance(self) -> float:
        """Height of one body line in inches."""
        return self.font_size * self.line_height / 72

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any] | None = None) -> LayoutConfig:
        """Build a configuration from a mapping of option names.

        Both the camelCase names (``pageWidth``) and the field names
        (``page_width``) are accepted. Missing options take their defaults.

        Parameters
        ----------
        options : Mapping[str, Any] | None
            Option values.

        Returns
        -------
        LayoutConfig
            The validated configuration.

        Raises
        ------
        LayoutConfigError
            If an option is unknown or has an invalid value.

        Examples
        --------
        >>> config = LayoutConfig.from_mapping({"margin": 1, "autoFlats": {"enabled": True}})
        >>> config.margin.right, config.auto_flats.enabled
        (1.0, True)
        """
        values: dict[str, Any] = {}
        for key, value in (options or {}).items():
            name = OPTION_ALIASES.get(key, key)
            if name not in _FIELD_NAMES:
                msg = f"Unknown layout option: {key}"
                raise LayoutConfigError(msg)
            values[name] = value

        if "margin" in values:
            values["margin"] = parse_margin(values["margin"])
        if "auto_flats" in values:
            values["auto_flats"] = _parse_auto_flats(values["auto_flats"])
        if "decorations" in values:
            values["decorations"] = tuple(values["decorations"])
        if "font_files" in values:
            font_files = dict(DEFAULT_FONT_FILES)
            font_files.update(values["font_files"])
            values["font_files"] = font_files

        for name in ("transpose", "capo"):
            if name in values and not isinstance(values[name], int):
                msg = f"Option {name} must be an integer, got {values[name]!r}"
                raise LayoutConfigError(msg)

        for name in ("line_height", "page_width", "page_height", "font_size"):
            if name in values:
                values[name] = _positive_number(name, values[name])

        return cls(**values)


def parse_margin(value: Any) -> Margins:
    """Normalize a margin option to four sides.

    Parameters
    ----------
    value : Any
        A single number, a (top, right, bottom, left) sequence, or Margins.

    Returns
    -------
    Margins
        The expanded margins.

    Raises
    ------
    LayoutConfigError
        If the value is neither a number nor a four-element sequence, or
        any side is negative.

    Examples
    --------
    >>> parse_margin(0.75)
    Margins(top=0.75, right=0.75, bottom=0.75, left=0.75)
    >>> parse_margin([1, 0.5, 1, 0.5]).left
    0.5
    """
    if isinstance(value, Margins):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        sides = (float(value),) * 4
    elif isinstance(value, (list, tuple)) and len(value) == 4:
        try:
            sides = tuple(float(side) for side in value)
        except (TypeError, ValueError):
            msg = f"Margin values must be numbers, got {value!r}"
            raise LayoutConfigError(msg) from None
    else:
        msg = f"Margin must be a number or four numbers, got {value!r}"
        raise LayoutConfigError(msg)

    if any(side < 0 for side in sides):
        msg = f"Margins cannot be negative, got {value!r}"
        raise LayoutConfigError(msg)
    return Margins.from_sequence(sides)


def _parse_auto_flats(value: Any) -> AutoFlats:
    if isinstance(value, AutoFlats):
        return value
    if not isinstance(value, Mapping):
        msg = f"autoFlats must be a mapping, got {value!r}"
        raise LayoutConfigError(msg)
    fields: dict[str, bool] = {}
    for key, flag in value.items():
        name = OPTION_ALIASES.get(key, key)
        if name not in ("enabled", "favor_flats"):
            msg = f"Unknown autoFlats option: {key}"
            raise LayoutConfigError(msg)
        fields[name] = bool(flag)
    return AutoFlats(**fields)


def _positive_number(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        msg = f"Option {name} must be a positive number, got {value!r}"
        raise LayoutConfigError(msg)
    return float(value)


_FIELD_NAMES = frozenset(LayoutConfig.__dataclass_fields__)
