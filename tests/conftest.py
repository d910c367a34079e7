"""Shared fixtures for layout tests."""

import pytest

from chord_layout import LayoutConfig


class FixedWidthMeasurer:
    """Every character is ``char_width`` inches wide, whatever the font."""

    def __init__(self, char_width: float = 0.1) -> None:
        self.char_width = char_width
        self.calls: list[tuple[str, str, float]] = []

    def measure(self, text: str, weight: str, size: float) -> float:
        self.calls.append((text, weight, size))
        return len(text) * self.char_width


@pytest.fixture
def measurer() -> FixedWidthMeasurer:
    return FixedWidthMeasurer()


def build_config(**overrides) -> LayoutConfig:
    """Config with 12pt type and 0.25in lines so positions are exact."""
    options = {"font_size": 12.0, "line_height": 1.5}
    options.update(overrides)
    return LayoutConfig(**options)


@pytest.fixture
def config() -> LayoutConfig:
    return build_config()


@pytest.fixture
def make_config():
    return build_config
