"""Exception types raised by chord-layout."""


class LayoutError(Exception):
    """Base class for errors raised by the layout engine."""


class LayoutConfigError(LayoutError, ValueError):
    """Raised when layout options are malformed."""


class DecorationNotFoundError(LayoutConfigError):
    """Raised when the configuration names a decoration that is not registered.

    Parameters
    ----------
    name : str
        The unknown decoration name.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Page decoration '{name}' not found.")


class FontLoadError(LayoutError):
    """Raised when a configured font file cannot be loaded."""
