"""Page decorations.

Decorations are looked up by name when a layout session is built. An
unknown name fails the session before any layout work is done.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING

from chord_layout.decorations.base import Decoration, DecorationFactory, Renderer
from chord_layout.decorations.footer import DefaultFooter
from chord_layout.decorations.header import DefaultHeader
from chord_layout.errors import DecorationNotFoundError

if TYPE_CHECKING:
    from chord_layout.layout.session import Layout

BUILTIN_DECORATIONS: dict[str, DecorationFactory] = {
    "defaultheader": DefaultHeader,
    "defaultfooter": DefaultFooter,
}

DEFAULT_DECORATIONS: tuple[str, ...] = ("defaultheader", "defaultfooter")


def build_decorations(
    names: Iterable[str],
    layout: Layout,
    extra: Mapping[str, DecorationFactory] | None = None,
) -> list[Decoration]:
    """Instantiate decorations in order.

    Parameters
    ----------
    names : Iterable[str]
        Decoration names from the configuration.
    layout : Layout
        The session the decorations belong to.
    extra : Mapping[str, DecorationFactory] | None
        Additional factories; these take precedence over the built-ins.

    Returns
    -------
    list[Decoration]
        One instance per name.

    Raises
    ------
    DecorationNotFoundError
        If a name is neither built in nor in ``extra``.
    """
    registry = dict(BUILTIN_DECORATIONS)
    registry.update(extra or {})
    decorations: list[Decoration] = []
    for name in names:
        factory = registry.get(name)
        if factory is None:
            raise DecorationNotFoundError(name)
        decorations.append(factory(layout))
    return decorations


__all__ = [
    "BUILTIN_DECORATIONS",
    "DEFAULT_DECORATIONS",
    "Decoration",
    "DecorationFactory",
    "DefaultFooter",
    "DefaultHeader",
    "Renderer",
    "build_decorations",
]
