"""Category picker — choose which declaration names an action reads."""

from __future__ import annotations

from collections.abc import Callable

from swftrawl.core.models import Category, DecodedSource

Picker = Callable[[DecodedSource], tuple[str, ...]]
"""Accessor returning one category of names from a decoded source."""


def _classes(source: DecodedSource) -> tuple[str, ...]:
    return source.classes


def _fonts(source: DecodedSource) -> tuple[str, ...]:
    return source.fonts


def _symbols(source: DecodedSource) -> tuple[str, ...]:
    return source.symbols


_PICKERS: dict[Category, Picker] = {
    Category.CLASSES: _classes,
    Category.FONTS: _fonts,
    Category.SYMBOLS: _symbols,
}


def pick(category: Category) -> Picker:
    """Return the accessor for *category*."""
    return _PICKERS[category]
