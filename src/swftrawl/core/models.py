"""Domain models for swftrawl.

All models are **frozen** dataclasses or enums — immutable value
objects with no behaviour beyond data access.  They carry zero I/O,
zero dependencies on external packages, and must remain pure across
the entire lifecycle.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


MARKER_PREFIX: str = "#"
"""Prefix reserved for per-source marker lines in an item list."""


# ---------------------------------------------------------------------------
# Declaration categories
# ---------------------------------------------------------------------------

class Category(enum.Enum):
    """Kind of declaration an output action reports on."""

    CLASSES = "classes"
    FONTS = "fonts"
    SYMBOLS = "symbols"


# ---------------------------------------------------------------------------
# Decoded source file
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class DecodedSource:
    """Everything a decoder reports for a single source file.

    Name tuples are kept exactly as the decoder produced them — they
    may contain duplicates and are in no particular order.
    """

    source_id: str
    """Identifier the file was requested with (usually its path)."""

    classes: tuple[str, ...] = ()
    """Names of classes declared by the file."""

    fonts: tuple[str, ...] = ()
    """Names of embedded fonts."""

    symbols: tuple[str, ...] = ()
    """Names of exported/linked symbols."""

    errors: tuple[str, ...] = ()
    """Decoder error messages.  Non-empty means the file is unusable."""

    @property
    def ok(self) -> bool:
        return not self.errors


# ---------------------------------------------------------------------------
# Output actions
# ---------------------------------------------------------------------------

class OutputKind(enum.Enum):
    """Destination kind of an output action."""

    STREAM = "stream"
    """Print items to standard output."""

    LIST_FILE = "list_file"
    """Write items to a plain text file, one per line."""

    EXCLUDE_XML = "exclude_xml"
    """Write an ``<excludeAssets>`` XML manifest."""


@dataclass(frozen=True, slots=True)
class OutputAction:
    """One requested output: which names go where.

    Actions are resolved once from the command line and then executed
    independently of each other, in order.
    """

    option: str
    """Command-line option that requested the action (e.g. ``classlist``)."""

    category: Category
    kind: OutputKind

    target: str | None = None
    """Destination path, ``None`` for :attr:`OutputKind.STREAM`."""


@dataclass(frozen=True, slots=True)
class TrawlRequest:
    """A fully validated run: inputs, filters and the actions to perform."""

    sources: tuple[str, ...]
    actions: tuple[OutputAction, ...]
    merge: bool
    omit_from: tuple[str, ...] = ()
    only_from: tuple[str, ...] = ()
