"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from swftrawl.core.item_service import ItemListService
from swftrawl.core.models import (
    Category,
    DecodedSource,
    OutputAction,
    OutputKind,
    TrawlRequest,
)
from swftrawl.core.picker import pick
from swftrawl.core.protocols import DeclarationDecoder

__all__: list[str] = [
    "Category",
    "DeclarationDecoder",
    "DecodedSource",
    "ItemListService",
    "OutputAction",
    "OutputKind",
    "TrawlRequest",
    "pick",
]
