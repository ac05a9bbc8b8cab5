"""Protocols (interfaces) consumed by the core layer.

These define the contracts that decoder plugins must satisfy.  Core
code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from swftrawl.core.models import DecodedSource


@runtime_checkable
class DeclarationDecoder(Protocol):
    """Contract for SWF decoding backends.

    Any object that implements :meth:`read` with the correct signature
    satisfies this protocol structurally (no explicit inheritance
    required).
    """

    def read(self, source_id: str) -> DecodedSource:
        """Decode *source_id* and return the names it declares.

        Problems with the file itself (unreadable, truncated, not a
        SWF) should be reported through :attr:`DecodedSource.errors`
        rather than raised.  Any exception that does escape is treated
        the same way: the whole batch the file belongs to fails.
        """
        ...  # pragma: no cover
