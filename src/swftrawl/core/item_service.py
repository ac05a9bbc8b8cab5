"""Core item-list service — reads sources and runs the filter pipeline.

This is the central service class consumed by the CLI layer.  It
depends on a :class:`~swftrawl.core.protocols.DeclarationDecoder`
injected at construction time (dependency inversion), keeping the core
free of any decoder-specific imports.

Guarantees
----------
* No ``print()`` — progress is reported through an optional callback.
* Only :class:`~swftrawl.exceptions.SwfTrawlError` subclasses escape.
* A decode failure anywhere aborts the whole call; no partial list is
  ever returned.
* Nothing is cached: every call re-reads the files it needs.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from swftrawl.core.item_filter import build_item_list, exclude_sources, merge_names
from swftrawl.core.models import DecodedSource
from swftrawl.core.picker import Picker
from swftrawl.core.protocols import DeclarationDecoder
from swftrawl.exceptions import DecodeError, SwfTrawlError


class ItemListService:
    """Stateless service that turns source files into an item list.

    Parameters
    ----------
    decoder:
        Any object satisfying the :class:`DeclarationDecoder` protocol.
    progress_callback:
        Optional callable invoked with each source identifier just
        before it is read.
    """

    def __init__(
        self,
        decoder: DeclarationDecoder,
        *,
        progress_callback: Callable[[str], None] | None = None,
    ) -> None:
        self._decoder: DeclarationDecoder = decoder
        self._progress_callback = progress_callback

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compute_item_list(
        self,
        sources: Sequence[str],
        picker: Picker,
        merge: bool,
        omit_from: Sequence[str] = (),
        only_from: Sequence[str] = (),
    ) -> list[str]:
        """Build the item list for one output action.

        Parameters
        ----------
        sources:
            Source identifiers to report, in output order.
        picker:
            Category accessor from :func:`~swftrawl.core.picker.pick`.
        merge:
            ``True`` for one sorted, de-duplicated list; ``False`` for
            per-source listings introduced by ``#source`` marker lines.
        omit_from:
            Sources whose names are removed from the result.  These
            sources are also dropped from *sources*.
        only_from:
            Sources whose names form a whitelist for the result.

        Raises
        ------
        DecodeError
            If any source, omit source or only source fails to decode.
        """
        if omit_from:
            sources = exclude_sources(sources, omit_from)

        omitted = self.collect_names(omit_from, picker)
        allowed = self.collect_names(only_from, picker)

        decoded = self.read_all(sources)
        return build_item_list(
            decoded,
            picker,
            merge=merge,
            omitted=frozenset(omitted),
            allowed=frozenset(allowed),
        )

    def collect_names(
        self,
        sources: Sequence[str],
        picker: Picker,
    ) -> list[str]:
        """Return the merged names of *sources*; empty when none given."""
        if not sources:
            return []
        return merge_names(self.read_all(sources), picker)

    def read_all(self, sources: Sequence[str]) -> list[DecodedSource]:
        """Decode every source in order, stopping at the first failure."""
        return [self._read(source_id) for source_id in sources]

    # ------------------------------------------------------------------
    # Decoder delegation (safe boundary)
    # ------------------------------------------------------------------

    def _read(self, source_id: str) -> DecodedSource:
        """Call the decoder and ensure only our exceptions escape."""
        if self._progress_callback is not None:
            self._progress_callback(source_id)

        try:
            decoded = self._decoder.read(source_id)
        except SwfTrawlError:
            # Already one of ours — let it propagate unchanged.
            raise
        except Exception as exc:
            raise DecodeError(
                source_id,
                [f"{source_id}: unexpected decoder error: {exc}"],
            ) from exc

        if not isinstance(decoded, DecodedSource):
            raise DecodeError(
                source_id,
                [f"{source_id}: decoder returned {type(decoded).__name__}, not DecodedSource"],
                hint="Check that the configured decoder implements DeclarationDecoder.read().",
            )
        if decoded.errors:
            raise DecodeError(
                source_id,
                decoded.errors,
                hint=f"Check that {source_id} is a valid, uncorrupted SWF file.",
            )
        return decoded
