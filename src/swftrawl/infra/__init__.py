"""Infrastructure layer — external system integration.

This layer wraps all interaction with decoder plugins, the filesystem
and standard streams.  Every raw exception must be caught here and
re-raised as a :class:`~swftrawl.exceptions.SwfTrawlError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the CLI layer.
"""

from swftrawl.infra.decoder_loader import DecoderStatus, detect_decoder, load_decoder, resolve_decoder
from swftrawl.infra.sinks import stream_items, write_exclude_xml, write_list
from swftrawl.infra.source_list import read_source_list

__all__: list[str] = [
    "DecoderStatus",
    "detect_decoder",
    "load_decoder",
    "read_source_list",
    "resolve_decoder",
    "stream_items",
    "write_exclude_xml",
    "write_list",
]
