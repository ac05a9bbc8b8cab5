"""Shared pytest fixtures and configuration for the swftrawl test suite.

Guidelines
----------
* No real SWF files — decoders are in-memory fakes.
* Core tests must be pure — no side effects.
* Output files go to ``tmp_path`` only.
* Tests must not depend on OS state (``SWFTRAWL_DECODER`` is cleared).
"""

from __future__ import annotations

import sys
import types
from collections.abc import Iterator, Mapping

import pytest

from swftrawl.core.models import DecodedSource

PLUGIN_MODULE = "swftrawl_test_plugin"


def make_source(
    source_id: str,
    *,
    classes: tuple[str, ...] = (),
    fonts: tuple[str, ...] = (),
    symbols: tuple[str, ...] = (),
    errors: tuple[str, ...] = (),
) -> DecodedSource:
    return DecodedSource(
        source_id=source_id,
        classes=classes,
        fonts=fonts,
        symbols=symbols,
        errors=errors,
    )


class FakeDecoder:
    """In-memory decoder that records every read.

    Unknown ids decode with a "file not found" error, like a real
    decoder given a bad path.
    """

    def __init__(self, files: Mapping[str, DecodedSource | Exception]) -> None:
        self.files = dict(files)
        self.calls: list[str] = []

    def read(self, source_id: str) -> DecodedSource:
        self.calls.append(source_id)
        entry = self.files.get(source_id)
        if entry is None:
            return make_source(source_id, errors=(f"{source_id}: file not found",))
        if isinstance(entry, Exception):
            raise entry
        return entry


def sample_files() -> dict[str, DecodedSource | Exception]:
    return {
        "A.bin": make_source(
            "A.bin",
            classes=("Foo", "Bar"),
            fonts=("Arial",),
            symbols=("sym_a",),
        ),
        "B.bin": make_source(
            "B.bin",
            classes=("Bar", "Baz"),
            fonts=("Verdana", "Arial"),
        ),
        "Omit.bin": make_source("Omit.bin", classes=("Bar",), fonts=("Arial",)),
        "Only.bin": make_source("Only.bin", classes=("Baz", "Qux")),
        "Empty.bin": make_source("Empty.bin"),
        "Broken.bin": make_source(
            "Broken.bin",
            errors=("Broken.bin: bad header", "Broken.bin: truncated tag"),
        ),
    }


@pytest.fixture(autouse=True)
def _no_decoder_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SWFTRAWL_DECODER", raising=False)


@pytest.fixture
def fake_decoder() -> FakeDecoder:
    return FakeDecoder(sample_files())


@pytest.fixture
def plugin(fake_decoder: FakeDecoder) -> Iterator[str]:
    """Register an importable plugin module; yield its ``module:attr`` spec."""
    module = types.ModuleType(PLUGIN_MODULE)
    module.decoder = fake_decoder  # type: ignore[attr-defined]
    module.FakeDecoder = FakeDecoder  # type: ignore[attr-defined]
    sys.modules[PLUGIN_MODULE] = module
    try:
        yield f"{PLUGIN_MODULE}:decoder"
    finally:
        sys.modules.pop(PLUGIN_MODULE, None)
