"""Infrastructure: locate and load the SWF decoder plugin.

swftrawl does not decode SWF files itself.  A decoder is any object
satisfying :class:`~swftrawl.core.protocols.DeclarationDecoder`, found
through (in order):

1. an explicit ``module:attr`` spec (the ``--decoder`` option),
2. the ``SWFTRAWL_DECODER`` environment variable,
3. the single entry point installed in the ``swftrawl.decoders`` group.

Rules
-----
* This module is the **only** place that imports decoder plugins.
* Every import/attribute failure is re-raised as
  :class:`~swftrawl.exceptions.DecoderUnavailableError`.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import importlib
import os
from collections.abc import Mapping
from dataclasses import dataclass
from importlib.metadata import entry_points
from typing import Any

from swftrawl.core.protocols import DeclarationDecoder
from swftrawl.exceptions import DecoderUnavailableError, append_decoder_setup_suggestion

ENV_VAR: str = "SWFTRAWL_DECODER"
ENTRY_POINT_GROUP: str = "swftrawl.decoders"


# ---------------------------------------------------------------------------
# Resolution result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class DecoderStatus:
    """Result of a decoder lookup, successful or not.

    Attributes
    ----------
    found : bool
        Whether a decoder could be imported and instantiated.
    spec : str | None
        The ``module:attr`` spec or entry point name that was used.
    origin : str
        Where the spec came from: ``"option"``, ``"environment"``,
        ``"entry point"`` or ``"none"``.
    detail : str
        Human-readable status (the failure reason when not found).
    """

    found: bool
    spec: str | None
    origin: str
    detail: str


# ---------------------------------------------------------------------------
# Spec parsing and import
# ---------------------------------------------------------------------------

def _split_spec(spec: str) -> tuple[str, str]:
    module_name, sep, attr_path = spec.strip().partition(":")
    if not sep or not module_name or not attr_path:
        raise DecoderUnavailableError(
            f"Invalid decoder spec: {spec!r}",
            hint="Use the form package.module:AttributeName",
        )
    return module_name, attr_path


def _import_object(spec: str) -> Any:
    """Import the object named by a ``module:attr`` spec."""
    module_name, attr_path = _split_spec(spec)
    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise DecoderUnavailableError(
            f"Decoder module {module_name!r} could not be imported: {exc}",
            hint=f"Is the package providing {module_name!r} installed?",
        ) from exc

    for attr in attr_path.split("."):
        try:
            obj = getattr(obj, attr)
        except AttributeError as exc:
            raise DecoderUnavailableError(
                f"Decoder {spec!r} not found: {module_name!r} has no {attr_path!r}.",
            ) from exc
    return obj


def _instantiate(obj: Any, label: str) -> DeclarationDecoder:
    """Turn a loaded plugin object into a decoder instance.

    Classes and zero-argument factories are called; objects that
    already provide ``read`` are used as they are.
    """
    if not isinstance(obj, type) and isinstance(obj, DeclarationDecoder):
        return obj
    if not callable(obj):
        raise DecoderUnavailableError(
            f"Decoder {label!r} is neither a decoder nor a factory.",
        )
    try:
        decoder = obj()
    except Exception as exc:
        raise DecoderUnavailableError(
            f"Decoder {label!r} failed to initialise: {exc}",
        ) from exc
    if not isinstance(decoder, DeclarationDecoder):
        raise DecoderUnavailableError(
            f"Decoder {label!r} does not provide a read(source_id) method.",
        )
    return decoder


def load_decoder(spec: str) -> DeclarationDecoder:
    """Import and instantiate the decoder named by *spec*.

    Raises
    ------
    DecoderUnavailableError
        When the spec is malformed, the module or attribute is missing,
        or the resulting object is not a decoder.
    """
    return _instantiate(_import_object(spec), spec)


# ---------------------------------------------------------------------------
# Discovery
# ---------------------------------------------------------------------------

def _load_entry_point() -> tuple[str, DeclarationDecoder] | None:
    """Return ``(name, decoder)`` for the single installed plugin, if any."""
    found = list(entry_points(group=ENTRY_POINT_GROUP))
    if not found:
        return None
    if len(found) > 1:
        names = ", ".join(sorted(ep.name for ep in found))
        raise DecoderUnavailableError(
            f"Several decoders are installed ({names}).",
            hint=append_decoder_setup_suggestion("Choose one explicitly."),
        )
    entry = found[0]
    try:
        obj = entry.load()
    except Exception as exc:
        raise DecoderUnavailableError(
            f"Decoder entry point {entry.name!r} failed to load: {exc}",
        ) from exc
    return entry.name, _instantiate(obj, entry.name)


def resolve_decoder(
    explicit: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> tuple[DeclarationDecoder, str, str]:
    """Find a decoder and return ``(decoder, spec, origin)``.

    Raises
    ------
    DecoderUnavailableError
        When no decoder is configured or the configured one is unusable.
    """
    env = os.environ if environ is None else environ

    if explicit:
        return load_decoder(explicit), explicit, "option"

    from_env = env.get(ENV_VAR, "").strip()
    if from_env:
        return load_decoder(from_env), from_env, "environment"

    plugin = _load_entry_point()
    if plugin is not None:
        name, decoder = plugin
        return decoder, name, "entry point"

    raise DecoderUnavailableError(
        "No SWF decoder is configured.",
        hint=append_decoder_setup_suggestion(
            f"Install a package registering a {ENTRY_POINT_GROUP!r} entry point.",
        ),
    )


def detect_decoder(
    explicit: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> DecoderStatus:
    """Probe for a decoder without raising.

    Returns a :class:`DecoderStatus` regardless of the outcome — the
    caller decides whether to abort or merely report.
    """
    try:
        _decoder, spec, origin = resolve_decoder(explicit, environ)
    except DecoderUnavailableError as exc:
        return DecoderStatus(found=False, spec=None, origin="none", detail=str(exc))
    return DecoderStatus(found=True, spec=spec, origin=origin, detail=f"{spec} ({origin})")
