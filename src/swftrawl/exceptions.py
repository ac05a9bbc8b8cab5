"""Custom exception hierarchy for swftrawl.

All exceptions that cross layer boundaries must inherit from
:class:`SwfTrawlError`.  Raw exceptions raised by a decoder plugin or
by the filesystem must NEVER propagate beyond the layer that called
them — they must be caught and re-raised as a typed subclass defined
here.

Hierarchy
---------
SwfTrawlError
├── InputValidationError
├── DecodeError
├── OutputWriteError
└── EnvironmentError
    └── DecoderUnavailableError
"""

from __future__ import annotations

from collections.abc import Sequence


class SwfTrawlError(Exception):
    """Base exception for all swftrawl errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command-line input ----------------------------------------------------

class InputValidationError(SwfTrawlError):
    """Raised when the requested run is incomplete or contradictory.

    Carries every problem found, so the user can fix them in one go.
    """

    def __init__(
        self,
        problems: Sequence[str],
        *,
        hint: str | None = None,
    ) -> None:
        super().__init__("\n".join(problems), hint=hint)
        self.problems: tuple[str, ...] = tuple(problems)


# --- Decoding --------------------------------------------------------------

class DecodeError(SwfTrawlError):
    """Raised when one or more source files could not be decoded.

    The message is the concatenation of every underlying decoder error,
    one per line.
    """

    def __init__(
        self,
        source_id: str,
        errors: Sequence[str],
        *,
        hint: str | None = None,
    ) -> None:
        super().__init__("\n".join(errors), hint=hint)
        self.source_id: str = source_id
        self.errors: tuple[str, ...] = tuple(errors)


# --- Output ----------------------------------------------------------------

class OutputWriteError(SwfTrawlError):
    """Raised when a list file or exclusion manifest cannot be written."""


# --- Environment / plugins -------------------------------------------------

class EnvironmentError(SwfTrawlError):
    """Raised when a required runtime dependency is not available."""


class DecoderUnavailableError(EnvironmentError):
    """Raised when no usable SWF decoder plugin can be loaded."""


def append_decoder_setup_suggestion(hint: str) -> str:
    """Append decoder configuration guidance to an existing hint text.

    The suggestion is appended only once and preserves the original
    hint content verbatim.
    """
    marker = "Configure a decoder with:"
    if marker in hint:
        return hint
    return "\n".join(
        (
            hint,
            marker,
            "    swftrawl --decoder package.module:Decoder ...",
            "    or set SWFTRAWL_DECODER=package.module:Decoder",
        )
    )
