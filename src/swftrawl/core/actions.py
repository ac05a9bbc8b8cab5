"""Output action resolution and request validation.

Pure functions that turn already-parsed command-line values into a
:class:`~swftrawl.core.models.TrawlRequest`.  No argparse, no I/O.

Rules
-----
* Stream actions run before file actions, each group in class → font →
  symbol order, with the exclusion manifest first among file actions.
* The exclusion manifest always lists classes and always merges.
* With fewer than two sources, output merges by default (a single
  ``#file`` marker line carries no information).
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from swftrawl.core.models import Category, OutputAction, OutputKind, TrawlRequest
from swftrawl.exceptions import InputValidationError

NO_SOURCES = "No valid input swf provided."
NO_OUTPUTS = "No valid outputs were chosen."
FILTER_WITHOUT_PATHS = "Please provide paths to swfs when using 'omit' and 'only' filters."


ACTION_TABLE: tuple[tuple[str, Category, OutputKind], ...] = (
    ("classlistout", Category.CLASSES, OutputKind.STREAM),
    ("fontlistout", Category.FONTS, OutputKind.STREAM),
    ("symbollistout", Category.SYMBOLS, OutputKind.STREAM),
    ("exclude", Category.CLASSES, OutputKind.EXCLUDE_XML),
    ("classlist", Category.CLASSES, OutputKind.LIST_FILE),
    ("fontlist", Category.FONTS, OutputKind.LIST_FILE),
    ("symbollist", Category.SYMBOLS, OutputKind.LIST_FILE),
)
"""Every supported action as ``(option, category, kind)``, in run order."""


def resolve_actions(outputs: Mapping[str, str | bool | None]) -> list[OutputAction]:
    """Return the requested actions in run order.

    *outputs* maps option names from :data:`ACTION_TABLE` to their
    parsed value: a path for file actions, a flag for stream actions.
    File actions with an empty path are ignored.
    """
    actions: list[OutputAction] = []
    for option, category, kind in ACTION_TABLE:
        value = outputs.get(option)
        if kind is OutputKind.STREAM:
            if value:
                actions.append(OutputAction(option, category, kind))
        elif isinstance(value, str) and value:
            actions.append(OutputAction(option, category, kind, target=value))
    return actions


def validation_problems(
    *,
    sources: Sequence[str],
    piped: bool,
    actions: Sequence[OutputAction],
    omit_from: Sequence[str] | None,
    only_from: Sequence[str] | None,
) -> list[str]:
    """Collect every reason the run cannot start.

    ``None`` for *omit_from*/*only_from* means the filter was not
    requested; an empty sequence means it was requested without paths.
    """
    problems: list[str] = []
    if not piped and not sources:
        problems.append(NO_SOURCES)
    if not actions:
        problems.append(NO_OUTPUTS)
    if any(paths is not None and not paths for paths in (omit_from, only_from)):
        problems.append(FILTER_WITHOUT_PATHS)
    return problems


def uses_stream_output(actions: Sequence[OutputAction]) -> bool:
    """Whether any action writes items to standard output."""
    return any(action.kind is OutputKind.STREAM for action in actions)


def effective_merge(action: OutputAction, merge: bool) -> bool:
    """Merge flag for one action: manifests always merge."""
    return merge or action.kind is OutputKind.EXCLUDE_XML


def build_request(
    *,
    sources: Sequence[str],
    actions: Sequence[OutputAction],
    merge: bool,
    omit_from: Sequence[str] | None = None,
    only_from: Sequence[str] | None = None,
) -> TrawlRequest:
    """Assemble the final request once the source list is complete.

    Raises
    ------
    InputValidationError
        If the complete source list (including piped input) is empty.
    """
    if not sources:
        raise InputValidationError(
            [NO_SOURCES],
            hint="Pass files with --swf or pipe one path per line with --swfpipe.",
        )
    return TrawlRequest(
        sources=tuple(sources),
        actions=tuple(actions),
        merge=merge or len(sources) < 2,
        omit_from=tuple(omit_from or ()),
        only_from=tuple(only_from or ()),
    )
