"""Pure item-list combination and filtering logic.

Every function in this module is a **pure** transformation — no I/O,
no side effects, fully deterministic, and trivially unit-testable.

Pipeline order (enforced by :func:`build_item_list`):

1. **Combine** — merged union or per-source listing with markers.
2. **Omit** — drop names found in the omit set.
3. **Only** — keep only names found in the only set.

Marker lines (``"#" + source_id``) survive both filters so that the
per-source grouping is always visible, even when a file ends up with
no items.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable, Sequence

from swftrawl.core.models import MARKER_PREFIX, DecodedSource
from swftrawl.core.picker import Picker


def marker_for(source_id: str) -> str:
    """Return the marker line that introduces *source_id*'s items."""
    return f"{MARKER_PREFIX}{source_id}"


def is_marker(item: str) -> bool:
    return item.startswith(MARKER_PREFIX)


# ---------------------------------------------------------------------------
# 1. Combine
# ---------------------------------------------------------------------------

def merge_names(
    sources: Iterable[DecodedSource],
    picker: Picker,
) -> list[str]:
    """Return the sorted, de-duplicated union of picked names."""
    seen: set[str] = set()
    for source in sources:
        seen.update(picker(source))
    return sorted(seen)


def per_source_names(
    sources: Iterable[DecodedSource],
    picker: Picker,
) -> list[str]:
    """Return a marker plus the sorted names of each source, in order.

    The marker is emitted even when a source has no names.  Names are
    not de-duplicated within a source.
    """
    result: list[str] = []
    for source in sources:
        result.append(marker_for(source.source_id))
        result.extend(sorted(picker(source)))
    return result


def combine(
    sources: Iterable[DecodedSource],
    picker: Picker,
    *,
    merge: bool,
) -> list[str]:
    """Dispatch to :func:`merge_names` or :func:`per_source_names`."""
    if merge:
        return merge_names(sources, picker)
    return per_source_names(sources, picker)


# ---------------------------------------------------------------------------
# 2. Omit
# ---------------------------------------------------------------------------

def omit_items(
    items: Sequence[str],
    omitted: Collection[str],
) -> list[str]:
    """Drop every plain name contained in *omitted*.

    Marker lines are never dropped.  An empty *omitted* set leaves
    *items* unchanged.
    """
    if not omitted:
        return list(items)
    return [
        item
        for item in items
        if is_marker(item) or item not in omitted
    ]


# ---------------------------------------------------------------------------
# 3. Only
# ---------------------------------------------------------------------------

def keep_only_items(
    items: Sequence[str],
    allowed: Collection[str],
) -> list[str]:
    """Keep plain names contained in *allowed*, plus every marker line.

    An empty *allowed* set disables the filter entirely.
    """
    if not allowed:
        return list(items)
    return [
        item
        for item in items
        if is_marker(item) or item in allowed
    ]


# ---------------------------------------------------------------------------
# Composite pipeline
# ---------------------------------------------------------------------------

def build_item_list(
    sources: Iterable[DecodedSource],
    picker: Picker,
    *,
    merge: bool,
    omitted: Collection[str] = frozenset(),
    allowed: Collection[str] = frozenset(),
) -> list[str]:
    """Run the full combine → omit → only pipeline."""
    combined = combine(sources, picker, merge=merge)
    without_omitted = omit_items(combined, omitted)
    return keep_only_items(without_omitted, allowed)


def exclude_sources(
    source_ids: Sequence[str],
    excluded: Collection[str],
) -> list[str]:
    """Set difference of *source_ids* and *excluded*, in first-seen order.

    Used so a file named as an omit source is not also reported.  A
    repeated identifier is kept once.
    """
    seen = set(excluded)
    remaining: list[str] = []
    for source_id in source_ids:
        if source_id not in seen:
            seen.add(source_id)
            remaining.append(source_id)
    return remaining
