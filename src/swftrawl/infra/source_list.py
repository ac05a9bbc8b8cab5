"""Infrastructure: read a source list piped on standard input."""

from __future__ import annotations

from collections.abc import Iterable


def read_source_list(lines: Iterable[str]) -> list[str]:
    """Drain *lines* completely and return one source id per line.

    Order is preserved.  Surrounding whitespace (including ``\\r`` from
    Windows ``dir /B`` output) is stripped and blank lines are skipped.
    """
    sources: list[str] = []
    for line in lines:
        stripped = line.strip()
        if stripped:
            sources.append(stripped)
    return sources
