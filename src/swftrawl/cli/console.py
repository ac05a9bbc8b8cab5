"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) remain
functional even when Rich is not installed.

All diagnostics go to **stderr**; standard output is reserved for item
listings so it can be piped into other tools.
"""

from __future__ import annotations

import sys
from typing import Any

from swftrawl.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True)


def escape(text: str) -> str:
	"""Escape Rich markup in user-supplied text such as file paths."""
	try:
		from rich.markup import escape as rich_escape
	except ModuleNotFoundError:
		return text
	return rich_escape(text)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)


console = _ConsoleProxy()


class Reporter:
	"""Progress/info output that can be silenced.

	The quiet setting is decided once per run and never changes, so
	listings written to stdout stay free of chatter.
	"""

	def __init__(self, *, quiet: bool = False) -> None:
		self.quiet: bool = quiet

	def info(self, message: str) -> None:
		"""Print *message* unless quiet."""
		if not self.quiet:
			console.print(message)

	def reading(self, source_id: str) -> None:
		"""Progress callback for :class:`~swftrawl.core.ItemListService`."""
		self.info(f"[dim]Reading[/dim] {escape(source_id)}")
