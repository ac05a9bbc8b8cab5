"""Allow ``python -m swftrawl`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m swftrawl`` behaves identically to the ``swftrawl``
console script.
"""

from __future__ import annotations

from swftrawl.cli.app import cli

if __name__ == "__main__":
    cli()
