"""``swftrawl doctor`` — environment diagnostics command.

Gathers system information and renders a Rich table summarising
whether the runtime environment satisfies swftrawl's requirements.

This module lives in the CLI layer — it may import from ``infra``
and ``core``, and it renders via Rich.  No business logic resides
here; it purely collects and displays diagnostic data.
"""

from __future__ import annotations

import platform
import sys
from importlib import metadata

from swftrawl.cli import exit_codes
from swftrawl.cli.console import console, escape
from swftrawl.infra.decoder_loader import ENTRY_POINT_GROUP, ENV_VAR, detect_decoder
from swftrawl.version import __version__


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    major, minor = sys.version_info[:2]
    ok = major >= 3 and minor >= 10
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _decoder_check(decoder_spec: str | None = None) -> tuple[str, str, str]:
    """Return (label, value, status) for the decoder plugin row."""
    status_obj = detect_decoder(decoder_spec)
    if status_obj.found:
        return "decoder", status_obj.detail, "[green]OK[/green]"
    return "decoder", "not configured", "[red]FAIL[/red]"


def _rich_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Rich row."""
    try:
        import rich  # noqa: F401
    except ImportError:
        return "rich", "NOT INSTALLED", "[yellow]WARN[/yellow]"

    try:
        return "rich", metadata.version("rich"), "[green]OK[/green]"
    except metadata.PackageNotFoundError:
        # Importable but not installed as a distribution (e.g. vendored).
        return "rich", "unknown", "[green]OK[/green]"


def _os_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {
        "Windows": "Windows",
        "Linux": "Linux",
        "Darwin": "macOS",
    }.get(system_raw, system_raw)
    release = platform.release()
    machine = platform.machine()
    value = f"{system_display} {release} ({machine})"
    return "OS", value, "[green]OK[/green]"


def _swftrawl_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the swftrawl version row."""
    return "swftrawl", __version__, "[green]OK[/green]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    if "FAIL" in status:
        return "FAIL"
    if "WARN" in status:
        return "WARN"
    if "OK" in status:
        return "OK"
    return status


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\nswftrawl doctor", file=sys.stderr)
    print("=" * 56, file=sys.stderr)
    print(f"{'Component':<12} {'Value':<32} {'Status':<8}", file=sys.stderr)
    print("-" * 56, file=sys.stderr)
    for label, value, status in checks:
        plain_status = _status_plain(status)
        print(f"{label:<12} {value:<32} {plain_status:<8}", file=sys.stderr)
    print(file=sys.stderr)


def _decoder_guidance() -> tuple[str, ...]:
    return (
        "swftrawl --decoder package.module:Decoder ...",
        f"export {ENV_VAR}=package.module:Decoder",
        f"install a package registering a '{ENTRY_POINT_GROUP}' entry point",
    )


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor(decoder_spec: str | None = None) -> int:
    """Execute all diagnostic checks and render a Rich summary table.

    Parameters
    ----------
    decoder_spec:
        Value of ``--decoder``, if given, so the check reflects what a
        real run would use.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when all critical checks pass,
        :data:`exit_codes.GENERAL_ERROR` if a critical check fails.
    """
    decoder_row = _decoder_check(decoder_spec)
    checks = [
        _swftrawl_version_check(),
        _python_version_check(),
        decoder_row,
        _rich_check(),
        _os_check(),
    ]

    has_failure = any("FAIL" in status for _, _, status in checks)

    rich_available = True
    try:
        from rich.table import Table
    except ModuleNotFoundError:
        rich_available = False

    if rich_available:
        table = Table(
            title="swftrawl doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=12)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)

        for label, value, status in checks:
            table.add_row(label, escape(value), status)

        console.print()
        console.print(table)
        console.print()
    else:
        _print_plain_doctor_table(checks)

    # Show decoder setup guidance when missing.
    if "FAIL" in decoder_row[2]:
        if rich_available:
            console.print("[yellow]No SWF decoder is available.[/yellow]")
            console.print("Configure one of the following ways:\n")
            for line in _decoder_guidance():
                console.print(f"  [bold]{escape(line)}[/bold]")
            console.print()
        else:
            print("No SWF decoder is available.", file=sys.stderr)
            print("Configure one of the following ways:\n", file=sys.stderr)
            for line in _decoder_guidance():
                print(f"  {line}", file=sys.stderr)
            print(file=sys.stderr)

    if has_failure:
        if rich_available:
            console.print("[bold red]Some checks failed.[/bold red]")
        else:
            print("Some checks failed.", file=sys.stderr)
        return exit_codes.GENERAL_ERROR

    if rich_available:
        console.print("[bold green]All checks passed.[/bold green]")
    else:
        print("All checks passed.", file=sys.stderr)
    return exit_codes.SUCCESS
