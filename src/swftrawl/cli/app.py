"""CLI application entry point and command routing for swftrawl.

This module is the **sole error boundary** for the entire application.
It catches :class:`~swftrawl.exceptions.SwfTrawlError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core/service
  and infrastructure layers.
* ``print()`` is forbidden outside the CLI layer; Rich console is used
  exclusively for diagnostics, and item listings go to stdout.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys

from swftrawl.cli import exit_codes
from swftrawl.cli.console import Reporter, console, escape
from swftrawl.core.actions import (
    ACTION_TABLE,
    build_request,
    effective_merge,
    resolve_actions,
    uses_stream_output,
    validation_problems,
)
from swftrawl.core.item_service import ItemListService
from swftrawl.core.models import OutputAction, OutputKind, TrawlRequest
from swftrawl.core.picker import pick
from swftrawl.exceptions import DecodeError, InputValidationError, SwfTrawlError
from swftrawl.infra.sinks import stream_items, write_exclude_xml, write_list
from swftrawl.version import __version__

_EPILOG = """\
Files can be given with --swf, or piped one path per line with --swfpipe:
    find . -name '*.swf' | swftrawl --swfpipe --exclude my_exclude.xml

Without --merge and with several files, each file's items are preceded
by a line holding the file path prefixed with '#'.

Don't combine --omititemsfrom and --onlyitemsfrom; the result is rarely
what you want.
"""


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Sub-commands are not used; the CLI supports:
    * ``swftrawl --swf a.swf b.swf --classlistout``  — report items
    * ``swftrawl doctor``  — environment diagnostics
    * ``swftrawl --version``
    """
    parser = argparse.ArgumentParser(
        prog="swftrawl",
        description="Get classes, fonts and symbols declared in multiple SWF files.",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "command",
        nargs="?",
        default=None,
        help="'doctor' to run environment diagnostics.",
    )

    inputs = parser.add_argument_group("inputs")
    inputs.add_argument("--swf", nargs="*", metavar="PATH", help="SWF files to read.")
    inputs.add_argument(
        "--swfpipe",
        action="store_true",
        help="Read the SWF list from standard input, one path per line.",
    )
    inputs.add_argument(
        "--decoder",
        metavar="MODULE:ATTR",
        default=None,
        help="SWF decoder plugin (default: $SWFTRAWL_DECODER or the installed plugin).",
    )

    filters = parser.add_argument_group("filters")
    filters.add_argument(
        "--merge",
        action="store_true",
        help="Output one list of distinct items over all SWFs.",
    )
    filters.add_argument(
        "--omititemsfrom",
        nargs="*",
        metavar="PATH",
        help="Leave out items declared in these SWFs.",
    )
    filters.add_argument(
        "--onlyitemsfrom",
        nargs="*",
        metavar="PATH",
        help="Only output items also declared in these SWFs.",
    )

    outputs = parser.add_argument_group("outputs")
    outputs.add_argument(
        "--exclude",
        metavar="XML",
        help="Write an exclude XML file of classes (implies --merge).",
    )
    outputs.add_argument("--classlist", metavar="FILE", help="Write a list of classes found.")
    outputs.add_argument(
        "--classlistout", action="store_true", help="Write a list of classes to standard output.",
    )
    outputs.add_argument("--fontlist", metavar="FILE", help="Write a list of fonts found.")
    outputs.add_argument(
        "--fontlistout", action="store_true", help="Write a list of fonts to standard output.",
    )
    outputs.add_argument("--symbollist", metavar="FILE", help="Write a list of symbols found.")
    outputs.add_argument(
        "--symbollistout", action="store_true", help="Write a list of symbols to standard output.",
    )
    outputs.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Suppress progress messages (implied by any *out option).",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _run_action(
    service: ItemListService,
    request: TrawlRequest,
    action: OutputAction,
    reporter: Reporter,
) -> None:
    """Compute the items for one action and hand them to its sink.

    The sink is only called once the whole list has been built, so a
    decode failure never touches the destination file.  The decoder's
    messages are reported before the error propagates.
    """
    try:
        items = service.compute_item_list(
            request.sources,
            pick(action.category),
            effective_merge(action, request.merge),
            omit_from=request.omit_from,
            only_from=request.only_from,
        )
    except DecodeError as exc:
        reporter.info(f"Could not read {escape(exc.source_id)}:")
        for message in exc.errors:
            reporter.info(f"  {escape(message)}")
        raise

    if action.kind is OutputKind.STREAM:
        stream_items(items, sys.stdout)
    elif action.kind is OutputKind.LIST_FILE:
        path = write_list(items, action.target or "")
        reporter.info(f"Wrote list to {escape(str(path))}.")
    elif action.kind is OutputKind.EXCLUDE_XML:
        path = write_exclude_xml(items, action.target or "")
        reporter.info(f"Wrote exclude XML to {escape(str(path))}.")


def _handle_trawl(args: argparse.Namespace, actions: list[OutputAction]) -> int:
    """Run every requested action in order.

    Flow:
    1. Resolve the decoder plugin.
    2. Drain piped input (if requested) into the source list.
    3. Build the request (merge default, omit/only lists).
    4. Run each action to completion before starting the next.
    """
    from swftrawl.infra.decoder_loader import resolve_decoder
    from swftrawl.infra.source_list import read_source_list

    reporter = Reporter(quiet=args.quiet or uses_stream_output(actions))

    decoder, _spec, _origin = resolve_decoder(args.decoder)

    sources: list[str] = list(args.swf or [])
    if args.swfpipe:
        sources.extend(read_source_list(sys.stdin))

    request = build_request(
        sources=sources,
        actions=actions,
        merge=args.merge,
        omit_from=args.omititemsfrom,
        only_from=args.onlyitemsfrom,
    )

    service = ItemListService(decoder, progress_callback=reporter.reading)
    for action in request.actions:
        _run_action(service, request, action, reporter)
    return exit_codes.SUCCESS


def _handle_doctor(decoder_spec: str | None) -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from swftrawl.cli.doctor import run_doctor

    return run_doctor(decoder_spec)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the swftrawl CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    InputValidationError
        When inputs or outputs are missing; nothing has been read yet.
    """
    raw_args = sys.argv[1:] if argv is None else argv
    parser = _build_parser()
    args = parser.parse_args(raw_args)

    if not raw_args:
        parser.print_help()
        return exit_codes.SUCCESS

    if args.command is not None:
        if args.command.lower() != "doctor":
            parser.error(f"unknown command: {args.command}")
        return _handle_doctor(args.decoder)

    actions = resolve_actions(
        {option: getattr(args, option) for option, _category, _kind in ACTION_TABLE},
    )
    problems = validation_problems(
        sources=args.swf or [],
        piped=args.swfpipe,
        actions=actions,
        omit_from=args.omititemsfrom,
        only_from=args.onlyitemsfrom,
    )
    if problems:
        raise InputValidationError(problems, hint="Run 'swftrawl --help' for usage.")

    return _handle_trawl(args, actions)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except SwfTrawlError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
