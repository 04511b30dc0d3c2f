"""CLI application entry point for buildprobe.

This module is the **sole error boundary** for the entire application.
It catches :class:`~buildprobe.exceptions.ProbeError`,
``KeyboardInterrupt`` and any unexpected ``Exception``, rendering
messages on stderr and returning well-defined exit codes.

Flow
----
1. Parse arguments.
2. Resolve the configuration (file, or defaults on read failure).
3. Render the report to stdout.
4. Run the inline self-checks.

Only the report body is written to stdout; every diagnostic goes to
stderr through :data:`~buildprobe.cli.console.console`.
"""

from __future__ import annotations

import argparse
import sys

from buildprobe.cli import exit_codes
from buildprobe.cli.console import console, escape
from buildprobe.core.codec import configuration_to_dict
from buildprobe.core.models import Configuration, default_configuration
from buildprobe.core.report import SUPPORTED_FORMATS, TEXT, render_report
from buildprobe.exceptions import ConfigReadError, ProbeError, UnsupportedFormatError
from buildprobe.infra.config_loader import load_configuration
from buildprobe.infra.platform_info import detect_platform
from buildprobe.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    ``--output`` is free-form: an unknown value must exit
    with :data:`exit_codes.GENERAL_ERROR`, not argparse's usage code.
    """
    parser = argparse.ArgumentParser(
        prog="buildprobe",
        description=(
            "A simple test application for exercising a build and "
            "release workflow."
        ),
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-c",
        "--config",
        metavar="FILE",
        default=None,
        help="Sets a custom config file.",
    )
    parser.add_argument(
        "-o",
        "--output",
        metavar="FORMAT",
        default=TEXT,
        help=(
            f"Output format: {', '.join(SUPPORTED_FORMATS)} "
            "(default: %(default)s)."
        ),
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity level (repeatable).",
    )
    parser.add_argument(
        "--platform",
        action="store_true",
        help="Show platform information.",
    )
    return parser


# ---------------------------------------------------------------------------
# Configuration resolution
# ---------------------------------------------------------------------------

def _resolve_configuration(config_path: str | None) -> Configuration:
    """Load *config_path*, falling back to defaults only when unreadable.

    A file that exists but does not parse is fatal:
    :class:`~buildprobe.exceptions.ConfigParseError` propagates.
    """
    if config_path is None:
        return default_configuration()
    try:
        return load_configuration(config_path)
    except ConfigReadError as exc:
        console.print(
            f"[yellow]Warning:[/yellow] Could not read config file "
            f"'{escape(exc.path)}', using defaults",
        )
        return default_configuration()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the buildprobe CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    ConfigParseError
        When ``--config`` points at a malformed file.
    SelfCheckError
        When the serialization self-check fails.
    """
    from buildprobe.cli.self_check import run_self_checks

    parser = _build_parser()
    args = parser.parse_args(argv)

    config = _resolve_configuration(args.config)
    verbose_level: int = args.verbose

    if verbose_level > 0:
        console.print(f"Verbose level: {verbose_level}")
        if verbose_level > 1:
            console.print(f"Config: {configuration_to_dict(config)}", markup=False)

    platform_info = detect_platform() if args.platform else None

    try:
        body = render_report(args.output, config, platform_info)
    except UnsupportedFormatError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        return exit_codes.GENERAL_ERROR

    print(body)

    run_self_checks(verbose_level)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except ProbeError as exc:
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
