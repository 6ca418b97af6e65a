"""CLI application entry point and command routing for tyg_template.

This module is the **sole error boundary** for the entire application.
It catches :class:`~tyg_template.exceptions.TygError`, ``KeyboardInterrupt``
and any unexpected ``Exception``, renders a message on stderr and returns
a well-defined exit code.

Architecture notes
------------------
* The parser turns ``argv`` into a :data:`~tyg_template.core.models.Command`;
  the dispatcher hands its fields to the matching handler as plain data.
* Errors raised by handlers propagate unchanged to :func:`cli`.  Nothing
  between the raise site and the boundary catches or wraps them.
* Replace the demo subcommands below with your own when starting a new
  project.
"""

from __future__ import annotations

import argparse
import logging
import sys

from tyg_template.cli import exit_codes
from tyg_template.cli.console import console
from tyg_template.cli.logging_setup import configure_logging
from tyg_template.config import get_settings
from tyg_template.core.models import (
    Command,
    FailCommand,
    FileFailCommand,
    HelpCommand,
    RecursiveFailCommand,
)
from tyg_template.exceptions import PROGRAM_NAME, TygError, render
from tyg_template.version import __version__

logger = logging.getLogger(__name__)

COMPLETED_MESSAGE: str = "The process completed normally"


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Sub-commands:
    * ``fail [--bare]``
    * ``recursive_fail``
    * ``file_fail [--better] PATH``
    """
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        description=(
            "A demonstration of a basic command line application with error "
            "handling. Designed as a template when starting a new command "
            "line project."
        ),
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Show debugging information.",
    )

    # Lets --debug also follow the subcommand without resetting it.
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "-d",
        "--debug",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Show debugging information.",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    fail = subparsers.add_parser(
        "fail",
        parents=[common],
        help="Show how to return an error using the error handler.",
    )
    fail.add_argument(
        "--bare",
        action="store_true",
        help="Show error without source file and line number displayed.",
    )

    subparsers.add_parser(
        "recursive_fail",
        parents=[common],
        help="Show how to handle errors whilst extracting values from an iterator.",
    )

    file_fail = subparsers.add_parser(
        "file_fail",
        parents=[common],
        help="Show how to handle a regular filing system error, e.g. file not found.",
    )
    file_fail.add_argument(
        "--better",
        action="store_true",
        help="A better rendition of the error message.",
    )
    file_fail.add_argument(
        "path",
        metavar="PATH",
        help="Path to an invalid file (i.e. one that doesn't exist).",
    )
    return parser


def parse_command(argv: list[str] | None = None) -> Command:
    """Parse *argv* into a :data:`Command`.

    Usage errors, ``--help`` and ``--version`` are handled by argparse,
    which exits the process itself.
    """
    args = _build_parser().parse_args(argv)
    debug: bool = args.debug

    if args.command == "fail":
        return FailCommand(bare=args.bare, debug=debug)
    if args.command == "recursive_fail":
        return RecursiveFailCommand(debug=debug)
    if args.command == "file_fail":
        return FileFailCommand(path=args.path, better=args.better, debug=debug)
    return HelpCommand(debug=debug)


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------

def _handle_help() -> int:
    _build_parser().print_help()
    return exit_codes.SUCCESS


def _handle_fail(bare: bool) -> int:
    from tyg_template.core.demos import error_demo

    error_demo(bare)
    console.echo("This should not be displayed because an error was forced...")
    return exit_codes.SUCCESS


def _handle_recursive_fail() -> int:
    from tyg_template.core.demos import recursive_fail_demo

    recursive_fail_demo(console.echo)
    console.echo("This should not be displayed because an error was forced...")
    return exit_codes.SUCCESS


def _handle_file_fail(path: str, better: bool) -> int:
    from tyg_template.core.demos import file_fail_demo

    file_fail_demo(path, better)
    console.echo("Now see what happens when an invalid file is entered")
    return exit_codes.SUCCESS


def dispatch(command: Command) -> int:
    """Invoke the handler for *command* and return its exit code."""
    logger.debug("dispatching %r", command)

    if isinstance(command, HelpCommand):
        return _handle_help()

    if isinstance(command, FailCommand):
        code = _handle_fail(command.bare)
    elif isinstance(command, RecursiveFailCommand):
        code = _handle_recursive_fail()
    elif isinstance(command, FileFailCommand):
        code = _handle_file_fail(command.path, command.better)
    else:
        raise TypeError(f"unknown command: {command!r}")

    if code == exit_codes.SUCCESS:
        console.echo(COMPLETED_MESSAGE)
    return code


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the tyg_template CLI.

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
    TygError
        Whatever the selected command raised, unchanged.
    """
    command = parse_command(argv)
    configure_logging(command.debug)
    logger.debug("disclose=%s", get_settings().disclose)
    return dispatch(command)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli(argv: list[str] | None = None) -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Wraps :func:`main`, renders any :class:`TygError` as a single line on
    stderr and exits with a non-zero code.  The process never exits with
    a raw stack trace during normal usage.
    """
    try:
        code = main(argv)
        sys.exit(code)
    except TygError as exc:
        console.error(render(exc, get_settings().disclose))
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        logger.debug("unexpected error", exc_info=True)
        console.print("[bold red]Unexpected error.[/bold red] Please report this issue.")
        console.error(f"  {type(exc).__name__}: {exc}")
        sys.exit(exit_codes.UNEXPECTED_ERROR)
