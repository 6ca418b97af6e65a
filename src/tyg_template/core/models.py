"""Command models for tyg_template.

Each invocable operation is a **frozen** dataclass produced by the
argument parser and consumed once by the dispatcher.  The set is closed:
:data:`Command` lists every variant.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class HelpCommand:
    """No subcommand given; show usage."""

    debug: bool = False


@dataclass(frozen=True, slots=True)
class FailCommand:
    """Raise the demonstration error."""

    bare: bool = False
    """Ask for a non-disclosed error."""

    debug: bool = False


@dataclass(frozen=True, slots=True)
class RecursiveFailCommand:
    """Fail part-way through an iteration."""

    debug: bool = False


@dataclass(frozen=True, slots=True)
class FileFailCommand:
    """Open a file and report what the filing system says."""

    path: str
    """File to open; a missing one demonstrates the failure path."""

    better: bool = False
    """Prefix the OS error with the path and the raise site."""

    debug: bool = False


Command = Union[HelpCommand, FailCommand, RecursiveFailCommand, FileFailCommand]
