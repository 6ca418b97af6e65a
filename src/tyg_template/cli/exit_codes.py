"""Process exit codes returned by :func:`tyg_template.cli.app.cli`.

Argparse usage errors also exit with ``2``; that code belongs to
argparse and is not listed here.
"""

from __future__ import annotations

SUCCESS: int = 0
"""The command finished and printed its completion message."""

GENERAL_ERROR: int = 1
"""A TygError reached the boundary and was rendered on stderr."""

UNEXPECTED_ERROR: int = 2
"""Some other exception reached the boundary."""

KEYBOARD_INTERRUPT: int = 130
"""Interrupted with Ctrl+C (128 + SIGINT)."""
