"""CLI console helpers with optional Rich support.

This module avoids module-level imports of Rich so that bootstrap paths
(``--help``, ``--version``) and error reporting keep working when Rich
is not installed.
"""

from __future__ import annotations

import sys
from typing import Any


def _load_rich_console_class() -> type[Any] | None:
	"""Return ``rich.console.Console``, or ``None`` when Rich is missing."""
	try:
		from rich.console import Console
	except ModuleNotFoundError:
		return None
	return Console


def get_rich_console() -> Any | None:
	"""Create a Rich console targeting stderr, or ``None`` without Rich."""
	console_class = _load_rich_console_class()
	if console_class is None:
		return None
	return console_class(stderr=True)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback.

	:meth:`print` renders Rich markup.  :meth:`echo` and :meth:`error`
	bypass Rich entirely: Rich rewrites text (tabs become spaces), and
	those lines must reach the stream exactly as given.
	"""

	def print(self, *objects: object) -> None:
		"""Render markup on stderr with Rich when available."""
		rich_console = get_rich_console()
		if rich_console is None:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)

	def echo(self, text: str) -> None:
		"""Write *text* verbatim to stdout."""
		print(text, file=sys.stdout)

	def error(self, text: str) -> None:
		"""Write *text* verbatim to stderr."""
		print(text, file=sys.stderr)


console = _ConsoleProxy()
