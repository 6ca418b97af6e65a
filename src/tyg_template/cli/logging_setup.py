"""Logging configuration for the CLI.

Library modules only ever call ``logging.getLogger(__name__)``; the
handler is attached here, once per run, to the ``tyg_template`` logger.
"""

from __future__ import annotations

import logging
import sys

ROOT_LOGGER_NAME: str = "tyg_template"


def _make_handler(debug: bool) -> logging.Handler:
    """Return a Rich handler on stderr, or a plain one without Rich."""
    try:
        from rich.console import Console
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler: logging.Handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter("%(levelname)s %(name)s: %(message)s"),
        )
        return handler

    return RichHandler(
        console=Console(stderr=True),
        show_time=debug,
        show_level=True,
        show_path=debug,
        markup=False,
        rich_tracebacks=True,
        log_time_format="[%H:%M:%S]",
    )


def configure_logging(debug: bool = False) -> logging.Logger:
    """Attach a fresh stderr handler to the package logger.

    ``DEBUG`` with *debug*, ``WARNING`` otherwise, so an ordinary run
    writes nothing but its own output.  Calling this again replaces the
    previous handler.
    """
    level = logging.DEBUG if debug else logging.WARNING
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for existing in list(logger.handlers):
        logger.removeHandler(existing)

    handler = _make_handler(debug)
    handler.setLevel(level)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
