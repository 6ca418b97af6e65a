"""Error reporting convention for tyg_template.

Every failure the application expects to report is a :class:`TygError`.
The error carries the message for the user and the source location of
the code that built it.  Whether that location is shown is decided once,
at render time, by the process-wide disclose switch
(:attr:`tyg_template.config.Settings.disclose`), never by the error
itself.

Hierarchy
---------
TygError
└── TygFileError

Building errors
---------------
* :func:`error` — a disclosed-style error.
* :func:`error_bare` — a bare-style (non-disclosed) error.
* :func:`make_error` — the general form both shorthands delegate to.

All three capture the file and line of *their caller*, so the usual
pattern is simply::

    raise error(f"Failed at cycle {count}")
"""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

PROGRAM_NAME: str = "tyg_template"
"""Prefix of every rendered error line."""


# ---------------------------------------------------------------------------
# Source location
# ---------------------------------------------------------------------------

def _display_path(filename: str) -> str:
    """Show *filename* relative to the working directory when beneath it."""
    try:
        return Path(filename).resolve().relative_to(Path.cwd()).as_posix()
    except (ValueError, OSError):
        return filename


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """File and line where an error was constructed."""

    file: str
    line: int

    def __str__(self) -> str:
        return f"{self.file}:{self.line}"

    @classmethod
    def capture(cls, stacklevel: int = 1) -> SourceLocation | None:
        """Return the location *stacklevel* frames above the caller.

        ``stacklevel=1`` is the function calling :meth:`capture`.
        ``None`` is returned when the interpreter exposes no frames.
        """
        frame = inspect.currentframe()
        try:
            for _ in range(stacklevel):
                if frame is None:
                    return None
                frame = frame.f_back
            if frame is None:
                return None
            return cls(
                file=_display_path(frame.f_code.co_filename),
                line=frame.f_lineno,
            )
        finally:
            del frame


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class TygError(Exception):
    """Base exception for every error tyg_template reports to the user.

    ``str(err)`` is always the bare message; use :func:`render` to
    produce the line written to stderr.
    """

    def __init__(
        self,
        message: str,
        *,
        location: SourceLocation | None = None,
        bare: bool = False,
    ) -> None:
        super().__init__(message)
        self.message: str = message
        self.location: SourceLocation | None = location
        """Where the error was built, or ``None`` when unknown."""
        self.bare: bool = bare
        """``True`` when the raise site asked for a non-disclosed error."""


class TygFileError(TygError):
    """Raised when the filing system refuses an operation.

    Wraps the original :class:`OSError`; the message is the OS error
    text and no source location is attached.
    """

    def __init__(self, cause: OSError) -> None:
        super().__init__(str(cause))
        self.cause: OSError = cause


# ---------------------------------------------------------------------------
# Construction helpers
# ---------------------------------------------------------------------------

def make_error(message: str, *, bare: bool = False, stacklevel: int = 1) -> TygError:
    """Build a :class:`TygError` located at the caller.

    Parameters
    ----------
    message:
        Human-readable description of the failure.
    bare:
        Record that the raise site asked for a non-disclosed error.
    stacklevel:
        How many frames above :func:`make_error` the location is taken
        from; ``1`` means the direct caller.
    """
    location = SourceLocation.capture(stacklevel + 1)
    logger.debug("error built at %s (bare=%s): %s", location, bare, message)
    return TygError(message, location=location, bare=bare)


def error(message: str) -> TygError:
    """Build a disclosed-style error located at the caller."""
    return make_error(message, stacklevel=2)


def error_bare(message: str) -> TygError:
    """Build a bare-style error located at the caller."""
    return make_error(message, bare=True, stacklevel=2)


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def render(err: TygError, disclose: bool, program: str = PROGRAM_NAME) -> str:
    """Format *err* for the error stream.

    The location is included only when *disclose* is set and the error
    has one; the error's own ``bare`` flag does not affect the output.
    """
    if disclose and err.location is not None:
        return f"{program}: {err.location}: {err.message}"
    return f"{program}: {err.message}"
