"""Demonstrations of the error-handling convention.

Each function here is the body of one subcommand.  None of them print;
anything meant for the user is passed to the ``emit`` callable the CLI
layer supplies.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterator

from tyg_template.exceptions import TygFileError, error, error_bare

logger = logging.getLogger(__name__)

DEMO_MESSAGE: str = "Error thrown to demonstrate the error handling process"


def error_demo(bare: bool) -> None:
    """Raise the demonstration error, bare-style when *bare* is set."""
    if bare:
        raise error_bare(DEMO_MESSAGE)
    raise error(DEMO_MESSAGE)


# ---------------------------------------------------------------------------
# Failing iteration
# ---------------------------------------------------------------------------

class Counter:
    """Count from 1 to *limit*, failing on every cycle from *fail_at* on.

    A failing cycle raises from ``__next__`` but leaves the counter
    advanced, so a caller that chooses to carry on sees the next cycle.
    """

    def __init__(self, limit: int = 11, fail_at: int = 5) -> None:
        self.count = 0
        self.limit = limit
        self.fail_at = fail_at

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        if self.count >= self.limit:
            raise StopIteration
        self.count += 1
        if self.count >= self.fail_at:
            raise error(f"Failed at cycle {self.count}")
        return self.count


def recursive_fail_demo(emit: Callable[[str], None]) -> None:
    """Report each cycle of a :class:`Counter` until it fails."""
    emit("We need to fail at cycle 5")
    for n in Counter():
        emit(f"Cycle {n}")


# ---------------------------------------------------------------------------
# Filing-system failure
# ---------------------------------------------------------------------------

def file_fail_demo(path: str, better: bool) -> None:
    """Open *path* read-only at the OS level and close it again.

    A missing or unreadable path raises :class:`TygFileError` carrying
    the OS error, or, with *better*, a located error naming the path.
    Directories open successfully on POSIX systems.
    """
    try:
        fd = os.open(path, os.O_RDONLY)
    except OSError as exc:
        if better:
            raise error(f"{path}: {exc.strerror or exc}") from exc
        raise TygFileError(exc) from exc
    os.close(fd)
    logger.debug("opened %s", path)
