"""Core layer — command models and the behaviour behind each command.

Rules
-----
* No ``print()`` calls; output goes through callables supplied by ``cli``.
* No imports from ``cli``.
* Failures are raised as :class:`~tyg_template.exceptions.TygError`.

Only the command models are re-exported here; the command bodies in
:mod:`tyg_template.core.demos` are imported by the handler that runs them.
"""

from tyg_template.core.models import (
    Command,
    FailCommand,
    FileFailCommand,
    HelpCommand,
    RecursiveFailCommand,
)

__all__: list[str] = [
    "Command",
    "FailCommand",
    "FileFailCommand",
    "HelpCommand",
    "RecursiveFailCommand",
]
