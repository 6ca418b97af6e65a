"""tyg_template — a starting point for command-line projects.

Wires an :mod:`argparse` command line to a small error-reporting
convention.  Copy it, rename it, and replace the demo commands.
('tyg' stands for 'there you go'.)
"""

from tyg_template.version import __version__

__all__: list[str] = ["__version__"]
