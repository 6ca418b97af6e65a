"""CLI layer — argument parsing, console output, and the error boundary.

This package is the outermost layer of the application.  It may import
from ``core``, ``config`` and ``exceptions``, but nothing else may import
from ``cli``.
"""
