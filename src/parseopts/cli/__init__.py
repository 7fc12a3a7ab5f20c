"""CLI layer — the program facade, terminal output and error boundary.

This package is the outermost layer of the library.  It may import
from ``core``, ``infra``, and ``utils``, but no other layer may import
from ``cli``.
"""
