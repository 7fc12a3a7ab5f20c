"""Allow ``python -m parseopts`` invocation.

This module simply delegates to the CLI entry point so that
``python -m parseopts`` behaves identically to the ``parseopts-demo``
console script.
"""

from __future__ import annotations

from parseopts.cli.app import cli

if __name__ == "__main__":
    cli()
