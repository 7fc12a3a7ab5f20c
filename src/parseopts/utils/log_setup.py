"""Map the implicit ``--verbose`` level onto stdlib logging.

Rich is optional here for the same reason it is optional in
:mod:`parseopts.cli.console`: a program must still be able to report
``--help`` and parse errors when Rich is missing.
"""

from __future__ import annotations

import logging
import sys

_HANDLER_NAME = "parseopts"


def level_for_verbosity(verbose: int) -> int:
    """Return the logging level for a ``--verbose`` value.

    ``0`` (and anything negative) shows warnings only, ``1`` adds info
    messages and ``2`` or more adds debug messages.
    """
    if verbose <= 0:
        return logging.WARNING
    if verbose == 1:
        return logging.INFO
    return logging.DEBUG


def _make_handler() -> logging.Handler:
    try:
        from rich.console import Console
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler: logging.Handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        return handler
    return RichHandler(console=Console(stderr=True), show_path=False)


def configure_logging(verbose: int, logger: logging.Logger | None = None) -> logging.Logger:
    """Install a stderr handler on *logger* (root by default).

    Calling this more than once replaces the handler installed by the
    previous call instead of stacking another one.
    """
    target = logger if logger is not None else logging.getLogger()
    for existing in list(target.handlers):
        if existing.get_name() == _HANDLER_NAME:
            target.removeHandler(existing)

    handler = _make_handler()
    handler.set_name(_HANDLER_NAME)
    target.addHandler(handler)
    target.setLevel(level_for_verbosity(verbose))
    return target
