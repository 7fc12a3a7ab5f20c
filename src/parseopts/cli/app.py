"""Program error boundary and the ``parseopts-demo`` program.

:func:`run_program` is the **error boundary** a hosting program wraps
its ``main`` in.  It turns :class:`~parseopts.exceptions.HelpRequested`,
:class:`~parseopts.exceptions.UsageError`, ``KeyboardInterrupt`` and any
unexpected ``Exception`` into user-facing messages and well-defined
exit codes.

Architecture notes
------------------
* Programmer errors (duplicate registrations, out-of-range ``get_arg``)
  are deliberately *not* treated as usage errors; they land in the
  unexpected-error branch so the defect is reported as such.
* This module is the only place that translates between parse results
  and the OS process exit code.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import NoReturn

from parseopts.cli import exit_codes
from parseopts.cli.console import console
from parseopts.cli.options import ParseOptions
from parseopts.core.protocols import OptionRegistrar
from parseopts.core.slots import AttrRef, Cell
from parseopts.exceptions import HelpRequested, UsageError
from parseopts.utils.log_setup import configure_logging

logger = logging.getLogger(__name__)

ProgramMain = Callable[[Sequence[str] | None], int]


def _escape(text: str) -> str:
    """Escape Rich markup in user-controlled text when Rich is present."""
    try:
        from rich.markup import escape
    except ModuleNotFoundError:
        return text
    return escape(text)


# ---------------------------------------------------------------------------
# Error boundary
# ---------------------------------------------------------------------------

def run_program(main: ProgramMain, argv: Sequence[str] | None = None) -> NoReturn:
    """Call ``main(argv)`` and exit the process with a well-defined code.

    * normal return → the returned code
    * ``HelpRequested`` → usage on stderr, exit 0
    * ``UsageError`` → usage, ``Error:`` line and optional hint, exit 1
    * ``KeyboardInterrupt`` → exit 130
    * anything else → "Unexpected error", exit 2
    """
    try:
        code = main(argv)
        sys.exit(code)
    except HelpRequested as exc:
        console.write(exc.usage)
        sys.exit(exc.exit_code)
    except UsageError as exc:
        if exc.usage:
            console.write(exc.usage + "\n")
        console.print(f"[bold red]Error:[/bold red] {_escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {_escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "This is a bug in the program, please report it.\n"
            f"  {type(exc).__name__}: {_escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)


# ---------------------------------------------------------------------------
# Demo program
# ---------------------------------------------------------------------------

USAGE = """\
Print the options and arguments a decoding program would run with.

Usage:  parseopts-demo [options] <model-in> [<output>]
 e.g.:  parseopts-demo --beam=13.0 --config=conf/decode.conf final.mdl
"""


@dataclass
class DecoderOptions:
    """Decoder tuning knobs, registered as a group."""

    beam: float = 16.0
    max_active: int = 7000
    lattice_beam: float = 10.0

    def register(self, opts: OptionRegistrar) -> None:
        opts.register("beam", AttrRef(self, "beam"),
                      "Decoding beam.  Larger->slower, more accurate.")
        opts.register("max_active", AttrRef(self, "max_active"),
                      "Decoder max active states.  Larger->slower; more accurate")
        opts.register("lattice_beam", AttrRef(self, "lattice_beam"),
                      "Lattice generation beam")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demo program.

    Parameters
    ----------
    argv:
        Explicit argument list without the program name.  When ``None``
        (default), ``sys.argv[1:]`` is used.

    Returns
    -------
    int
        OS process exit code.
    """
    po = ParseOptions(USAGE)
    binary = Cell(True)
    word_syms = Cell("")
    acoustic_scale = Cell(0.1)
    po.register_bool("binary", binary, "Write output in binary mode")
    po.register_str("word-symbol-table", word_syms,
                    "Symbol table for words [for debug output]")
    po.register_float("acoustic-scale", acoustic_scale,
                      "Scaling factor for acoustic likelihoods")
    decoder = DecoderOptions()
    po.register_group(decoder)

    po.read(argv, prog="parseopts-demo")
    configure_logging(po.verbose)
    po.expect_args(1, 2)

    logger.info("Model: %s", po.get_arg(1))
    po.print_config()
    for i in range(1, po.num_args() + 1):
        console.write(f"arg {i}: {po.get_arg(i)}\n")
    if not po.get_opt_arg(2):
        console.write("output: (stdout)\n")
    return exit_codes.SUCCESS


def cli() -> None:
    """Console-script entry point for ``parseopts-demo``."""
    run_program(main)
