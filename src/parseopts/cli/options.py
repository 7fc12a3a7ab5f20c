"""The program facade: :class:`ParseOptions`.

A program builds one ``ParseOptions`` with its usage text, registers
its options, calls :meth:`ParseOptions.read` exactly once, then reads
positional arguments back::

    po = ParseOptions("Usage: align [options] <model> <feats>\\n")
    beam = Cell(10.0)
    po.register("beam", beam, "Decoding beam")
    po.read()
    po.expect_args(2)
    model, feats = po.get_arg(1), po.get_arg(2)

Every instance carries four implicit options of its own: ``--config``,
``--print-args``, ``--help`` and ``--verbose``.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from parseopts.cli.console import console
from parseopts.core.config_lines import CONFIG_OPTION
from parseopts.core.conversion import to_bool
from parseopts.core.models import OptionKind, ParsedArguments, ValueBinding
from parseopts.core.protocols import OptionRegistrar, OptionsGroup, Slot
from parseopts.core.registry import OptionRegistry, normalize_name
from parseopts.core.slots import Cell
from parseopts.core.tokens import OPTION_PREFIX, parse_option_token, split_args
from parseopts.core.usage import render_command_line, render_config, render_usage
from parseopts.exceptions import (
    ArgumentCountError,
    HelpRequested,
    PositionalIndexError,
    ReadStateError,
    TypeMismatchError,
    UsageError,
)
from parseopts.infra.config_reader import load_config

logger = logging.getLogger(__name__)

HELP_OPTION = "help"


# ---------------------------------------------------------------------------
# Prefixed registration for option groups
# ---------------------------------------------------------------------------

class PrefixedRegistrar:
    """Registers every name as ``<prefix>-<name>`` into another registrar.

    Handed to an :class:`~parseopts.core.protocols.OptionsGroup` so the
    same group type can be registered twice under different prefixes.
    """

    def __init__(self, target: OptionRegistrar, prefix: str) -> None:
        self._target = target
        self._prefix = normalize_name(prefix)

    def register(
        self,
        name: str,
        slot: Slot,
        description: str,
        kind: OptionKind | None = None,
    ) -> None:
        self._target.register(f"{self._prefix}-{name}", slot, description, kind)


# ---------------------------------------------------------------------------
# Facade
# ---------------------------------------------------------------------------

class ParseOptions:
    """Option registry, argv parser and config-file merger for one program."""

    def __init__(self, usage: str) -> None:
        self._usage = usage
        self._registry = OptionRegistry()
        self._read_called = False
        self._parsed: ParsedArguments | None = None

        self._config: Cell[str] = Cell("")
        self._print_args: Cell[bool] = Cell(True)
        self._help: Cell[bool] = Cell(False)
        self._verbose: Cell[int] = Cell(0)

        implicit = (
            (CONFIG_OPTION, self._config, OptionKind.STR,
             "Configuration file to read (this option may be repeated)"),
            ("print-args", self._print_args, OptionKind.BOOL,
             "Print the command line arguments (to stderr)"),
            (HELP_OPTION, self._help, OptionKind.BOOL,
             "Print out usage message"),
            ("verbose", self._verbose, OptionKind.INT,
             "Verbose level (higher->more logging)"),
        )
        for name, slot, kind, description in implicit:
            self._registry.register(name, slot, description, kind, implicit=True)

    # -- registration -------------------------------------------------------

    def register(
        self,
        name: str,
        slot: Slot,
        description: str,
        kind: OptionKind | None = None,
    ) -> None:
        """Bind *slot* to ``--name``.  The kind defaults to the slot's type."""
        if self._read_called:
            raise ReadStateError(
                f"Cannot register --{normalize_name(name)} after read().",
            )
        self._registry.register(name, slot, description, kind)

    def register_bool(self, name: str, slot: Slot, description: str) -> None:
        self.register(name, slot, description, OptionKind.BOOL)

    def register_int(self, name: str, slot: Slot, description: str) -> None:
        self.register(name, slot, description, OptionKind.INT)

    def register_uint(self, name: str, slot: Slot, description: str) -> None:
        self.register(name, slot, description, OptionKind.UINT)

    def register_float(self, name: str, slot: Slot, description: str) -> None:
        self.register(name, slot, description, OptionKind.FLOAT)

    def register_str(self, name: str, slot: Slot, description: str) -> None:
        self.register(name, slot, description, OptionKind.STR)

    def register_group(self, group: OptionsGroup, prefix: str = "") -> None:
        """Let *group* register itself, optionally under ``<prefix>-``."""
        target: OptionRegistrar = PrefixedRegistrar(self, prefix) if prefix else self
        group.register(target)

    def options(self) -> tuple[ValueBinding, ...]:
        """All bindings, implicit ones first, in registration order."""
        return tuple(self._registry)

    # -- reading ------------------------------------------------------------

    def read(
        self,
        args: Sequence[str] | None = None,
        *,
        prog: str | None = None,
    ) -> ParsedArguments:
        """Parse *args* (``sys.argv[1:]`` by default).

        Steps, in order: split the option region from the positional
        tail; look for ``--help``; assign every option token, loading a
        config file inline whenever ``--config`` is seen; raise
        :class:`HelpRequested` if help ended up true; echo the command
        line when ``--print-args`` is true; store positionals.

        Raises
        ------
        HelpRequested
            When ``--help`` was requested.  Nothing else is validated
            when it is given on the command line.
        UsageError
            For any unknown, malformed, mistyped option or unreadable
            config file.  ``exc.usage`` holds the usage text.
            Assignments made before the failure are kept.
        ReadStateError
            When called a second time.
        """
        if self._read_called:
            raise ReadStateError("read() may only be called once.")
        self._read_called = True

        if args is None:
            args = sys.argv[1:]
        if prog is None:
            prog = Path(sys.argv[0]).name if sys.argv and sys.argv[0] else "program"
        args = list(args)

        option_texts, positional = split_args(args)

        if self._help_on_command_line(option_texts):
            self._help.set(True)
            self._parsed = ParsedArguments(
                positional=tuple(positional),
                supplied=frozenset({HELP_OPTION}),
            )
            raise HelpRequested(self.usage())

        supplied: set[str] = set()
        try:
            for text in option_texts:
                token = parse_option_token(text)
                self._registry.assign(token.name, token.value)
                supplied.add(token.name)
                if token.name == CONFIG_OPTION:
                    supplied.update(self._merge_config(self._config.get()))
        except UsageError as exc:
            exc.usage = self.usage()
            raise

        self._parsed = ParsedArguments(
            positional=tuple(positional),
            supplied=frozenset(supplied),
        )

        if self._help.get():
            raise HelpRequested(self.usage())

        if self._print_args.get():
            console.write(render_command_line(prog, args) + "\n")

        logger.debug(
            "Read %d option(s) and %d positional argument(s)",
            len(supplied), len(positional),
        )
        return self._parsed

    def _help_on_command_line(self, option_texts: Sequence[str]) -> bool:
        """Return the last valid ``--help`` value in the option region.

        Tokens are inspected without being decoded so that a malformed
        or unknown option elsewhere cannot hide a help request.
        """
        requested = False
        for text in option_texts:
            name, sep, value = text[len(OPTION_PREFIX):].partition("=")
            if name != HELP_OPTION:
                continue
            try:
                requested = to_bool(HELP_OPTION, value if sep else None)
            except TypeMismatchError:
                continue
        return requested

    def _merge_config(self, path: str) -> set[str]:
        names: set[str] = set()
        for token in load_config(path):
            self._registry.assign(token.name, token.value)
            names.add(token.name)
        logger.info("Applied %d option(s) from config file %s", len(names), path)
        return names

    # -- positional arguments ----------------------------------------------

    def _require_parsed(self) -> ParsedArguments:
        if self._parsed is None:
            raise ReadStateError("Positional arguments are only available after read().")
        return self._parsed

    def num_args(self) -> int:
        return len(self._require_parsed().positional)

    def get_arg(self, i: int) -> str:
        """Return positional argument *i* (1-based).

        Raises
        ------
        PositionalIndexError
            When *i* is outside ``[1, num_args()]``.
        """
        positional = self._require_parsed().positional
        if not 1 <= i <= len(positional):
            raise PositionalIndexError(
                f"get_arg({i}) is out of range: {len(positional)} positional "
                "argument(s) were given.",
            )
        return positional[i - 1]

    def get_opt_arg(self, i: int) -> str:
        """Like :meth:`get_arg` but returns ``""`` for a missing argument."""
        positional = self._require_parsed().positional
        if not 1 <= i <= len(positional):
            return ""
        return positional[i - 1]

    def expect_args(self, minimum: int, maximum: int | None = None) -> None:
        """Check the positional count is in ``[minimum, maximum]``.

        *maximum* defaults to *minimum*.  Pass ``-1`` for no upper bound.

        Raises
        ------
        ArgumentCountError
            With the usage text attached, when the count is out of range.
        """
        if maximum is None:
            maximum = minimum
        count = self.num_args()
        if count >= minimum and (maximum < 0 or count <= maximum):
            return
        if maximum == minimum:
            expected = f"{minimum}"
        elif maximum < 0:
            expected = f"at least {minimum}"
        else:
            expected = f"{minimum} to {maximum}"
        exc = ArgumentCountError(
            f"Expected {expected} positional argument(s), got {count}.",
        )
        exc.usage = self.usage()
        raise exc

    def was_supplied(self, name: str) -> bool:
        """Whether ``--name`` came from the command line or a config file."""
        return normalize_name(name) in self._require_parsed().supplied

    # -- implicit option values --------------------------------------------

    @property
    def verbose(self) -> int:
        return self._verbose.get()

    @property
    def print_args(self) -> bool:
        return self._print_args.get()

    @property
    def help_requested(self) -> bool:
        return self._help.get()

    @property
    def config_path(self) -> str:
        return self._config.get()

    # -- reporting ----------------------------------------------------------

    def usage(self) -> str:
        return render_usage(self._usage, self._registry)

    def config_text(self) -> str:
        return render_config(self._registry)

    def print_usage(self) -> None:
        console.write(self.usage())

    def print_config(self) -> None:
        """Write current option values to stderr in config-file form."""
        console.write(self.config_text())
