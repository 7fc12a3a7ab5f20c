"""Domain models for parseopts.

Value objects are **frozen** dataclasses.  The only mutable state in
the system lives in the caller-owned slots a :class:`ValueBinding`
points at (see :mod:`parseopts.core.slots`).
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from parseopts.core.protocols import Slot


# ---------------------------------------------------------------------------
# Option kinds
# ---------------------------------------------------------------------------

class OptionKind(enum.Enum):
    """Type tag of a binding.  Fixed at registration."""

    BOOL = "bool"
    INT = "int"
    UINT = "uint"
    FLOAT = "float"
    STR = "string"

    @property
    def takes_value(self) -> bool:
        """Whether ``--name`` without ``=value`` is invalid for this kind."""
        return self is not OptionKind.BOOL


# ---------------------------------------------------------------------------
# Registered option
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ValueBinding:
    """A named, typed reference to a caller-owned slot."""

    name: str
    """Normalised option name, without the leading ``--``."""

    kind: OptionKind

    slot: Slot
    """Where assignments land.  Owned by the calling program."""

    description: str
    """One-line help text."""

    default: object
    """Value held by the slot when the option was registered."""

    implicit: bool = False
    """``True`` for ``config``, ``print-args``, ``help`` and ``verbose``."""


# ---------------------------------------------------------------------------
# Parser outputs
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class OptionToken:
    """One decoded ``--name`` or ``--name=value`` token."""

    name: str

    value: str | None
    """Text after the first ``=``, or ``None`` when there was no ``=``."""


@dataclass(frozen=True, slots=True)
class ParsedArguments:
    """Result of a single ``read`` pass."""

    positional: tuple[str, ...]
    """Tokens from the first non-option token onward, verbatim."""

    supplied: frozenset[str]
    """Names assigned from the command line or a config file."""

    def __len__(self) -> int:
        return len(self.positional)
