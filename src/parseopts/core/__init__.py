"""Core layer — registry, tokeniser, conversions and text rendering.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
"""

from parseopts.core.models import OptionKind, OptionToken, ParsedArguments, ValueBinding
from parseopts.core.protocols import OptionRegistrar, OptionsGroup, Slot
from parseopts.core.registry import OptionRegistry
from parseopts.core.slots import AttrRef, Cell

__all__: list[str] = [
    "AttrRef",
    "Cell",
    "OptionKind",
    "OptionRegistrar",
    "OptionRegistry",
    "OptionToken",
    "OptionsGroup",
    "ParsedArguments",
    "Slot",
    "ValueBinding",
]
