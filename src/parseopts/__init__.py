"""parseopts — typed ``--name=value`` option and config-file parsing.

Bind named options to caller-owned variables, read ``argv`` and an
optional config file, and produce a usage message on request or error.
"""

from parseopts.cli.options import ParseOptions
from parseopts.core.models import OptionKind, ParsedArguments
from parseopts.core.protocols import OptionRegistrar, OptionsGroup, Slot
from parseopts.core.slots import AttrRef, Cell
from parseopts.exceptions import HelpRequested, ParseOptionsError, UsageError
from parseopts.version import __version__

__all__: list[str] = [
    "AttrRef",
    "Cell",
    "HelpRequested",
    "OptionKind",
    "OptionRegistrar",
    "OptionsGroup",
    "ParseOptions",
    "ParseOptionsError",
    "ParsedArguments",
    "Slot",
    "UsageError",
    "__version__",
]
