"""Custom exception hierarchy for parseopts.

Every error raised by the library inherits from
:class:`ParseOptionsError`.  The hierarchy separates mistakes made by
the *user* of a program (bad command line, missing config file) from
defects in the *calling program* (registering a name twice, asking for
a positional argument that does not exist).

Hierarchy
---------
ParseOptionsError
├── UsageError
│   ├── UnknownOptionError
│   ├── MalformedOptionError
│   ├── TypeMismatchError
│   ├── ConfigNotFoundError
│   └── ArgumentCountError
└── ProgrammingError
    ├── DuplicateOptionError
    ├── InvalidOptionNameError
    ├── OptionTypeError
    ├── PositionalIndexError
    └── ReadStateError

:class:`HelpRequested` sits outside the hierarchy: it is a termination
signal, not an error.
"""

from __future__ import annotations


class ParseOptionsError(Exception):
    """Base exception for all parseopts errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- User input ------------------------------------------------------------

class UsageError(ParseOptionsError):
    """Raised for any problem with what the user typed or configured.

    The program facade attaches its rendered usage text to
    :attr:`usage` before the exception leaves ``read`` so the error
    boundary can print it alongside the message.
    """

    exit_code: int = 1

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message, hint=hint)
        self.usage: str | None = None


class UnknownOptionError(UsageError):
    """Raised when an option name is not in the registry."""


class MalformedOptionError(UsageError):
    """Raised when a token does not match the ``--name[=value]`` grammar."""


class TypeMismatchError(UsageError):
    """Raised when a value cannot be converted to the option's type."""


class ConfigNotFoundError(UsageError):
    """Raised when the file named by ``--config`` cannot be read."""


class ArgumentCountError(UsageError):
    """Raised when the number of positional arguments is out of range."""


# --- Defects in the calling program ---------------------------------------

class ProgrammingError(ParseOptionsError):
    """Raised when the calling program misuses the API."""


class DuplicateOptionError(ProgrammingError):
    """Raised when the same option name is registered twice."""


class InvalidOptionNameError(ProgrammingError):
    """Raised when a registered name is empty or has illegal characters."""


class OptionTypeError(ProgrammingError, TypeError):
    """Raised when a slot's value does not fit the option's type."""


class PositionalIndexError(ProgrammingError, IndexError):
    """Raised by ``get_arg`` for an index outside ``[1, num_args()]``."""


class ReadStateError(ProgrammingError):
    """Raised when the facade is used out of lifecycle order."""


# --- Termination signals ---------------------------------------------------

class HelpRequested(Exception):
    """Raised by ``read`` when ``--help`` resolved to true.

    Carries the full usage text; the hosting program is expected to
    print it and exit with :attr:`exit_code`.
    """

    exit_code: int = 0

    def __init__(self, usage: str) -> None:
        super().__init__("help requested")
        self.usage: str = usage
