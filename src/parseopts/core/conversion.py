"""Pure text → value conversions, one per :class:`OptionKind`.

Every converter accepts the *whole* string or rejects it; trailing
residue such as ``"10abc"`` or ``"1.5 "`` is a
:class:`~parseopts.exceptions.TypeMismatchError`.  Python's own
``int()``/``float()`` are deliberately fronted by regular expressions
because they accept whitespace, underscores and non-ASCII digits.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from parseopts.core.models import OptionKind
from parseopts.exceptions import OptionTypeError, TypeMismatchError

_TRUE_WORDS = frozenset({"true", "yes", "1"})
_FALSE_WORDS = frozenset({"false", "no", "0"})

_INT_RE = re.compile(r"[+-]?[0-9]+")
_UINT_RE = re.compile(r"\+?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


def _mismatch(name: str, text: str, expected: str) -> TypeMismatchError:
    return TypeMismatchError(
        f"Invalid value {text!r} for option --{name}: expected {expected}.",
    )


def to_bool(name: str, text: str | None) -> bool:
    """Convert boolean option text.  ``None`` (bare ``--name``) is true."""
    if text is None:
        return True
    lowered = text.lower()
    if lowered in _TRUE_WORDS:
        return True
    if lowered in _FALSE_WORDS:
        return False
    raise _mismatch(name, text, "true/false, yes/no or 1/0")


def to_int(name: str, text: str) -> int:
    if _INT_RE.fullmatch(text) is None:
        raise _mismatch(name, text, "an integer")
    return int(text)


def to_uint(name: str, text: str) -> int:
    if _UINT_RE.fullmatch(text) is None:
        raise _mismatch(name, text, "a non-negative integer")
    return int(text)


def to_float(name: str, text: str) -> float:
    if _FLOAT_RE.fullmatch(text) is None:
        raise _mismatch(name, text, "a floating-point number")
    return float(text)


def to_str(name: str, text: str) -> str:
    del name
    return text


_CONVERTERS: dict[OptionKind, Callable[[str, str], object]] = {
    OptionKind.INT: to_int,
    OptionKind.UINT: to_uint,
    OptionKind.FLOAT: to_float,
    OptionKind.STR: to_str,
}


def convert(kind: OptionKind, name: str, text: str | None) -> object:
    """Convert *text* for an option of *kind* named *name*.

    Raises
    ------
    TypeMismatchError
        When *text* is not a valid literal of *kind*.
    """
    if kind is OptionKind.BOOL:
        return to_bool(name, text)
    if text is None:
        # Callers reject value-less tokens for non-bool kinds first.
        raise _mismatch(name, "", f"a {kind.value} value")
    return _CONVERTERS[kind](name, text)


def infer_kind(value: object) -> OptionKind:
    """Pick the :class:`OptionKind` matching a slot's current value.

    ``bool`` is tested before ``int`` because it is a subclass of it.
    Negative integers cannot be inferred as unsigned, so plain ``int``
    always maps to :attr:`OptionKind.INT`.

    Raises
    ------
    OptionTypeError
        When the value is not a bool, int, float or str.
    """
    if isinstance(value, bool):
        return OptionKind.BOOL
    if isinstance(value, int):
        return OptionKind.INT
    if isinstance(value, float):
        return OptionKind.FLOAT
    if isinstance(value, str):
        return OptionKind.STR
    raise OptionTypeError(
        f"Cannot infer option type from {type(value).__name__} value {value!r}.",
    )


def check_default(kind: OptionKind, name: str, value: object) -> None:
    """Raise :class:`OptionTypeError` unless *value* is a valid *kind* value.

    An ``int`` is accepted for a float option; ``bool`` never counts as
    a number.
    """
    if kind is OptionKind.BOOL:
        fits = isinstance(value, bool)
    elif isinstance(value, bool):
        fits = False
    elif kind is OptionKind.INT:
        fits = isinstance(value, int)
    elif kind is OptionKind.UINT:
        fits = isinstance(value, int) and value >= 0
    elif kind is OptionKind.FLOAT:
        fits = isinstance(value, (int, float))
    else:
        fits = isinstance(value, str)
    if not fits:
        raise OptionTypeError(
            f"Default {value!r} of option --{name} is not a valid "
            f"{kind.value} value.",
        )


def format_value(kind: OptionKind, value: object) -> str:
    """Render *value* the way it would be written on a command line."""
    if kind is OptionKind.BOOL:
        return "true" if value else "false"
    return str(value)
