"""The option registry: name → :class:`ValueBinding`, in registration order.

Registration mistakes are defects in the calling program and raise
:class:`~parseopts.exceptions.ProgrammingError` subclasses at once.
Lookup and assignment failures are user input problems and raise
:class:`~parseopts.exceptions.UsageError` subclasses.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from parseopts.core.conversion import check_default, convert, infer_kind
from parseopts.core.models import OptionKind, ValueBinding
from parseopts.core.protocols import Slot
from parseopts.core.tokens import NAME_RE
from parseopts.exceptions import (
    DuplicateOptionError,
    InvalidOptionNameError,
    MalformedOptionError,
    UnknownOptionError,
)

logger = logging.getLogger(__name__)


def normalize_name(name: str) -> str:
    """Map a registration name to its command-line form (``_`` → ``-``)."""
    return name.replace("_", "-")


class OptionRegistry:
    """Ordered mapping of option names to bindings."""

    def __init__(self) -> None:
        self._bindings: dict[str, ValueBinding] = {}

    # -- registration -------------------------------------------------------

    def register(
        self,
        name: str,
        slot: Slot,
        description: str,
        kind: OptionKind | None = None,
        *,
        implicit: bool = False,
    ) -> ValueBinding:
        """Record a new binding and return it.

        When *kind* is omitted it is inferred from ``slot.get()``.

        Raises
        ------
        InvalidOptionNameError
            When the normalised name is empty or has illegal characters.
        DuplicateOptionError
            When the name is already registered, whatever its kind.
        OptionTypeError
            When the slot value cannot be inferred or does not fit *kind*.
        """
        normalized = normalize_name(name)
        if NAME_RE.fullmatch(normalized) is None:
            raise InvalidOptionNameError(
                f"Invalid option name {name!r}: names must be non-empty and "
                "contain only letters, digits, '-' or '_'.",
            )
        if normalized in self._bindings:
            raise DuplicateOptionError(
                f"Option --{normalized} is registered more than once.",
            )

        default = slot.get()
        if kind is None:
            kind = infer_kind(default)
        else:
            check_default(kind, normalized, default)
        binding = ValueBinding(
            name=normalized,
            kind=kind,
            slot=slot,
            description=description,
            default=default,
            implicit=implicit,
        )
        self._bindings[normalized] = binding
        logger.debug("Registered --%s (%s)", normalized, kind.value)
        return binding

    # -- lookup -------------------------------------------------------------

    def resolve(self, name: str) -> ValueBinding:
        """Return the binding for *name* or raise ``UnknownOptionError``."""
        try:
            return self._bindings[name]
        except KeyError:
            raise UnknownOptionError(f"Unknown option --{name}.") from None

    def __contains__(self, name: object) -> bool:
        return name in self._bindings

    def __iter__(self) -> Iterator[ValueBinding]:
        return iter(self._bindings.values())

    def __len__(self) -> int:
        return len(self._bindings)

    # -- assignment ---------------------------------------------------------

    def assign(self, name: str, raw: str | None) -> ValueBinding:
        """Convert *raw* for option *name* and write it to the slot.

        ``raw`` is ``None`` for a bare ``--name`` token, which only
        boolean options accept.  The write happens immediately; earlier
        assignments are never rolled back when a later one fails.

        Raises
        ------
        UnknownOptionError
            When *name* is not registered.
        MalformedOptionError
            When a non-boolean option is given without ``=value``.
        TypeMismatchError
            When *raw* does not convert to the option's type.
        """
        binding = self.resolve(name)
        if raw is None and binding.kind.takes_value:
            raise MalformedOptionError(
                f"Option --{name} requires a value.",
                hint=f"Write it as --{name}=<{binding.kind.value}>.",
            )
        value = convert(binding.kind, name, raw)
        binding.slot.set(value)
        logger.debug("Set --%s = %r", name, value)
        return binding
