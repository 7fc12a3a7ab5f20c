"""Protocols (interfaces) consumed by the core layer.

Everything here is structural: a caller's type satisfies a protocol by
having the right methods, never by inheriting from it.
"""

from __future__ import annotations

from typing import Any, Protocol


class Slot(Protocol):
    """A single typed cell owned by the calling program.

    The registry holds a non-owning reference to the slot and writes
    converted values through :meth:`set`.
    """

    def get(self) -> Any:
        """Return the current value."""
        ...  # pragma: no cover

    def set(self, value: Any) -> None:
        """Replace the current value."""
        ...  # pragma: no cover


class OptionRegistrar(Protocol):
    """Anything options can be registered into.

    Both :class:`~parseopts.cli.options.ParseOptions` and the prefixed
    view handed to option groups satisfy this protocol.
    """

    def register(
        self,
        name: str,
        slot: Slot,
        description: str,
        kind: Any = None,
    ) -> None:
        """Register *slot* under *name*.

        Raises
        ------
        DuplicateOptionError
            When *name* is already registered.
        InvalidOptionNameError
            When *name* is not a valid option name.
        """
        ...  # pragma: no cover


class OptionsGroup(Protocol):
    """A structured set of options that knows how to register itself.

    Typical implementations are dataclasses whose fields are bound with
    :class:`~parseopts.core.slots.AttrRef`::

        @dataclass
        class DecoderOptions:
            beam: float = 16.0

            def register(self, opts: OptionRegistrar) -> None:
                opts.register("beam", AttrRef(self, "beam"), "Decoding beam")
    """

    def register(self, opts: OptionRegistrar) -> None:
        """Register this group's options into *opts*."""
        ...  # pragma: no cover
