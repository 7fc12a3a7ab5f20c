"""Concrete :class:`~parseopts.core.protocols.Slot` implementations."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

T = TypeVar("T")


class Cell(Generic[T]):
    """A mutable box for a single value.

    Use when the option value is a local variable rather than an
    attribute::

        beam = Cell(16.0)
        opts.register("beam", beam, "Decoding beam")
        opts.read()
        run_decoder(beam.value)
    """

    __slots__ = ("value",)

    def __init__(self, value: T) -> None:
        self.value: T = value

    def get(self) -> T:
        return self.value

    def set(self, value: T) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"Cell({self.value!r})"


class AttrRef:
    """A slot backed by an attribute of a caller-owned object."""

    __slots__ = ("obj", "attr")

    def __init__(self, obj: object, attr: str) -> None:
        if not hasattr(obj, attr):
            raise AttributeError(
                f"{type(obj).__name__!s} has no attribute {attr!r}"
            )
        self.obj = obj
        self.attr = attr

    def get(self) -> Any:
        return getattr(self.obj, self.attr)

    def set(self, value: Any) -> None:
        setattr(self.obj, self.attr, value)

    def __repr__(self) -> str:
        return f"AttrRef({type(self.obj).__name__}.{self.attr})"
