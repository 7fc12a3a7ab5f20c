"""Tests for domain models (core/models.py) and slots (core/slots.py).

Models are frozen dataclasses; these tests verify immutability and
field access.  Slots are the only mutable pieces and are checked for
read/write-through behaviour.
"""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from parseopts.core.models import OptionKind, OptionToken, ParsedArguments, ValueBinding
from parseopts.core.slots import AttrRef, Cell


def _make_binding(**overrides: object) -> ValueBinding:
    """Factory with sensible defaults for concise tests."""
    defaults: dict[str, object] = {
        "name": "beam",
        "kind": OptionKind.FLOAT,
        "slot": Cell(16.0),
        "description": "Decoding beam",
        "default": 16.0,
    }
    defaults.update(overrides)
    return ValueBinding(**defaults)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# OptionKind
# ---------------------------------------------------------------------------

class TestOptionKind:
    def test_only_bool_may_omit_value(self) -> None:
        assert not OptionKind.BOOL.takes_value
        for kind in (OptionKind.INT, OptionKind.UINT, OptionKind.FLOAT, OptionKind.STR):
            assert kind.takes_value

    def test_values_are_display_names(self) -> None:
        assert OptionKind.STR.value == "string"
        assert OptionKind.UINT.value == "uint"


# ---------------------------------------------------------------------------
# ValueBinding
# ---------------------------------------------------------------------------

class TestValueBinding:
    def test_fields_accessible(self) -> None:
        b = _make_binding()
        assert b.name == "beam"
        assert b.kind is OptionKind.FLOAT
        assert b.description == "Decoding beam"
        assert b.default == 16.0
        assert b.implicit is False

    def test_frozen(self) -> None:
        b = _make_binding()
        with pytest.raises(AttributeError):
            b.kind = OptionKind.INT  # type: ignore[misc]

    def test_slot_stays_mutable(self) -> None:
        cell = Cell(16.0)
        b = _make_binding(slot=cell)
        b.slot.set(8.0)
        assert cell.value == 8.0
        assert b.default == 16.0


# ---------------------------------------------------------------------------
# OptionToken / ParsedArguments
# ---------------------------------------------------------------------------

class TestOptionToken:
    def test_value_can_be_none(self) -> None:
        assert OptionToken(name="binary", value=None).value is None

    def test_equality(self) -> None:
        assert OptionToken("beam", "10") == OptionToken("beam", "10")

    def test_frozen(self) -> None:
        t = OptionToken("beam", "10")
        with pytest.raises(AttributeError):
            t.value = "11"  # type: ignore[misc]


class TestParsedArguments:
    def test_len_is_positional_count(self) -> None:
        parsed = ParsedArguments(positional=("a", "b"), supplied=frozenset())
        assert len(parsed) == 2

    def test_frozen(self) -> None:
        parsed = ParsedArguments(positional=(), supplied=frozenset())
        with pytest.raises(AttributeError):
            parsed.positional = ("x",)  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Slots
# ---------------------------------------------------------------------------

@dataclass
class _Group:
    beam: float = 16.0


class TestCell:
    def test_get_set(self) -> None:
        cell = Cell(1)
        assert cell.get() == 1
        cell.set(2)
        assert cell.value == 2

    def test_repr(self) -> None:
        assert repr(Cell("x")) == "Cell('x')"


class TestAttrRef:
    def test_writes_through_to_owner(self) -> None:
        group = _Group()
        ref = AttrRef(group, "beam")
        ref.set(9.5)
        assert group.beam == 9.5
        assert ref.get() == 9.5

    def test_missing_attribute_rejected(self) -> None:
        with pytest.raises(AttributeError, match="no attribute 'width'"):
            AttrRef(_Group(), "width")

    def test_repr(self) -> None:
        assert repr(AttrRef(_Group(), "beam")) == "AttrRef(_Group.beam)"
