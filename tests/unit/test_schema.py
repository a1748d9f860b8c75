"""Unit tests for schema binding and Compound models."""

from __future__ import annotations

from typing import Any, ClassVar, Optional, Union

import pytest
from pydantic import Field

from nbtbind import Byte, Compound, SchemaError, Short, TagField, TagType
from nbtbind.codec import CompoundBinding, ScalarBinding, SequenceBinding, bind_fields


class Egg(Compound):
    """Nested compound."""

    name: str = ""
    value: float = 0.0


class Basket(Compound):
    """Schema with every slot kind."""

    label: str = TagField("", name="Basket Label")
    count: int = 0
    egg: Egg = Field(default_factory=Egg)
    eggs: list[Egg] = []
    scores: list[int] = []
    spare: Optional[Egg] = None
    small: int = Byte(0)


class Renamed(Compound):
    """Schema with an explicit root name."""

    nbt_name: ClassVar[Optional[str]] = "Data"

    value: int = 0


class Colliding(Compound):
    """Schema with a field named like the class."""

    colliding: int = 0


class Required(Compound):
    """Schema without defaults."""

    name: str
    ratio: float
    data: bytes
    items: list[str]
    egg: Egg
    maybe: Optional[int]


class TestBindFields:
    """Test name-to-binding lookup construction."""

    def test_keys_are_lowercase(self) -> None:
        bindings = bind_fields(Basket())
        assert {"count", "egg", "eggs", "scores", "spare", "small"} <= set(bindings)

    def test_alias_replaces_field_name(self) -> None:
        bindings = bind_fields(Basket())
        assert "basket label" in bindings
        assert "label" not in bindings

    def test_binding_kinds(self) -> None:
        bindings = bind_fields(Basket())
        assert isinstance(bindings["count"], ScalarBinding)
        assert isinstance(bindings["egg"], CompoundBinding)
        assert isinstance(bindings["spare"], CompoundBinding)
        assert isinstance(bindings["eggs"], SequenceBinding)
        assert bindings["eggs"].element is Egg

    def test_root_entry_resolves_to_model(self) -> None:
        basket = Basket()
        binding = bind_fields(basket)["basket"]
        assert isinstance(binding, CompoundBinding)
        assert binding.enter() is basket

    def test_nbt_name_overrides_root_entry(self) -> None:
        bindings = bind_fields(Renamed())
        assert "data" in bindings
        assert "renamed" not in bindings

    def test_field_wins_over_root_entry(self) -> None:
        assert isinstance(bind_fields(Colliding())["colliding"], ScalarBinding)

    def test_pinned_tag(self) -> None:
        assert bind_fields(Basket())["small"].tag is TagType.BYTE

    def test_rejects_non_compound(self) -> None:
        with pytest.raises(SchemaError, match="must be a Compound"):
            bind_fields(object())  # type: ignore[arg-type]

    def test_rejects_complex_union(self) -> None:
        class Ambiguous(Compound):
            value: Union[int, str] = 0

        with pytest.raises(SchemaError, match="complex Union"):
            bind_fields(Ambiguous())


class TestTryAssign:
    """Test assignment compatibility without coercion."""

    def test_int_slot_accepts_all_integer_tags(self) -> None:
        basket = Basket()
        binding = bind_fields(basket)["count"]
        for tag in (TagType.BYTE, TagType.SHORT, TagType.INT, TagType.LONG):
            assert binding.try_assign(5, tag) is True
        assert basket.count == 5

    def test_no_int_to_float_coercion(self) -> None:
        egg = Egg()
        assert bind_fields(egg)["value"].try_assign(1, TagType.INT) is False
        assert egg.value == 0.0

    def test_float_slot_accepts_float_and_double(self) -> None:
        egg = Egg()
        binding = bind_fields(egg)["value"]
        assert binding.try_assign(0.5, TagType.FLOAT) is True
        assert binding.try_assign(0.25, TagType.DOUBLE) is True
        assert egg.value == 0.25

    def test_no_string_to_int(self) -> None:
        assert bind_fields(Basket())["count"].try_assign("5", TagType.STRING) is False

    def test_compound_slot_rejects_scalars(self) -> None:
        assert bind_fields(Basket())["egg"].try_assign("x", TagType.STRING) is False

    def test_pinned_slot_rejects_other_kinds(self) -> None:
        basket = Basket()
        binding = bind_fields(basket)["small"]
        assert binding.try_assign(3, TagType.SHORT) is False
        assert binding.try_assign(3, TagType.BYTE) is True
        assert basket.small == 3

    def test_bounds_rejection_is_a_mismatch(self) -> None:
        class Bounded(Compound):
            level: int = Field(0, ge=0, le=10)

        bounded = Bounded()
        assert bind_fields(bounded)["level"].try_assign(11, TagType.INT) is False
        assert bounded.level == 0

    def test_short_helper_range(self) -> None:
        class Pinned(Compound):
            value: int = Short(0)

        pinned = Pinned()
        assert bind_fields(pinned)["value"].try_assign(-32768, TagType.SHORT) is True
        assert pinned.value == -32768

    def test_int_array_into_int_list(self) -> None:
        basket = Basket()
        assert bind_fields(basket)["scores"].try_assign([1, 2], TagType.INT_ARRAY) is True
        assert basket.scores == [1, 2]

    def test_int_array_not_into_egg_list(self) -> None:
        assert bind_fields(Basket())["eggs"].try_assign([1], TagType.INT_ARRAY) is False

    def test_any_slot_accepts_scalars(self) -> None:
        class Loose(Compound):
            anything: Any = None

        loose = Loose()
        assert bind_fields(loose)["anything"].try_assign(b"\x01", TagType.BYTE_ARRAY) is True
        assert loose.anything == b"\x01"

    def test_bool_slot_accepts_nothing(self) -> None:
        class Flags(Compound):
            on: bool = False

        assert bind_fields(Flags())["on"].try_assign(1, TagType.BYTE) is False


class TestSequenceBinding:
    """Test list element creation and appending."""

    def test_new_element_is_zero_valued(self) -> None:
        binding = bind_fields(Basket())["eggs"]
        element, result = binding.new_element()
        assert isinstance(element, CompoundBinding)
        assert result() == Egg()

    def test_extend_appends_to_existing(self) -> None:
        basket = Basket(scores=[1])
        binding = bind_fields(basket)["scores"]
        assert binding.extend([2, 3]) is True
        assert basket.scores == [1, 2, 3]


class TestBlank:
    """Test blank instance construction."""

    def test_zero_values_for_required_fields(self) -> None:
        blank = Required.blank()
        assert blank.name == ""
        assert blank.ratio == 0.0
        assert blank.data == b""
        assert blank.items == []
        assert blank.egg == Egg()
        assert blank.maybe is None

    def test_defaults_are_copied(self) -> None:
        first = Basket.blank()
        second = Basket.blank()
        assert first.egg is not second.egg
        assert first.eggs is not second.eggs

    def test_nested_slot_created_on_enter(self) -> None:
        basket = Basket()
        spare = bind_fields(basket)["spare"]
        assert isinstance(spare, CompoundBinding)
        egg = spare.enter()
        assert basket.spare is egg
