"""Schema for the classic bigtest.nbt test document.

Decode it with the command-line tool (after gunzipping the file):

    nbtbind --schema examples/level_schema.py bigtest.nbt
"""

from __future__ import annotations

from pydantic import Field

from nbtbind import Byte, Compound, Double, Float, Int, Long, Short, TagField, TagType


class Food(Compound):
    name: str = ""
    value: float = Float(0.0)


class Nested(Compound):
    egg: Food = Field(default_factory=Food)
    ham: Food = Field(default_factory=Food)


class ListItem(Compound):
    created_on: int = Long(0, name="created-on")
    name: str = ""


class Level(Compound):
    """Root compound; the root tag in bigtest.nbt is named "Level"."""

    nested: Nested = TagField(default_factory=Nested, name="nested compound test")
    byte_test: int = Byte(0, name="byteTest")
    short_test: int = Short(0, name="shortTest")
    int_test: int = Int(0, name="intTest")
    long_test: int = Long(0, name="longTest")
    float_test: float = Float(0.0, name="floatTest")
    double_test: float = Double(0.0, name="doubleTest")
    string_test: str = TagField("", name="stringTest")
    list_test_long: list[int] = TagField([], name="listTest (long)", tag=TagType.LONG)
    list_test_compound: list[ListItem] = TagField([], name="listTest (compound)")
    byte_array_test: bytes = TagField(
        b"",
        name=(
            "byteArrayTest (the first 1000 values of (n*n*255+n*7)%100, "
            "starting with n=0 (0, 62, 34, 16, 8, ...))"
        ),
    )
