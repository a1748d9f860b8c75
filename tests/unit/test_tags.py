"""Unit tests for tag kinds."""

from __future__ import annotations

import pytest

from nbtbind import TagType


@pytest.mark.parametrize(
    ("ordinal", "name"),
    [
        (0, "TAG_END"),
        (1, "TAG_BYTE"),
        (7, "TAG_BYTE_ARRAY"),
        (9, "TAG_LIST"),
        (10, "TAG_COMPOUND"),
        (11, "TAG_INT_ARRAY"),
    ],
)
def test_tag_names(ordinal: int, name: str) -> None:
    """Test canonical diagnostic names."""
    assert TagType(ordinal).tag_name == name
    assert TagType.describe(ordinal) == name


def test_describe_out_of_range() -> None:
    """Test unknown ordinals describe as TAG_UNKNOWN."""
    assert TagType.describe(12) == "TAG_UNKNOWN"
    assert TagType.describe(200) == "TAG_UNKNOWN"


def test_from_wire() -> None:
    """Test wire ordinals map to kinds and the sentinel is never a wire value."""
    assert TagType.from_wire(3) is TagType.INT
    assert TagType.from_wire(0) is TagType.END
    assert TagType.from_wire(12) is None
    assert TagType.from_wire(99) is None
