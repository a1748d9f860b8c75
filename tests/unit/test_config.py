"""Tests for decoder configuration."""

from __future__ import annotations

import pytest

from nbtbind import DecoderConfig


def test_defaults() -> None:
    """Test lenient defaults."""
    config = DecoderConfig()
    assert config.max_depth == 256
    assert config.strict is False
    assert config.max_array_length is None


@pytest.mark.parametrize("max_depth", [0, -1])
def test_max_depth_must_be_positive(max_depth: int) -> None:
    """Test max_depth validation."""
    with pytest.raises(ValueError, match="max_depth must be > 0"):
        DecoderConfig(max_depth=max_depth)


def test_max_array_length_must_not_be_negative() -> None:
    """Test max_array_length validation."""
    with pytest.raises(ValueError, match="max_array_length must be >= 0"):
        DecoderConfig(max_array_length=-1)

    assert DecoderConfig(max_array_length=0).max_array_length == 0
