"""Pydantic schema modeling for nbtbind.

This module provides the Compound base class and field helpers for describing
which parts of an NBT tree to decode, and where to put them.
"""

from __future__ import annotations

from .base import Compound
from .fields import Byte, Double, Float, Int, Long, Short, TagField

__all__ = [
    "Compound",
    "TagField",
    "Byte",
    "Short",
    "Int",
    "Long",
    "Float",
    "Double",
]
