"""NBT codec for nbtbind.

This module provides the primitive readers, the schema binder and the
recursive decoder that populates Compound models from NBT byte streams.
"""

from __future__ import annotations

from .decoder import decode, decode_bytes
from .reader import TagReader
from .schema import CompoundBinding, FieldBinding, ScalarBinding, SequenceBinding, bind_fields

__all__ = [
    "decode",
    "decode_bytes",
    "TagReader",
    "bind_fields",
    "FieldBinding",
    "ScalarBinding",
    "CompoundBinding",
    "SequenceBinding",
]
