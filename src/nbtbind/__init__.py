"""nbtbind: Named Binary Tag decoding into Pydantic models

A Python library for reading NBT (Named Binary Tag) documents, the tree-shaped
binary format used by Minecraft save files, straight into typed Pydantic
models. The model describes the tags you care about; everything else in the
document is read past and ignored.

Key Features:
- Pydantic-based schema modeling
- Case-insensitive tag name matching, with aliases for awkward names
- Partial schemas: unknown tags and mismatched types are skipped, not fatal
- Fail-fast on truncated or malformed input, with bounded nesting depth

Quick Start:
    >>> from nbtbind import Compound, decode_bytes
    >>>
    >>> class Egg(Compound):
    ...     name: str = ""
    ...     value: float = 0.0
    >>>
    >>> with open("egg.nbt", "rb") as f:  # already decompressed
    ...     egg = decode_bytes(Egg, f.read())
    >>> egg.name
    'Eggbert'
"""

from __future__ import annotations

from .codec import decode, decode_bytes
from .config import DecoderConfig
from .exceptions import (
    BindingMismatchError,
    DecodeError,
    DepthExceededError,
    MalformedLengthError,
    NbtError,
    SchemaError,
    StreamError,
    UnknownTagError,
    UnknownTagTypeError,
)
from .models import Byte, Compound, Double, Float, Int, Long, Short, TagField
from .tags import TagType

__version__ = "0.1.0"

__all__ = [
    # Core API
    "Compound",
    "decode",
    "decode_bytes",
    "DecoderConfig",
    "TagType",
    # Field helpers
    "TagField",
    "Byte",
    "Short",
    "Int",
    "Long",
    "Float",
    "Double",
    # Exceptions
    "NbtError",
    "SchemaError",
    "DecodeError",
    "StreamError",
    "MalformedLengthError",
    "DepthExceededError",
    "UnknownTagTypeError",
    "UnknownTagError",
    "BindingMismatchError",
    # Version
    "__version__",
]
