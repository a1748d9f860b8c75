"""Decoder configuration.

This module provides the configuration dataclass accepted by decode() and
decode_bytes().
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_MAX_DEPTH = 256


@dataclass
class DecoderConfig:
    """Configuration for a decode call.

    The defaults reproduce the lenient behavior NBT consumers rely on: a
    schema may describe only part of a document, and anything it does not
    describe (or describes with a different type) is read past silently.

    Attributes:
        max_depth: Maximum nesting of Compound and List tags (default 256).
            The root Compound is depth 1. Deeper input raises DepthExceededError,
            as does input that would exhaust the interpreter recursion limit
            when max_depth is raised above the default.

        strict: Raise UnknownTagError for tags without a matching field and
            BindingMismatchError for values that do not fit their field,
            instead of discarding them (default False).

        max_array_length: Optional upper bound on ByteArray, IntArray and
            List counts. Larger counts raise MalformedLengthError before
            anything is allocated (default None, no bound beyond the
            signed 32-bit wire limit).

    Examples:
        ```python
        from nbtbind import DecoderConfig, decode_bytes

        # Fail on anything the schema does not cover
        level = decode_bytes(Level, data, DecoderConfig(strict=True))

        # Untrusted input: shallow trees and small arrays only
        config = DecoderConfig(max_depth=32, max_array_length=1 << 16)
        ```
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    strict: bool = False
    max_array_length: int | None = None

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.max_depth <= 0:
            raise ValueError(f"max_depth must be > 0, got {self.max_depth}")

        if self.max_array_length is not None and self.max_array_length < 0:
            raise ValueError(f"max_array_length must be >= 0, got {self.max_array_length}")
