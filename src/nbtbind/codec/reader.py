"""Big-endian primitive readers for NBT payloads.

This module provides the TagReader class, which pulls fixed-width scalars and
length-prefixed arrays and strings off a readable binary stream. Every read
consumes exactly the bytes its type requires; anything less is a StreamError.
"""

from __future__ import annotations

import struct
from typing import Any, BinaryIO

from ..exceptions import MalformedLengthError, StreamError
from ..tags import TagType

_BYTE = struct.Struct(">b")
_UBYTE = struct.Struct(">B")
_SHORT = struct.Struct(">h")
_USHORT = struct.Struct(">H")
_INT = struct.Struct(">i")
_LONG = struct.Struct(">q")
_FLOAT = struct.Struct(">f")
_DOUBLE = struct.Struct(">d")

# Upper bound for a single read() call, so a bogus length prefix on a short
# stream never allocates more than this before failing.
_CHUNK_SIZE = 1 << 16


class TagReader:
    """Reads NBT primitives from a binary stream.

    The stream is not owned: the reader never closes or seeks it, and only
    consumes bytes strictly in order.

    Example:
        >>> reader = TagReader(io.BytesIO(b"\\x00\\x03abc"))
        >>> reader.read_string()
        'abc'
        >>> reader.bytes_consumed
        5
    """

    def __init__(self, stream: BinaryIO, max_array_length: int | None = None) -> None:
        """Initialize a reader over the given stream.

        Args:
            stream: Readable binary stream, already decompressed
            max_array_length: Optional upper bound on array and list counts
        """
        self._stream = stream
        self._max_array_length = max_array_length
        self._consumed = 0

    @property
    def bytes_consumed(self) -> int:
        """Number of bytes read from the stream so far."""
        return self._consumed

    def read_exact(self, num_bytes: int) -> bytes:
        """Read exactly num_bytes raw bytes.

        Raises:
            StreamError: If the stream ends first or the read itself fails
        """
        if num_bytes == 0:
            return b""

        chunks = []
        remaining = num_bytes
        while remaining > 0:
            try:
                chunk = self._stream.read(min(remaining, _CHUNK_SIZE))
            except OSError as e:
                raise StreamError(f"Read failed after {self._consumed} bytes: {e}") from e
            if not chunk:
                raise StreamError(
                    f"Unexpected end of stream: needed {num_bytes} bytes, "
                    f"got {num_bytes - remaining}"
                )
            chunks.append(chunk)
            remaining -= len(chunk)
            self._consumed += len(chunk)

        return b"".join(chunks)

    def _unpack(self, fmt: struct.Struct) -> Any:
        return fmt.unpack(self.read_exact(fmt.size))[0]

    def read_tag_type(self) -> int:
        """Read a tag type byte as an unsigned ordinal."""
        return int(self._unpack(_UBYTE))

    def read_byte(self) -> int:
        """Read a signed 8-bit integer."""
        return int(self._unpack(_BYTE))

    def read_short(self) -> int:
        """Read a signed 16-bit integer."""
        return int(self._unpack(_SHORT))

    def read_int(self) -> int:
        """Read a signed 32-bit integer."""
        return int(self._unpack(_INT))

    def read_long(self) -> int:
        """Read a signed 64-bit integer."""
        return int(self._unpack(_LONG))

    def read_float(self) -> float:
        """Read a 32-bit IEEE-754 float. NaN and infinities pass through."""
        return float(self._unpack(_FLOAT))

    def read_double(self) -> float:
        """Read a 64-bit IEEE-754 float. NaN and infinities pass through."""
        return float(self._unpack(_DOUBLE))

    def read_length(self, what: TagType) -> int:
        """Read a signed 32-bit count and check it before anything is allocated.

        Args:
            what: Tag kind the count belongs to, for the error message

        Raises:
            MalformedLengthError: If the count is negative or over max_array_length
        """
        length = self.read_int()
        if length < 0:
            raise MalformedLengthError(f"{what.tag_name} has negative length {length}")
        if self._max_array_length is not None and length > self._max_array_length:
            raise MalformedLengthError(
                f"{what.tag_name} length {length} exceeds limit {self._max_array_length}"
            )
        return length

    def read_byte_array(self) -> bytes:
        """Read a 4-byte signed length followed by that many raw bytes."""
        length = self.read_length(TagType.BYTE_ARRAY)
        return self.read_exact(length)

    def read_string(self) -> str:
        """Read a 2-byte unsigned length followed by that many bytes of text.

        The bytes are not validated. Invalid UTF-8 sequences are kept as
        lone surrogates so the original bytes can be recovered with
        ``value.encode("utf-8", "surrogateescape")``.
        """
        length = int(self._unpack(_USHORT))
        return self.read_exact(length).decode("utf-8", errors="surrogateescape")

    def read_int_array(self) -> list[int]:
        """Read a 4-byte signed length followed by that many signed 32-bit integers."""
        length = self.read_length(TagType.INT_ARRAY)
        data = self.read_exact(length * _INT.size)
        return list(struct.unpack(f">{length}i", data))
