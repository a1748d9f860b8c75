"""NBT tag kinds."""

from __future__ import annotations

import enum


class TagType(enum.IntEnum):
    """The twelve NBT tag kinds, by wire ordinal.

    UNKNOWN is not a wire value. The decoder passes it down when the next
    tag carries its own header (type byte and name), i.e. everywhere except
    inside a List.
    """

    END = 0
    BYTE = 1
    SHORT = 2
    INT = 3
    LONG = 4
    FLOAT = 5
    DOUBLE = 6
    BYTE_ARRAY = 7
    STRING = 8
    LIST = 9
    COMPOUND = 10
    INT_ARRAY = 11
    UNKNOWN = 12

    @property
    def tag_name(self) -> str:
        """Canonical diagnostic name, e.g. ``TAG_BYTE_ARRAY``."""
        return f"TAG_{self.name}"

    @classmethod
    def describe(cls, ordinal: int) -> str:
        """Diagnostic name for a raw ordinal, ``TAG_UNKNOWN`` when out of range."""
        try:
            return cls(ordinal).tag_name
        except ValueError:
            return TagType.UNKNOWN.tag_name

    @classmethod
    def from_wire(cls, ordinal: int) -> TagType | None:
        """Map a type byte read from the stream to a tag kind.

        Returns None for ordinals outside 0..11, including the UNKNOWN sentinel.
        """
        if 0 <= ordinal < cls.UNKNOWN:
            return cls(ordinal)
        return None


INTEGER_TAGS = frozenset({TagType.BYTE, TagType.SHORT, TagType.INT, TagType.LONG})

FLOAT_TAGS = frozenset({TagType.FLOAT, TagType.DOUBLE})
