#!/usr/bin/env python3
"""Basic usage example for nbtbind.

This example demonstrates:
1. Describing part of an NBT document with Compound models
2. Decoding an uncompressed NBT stream into the model
3. Skipping tags the model does not describe
4. Strict mode and error handling
"""

from __future__ import annotations

import gzip
import struct

from pydantic import Field

from nbtbind import Compound, DecodeError, DecoderConfig, Long, TagField, TagType, decode_bytes


# Define the schema
class Position(Compound):
    """A nested compound."""

    x: int = 0
    y: int = 0
    z: int = 0


class Player(Compound):
    """Root compound. The root tag name "Player" matches the class name."""

    name: str = ""
    last_played: int = Long(0, name="LastPlayed")
    pos: Position = Field(default_factory=Position)
    inventory: list[str] = TagField([], name="Inventory")


def tag(tag_type: TagType, name: str, payload: bytes) -> bytes:
    """Build a named tag (nbtbind reads NBT; this example writes a little by hand)."""
    raw = name.encode("utf-8")
    return bytes([tag_type]) + struct.pack(">H", len(raw)) + raw + payload


def string(value: str) -> bytes:
    raw = value.encode("utf-8")
    return struct.pack(">H", len(raw)) + raw


def build_document() -> bytes:
    """Build a small gzip-compressed player document, as found on disk."""
    body = b"".join(
        [
            tag(TagType.STRING, "Name", string("Steve")),
            tag(TagType.LONG, "LastPlayed", struct.pack(">q", 1700000000000)),
            tag(TagType.DOUBLE, "Health", struct.pack(">d", 20.0)),
            tag(
                TagType.COMPOUND,
                "Pos",
                b"".join(
                    tag(TagType.INT, axis, struct.pack(">i", value))
                    for axis, value in (("X", 12), ("Y", 64), ("Z", -30))
                )
                + b"\x00",
            ),
            tag(
                TagType.LIST,
                "Inventory",
                bytes([TagType.STRING])
                + struct.pack(">i", 2)
                + string("diamond_pickaxe")
                + string("torch"),
            ),
        ]
    )
    return gzip.compress(tag(TagType.COMPOUND, "Player", body + b"\x00"))


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("nbtbind Basic Usage Example")
    print("=" * 60)
    print()

    # Files on disk are usually gzip-compressed; nbtbind expects raw NBT
    print("1. Loading and decompressing a player document...")
    data = gzip.decompress(build_document())
    print(f"   {len(data)} bytes of uncompressed NBT")
    print()

    print("2. Decoding into the Player model...")
    player = decode_bytes(Player, data)
    print(f"   Name: {player.name}")
    print(f"   Last played: {player.last_played}")
    print(f"   Position: ({player.pos.x}, {player.pos.y}, {player.pos.z})")
    print(f"   Inventory: {', '.join(player.inventory)}")
    print("   (the Health tag is not in the model and was skipped)")
    print()

    print("3. Strict mode reports tags the model does not describe...")
    try:
        decode_bytes(Player, data, DecoderConfig(strict=True))
    except DecodeError as e:
        print(f"   {type(e).__name__}: {e}")
    print()

    print("4. Truncated input fails fast...")
    try:
        decode_bytes(Player, data[:-10])
    except DecodeError as e:
        print(f"   {type(e).__name__}: {e}")
    print()

    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
