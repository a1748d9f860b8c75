"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import struct

import pytest

from nbtbind import TagType


class NbtBuilder:
    """Builds NBT byte streams for tests, one tag or payload at a time."""

    @staticmethod
    def string(value: str | bytes) -> bytes:
        raw = value.encode("utf-8") if isinstance(value, str) else value
        return struct.pack(">H", len(raw)) + raw

    @staticmethod
    def byte(value: int) -> bytes:
        return struct.pack(">b", value)

    @staticmethod
    def short(value: int) -> bytes:
        return struct.pack(">h", value)

    @staticmethod
    def int_(value: int) -> bytes:
        return struct.pack(">i", value)

    @staticmethod
    def long(value: int) -> bytes:
        return struct.pack(">q", value)

    @staticmethod
    def float_(value: float) -> bytes:
        return struct.pack(">f", value)

    @staticmethod
    def double(value: float) -> bytes:
        return struct.pack(">d", value)

    @staticmethod
    def byte_array(value: bytes) -> bytes:
        return struct.pack(">i", len(value)) + value

    @staticmethod
    def int_array(values: list[int]) -> bytes:
        return struct.pack(f">i{len(values)}i", len(values), *values)

    @staticmethod
    def list_(element_type: TagType, payloads: list[bytes]) -> bytes:
        return bytes([element_type]) + struct.pack(">i", len(payloads)) + b"".join(payloads)

    @staticmethod
    def compound(*children: bytes) -> bytes:
        return b"".join(children) + bytes([TagType.END])

    @classmethod
    def tag(cls, tag_type: TagType, name: str, payload: bytes) -> bytes:
        """A named tag: type byte, name string, payload."""
        return bytes([tag_type]) + cls.string(name) + payload


@pytest.fixture
def nbt() -> type[NbtBuilder]:
    """NBT stream builder."""
    return NbtBuilder


@pytest.fixture
def egg_document(nbt: type[NbtBuilder]) -> bytes:
    """Root compound with a byte and a nested compound holding a string and a float."""
    return nbt.tag(
        TagType.COMPOUND,
        "Level",
        nbt.compound(
            nbt.tag(TagType.BYTE, "ByteTest", nbt.byte(0x7F)),
            nbt.tag(
                TagType.COMPOUND,
                "Nested",
                nbt.compound(
                    nbt.tag(TagType.STRING, "Name", nbt.string("Eggbert")),
                    nbt.tag(TagType.FLOAT, "Value", nbt.float_(0.5)),
                ),
            ),
        ),
    )
