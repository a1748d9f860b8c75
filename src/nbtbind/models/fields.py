"""Field type helpers and utilities.

This module provides convenience functions for declaring Compound fields that
are tied to a specific NBT tag name or tag kind.
"""

from __future__ import annotations

from typing import Any, cast

from pydantic import Field
from pydantic.fields import FieldInfo

from ..tags import TagType

TAG_PIN_KEY = "nbt_tag"

_INT_RANGES = {
    TagType.BYTE: (-(1 << 7), (1 << 7) - 1),
    TagType.SHORT: (-(1 << 15), (1 << 15) - 1),
    TagType.INT: (-(1 << 31), (1 << 31) - 1),
    TagType.LONG: (-(1 << 63), (1 << 63) - 1),
}


def TagField(
    default: Any = ..., *, name: str | None = None, tag: TagType | None = None, **kwargs: Any
) -> FieldInfo:
    """Create a field bound to an explicit tag name and/or tag kind.

    NBT tag names often contain spaces or punctuation that cannot be Python
    identifiers; ``name`` sets the pydantic alias used for matching. ``tag``
    restricts the field to values decoded from that one tag kind, so an
    ``int`` field pinned to TagType.SHORT ignores Int and Long tags of the
    same name.

    Args:
        default: Field default (required when omitted)
        name: Tag name to match instead of the field name
        tag: Only accept values from this tag kind
        **kwargs: Additional Field() arguments (description, ge, le, etc.)

    Returns:
        Pydantic FieldInfo suitable for use as a field default/metadata.

    Example:
        >>> class Level(Compound):
        ...     created_on: int = TagField(0, name="created-on", tag=TagType.LONG)
    """
    if tag is not None:
        if tag in (TagType.END, TagType.UNKNOWN):
            raise ValueError(f"cannot pin a field to {tag.tag_name}")
        kwargs["json_schema_extra"] = {TAG_PIN_KEY: tag.name}
    if name is not None:
        kwargs["alias"] = name
    if default is not ... or "default_factory" not in kwargs:
        kwargs["default"] = default
    return cast(FieldInfo, Field(**kwargs))


def _pinned_int(tag: TagType, default: Any, kwargs: dict[str, Any]) -> FieldInfo:
    lo, hi = _INT_RANGES[tag]
    kwargs.setdefault("ge", lo)
    kwargs.setdefault("le", hi)
    return TagField(default, tag=tag, **kwargs)


def Byte(default: Any = ..., **kwargs: Any) -> FieldInfo:
    """Create a field that only accepts TAG_BYTE values (-128..127).

    Example:
        >>> class Level(Compound):
        ...     byte_test: int = Byte(0, name="ByteTest")
    """
    return _pinned_int(TagType.BYTE, default, kwargs)


def Short(default: Any = ..., **kwargs: Any) -> FieldInfo:
    """Create a field that only accepts TAG_SHORT values."""
    return _pinned_int(TagType.SHORT, default, kwargs)


def Int(default: Any = ..., **kwargs: Any) -> FieldInfo:
    """Create a field that only accepts TAG_INT values."""
    return _pinned_int(TagType.INT, default, kwargs)


def Long(default: Any = ..., **kwargs: Any) -> FieldInfo:
    """Create a field that only accepts TAG_LONG values."""
    return _pinned_int(TagType.LONG, default, kwargs)


def Float(default: Any = ..., **kwargs: Any) -> FieldInfo:
    """Create a field that only accepts TAG_FLOAT values.

    Note:
        Python has a single float type, so the value is the 32-bit float
        widened to double precision and rarely equals the decimal literal it
        was written from.
    """
    return TagField(default, tag=TagType.FLOAT, **kwargs)


def Double(default: Any = ..., **kwargs: Any) -> FieldInfo:
    """Create a field that only accepts TAG_DOUBLE values."""
    return TagField(default, tag=TagType.DOUBLE, **kwargs)


def pinned_tag(field_info: FieldInfo) -> TagType | None:
    """Return the tag kind a field is pinned to, if any."""
    extra = field_info.json_schema_extra
    if isinstance(extra, dict) and TAG_PIN_KEY in extra:
        return TagType[cast(str, extra[TAG_PIN_KEY])]
    return None
