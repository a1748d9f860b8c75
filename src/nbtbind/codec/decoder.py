"""Recursive NBT decoder.

This module provides decode(), which walks an NBT byte stream tag by tag and
writes each value into the Compound field whose name matches the tag's name,
and decode_bytes(), a convenience wrapper for in-memory data.

Tags with no matching field, and values that do not fit their field, are read
past and dropped (or raised in strict mode). Stream problems always raise.
"""

from __future__ import annotations

import io
import logging
from typing import Any, BinaryIO, Callable, TypeVar

from ..config import DecoderConfig
from ..exceptions import (
    BindingMismatchError,
    DecodeError,
    DepthExceededError,
    MalformedLengthError,
    SchemaError,
    UnknownTagError,
    UnknownTagTypeError,
)
from ..models.base import Compound
from ..tags import TagType
from .reader import TagReader
from .schema import CompoundBinding, FieldBinding, SequenceBinding, self_binding

logger = logging.getLogger(__name__)

C = TypeVar("C", bound=Compound)

_SCALAR_READERS: dict[TagType, Callable[[TagReader], Any]] = {
    TagType.BYTE: TagReader.read_byte,
    TagType.SHORT: TagReader.read_short,
    TagType.INT: TagReader.read_int,
    TagType.LONG: TagReader.read_long,
    TagType.FLOAT: TagReader.read_float,
    TagType.DOUBLE: TagReader.read_double,
    TagType.BYTE_ARRAY: TagReader.read_byte_array,
    TagType.STRING: TagReader.read_string,
    TagType.INT_ARRAY: TagReader.read_int_array,
}


class _DecodeState:
    """Per-call decoding state: the reader, options, nesting depth and tag path."""

    def __init__(self, reader: TagReader, config: DecoderConfig) -> None:
        self.reader = reader
        self.config = config
        self.depth = 0
        # Left in place when an error unwinds, so it names the failing tag
        self.path: list[str] = []

    def descend(self, tag_type: TagType) -> None:
        self.depth += 1
        if self.depth > self.config.max_depth:
            raise DepthExceededError(
                f"{tag_type.tag_name} nested deeper than max_depth={self.config.max_depth}"
            )

    def ascend(self) -> None:
        self.depth -= 1

    def unknown_tag(self, name: str, tag_type: TagType, container: CompoundBinding) -> None:
        message = f"No field for {tag_type.tag_name} {name!r} in {container.annotation.__name__}"
        if self.config.strict:
            raise UnknownTagError(message)
        logger.debug("Skipping %s", message)

    def mismatch(self, binding: FieldBinding, tag_type: TagType) -> None:
        message = f"{tag_type.tag_name} does not fit field {binding.name!r} ({binding.kind})"
        if self.config.strict:
            raise BindingMismatchError(message)
        logger.debug("Dropping value: %s", message)


def decode(stream: BinaryIO, target: Compound, config: DecoderConfig | None = None) -> None:
    """Decode one root Compound tag from a stream into a target model.

    The target is mutated in place. Fields are matched to tag names
    case-insensitively; the root tag itself is matched by the target's
    root name (its lowercase class name unless ``nbt_name`` is set) or may
    be unnamed. Tags the target does not describe are read and discarded.

    Args:
        stream: Readable binary stream positioned at the root tag. Must
            already be decompressed; it is read sequentially and not closed.
        target: Compound instance to populate
        config: Decoder options (defaults to DecoderConfig())

    Raises:
        SchemaError: If target is not a Compound or has an unsupported field
        StreamError: If the stream ends early or a read fails
        MalformedLengthError: If a length or count prefix is negative or too large
        DepthExceededError: If nesting exceeds config.max_depth or the
            interpreter recursion limit
        UnknownTagTypeError: If a tag type byte is not a valid NBT kind
        UnknownTagError: In strict mode, for tags without a matching field
        BindingMismatchError: In strict mode, for values that do not fit their field

    Note:
        After a failed decode the target may be partially populated.

    Examples:
        ```python
        from nbtbind import Compound, decode

        class Egg(Compound):
            name: str = ""
            value: float = 0.0

        egg = Egg()
        with open("egg.nbt", "rb") as f:
            decode(f, egg)
        ```
    """
    if config is None:
        config = DecoderConfig()
    if not isinstance(target, Compound):
        raise SchemaError(f"Decode target must be a Compound, got {type(target).__name__}")

    reader = TagReader(stream, config.max_array_length)
    state = _DecodeState(reader, config)

    logger.debug("Decoding %s (strict=%s)", type(target).__name__, config.strict)
    try:
        _read_tag(state, TagType.UNKNOWN, self_binding(target))
    except DecodeError as e:
        if e.path is None and state.path:
            raise type(e)(str(e), "/".join(state.path)) from e
        raise
    except RecursionError as e:
        raise DepthExceededError(
            f"Nesting at depth {state.depth} exceeds the interpreter recursion limit",
            "/".join(state.path) or None,
        ) from e
    logger.debug("Decoded %s from %d bytes", type(target).__name__, reader.bytes_consumed)


def decode_bytes(model_class: type[C], data: bytes, config: DecoderConfig | None = None) -> C:
    """Decode an in-memory NBT document into a new instance of model_class.

    The instance starts from Compound.blank(): declared defaults, or zero
    values for fields without one. Trailing bytes after the root tag are ignored.

    Args:
        model_class: Compound subclass to decode to
        data: Uncompressed NBT bytes
        config: Decoder options (defaults to DecoderConfig())

    Returns:
        Decoded model instance

    Example:
        >>> level = decode_bytes(Level, data)
        >>> level.nested.egg.name
        'Eggbert'
    """
    target = model_class.blank()
    decode(io.BytesIO(data), target, config)
    return target


def _read_tag(
    state: _DecodeState, declared: TagType, target: FieldBinding | None
) -> tuple[str, TagType]:
    """Read one tag and bind its value.

    Args:
        state: Decoding state
        declared: UNKNOWN when the tag has its own header; otherwise the
            element kind of the enclosing List (list elements are unnamed)
        target: Binding of the enclosing compound, or the element's own
            binding for list elements; None when the value is discarded

    Returns:
        The tag's name ("" for list elements and End) and its kind
    """
    reader = state.reader
    name = ""

    if declared is TagType.UNKNOWN:
        ordinal = reader.read_tag_type()
        tag_type = TagType.from_wire(ordinal)
        if tag_type is None:
            raise UnknownTagTypeError(f"Invalid tag type {ordinal} ({TagType.describe(ordinal)})")
        if tag_type is TagType.END:
            return name, tag_type
        name = reader.read_string()
    else:
        tag_type = declared

    # Resolve the slot this tag writes to
    binding: FieldBinding | None
    if not name:
        binding = target
    elif isinstance(target, CompoundBinding):
        binding = target.lookup(name)
        if binding is None:
            state.unknown_tag(name, tag_type, target)
    else:
        binding = None

    if name:
        state.path.append(name)

    if tag_type is TagType.COMPOUND:
        if binding is not None and not isinstance(binding, CompoundBinding):
            state.mismatch(binding, tag_type)
            binding = None
        _read_compound(state, binding)
    elif tag_type is TagType.LIST:
        if binding is not None and not isinstance(binding, SequenceBinding):
            state.mismatch(binding, tag_type)
            binding = None
        _read_list(state, binding)
    else:
        value = _SCALAR_READERS[tag_type](reader)
        if binding is not None and not binding.try_assign(value, tag_type):
            state.mismatch(binding, tag_type)

    if name:
        state.path.pop()
    return name, tag_type


def _read_compound(state: _DecodeState, binding: CompoundBinding | None) -> None:
    """Read named child tags until an End tag."""
    state.descend(TagType.COMPOUND)
    if binding is not None:
        binding.enter()
    while True:
        _, child_type = _read_tag(state, TagType.UNKNOWN, binding)
        if child_type is TagType.END:
            break
    state.ascend()


def _read_list(state: _DecodeState, binding: SequenceBinding | None) -> None:
    """Read a List payload: element kind, count, then that many unnamed elements."""
    reader = state.reader
    ordinal = reader.read_tag_type()
    element_type = TagType.from_wire(ordinal)
    if element_type is None:
        raise UnknownTagTypeError(
            f"Invalid list element type {ordinal} ({TagType.describe(ordinal)})"
        )
    count = reader.read_length(TagType.LIST)
    if element_type is TagType.END and count > 0:
        raise MalformedLengthError(f"{TagType.LIST.tag_name} of TAG_END with {count} elements")

    state.descend(TagType.LIST)
    if binding is None:
        for _ in range(count):
            _read_tag(state, element_type, None)
    else:
        values = []
        for _ in range(count):
            element, result = binding.new_element()
            _read_tag(state, element_type, element)
            values.append(result())
        if not binding.extend(values):
            state.mismatch(binding, TagType.LIST)
    state.ascend()
