"""Exception hierarchy for nbtbind.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from NbtError for easy catching of any nbtbind-specific error.

Stream and structure problems always raise. Schema mismatches (unknown tag
names, values that do not fit their bound field) are silent unless the decoder
runs in strict mode, in which case UnknownTagError and BindingMismatchError
are raised instead.
"""

from __future__ import annotations


class NbtError(Exception):
    """Base exception for all nbtbind errors."""

    pass


class SchemaError(NbtError):
    """Raised when a target schema cannot be bound.

    Examples:
        - Target is not a Compound model
        - Unsupported field annotation (non-Optional Union)
    """

    pass


class DecodeError(NbtError):
    """Raised when decoding an NBT stream fails.

    Attributes:
        path: Slash-separated tag names leading to the failing tag, if known
    """

    def __init__(self, message: str, path: str | None = None) -> None:
        self.path = path
        if path:
            message = f"{message} (at {path})"
        super().__init__(message)


class StreamError(DecodeError):
    """Raised when the stream ends early or the underlying read fails."""

    pass


class MalformedLengthError(DecodeError):
    """Raised when a length or count prefix is negative or over the configured limit."""

    pass


class DepthExceededError(DecodeError):
    """Raised when Compound/List nesting goes deeper than the configured maximum."""

    pass


class UnknownTagTypeError(DecodeError):
    """Raised when a tag type byte is not one of the twelve NBT kinds."""

    pass


class UnknownTagError(DecodeError):
    """Raised in strict mode when a tag name has no field in the target schema."""

    pass


class BindingMismatchError(DecodeError):
    """Raised in strict mode when a decoded value does not fit its bound field."""

    pass
