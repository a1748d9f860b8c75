"""Base class for NBT target schemas.

This module provides the Compound class that all decode targets should inherit
from, and the zero-value rules used to build blank instances.
"""

from __future__ import annotations

import copy
import types
from typing import Any, ClassVar, TypeVar, Union, get_args, get_origin

from pydantic import BaseModel, ConfigDict
from pydantic_core import PydanticUndefined

C = TypeVar("C", bound="Compound")

_ZERO_VALUES: dict[Any, Any] = {
    int: 0,
    float: 0.0,
    str: "",
    bytes: b"",
    bool: False,
}


class Compound(BaseModel):
    """Base class for all NBT target schemas.

    A Compound subclass describes the part of an NBT tree the caller cares
    about. Field names are matched against tag names case-insensitively;
    a pydantic alias overrides the field name for matching. Fields whose
    annotation is another Compound bind nested compound tags, and ``list[...]``
    fields bind List tags (and IntArray tags, for ``list[int]``).

    The unnamed root tag is matched by the lowercase class name, or by the
    ``nbt_name`` class variable when it is set.

    Example:
        >>> from pydantic import Field
        >>> class Egg(Compound):
        ...     name: str = ""
        ...     value: float = 0.0
        >>> class Level(Compound):
        ...     byte_test: int = Field(0, alias="ByteTest")
        ...     egg: Egg = Field(default_factory=Egg)

    Attributes:
        nbt_name: Tag name that resolves to the model itself (optional)
    """

    model_config = ConfigDict(
        # Decoded values are checked against annotations, never coerced
        strict=True,
        # Tag pins and bounds are enforced when the decoder writes a field
        validate_assignment=True,
        # Aliases are tag names; fields stay constructible by their own names
        populate_by_name=True,
        extra="forbid",
        ser_json_bytes="base64",
    )

    nbt_name: ClassVar[str | None] = None

    @classmethod
    def root_name(cls) -> str:
        """Lookup key of the synthetic entry that resolves to the model itself."""
        return (cls.nbt_name or cls.__name__).lower()

    @classmethod
    def blank(cls: type[C]) -> C:
        """Build an instance holding defaults, or zero values where no default exists.

        Validation is skipped, so required fields are allowed to start at
        their zero value and are filled in by decoding.
        """
        values: dict[str, Any] = {}
        for name, field_info in cls.model_fields.items():
            if field_info.default_factory is not None:
                values[name] = field_info.default_factory()
            elif field_info.default is not PydanticUndefined:
                values[name] = copy.deepcopy(field_info.default)
            else:
                values[name] = zero_value(field_info.annotation)
        return cls.model_construct(**values)


def zero_value(annotation: Any) -> Any:
    """Zero value for a field annotation, as used for blank targets and list elements."""
    origin = get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        if type(None) in get_args(annotation):
            return None
        return zero_value(get_args(annotation)[0])

    if annotation is list or origin is list:
        return []

    if is_compound_type(annotation):
        return annotation.blank()

    return _ZERO_VALUES.get(annotation)


def is_compound_type(annotation: Any) -> bool:
    """Whether an annotation is a Compound subclass (and not a parametrized generic)."""
    return (
        get_origin(annotation) is None
        and isinstance(annotation, type)
        and issubclass(annotation, Compound)
    )
