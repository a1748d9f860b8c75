"""Schema binding for Compound models.

This module turns a Compound instance into a lookup from lowercase tag name to
a writable binding: a scalar slot, a nested compound slot or a sequence slot.
The decoder resolves every named tag through this lookup and writes decoded
values with FieldBinding.try_assign(), which reports False instead of raising
when a value does not fit.
"""

from __future__ import annotations

import types
from typing import Any, Callable, ClassVar, Union, get_args, get_origin

from pydantic import ValidationError

from ..exceptions import SchemaError
from ..models.base import Compound, is_compound_type, zero_value
from ..models.fields import pinned_tag
from ..tags import FLOAT_TAGS, INTEGER_TAGS, TagType

Getter = Callable[[], Any]
Setter = Callable[[Any], None]


class FieldBinding:
    """A writable reference to one slot of a target value.

    Attributes:
        name: Field name (or a placeholder for list elements), for diagnostics
        annotation: Declared type of the slot, with Optional unwrapped
        tag: Tag kind the slot is pinned to, if any
    """

    kind: ClassVar[str] = "scalar"

    def __init__(
        self,
        name: str,
        annotation: Any,
        getter: Getter,
        setter: Setter,
        tag: TagType | None = None,
    ) -> None:
        self.name = name
        self.annotation = annotation
        self.tag = tag
        self._get = getter
        self._set = setter

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, {self.annotation!r})"

    def get(self) -> Any:
        return self._get()

    def try_assign(self, value: Any, tag_type: TagType) -> bool:
        """Write a decoded value into the slot if it fits.

        Args:
            value: Decoded scalar payload
            tag_type: Tag kind the value was decoded from

        Returns:
            True if the value was written, False if it was rejected
        """
        if not self.accepts(value, tag_type):
            return False
        return self._store(value)

    def accepts(self, value: Any, tag_type: TagType) -> bool:
        if self.tag is not None and tag_type is not self.tag:
            return False
        return _fits(self.annotation, value, tag_type)

    def _store(self, value: Any) -> bool:
        try:
            self._set(value)
        except ValidationError:
            return False
        return True


class ScalarBinding(FieldBinding):
    """Slot for a single decoded value (number, string, byte array)."""

    kind = "scalar"


class CompoundBinding(FieldBinding):
    """Slot holding a nested Compound model.

    The name lookup for the nested model is built on first use and kept for
    the lifetime of this binding, i.e. for one pass through the compound tag.
    """

    kind = "compound"

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._fields: dict[str, FieldBinding] | None = None

    def accepts(self, value: Any, tag_type: TagType) -> bool:
        return False

    def enter(self) -> Compound:
        """Return the model to decode into, creating a blank one if the slot is empty."""
        current = self._get()
        if not isinstance(current, self.annotation):
            self._set(self.annotation.blank())
            current = self._get()
        return current

    def lookup(self, name: str) -> FieldBinding | None:
        """Resolve a tag name against the nested model's fields."""
        if self._fields is None:
            self._fields = bind_fields(self.enter())
        return self._fields.get(name.lower())


class SequenceBinding(FieldBinding):
    """Slot holding a list, filled from a List tag (or an IntArray for list[int]).

    Attributes:
        element: Declared type of each element
    """

    kind = "sequence"

    def __init__(self, *args: Any, element: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.element = element

    def accepts(self, value: Any, tag_type: TagType) -> bool:
        # An IntArray fits a sequence of TAG_INT elements
        if tag_type is not TagType.INT_ARRAY or self.tag not in (None, TagType.INT):
            return False
        probe = _make_binding("<element>", self.element, _none, _discard)
        return isinstance(probe, ScalarBinding) and probe.accepts(0, TagType.INT)

    def _store(self, value: Any) -> bool:
        return super()._store(list(value))

    def new_element(self) -> tuple[FieldBinding, Callable[[], Any]]:
        """Create a binding over a fresh zero-valued element.

        Returns:
            The element's binding and a function returning its final value
        """
        cell = [zero_value(self.element)]

        def get() -> Any:
            return cell[0]

        def set_(value: Any) -> None:
            cell[0] = value

        return _make_binding(f"{self.name}[]", self.element, get, set_, self.tag), get

    def extend(self, values: list[Any]) -> bool:
        """Append decoded elements to the slot's current contents and write the list back."""
        current = self._get() or []
        return super()._store([*current, *values])


def bind_fields(model: Compound) -> dict[str, FieldBinding]:
    """Build the tag-name lookup for a Compound instance.

    Keys are lowercase. The field's pydantic alias, if any, replaces its name.
    One extra entry, keyed by the model's root name, resolves to the model
    itself; fields registered afterwards win on a collision.

    Args:
        model: Compound instance to bind

    Returns:
        Mapping from lowercase tag name to binding

    Raises:
        SchemaError: If model is not a Compound or a field annotation is unsupported
    """
    if not isinstance(model, Compound):
        raise SchemaError(f"Decode target must be a Compound, got {type(model).__name__}")

    model_class = type(model)
    bindings: dict[str, FieldBinding] = {
        model_class.root_name(): self_binding(model),
    }

    for field_name, field_info in model_class.model_fields.items():
        key = (field_info.alias or field_name).lower()
        bindings[key] = _make_binding(
            field_name,
            field_info.annotation,
            _attr_getter(model, field_name),
            _attr_setter(model, field_name),
            pinned_tag(field_info),
        )

    return bindings


def self_binding(model: Compound) -> CompoundBinding:
    """Binding that resolves to the model itself (used for the root tag)."""
    return CompoundBinding(type(model).__name__, type(model), lambda: model, _discard)


def _make_binding(
    name: str, annotation: Any, getter: Getter, setter: Setter, tag: TagType | None = None
) -> FieldBinding:
    if annotation is None:
        raise SchemaError(f"Field {name} has no type annotation")

    annotation = _unwrap_optional(name, annotation)

    if annotation is list or get_origin(annotation) is list:
        args = get_args(annotation)
        element = args[0] if args else Any
        return SequenceBinding(name, annotation, getter, setter, tag, element=element)

    if is_compound_type(annotation):
        return CompoundBinding(name, annotation, getter, setter, tag)

    return ScalarBinding(name, annotation, getter, setter, tag)


def _unwrap_optional(name: str, annotation: Any) -> Any:
    origin = get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        non_none_args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(non_none_args) != 1:
            raise SchemaError(f"Field {name}: complex Union types not supported")
        return non_none_args[0]
    return annotation


def _fits(annotation: Any, value: Any, tag_type: TagType) -> bool:
    """Whether a decoded value may be written into a slot of this type, without coercion."""
    if annotation is Any:
        return True
    if annotation is bool:
        return False
    if annotation is int:
        return tag_type in INTEGER_TAGS
    if annotation is float:
        return tag_type in FLOAT_TAGS
    if annotation is str:
        return tag_type is TagType.STRING
    if annotation is bytes:
        return tag_type is TagType.BYTE_ARRAY
    return isinstance(annotation, type) and isinstance(value, annotation)


def _attr_getter(model: Compound, field_name: str) -> Getter:
    return lambda: getattr(model, field_name, None)


def _attr_setter(model: Compound, field_name: str) -> Setter:
    return lambda value: setattr(model, field_name, value)


def _none() -> None:
    return None


def _discard(value: Any) -> None:
    pass
