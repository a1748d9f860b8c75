"""Decode-and-print CLI command."""

from __future__ import annotations

import importlib.util
import inspect
import json
import sys
from pathlib import Path
from typing import Any, Iterator, get_args

from ..codec.decoder import decode
from ..config import DecoderConfig
from ..models.base import Compound, is_compound_type


def load_schema(reference: str) -> type[Compound]:
    """Load a Compound class from a ``FILE.py[:ClassName]`` reference.

    Without a class name the file must define exactly one Compound subclass
    that no other Compound in the file uses as a field type, i.e. a single root.

    Args:
        reference: Path to a Python file, optionally followed by ``:ClassName``

    Returns:
        The Compound subclass

    Raises:
        ValueError: If the file cannot be loaded or the class cannot be chosen
    """
    file_part, _, class_name = reference.partition(":")
    file_path = Path(file_part)
    if not file_path.exists():
        raise ValueError(f"Schema file not found: {file_path}")

    spec = importlib.util.spec_from_file_location("user_schema", file_path)
    if spec is None or spec.loader is None:
        raise ValueError(f"Could not load module from {file_path}")

    module = importlib.util.module_from_spec(spec)
    sys.modules["user_schema"] = module
    spec.loader.exec_module(module)

    # Only classes defined in this file (not imported)
    schema_classes = [
        obj
        for _name, obj in inspect.getmembers(module, inspect.isclass)
        if issubclass(obj, Compound) and obj is not Compound and obj.__module__ == "user_schema"
    ]

    if class_name:
        for schema_class in schema_classes:
            if schema_class.__name__ == class_name:
                return schema_class
        raise ValueError(f"No Compound class {class_name!r} in {file_path}")

    used = {
        referenced
        for schema_class in schema_classes
        for field_info in schema_class.model_fields.values()
        for referenced in _compound_types(field_info.annotation)
    }
    roots = [schema_class for schema_class in schema_classes if schema_class not in used]
    if len(roots) != 1:
        names = ", ".join(c.__name__ for c in roots) or "none"
        raise ValueError(
            f"Cannot choose a root schema in {file_path} (candidates: {names}); "
            f"use {file_part}:ClassName"
        )
    return roots[0]


def _compound_types(annotation: Any) -> Iterator[type[Compound]]:
    """Yield every Compound class mentioned in an annotation, including inside list[...]."""
    if is_compound_type(annotation):
        yield annotation
    for arg in get_args(annotation):
        yield from _compound_types(arg)


def report_file(schema_class: type[Compound], nbt_path: Path, config: DecoderConfig) -> str:
    """Decode an NBT file into a blank schema_class instance and render it as JSON.

    Strings that were not valid UTF-8 in the file (NBT writers use Java's
    modified UTF-8) are shown with U+FFFD in place of the undecodable bytes.

    Args:
        schema_class: Compound subclass describing the document
        nbt_path: Path to an uncompressed NBT file
        config: Decoder options

    Returns:
        Indented JSON text, keyed by tag name (field aliases)
    """
    target = schema_class.blank()
    with nbt_path.open("rb") as f:
        decode(f, target, config)
    return json.dumps(_printable(target.model_dump(mode="json", by_alias=True)), indent=2)


def _printable(value: Any) -> Any:
    """Replace the escaped bytes of undecodable strings with U+FFFD, recursively."""
    if isinstance(value, str):
        return value.encode("utf-8", "surrogateescape").decode("utf-8", "replace")
    if isinstance(value, dict):
        return {_printable(key): _printable(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_printable(item) for item in value]
    return value
