"""JSON Schema definitions and schema generation from Python types."""

import collections.abc
import dataclasses
import json
import types
import typing
from enum import Enum
from typing import Any, Optional, Union

_NONE_TYPE = type(None)
_SEQUENCE_ORIGINS = (
    list,
    tuple,
    set,
    frozenset,
    collections.abc.Sequence,
    collections.abc.MutableSequence,
    collections.abc.Set,
    collections.abc.Iterable,
)
_MAPPING_ORIGINS = (dict, collections.abc.Mapping, collections.abc.MutableMapping)


class DataType(str, Enum):
    """The JSON Schema primitive types."""

    OBJECT = "object"
    NUMBER = "number"
    INTEGER = "integer"
    STRING = "string"
    ARRAY = "array"
    NULL = "null"
    BOOLEAN = "boolean"


@dataclasses.dataclass
class Definition:
    """A small, nested description of a JSON Schema."""

    type: Union[DataType, str, None] = None
    description: str = ""
    enum: Optional[list] = None
    properties: "Optional[dict[str, Definition]]" = None
    required: Optional[list] = None
    items: "Optional[Definition]" = None
    additional_properties: Any = None

    def to_dict(self) -> dict:
        """Return the schema as plain JSON-ready data; properties are always present."""
        out: dict = {}
        if self.type:
            out["type"] = self.type.value if isinstance(self.type, DataType) else str(self.type)
        if self.description:
            out["description"] = self.description
        if self.enum:
            out["enum"] = list(self.enum)
        out["properties"] = {
            name: definition.to_dict() for name, definition in (self.properties or {}).items()
        }
        if self.required:
            out["required"] = list(self.required)
        if self.items is not None:
            out["items"] = self.items.to_dict()
        if self.additional_properties is not None:
            extra = self.additional_properties
            out["additionalProperties"] = extra.to_dict() if isinstance(extra, Definition) else extra
        return out

    def to_json(self) -> str:
        """Return the schema as compact JSON text."""
        return json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)

    def unmarshal(self, content: Union[str, bytes]) -> Any:
        """Parse JSON content, check it against this schema and return it."""
        from .validate import verify_schema_and_unmarshal

        return verify_schema_and_unmarshal(self, content)


def generate_schema_for_type(tp: Any) -> Definition:
    """Build a schema for a Python type or a dataclass (class or instance)."""
    if dataclasses.is_dataclass(tp) and not isinstance(tp, type):
        tp = type(tp)
    return _reflect(tp)


def _type_name(tp: Any) -> str:
    return getattr(tp, "__name__", repr(tp))


def _reflect(tp: Any) -> Definition:
    if isinstance(tp, str):
        raise TypeError(f"unsupported type: unresolved annotation {tp!r}")

    origin = typing.get_origin(tp)

    if origin is typing.Annotated:
        return _reflect(typing.get_args(tp)[0])

    if origin is Union or origin is types.UnionType:
        args = [arg for arg in typing.get_args(tp) if arg is not _NONE_TYPE]
        if len(args) == 1:
            return _reflect(args[0])
        raise TypeError(f"unsupported type: {tp!r}")

    if origin in _MAPPING_ORIGINS or tp in _MAPPING_ORIGINS:
        raise TypeError("unsupported type: map")

    if origin in _SEQUENCE_ORIGINS:
        return Definition(type=DataType.ARRAY, items=_reflect(_element_type(tp, origin)))

    if isinstance(tp, type):
        if issubclass(tp, bool):
            return Definition(type=DataType.BOOLEAN)
        if issubclass(tp, int):
            return Definition(type=DataType.INTEGER)
        if issubclass(tp, float):
            return Definition(type=DataType.NUMBER)
        if issubclass(tp, str):
            return Definition(type=DataType.STRING)
        if dataclasses.is_dataclass(tp):
            return _reflect_object(tp)

    raise TypeError(f"unsupported type: {_type_name(tp)}")


def _element_type(tp: Any, origin: Any) -> Any:
    args = typing.get_args(tp)
    if not args:
        raise TypeError(f"unsupported type: {tp!r}")
    if origin is tuple:
        if len(args) == 2 and args[1] is Ellipsis:
            return args[0]
        if all(arg == args[0] for arg in args):
            return args[0]
        raise TypeError(f"unsupported type: {tp!r}")
    return args[0]


def _reflect_object(cls: type) -> Definition:
    properties: dict = {}
    required: list = []
    for field in dataclasses.fields(cls):
        if field.name.startswith("_"):
            continue
        meta = field.metadata
        name = meta.get("json") or field.name
        is_required = not meta.get("omitempty", False)

        item = _reflect(field.type)
        description = meta.get("description")
        if description:
            item.description = description
        properties[name] = item

        if "required" in meta:
            is_required = bool(meta["required"])
        if is_required:
            required.append(name)

    return Definition(
        type=DataType.OBJECT,
        additional_properties=False,
        properties=properties,
        required=required or None,
    )