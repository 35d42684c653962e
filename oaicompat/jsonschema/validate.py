"""Checking decoded JSON data against a schema Definition."""

from __future__ import annotations

import json
from typing import Any

from .definition import DataType, Definition


class SchemaValidationError(ValueError):
    """Raised when data does not satisfy a schema."""

    def __init__(self, message: str = "data validation failed against the provided schema") -> None:
        super().__init__(message)


def verify_schema_and_unmarshal(schema: Definition, content: str | bytes) -> Any:
    """Decode JSON content, check it against the schema and return the data."""
    data = json.loads(content)
    if not validate(schema, data):
        raise SchemaValidationError()
    return data


def validate(schema: Definition, data: Any) -> bool:
    """Return whether decoded JSON data satisfies the schema."""
    try:
        kind = DataType(schema.type)
    except ValueError:
        return False

    if kind is DataType.OBJECT:
        return _validate_object(schema, data)
    if kind is DataType.ARRAY:
        return _validate_array(schema, data)
    if kind is DataType.STRING:
        return isinstance(data, str)
    if kind is DataType.NUMBER:
        return isinstance(data, (int, float)) and not isinstance(data, bool)
    if kind is DataType.BOOLEAN:
        return isinstance(data, bool)
    if kind is DataType.INTEGER:
        if isinstance(data, float):
            return data.is_integer()
        return isinstance(data, int) and not isinstance(data, bool)
    if kind is DataType.NULL:
        return data is None
    return False


def _validate_object(schema: Definition, data: Any) -> bool:
    if not isinstance(data, dict):
        return False
    required = schema.required or []
    if any(name not in data for name in required):
        return False
    return all(
        validate(value_schema, data[key])
        for key, value_schema in (schema.properties or {}).items()
        if key in data
    )


def _validate_array(schema: Definition, data: Any) -> bool:
    if not isinstance(data, list):
        return False
    if data and schema.items is None:
        raise ValueError("array schema has no items definition")
    return all(validate(schema.items, item) for item in data)