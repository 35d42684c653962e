import json

import pytest

from oaicompat.jsonschema.definition import DataType, Definition
from oaicompat.jsonschema.validate import (
    SchemaValidationError,
    validate,
    verify_schema_and_unmarshal,
)

OBJECT_PROPERTIES = {
    "string": Definition(type=DataType.STRING),
    "integer": Definition(type=DataType.INTEGER),
    "number": Definition(type=DataType.NUMBER),
    "boolean": Definition(type=DataType.BOOLEAN),
    "array": Definition(type=DataType.ARRAY, items=Definition(type=DataType.NUMBER)),
}


@pytest.mark.parametrize(
    "data,schema,want",
    [
        ("ABC", Definition(type=DataType.STRING), True),
        (123, Definition(type=DataType.STRING), False),
        (123, Definition(type=DataType.INTEGER), True),
        (123.4, Definition(type=DataType.INTEGER), False),
        ("ABC", Definition(type=DataType.NUMBER), False),
        (123, Definition(type=DataType.NUMBER), True),
        (False, Definition(type=DataType.BOOLEAN), True),
        (123, Definition(type=DataType.BOOLEAN), False),
        (None, Definition(type=DataType.NULL), True),
        (0, Definition(type=DataType.NULL), False),
        (
            ["a", "b", "c"],
            Definition(type=DataType.ARRAY, items=Definition(type=DataType.STRING)),
            True,
        ),
        (
            [1, 2, 3],
            Definition(type=DataType.ARRAY, items=Definition(type=DataType.STRING)),
            False,
        ),
        (
            [1, 2, 3],
            Definition(type=DataType.ARRAY, items=Definition(type=DataType.INTEGER)),
            True,
        ),
        (
            [1, 2, 3.4],
            Definition(type=DataType.ARRAY, items=Definition(type=DataType.INTEGER)),
            False,
        ),
        (
            {"string": "abc", "integer": 123, "number": 123.4, "boolean": False, "array": [1, 2, 3]},
            Definition(type=DataType.OBJECT, properties=OBJECT_PROPERTIES, required=["string"]),
            True,
        ),
        (
            {"integer": 123, "number": 123.4, "boolean": False, "array": [1, 2, 3]},
            Definition(type=DataType.OBJECT, properties=OBJECT_PROPERTIES, required=["string"]),
            False,
        ),
    ],
)
def test_validate(data, schema, want):
    assert validate(schema, data) is want


def test_validate_unknown_type_is_false():
    assert validate(Definition(), "anything") is False


def test_validate_accepts_plain_string_type():
    assert validate(Definition(type="string"), "abc") is True


def test_validate_float_with_integral_value_is_integer():
    assert validate(Definition(type=DataType.INTEGER), 123.0) is True


def test_array_without_items_definition_fails_loudly():
    with pytest.raises(ValueError):
        validate(Definition(type=DataType.ARRAY), [1])


def test_unmarshal_valid_object():
    schema = Definition(
        type=DataType.OBJECT,
        properties={"string": Definition(type=DataType.STRING), "number": Definition(type=DataType.NUMBER)},
    )
    content = b'{"string":"abc","number":123.4}'
    assert verify_schema_and_unmarshal(schema, content) == {"string": "abc", "number": 123.4}


def test_unmarshal_missing_required_field():
    schema = Definition(
        type=DataType.OBJECT,
        properties={"string": Definition(type=DataType.STRING), "number": Definition(type=DataType.NUMBER)},
        required=["string", "number"],
    )
    with pytest.raises(SchemaValidationError, match="data validation failed"):
        verify_schema_and_unmarshal(schema, '{"string":"abc"}')


INTEGER_SCHEMA = Definition(
    type=DataType.OBJECT,
    properties={"string": Definition(type=DataType.STRING), "integer": Definition(type=DataType.INTEGER)},
    required=["string", "integer"],
)


def test_unmarshal_validate_integer():
    content = '{"string":"abc","integer":123}'
    assert verify_schema_and_unmarshal(INTEGER_SCHEMA, content) == json.loads(content)


def test_unmarshal_validate_integer_failed():
    with pytest.raises(SchemaValidationError):
        verify_schema_and_unmarshal(INTEGER_SCHEMA, '{"string":"abc","integer":123.4}')


def test_unmarshal_malformed_json():
    with pytest.raises(json.JSONDecodeError):
        verify_schema_and_unmarshal(INTEGER_SCHEMA, '{"string":')