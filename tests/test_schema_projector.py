"""
Тесты преобразования JSON Schema в TypeScript
"""

import pytest

from typed_fetch.internal.generator.schema_projector import SchemaProjector
from typed_fetch.internal.types.errors import (
    InvalidRequiredError,
    InvalidSchemaNodeError,
    UnresolvedReferenceError,
    UnsupportedReferenceError,
)


@pytest.fixture
def projector():
    return SchemaProjector(component_names=["User", "pet"])


class TestPrimitives:
    """Тесты примитивных типов"""

    def test_number_and_integer(self, projector):
        assert projector.project({"type": "number"}) == "number"
        assert projector.project({"type": "integer"}) == "number"

    def test_boolean(self, projector):
        assert projector.project({"type": "boolean"}) == "boolean"

    def test_plain_string(self, projector):
        assert projector.project({"type": "string", "format": "date-time"}) == "string"

    def test_string_enum(self, projector):
        schema = {"type": "string", "enum": ["a", "b", "c"]}
        assert projector.project(schema) == "'a' | 'b' | 'c'"

    def test_string_enum_escapes_quotes(self, projector):
        assert projector.project({"type": "string", "enum": ["it's"]}) == "'it\\'s'"

    def test_empty_enum(self, projector):
        assert projector.project({"type": "string", "enum": []}) == "never"

    def test_non_string_enum_fails(self, projector):
        with pytest.raises(InvalidSchemaNodeError):
            projector.project({"type": "string", "enum": ["a", 1]})


class TestReferences:
    """Тесты $ref"""

    def test_component_ref(self, projector):
        assert projector.project({"$ref": "#/components/schemas/User"}) == "ComponentSchemaUser"

    def test_component_ref_is_capitalized(self, projector):
        assert projector.project({"$ref": "#/components/schemas/pet"}) == "ComponentSchemaPet"

    def test_foreign_ref_fails(self, projector):
        with pytest.raises(UnsupportedReferenceError):
            projector.project({"$ref": "#/components/parameters/User"})

    def test_missing_component_fails(self, projector):
        with pytest.raises(UnresolvedReferenceError):
            projector.project({"$ref": "#/components/schemas/Missing"})

    def test_unchecked_names(self):
        assert SchemaProjector().project({"$ref": "#/components/schemas/Any"}) == "ComponentSchemaAny"


class TestObjects:
    """Тесты объектов"""

    def test_properties_sorted_with_optional_marks(self, projector):
        schema = {
            "type": "object",
            "properties": {
                "name": {"type": "string"},
                "age": {"type": "integer"},
            },
            "required": ["name"],
        }
        assert projector.project(schema) == "{\n    age?: number;\n    name: string;\n}"

    def test_property_doc_comment(self, projector):
        schema = {
            "type": "object",
            "properties": {
                "name": {"type": "string", "description": "Pet name", "example": "doggie"}
            },
        }
        assert projector.project(schema) == (
            "{\n    /** Pet name; Example: doggie */\n    name?: string;\n}"
        )

    def test_open_map(self, projector):
        schema = {"type": "object", "additionalProperties": True}
        assert projector.project(schema) == "{\n    [key: string]: any;\n}"

    def test_open_map_empty_values(self, projector):
        for value in ("", {}):
            schema = {"type": "object", "additionalProperties": value}
            assert projector.project(schema) == "{\n    [key: string]: any;\n}"

    def test_typed_map(self, projector):
        schema = {"type": "object", "additionalProperties": {"type": "number"}}
        assert projector.project(schema) == "{\n    [key: string]: number;\n}"

    def test_nested_object_indented(self, projector):
        schema = {
            "type": "object",
            "properties": {
                "tags": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "properties": {"id": {"type": "integer"}},
                        "required": ["id"],
                    },
                }
            },
        }
        assert projector.project(schema) == (
            "{\n    tags?: {\n        id: number;\n    }[];\n}"
        )

    def test_empty_object_fails(self, projector):
        with pytest.raises(InvalidSchemaNodeError):
            projector.project({"type": "object"})
        with pytest.raises(InvalidSchemaNodeError):
            projector.project({"type": "object", "properties": {}})

    def test_additional_properties_false_is_absent(self, projector):
        with pytest.raises(InvalidSchemaNodeError):
            projector.project({"type": "object", "additionalProperties": False})

    def test_malformed_additional_properties(self, projector):
        with pytest.raises(InvalidSchemaNodeError):
            projector.project({"type": "object", "additionalProperties": 5})

    def test_numeric_property_names(self, projector):
        schema = {
            "type": "object",
            "properties": {1: {"type": "string"}, "a": {"type": "number"}},
            "required": ["1"],
        }
        assert projector.project(schema) == (
            "{\n    \"1\": string;\n    a?: number;\n}"
        )

    def test_non_identifier_property_quoted(self, projector):
        schema = {
            "type": "object",
            "properties": {
                "x-rate-limit": {
                    "type": "integer",
                    "description": "Calls per hour */\nper user",
                }
            },
        }
        assert projector.project(schema) == (
            "{\n"
            "    /** Calls per hour *\\/ per user */\n"
            "    \"x-rate-limit\"?: number;\n"
            "}"
        )

    def test_non_string_required_fails(self, projector):
        schema = {
            "type": "object",
            "properties": {"a": {"type": "string"}},
            "required": [1],
        }
        with pytest.raises(InvalidRequiredError):
            projector.project(schema)


class TestInvalidNodes:
    """Тесты ошибок"""

    def test_array_requires_items(self, projector):
        with pytest.raises(InvalidSchemaNodeError):
            projector.project({"type": "array"})

    def test_array_of_refs(self, projector):
        schema = {"type": "array", "items": {"$ref": "#/components/schemas/User"}}
        assert projector.project(schema) == "ComponentSchemaUser[]"

    @pytest.mark.parametrize(
        "schema", [{}, {"type": "null"}, {"type": ["string", "null"]}, None, True]
    )
    def test_invalid_type(self, projector, schema):
        with pytest.raises(InvalidSchemaNodeError):
            projector.project(schema)

    def test_depth_bound(self):
        schema = {"type": "string"}
        for _ in range(10):
            schema = {"type": "array", "items": schema}

        assert SchemaProjector(max_depth=10).project(schema) == "string" + "[]" * 10
        with pytest.raises(InvalidSchemaNodeError):
            SchemaProjector(max_depth=9).project(schema)
