from typing import Any, Dict, Iterable, List, Optional

from ..types.errors import (
    InvalidRequiredError,
    InvalidSchemaNodeError,
    UnresolvedReferenceError,
    UnsupportedReferenceError,
)
from ..utils.doc_utils import get_doc_string, sorted_keys
from ..utils.naming import component_schema_type_name, property_key

SCHEMA_REF_PREFIX = "#/components/schemas/"

VALID_JSON_TYPES = ("string", "number", "integer", "boolean", "array", "object")

INDENT = "    "


def indent_continuation(text: str, indent: str = INDENT) -> str:
    """Сдвигает все строки кроме первой (вложенные многострочные типы)"""
    return text.replace("\n", "\n" + indent)


def _quote_literal(value: str) -> str:
    return "'" + value.replace("\\", "\\\\").replace("'", "\\'") + "'"


class SchemaProjector:
    """Преобразование узла JSON Schema в выражение TypeScript типа"""

    def __init__(
        self, component_names: Optional[Iterable[str]] = None, max_depth: int = 64
    ):
        # None - имена компонентов не проверяются
        self.component_names = (
            set(component_names) if component_names is not None else None
        )
        self.max_depth = max_depth

    def project(self, schema: Any) -> str:
        """Получение TypeScript типа из схемы"""
        return self._project(schema, 0)

    def _project(self, schema: Any, depth: int) -> str:
        if depth > self.max_depth:
            raise InvalidSchemaNodeError(
                f"schema nesting exceeds {self.max_depth} levels"
            )

        if not isinstance(schema, dict):
            raise InvalidSchemaNodeError(f"invalid schema: {schema!r}")

        ref = schema.get("$ref")
        if isinstance(ref, str):
            return self._project_ref(ref)

        schema_type = schema.get("type")
        if not isinstance(schema_type, str) or schema_type not in VALID_JSON_TYPES:
            raise InvalidSchemaNodeError(f"invalid type: {schema_type!r}")

        if schema_type == "object":
            return self._project_object(schema, depth)
        if schema_type == "array":
            return self._project_array(schema, depth)
        if schema_type == "string":
            return self._project_string(schema)
        if schema_type == "boolean":
            return "boolean"
        return "number"

    def _project_ref(self, ref: str) -> str:
        if not ref.startswith(SCHEMA_REF_PREFIX):
            raise UnsupportedReferenceError(
                f"unsupported ref, expected {SCHEMA_REF_PREFIX}: {ref}"
            )

        name = ref[len(SCHEMA_REF_PREFIX) :]
        if self.component_names is not None and name not in self.component_names:
            raise UnresolvedReferenceError(f"schema {name} not found")

        return component_schema_type_name(name)

    def _project_object(self, schema: Dict[str, Any], depth: int) -> str:
        properties = schema.get("properties")
        if not isinstance(properties, dict):
            properties = {}
        # YAML отдает числовые имена свойств как int
        properties = {str(name): value for name, value in properties.items()}

        additional = schema.get("additionalProperties")
        # additionalProperties: false ничего не добавляет
        has_additional = "additionalProperties" in schema and additional is not False

        if not properties and not has_additional:
            raise InvalidSchemaNodeError(
                f"missing properties or additionalProperties: {schema.get('properties')!r}"
            )

        required = self._required_props(schema)

        lines = ["{"]
        for name in sorted_keys(properties):
            prop_schema = properties[name]
            if not isinstance(prop_schema, dict):
                raise InvalidSchemaNodeError(f"invalid property schema: {prop_schema!r}")

            prop_type = self._project(prop_schema, depth + 1)
            optional = "" if name in required else "?"

            doc_string = get_doc_string(prop_schema)
            if doc_string:
                lines.append(INDENT + doc_string)
            lines.append(
                f"{INDENT}{property_key(name)}{optional}: {indent_continuation(prop_type)};"
            )

        if has_additional:
            lines.append(
                f"{INDENT}[key: string]: {self._project_additional(additional, depth)};"
            )

        lines.append("}")
        return "\n".join(lines)

    def _project_additional(self, additional: Any, depth: int) -> str:
        # https://swagger.io/docs/specification/data-models/dictionaries/
        if additional is True or additional == "" or additional == {}:
            return "any"

        if not isinstance(additional, dict):
            raise InvalidSchemaNodeError(
                f"invalid additionalProperties: {additional!r}"
            )

        return indent_continuation(self._project(additional, depth + 1))

    def _project_array(self, schema: Dict[str, Any], depth: int) -> str:
        items = schema.get("items")
        if not isinstance(items, dict):
            raise InvalidSchemaNodeError(f"missing items: {items!r}")

        return f"{self._project(items, depth + 1)}[]"

    @staticmethod
    def _project_string(schema: Dict[str, Any]) -> str:
        enum = schema.get("enum")
        if not isinstance(enum, list):
            return "string"

        values = []
        for value in enum:
            if not isinstance(value, str):
                raise InvalidSchemaNodeError(
                    f"expected enum value to be a string: {value!r}"
                )
            values.append(_quote_literal(value))

        return " | ".join(values) if values else "never"

    @staticmethod
    def _required_props(schema: Dict[str, Any]) -> List[str]:
        required = schema.get("required")
        if not isinstance(required, list):
            return []

        for prop in required:
            if not isinstance(prop, str):
                raise InvalidRequiredError(
                    f"expected required property to be a string: {prop!r}"
                )

        return required
