import logging
from typing import Any, Dict, Optional, Type

from pydantic import BaseModel, ValidationError

from ..types.errors import InvalidDocumentError
from ..types.models import (
    Components,
    HTTP_METHODS,
    OpenApiSpec,
    Operation,
    Parameter,
    ParameterOrRef,
    PathItem,
    Reference,
    RequestBody,
    RequestBodyOrRef,
    Response,
    ResponseOrRef,
    Responses,
)

logger = logging.getLogger(__name__)


class OpenApiParser:
    """Парсер OpenAPI спецификации в модели ParsedSpec"""

    def __init__(self, openapi_dict: Dict[str, Any]):
        self.openapi_dict = openapi_dict

    def parse(self) -> OpenApiSpec:
        """Парсинг OpenAPI словаря в OpenApiSpec"""
        if not isinstance(self.openapi_dict, dict):
            raise InvalidDocumentError("document root must be a mapping")

        paths = self._mapping(self.openapi_dict.get("paths"), "paths")
        spec = OpenApiSpec(
            openapi=self._string(self.openapi_dict.get("openapi")),
            paths={
                path: self._parse_path_item(item, path) for path, item in paths.items()
            },
            components=self._parse_components(self.openapi_dict.get("components")),
        )

        logger.debug(
            "Разобрано %d путей, %d схем", len(spec.paths), len(spec.components.schemas)
        )
        return spec

    def _parse_components(self, raw: Any) -> Components:
        raw = self._mapping(raw, "components")

        return Components(
            schemas=dict(self._mapping(raw.get("schemas"), "components.schemas")),
            parameters={
                name: self._or_ref(value, Parameter, ParameterOrRef, f"components.parameters.{name}")
                for name, value in self._mapping(
                    raw.get("parameters"), "components.parameters"
                ).items()
            },
            request_bodies={
                name: self._or_ref(value, RequestBody, RequestBodyOrRef, f"components.requestBodies.{name}")
                for name, value in self._mapping(
                    raw.get("requestBodies"), "components.requestBodies"
                ).items()
            },
            responses={
                name: self._or_ref(value, Response, ResponseOrRef, f"components.responses.{name}")
                for name, value in self._mapping(
                    raw.get("responses"), "components.responses"
                ).items()
            },
        )

    def _parse_path_item(self, raw: Any, path: str) -> PathItem:
        raw = self._mapping(raw, f"paths.{path}")

        operations = {}
        for method in HTTP_METHODS:
            key = method.value.lower()
            if raw.get(key) is not None:
                operations[key] = self._parse_operation(raw[key], f"{method.value} {path}")

        return PathItem(**operations)

    def _parse_operation(self, raw: Any, location: str) -> Operation:
        raw = self._mapping(raw, location)

        raw_parameters = raw.get("parameters") or []
        if not isinstance(raw_parameters, list):
            raise InvalidDocumentError(f"{location}: parameters must be a list")

        request_body = None
        if "requestBody" in raw:
            request_body = self._or_ref(
                raw["requestBody"], RequestBody, RequestBodyOrRef, f"{location} requestBody"
            )

        responses = None
        if raw.get("responses") is not None:
            responses = self._parse_responses(raw["responses"], location)

        return Operation(
            parameters=[
                self._or_ref(value, Parameter, ParameterOrRef, f"{location} parameters[{i}]")
                for i, value in enumerate(raw_parameters)
            ],
            request_body=request_body,
            responses=responses,
        )

    def _parse_responses(self, raw: Any, location: str) -> Responses:
        raw = self._mapping(raw, f"{location} responses")

        codes = {}
        default = None
        for code, value in raw.items():
            entry = self._or_ref(
                value, Response, ResponseOrRef, f"{location} responses.{code}"
            )
            if code == "default":
                default = entry
            else:
                codes[code] = entry

        return Responses(codes=codes, default=default)

    @staticmethod
    def _or_ref(
        raw: Any,
        value_cls: Type[BaseModel],
        or_ref_cls: Type[BaseModel],
        location: str,
    ):
        """Ссылка, конкретный объект или пустая запись"""
        if not isinstance(raw, dict):
            return or_ref_cls()

        try:
            if isinstance(raw.get("$ref"), str):
                return or_ref_cls(reference=Reference(ref=raw["$ref"]))
            return or_ref_cls(value=value_cls.model_validate(raw))
        except ValidationError as e:
            raise InvalidDocumentError(f"{location}: {e}") from e

    @staticmethod
    def _mapping(raw: Any, location: str) -> Dict[str, Any]:
        if raw is None:
            return {}
        if not isinstance(raw, dict):
            raise InvalidDocumentError(f"{location} must be a mapping")
        # YAML отдает числовые ключи (200, имена компонентов) как int
        return {str(key): value for key, value in raw.items()}

    @staticmethod
    def _string(raw: Any) -> Optional[str]:
        return str(raw) if raw is not None else None
