import logging
from typing import Dict, List, Optional, Sequence

from ..types.errors import MissingContentError, NoResponsesError, TypedFetchError
from ..types.models import (
    BodyInfo,
    HttpMethod,
    MediaType,
    Operation,
    Parameter,
    ParamInfo,
    Response,
)
from ..types.reference_resolver import ReferenceResolver
from ..utils.doc_utils import build_doc_string
from ..utils import naming
from .schema_projector import INDENT, SchemaProjector, indent_continuation

logger = logging.getLogger(__name__)

PREFERRED_CONTENT_TYPES = [
    "application/json",
    "multipart/form-data",
    "application/x-www-form-urlencoded",
    "application/octet-stream",
]

PARAMETER_LOCATIONS = ["path", "query", "header", "cookie"]

DATA_STATUS_PREFIXES = ["2"]
ERROR_STATUS_PREFIXES = ["4", "5"]


def select_content_type(content: Dict[str, MediaType]) -> Optional[str]:
    """Выбор media type по списку предпочтений, иначе первый по алфавиту"""
    for content_type in PREFERRED_CONTENT_TYPES:
        if content_type in content:
            return content_type

    if content:
        return sorted(content.keys())[0]

    return None


class OperationSynthesizer:
    """Генерация Param / Body / Request / Response типов одной операции"""

    def __init__(self, resolver: ReferenceResolver, projector: SchemaProjector):
        self.resolver = resolver
        self.projector = projector

    def synthesize(
        self, operation: Operation, method: HttpMethod, path: str
    ) -> List[str]:
        """Все типы операции в порядке: param, body, request, data, error"""
        param_info = self.get_param_info(operation, method, path)
        body_info = self.get_body_info(operation, method, path)

        lines = [f"// {method.value} {path}"]
        lines.extend(self.generate_param_type(param_info))
        lines.extend(self.generate_body_type(body_info, method, path))
        lines.append(self.generate_request_type(method, path, param_info, body_info))
        lines.extend(self.generate_response_types(operation, method, path))
        return lines

    def get_param_info(
        self, operation: Operation, method: HttpMethod, path: str
    ) -> ParamInfo:
        resolved = []
        for entry in operation.parameters:
            try:
                resolved.append(self.resolver.resolve_parameter(entry))
            except TypedFetchError as e:
                raise e.add_context(f"{method.value} {path}")

        return ParamInfo(
            type_name=naming.param_type_name(method, path),
            required=any(param.required for param in resolved),
            included=bool(resolved),
            resolved=resolved,
        )

    def get_body_info(
        self, operation: Operation, method: HttpMethod, path: str
    ) -> BodyInfo:
        info = BodyInfo(type_name=naming.body_type_name(method, path))
        if operation.request_body is None:
            return info

        try:
            info.resolved = self.resolver.resolve_request_body(operation.request_body)
        except TypedFetchError as e:
            raise e.add_context(f"{method.value} {path}")

        info.included = True
        info.required = bool(info.resolved.required)
        return info

    def generate_param_type(self, param_info: ParamInfo) -> List[str]:
        if not param_info.included:
            return []

        groups: Dict[str, List[Parameter]] = {}
        for param in param_info.resolved:
            groups.setdefault(param.in_, []).append(param)

        lines = [f"type {param_info.type_name} = {{"]
        for location in PARAMETER_LOCATIONS:
            if location not in groups:
                continue

            group_lines = []
            for param in groups[location]:
                try:
                    param_type = self.projector.project(param.schema_)
                except TypedFetchError as e:
                    raise e.add_context(
                        f"{param_info.type_name}, parameter {param.name}"
                    )

                doc_string = build_doc_string(
                    param.description or "",
                    param.example if isinstance(param.example, str) else "",
                )
                if doc_string:
                    group_lines.append(INDENT * 2 + doc_string)

                optional = "" if param.required else "?"
                group_lines.append(
                    f"{INDENT * 2}{naming.property_key(param.name)}{optional}: "
                    f"{indent_continuation(param_type, INDENT * 2)};"
                )

            group_optional = "" if any(p.required for p in groups[location]) else "?"
            lines.append(f"{INDENT}{location}{group_optional}: {{")
            lines.extend(group_lines)
            lines.append(f"{INDENT}}};")

        lines.append("};")
        return lines

    def generate_body_type(
        self, body_info: BodyInfo, method: HttpMethod, path: str
    ) -> List[str]:
        if not body_info.included:
            return []

        content = body_info.resolved.content
        content_type = select_content_type(content)
        if content_type is None:
            raise MissingContentError("no content type found for request body").add_context(
                f"{method.value} {path}, {body_info.type_name}"
            )

        try:
            body_type = self.projector.project(content[content_type].schema_)
        except TypedFetchError as e:
            raise e.add_context(
                f"{method.value} {path}, {body_info.type_name} ({content_type})"
            )

        return [f"type {body_info.type_name} = {body_type};"]

    @staticmethod
    def generate_request_type(
        method: HttpMethod, path: str, param_info: ParamInfo, body_info: BodyInfo
    ) -> str:
        # Example:
        # type RequestGetFoo = RequestInit & { params?: ParamGetFoo; } & RequestInitExtended;
        # type RequestPostBar = Omit<RequestInit, 'body'> & { body: BodyPostBar; } & RequestInitExtended;
        base_type = "Omit<RequestInit, 'body'>" if body_info.included else "RequestInit"

        decls = []
        if param_info.included:
            optional = "" if param_info.required else "?"
            decls.append(f"params{optional}: {param_info.type_name};")
        if body_info.included:
            optional = "" if body_info.required else "?"
            decls.append(f"body{optional}: {body_info.type_name};")

        refinement = f" & {{ {' '.join(decls)} }}" if decls else ""

        return (
            f"type {naming.request_type_name(method, path)} = "
            f"{base_type}{refinement} & RequestInitExtended;"
        )

    def generate_response_types(
        self, operation: Operation, method: HttpMethod, path: str
    ) -> List[str]:
        data_response = self.pick_response(
            operation, method, path, DATA_STATUS_PREFIXES
        )
        error_response = self.pick_response(
            operation, method, path, ERROR_STATUS_PREFIXES
        )

        return [
            self.generate_response_type(
                method, path, naming.response_data_type_name(method, path), data_response
            ),
            self.generate_response_type(
                method, path, naming.response_error_type_name(method, path), error_response
            ),
        ]

    def pick_response(
        self,
        operation: Operation,
        method: HttpMethod,
        path: str,
        prefixes: Sequence[str],
    ) -> Response:
        """Первый ответ с кодом на один из префиксов, иначе default, иначе пустой"""
        responses = operation.responses
        if responses is None:
            raise NoResponsesError(f"operation {method.value} {path} has no responses")

        try:
            for prefix in prefixes:
                for code in sorted(responses.codes.keys()):
                    if code.startswith(prefix):
                        return self.resolver.resolve_response(responses.codes[code])

            if responses.default is not None:
                return self.resolver.resolve_response(responses.default)
        except TypedFetchError as e:
            raise e.add_context(f"{method.value} {path}")

        return Response(content={})

    def generate_response_type(
        self, method: HttpMethod, path: str, type_name: str, response: Response
    ) -> str:
        content_type = select_content_type(response.content)
        logger.debug("%s: media type %s", type_name, content_type)
        if content_type is None:
            return f"type {type_name} = {{}};"

        try:
            response_type = self.projector.project(response.content[content_type].schema_)
        except TypedFetchError as e:
            raise e.add_context(f"{method.value} {path}, {type_name} ({content_type})")

        return f"type {type_name} = {response_type};"
