import logging
from dataclasses import dataclass
from typing import Dict, List, Tuple

from ..types.errors import IdentifierCollisionError, TypedFetchError
from ..types.models import (
    CodeFile,
    HTTP_METHODS,
    HttpMethod,
    OpenApiSpec,
    Operation,
)
from ..types.reference_resolver import ReferenceResolver
from ..utils.doc_utils import get_doc_string, sorted_keys
from ..utils import naming
from .operation_synthesizer import OperationSynthesizer
from .schema_projector import INDENT, SchemaProjector
from .templates import templates

logger = logging.getLogger(__name__)


@dataclass
class GeneratorOptions:
    """Параметры генерации"""

    url_types: bool = False
    max_schema_depth: int = 64
    max_reference_depth: int = 32


class ClientGenerator:
    """Сборка TypeScript файла: компоненты, операции, lookup таблицы, Client"""

    def __init__(self, spec: OpenApiSpec, options: GeneratorOptions = None):
        self.spec = spec
        self.options = options or GeneratorOptions()
        self.resolver = ReferenceResolver(
            spec.components, max_depth=self.options.max_reference_depth
        )
        self.projector = SchemaProjector(
            spec.components.schemas.keys(), max_depth=self.options.max_schema_depth
        )
        self.synthesizer = OperationSynthesizer(self.resolver, self.projector)

    def generate(self) -> str:
        """Основная генерация"""
        self._check_collisions()

        self.code_file = CodeFile(file_name="typed-fetch.ts")
        self.code_file.add_code_block(templates.preamble)
        self.code_file.add_code_block(self._generate_component_types())
        self.code_file.add_code_block(self._generate_operation_types())
        if self.options.url_types:
            self.code_file.add_code_block(self._generate_url_types())

        lookup_lines, client_lines = self._generate_client()
        self.code_file.add_code_block(lookup_lines)
        self.code_file.add_code_block(client_lines)

        return str(self.code_file)

    def _operations(self) -> List[Tuple[str, HttpMethod, Operation]]:
        """Все операции: пути по алфавиту, методы в фиксированном порядке"""
        result = []
        for path in sorted_keys(self.spec.paths):
            for method, operation in self.spec.paths[path].operations():
                result.append((path, method, operation))
        return result

    def _check_collisions(self):
        """Имена типов должны быть уникальны"""
        seen: Dict[str, str] = {}

        for name in sorted_keys(self.spec.components.schemas):
            type_name = naming.component_schema_type_name(name)
            if type_name in seen:
                raise IdentifierCollisionError(
                    f"{type_name} is produced by both schemas {seen[type_name]} and {name}"
                )
            seen[type_name] = name

        endpoints: Dict[str, str] = {}
        for path, method, _ in self._operations():
            ident = naming.endpoint_ident(method, path)
            source = f"{method.value} {path}"
            if ident in endpoints:
                raise IdentifierCollisionError(
                    f"{ident} is produced by both {endpoints[ident]} and {source}"
                )
            endpoints[ident] = source

    def _generate_component_types(self) -> List[str]:
        """Типы из components/schemas"""
        lines = [templates.component_types_header, ""]

        schemas = self.spec.components.schemas
        for name in sorted_keys(schemas):
            schema = schemas[name]
            type_name = naming.component_schema_type_name(name)
            try:
                type_decl = self.projector.project(schema)
            except TypedFetchError as e:
                raise e.add_context(type_name)

            doc_string = get_doc_string(schema)
            if doc_string:
                lines.append(doc_string)
            lines.append(f"type {type_name} = {type_decl};")
            lines.append("")

        logger.debug("Сгенерировано %d компонентных типов", len(schemas))
        return lines[:-1] if len(lines) > 2 else lines[:1]

    def _generate_operation_types(self) -> List[str]:
        """Request/Response типы всех операций"""
        lines = [templates.operation_types_header]

        for path, method, operation in self._operations():
            logger.debug("Генерация типов %s %s", method.value, path)
            lines.append("")
            lines.extend(self.synthesizer.synthesize(operation, method, path))

        return lines

    def _generate_url_types(self) -> List[str]:
        """Литеральные типы URL по методам"""
        lines = [templates.url_types_header]

        by_method: Dict[HttpMethod, List[str]] = {}
        for path, method, _ in self._operations():
            by_method.setdefault(method, []).append(path)

        for method in HTTP_METHODS:
            if method not in by_method:
                continue

            lines.append("")
            url_types = []
            for path in by_method[method]:
                url_type = naming.url_type_name(method, path)
                url_types.append(url_type)
                lines.append(f"type {url_type} = '{path}';")

            lines.append(
                f"type {naming.method_url_type_name(method)} = {' | '.join(url_types)};"
            )

        return lines

    def _generate_client(self) -> Tuple[List[str], List[str]]:
        """Lookup таблицы по методам и интерфейс Client"""
        lookups: Dict[HttpMethod, List[str]] = {}

        for path, method, operation in self._operations():
            param_info = self.synthesizer.get_param_info(operation, method, path)
            body_info = self.synthesizer.get_body_info(operation, method, path)
            init_required = param_info.required or body_info.required

            lookups.setdefault(method, []).append(
                templates.lookup_entry.format(
                    path=path,
                    optional="" if init_required else "?",
                    request=naming.request_type_name(method, path),
                    data=naming.response_data_type_name(method, path),
                    error=naming.response_error_type_name(method, path),
                )
            )

        lookup_lines = [templates.lookups_header] if lookups else []
        client_methods = []
        for method in HTTP_METHODS:
            if method not in lookups:
                continue

            lookup_name = naming.lookup_type_name(method)
            lookup_lines.append("")
            lookup_lines.append(f"type {lookup_name} = {{")
            lookup_lines.append(
                ",\n".join(INDENT + entry for entry in lookups[method])
            )
            lookup_lines.append("};")
            client_methods.append(f"{INDENT}{method.value}: ClientMethod<{lookup_name}>;")

        if client_methods:
            client_lines = templates.client_interface.format(
                methods="\n".join(client_methods)
            ).split("\n")
        else:
            client_lines = ["export interface Client {", "}"]

        return lookup_lines, client_lines
