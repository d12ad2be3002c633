"""
Главный модуль генератора - чистый интерфейс
"""

from typing import Dict, Any, Union

from .internal.generator.client_generator import ClientGenerator, GeneratorOptions
from .internal.parser.openapi import OpenApiParser
from .internal.types.models import OpenApiSpec


class TypedFetchGenerator:
    """Чистый интерфейс для генерации TypeScript клиента"""

    def __init__(
        self,
        openapi_spec: Union[Dict[str, Any], OpenApiSpec],
        options: GeneratorOptions = None,
    ):
        self.openapi_spec = openapi_spec
        self.options = options or GeneratorOptions()

    def parse(self) -> OpenApiSpec:
        """Приведение входа к OpenApiSpec"""
        if isinstance(self.openapi_spec, OpenApiSpec):
            return self.openapi_spec
        return OpenApiParser(self.openapi_spec).parse()

    def generate(self) -> str:
        """Генерация исходника TypeScript"""
        return ClientGenerator(self.parse(), self.options).generate()


def generate_typed_fetch(
    openapi_spec: Union[Dict[str, Any], OpenApiSpec], **options
) -> str:
    """Генерация TypeScript клиента из OpenAPI спецификации"""
    return TypedFetchGenerator(openapi_spec, GeneratorOptions(**options)).generate()
