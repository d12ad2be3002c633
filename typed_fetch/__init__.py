"""Генератор типизированного TypeScript fetch-клиента из OpenAPI 3.1"""

from .generator import TypedFetchGenerator, generate_typed_fetch
from .internal.generator.client_generator import GeneratorOptions
from .internal.types.errors import TypedFetchError

__all__ = [
    "TypedFetchGenerator",
    "generate_typed_fetch",
    "GeneratorOptions",
    "TypedFetchError",
]
