"""
Ошибки генератора typed-fetch
"""

from typing import List


class TypedFetchError(Exception):
    """Базовая ошибка генерации"""

    def __init__(self, message: str):
        self.message = message
        self.context: List[str] = []
        super().__init__(message)

    def add_context(self, prefix: str) -> "TypedFetchError":
        """Добавление контекста (эндпоинт, тип, media type) перед сообщением"""
        if prefix:
            self.context.insert(0, prefix)
        return self

    def __str__(self) -> str:
        if not self.context:
            return self.message
        return ", ".join(self.context) + ": " + self.message


class UnsupportedReferenceError(TypedFetchError):
    """$ref не начинается с #/components/<section>/"""


class UnresolvedReferenceError(TypedFetchError):
    """Имя из $ref отсутствует в секции components"""


class InvalidSchemaNodeError(TypedFetchError):
    """Узел схемы не входит в поддерживаемое подмножество JSON Schema"""


class InvalidRequiredError(TypedFetchError):
    """В списке required встретилось не строковое значение"""


class MissingContentError(TypedFetchError):
    """У request body пустой content"""


class NilParameterError(TypedFetchError):
    """Параметр не содержит ни ссылки, ни объекта"""


class NilRequestBodyError(TypedFetchError):
    """Request body не содержит ни ссылки, ни объекта"""


class NilResponseError(TypedFetchError):
    """Ответ не содержит ни ссылки, ни объекта"""


class NoResponsesError(TypedFetchError):
    """У операции нет responses"""


class InvalidDocumentError(TypedFetchError):
    """Документ нельзя привести к модели OpenAPI"""


class IdentifierCollisionError(TypedFetchError):
    """Два источника дают одно и то же имя TypeScript типа"""
