import logging
from typing import Dict, Type, Union

from .models import (
    Components,
    Parameter,
    ParameterOrRef,
    RequestBody,
    RequestBodyOrRef,
    Response,
    ResponseOrRef,
)
from .errors import (
    NilParameterError,
    NilRequestBodyError,
    NilResponseError,
    TypedFetchError,
    UnresolvedReferenceError,
    UnsupportedReferenceError,
)

logger = logging.getLogger(__name__)

AnyOrRef = Union[ParameterOrRef, RequestBodyOrRef, ResponseOrRef]


class ReferenceResolver:
    """Резолвер ссылок #/components/<section>/<name>"""

    # section -> (атрибут Components, ошибка для пустой записи)
    _SECTIONS: Dict[str, tuple] = {
        "parameters": ("parameters", NilParameterError),
        "requestBodies": ("request_bodies", NilRequestBodyError),
        "responses": ("responses", NilResponseError),
    }

    def __init__(self, components: Components, max_depth: int = 32):
        self.components = components
        self.max_depth = max_depth

    def resolve_parameter(self, entry: ParameterOrRef) -> Parameter:
        """Параметр операции: прямой объект или ссылка"""
        return self._resolve_entry(entry, "parameters", 0)

    def resolve_request_body(self, entry: RequestBodyOrRef) -> RequestBody:
        """Тело запроса: прямой объект или ссылка"""
        return self._resolve_entry(entry, "requestBodies", 0)

    def resolve_response(self, entry: ResponseOrRef) -> Response:
        """Ответ: прямой объект или ссылка"""
        return self._resolve_entry(entry, "responses", 0)

    def resolve_ref(self, ref: str, section: str):
        """Разрешение строки $ref в конкретный объект секции"""
        return self._resolve_ref(ref, section, 0)

    def _resolve_entry(self, entry: AnyOrRef, section: str, depth: int):
        if entry.reference is not None:
            return self._resolve_ref(entry.reference.ref, section, depth)

        if entry.value is not None:
            return entry.value

        error_cls: Type[TypedFetchError] = self._SECTIONS[section][1]
        raise error_cls(f"{section} entry holds neither a reference nor an object")

    def _resolve_ref(self, ref: str, section: str, depth: int):
        if depth >= self.max_depth:
            raise UnresolvedReferenceError(
                f"reference chain for {ref} exceeds {self.max_depth} hops"
            )

        prefix = f"#/components/{section}/"
        if not ref.startswith(prefix):
            raise UnsupportedReferenceError(f"reference {ref} is not a {section} entry")

        name = ref[len(prefix) :]
        mapping = getattr(self.components, self._SECTIONS[section][0])
        if name not in mapping:
            raise UnresolvedReferenceError(f"{section} entry {name} not found")

        logger.debug("Разрешение ссылки %s (глубина %d)", ref, depth)
        return self._resolve_entry(mapping[name], section, depth + 1)
