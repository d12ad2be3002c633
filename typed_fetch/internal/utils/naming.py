"""Утилиты для построения имен TypeScript типов"""

import json
import re
from typing import Union

from ..types.models import HttpMethod

# Символы, недопустимые в идентификаторах TypeScript
_INVALID_PATH_CHARS = "-{}.~%"

_IDENTIFIER_RE = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")


def capitalize(name: str) -> str:
    """
    Делает заглавной только первую букву, остаток не трогает.

    Examples:
        >>> capitalize("petStatus")
        'PetStatus'
    """
    if not name:
        return name
    return name[:1].upper() + name[1:]


def pascalize(name: str) -> str:
    """
    Первая буква заглавная, остальные строчные.

    Examples:
        >>> pascalize("GET")
        'Get'
    """
    if not name:
        return name
    return name[:1].upper() + name[1:].lower()


def path_to_ident(path: str) -> str:
    """
    Преобразует путь в идентификатор.

    Examples:
        >>> path_to_ident("/store/order/{orderId}")
        'StoreOrderOrderId'
    """
    for char in _INVALID_PATH_CHARS:
        path = path.replace(char, "")

    return "".join(capitalize(part) for part in path.split("/") if part)


def _method_token(method: Union[HttpMethod, str]) -> str:
    return method.value if isinstance(method, HttpMethod) else method


def endpoint_ident(method: Union[HttpMethod, str], path: str) -> str:
    return pascalize(_method_token(method)) + path_to_ident(path)


def component_schema_type_name(name: str) -> str:
    return f"ComponentSchema{capitalize(name)}"


def param_type_name(method: Union[HttpMethod, str], path: str) -> str:
    return f"Param{endpoint_ident(method, path)}"


def body_type_name(method: Union[HttpMethod, str], path: str) -> str:
    return f"Body{endpoint_ident(method, path)}"


def request_type_name(method: Union[HttpMethod, str], path: str) -> str:
    return f"Request{endpoint_ident(method, path)}"


def response_data_type_name(method: Union[HttpMethod, str], path: str) -> str:
    return f"ResponseData{endpoint_ident(method, path)}"


def response_error_type_name(method: Union[HttpMethod, str], path: str) -> str:
    return f"ResponseError{endpoint_ident(method, path)}"


def lookup_type_name(method: Union[HttpMethod, str]) -> str:
    return f"{pascalize(_method_token(method))}TypesLookup"


def url_type_name(method: Union[HttpMethod, str], path: str) -> str:
    return f"Url{endpoint_ident(method, path)}"


def method_url_type_name(method: Union[HttpMethod, str]) -> str:
    return f"UrlValid{pascalize(_method_token(method))}"


def property_key(name: str) -> str:
    """
    Ключ свойства TypeScript: идентификатор как есть, иначе строковый литерал.

    Examples:
        >>> property_key("petId")
        'petId'
        >>> property_key("x-rate-limit")
        '"x-rate-limit"'
    """
    if _IDENTIFIER_RE.fullmatch(name):
        return name
    return json.dumps(name, ensure_ascii=False)
