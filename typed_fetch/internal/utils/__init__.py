"""Утилиты для генератора"""

from .naming import (
    capitalize,
    pascalize,
    path_to_ident,
    endpoint_ident,
)
from .doc_utils import build_doc_string, get_doc_string, sorted_keys

__all__ = [
    "capitalize",
    "pascalize",
    "path_to_ident",
    "endpoint_ident",
    "build_doc_string",
    "get_doc_string",
    "sorted_keys",
]
