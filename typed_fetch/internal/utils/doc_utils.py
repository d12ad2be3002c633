"""Утилиты для doc-комментариев и детерминированного обхода"""

import re
from typing import Any, Dict, List, Mapping

_LINE_BREAK_RE = re.compile(r"\s*[\r\n]+\s*")


def sorted_keys(mapping: Mapping[str, Any]) -> List[str]:
    """Ключи словаря в лексикографическом порядке"""
    return sorted(mapping.keys())


def build_doc_string(description: str = "", example: str = "") -> str:
    """
    Собирает однострочный JSDoc из описания и примера.

    Examples:
        >>> build_doc_string("Pet name", "doggie")
        '/** Pet name; Example: doggie */'
        >>> build_doc_string("", "doggie")
        '/** Example: doggie */'
        >>> build_doc_string()
        ''
        >>> build_doc_string("Ends with */ and\\nbreaks")
        '/** Ends with *\\\\/ and breaks */'
    """
    description = _comment_text(description)
    example = _comment_text(example)

    if description and example:
        return f"/** {description}; Example: {example} */"
    if example:
        return f"/** Example: {example} */"
    if description:
        return f"/** {description} */"
    return ""


def _comment_text(text: str) -> str:
    # JSDoc однострочный: переводы строк схлопываются, */ не закрывает комментарий
    return _LINE_BREAK_RE.sub(" ", text).strip().replace("*/", "*\\/")


def _string_prop(value: Any) -> str:
    return value if isinstance(value, str) else ""


def get_doc_string(node: Dict[str, Any]) -> str:
    """Doc-комментарий узла схемы (учитываются только строковые значения)"""
    if not isinstance(node, dict):
        return ""
    return build_doc_string(
        _string_prop(node.get("description")), _string_prop(node.get("example"))
    )
