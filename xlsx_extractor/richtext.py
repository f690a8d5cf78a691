from __future__ import annotations

__all__ = ["flatten_run", "flatten_string_item", "flatten_text"]

from typing import TYPE_CHECKING

from .nodes import PreservedTextNode, TextRunNode

if TYPE_CHECKING:
    from typing import Iterable

    from .nodes import StringItem, TextNode


def flatten_text(nodes: Iterable[TextNode]) -> str:
    """Concatenate `<t>` contents. Whitespace is kept exactly as written"""
    value = ""
    for obj in nodes:
        if isinstance(obj, str):
            value += obj
        elif isinstance(obj, PreservedTextNode):
            value += obj.text
    return value


def flatten_run(runs: Iterable[TextRunNode]) -> str:
    value = ""
    for run in runs:
        if isinstance(run, TextRunNode) and run.texts:
            value += flatten_text(run.texts)
    return value


def flatten_string_item(item: StringItem) -> str:
    """Plain text of a shared-string entry or an inline string"""
    return flatten_text(item.texts) + flatten_run(item.runs)
