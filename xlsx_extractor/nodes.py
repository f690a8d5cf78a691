"""
Typed nodes of worksheet and shared-string documents.

The generic XML tree is translated into these once, by `xmltree.to_worksheet`
and `xmltree.to_shared_strings`. Extraction code works with nothing else.

`<t>` elements become plain `str` when they carry no attributes and
`PreservedTextNode` when they do (in practice, `xml:space="preserve"`).
"""
from __future__ import annotations

__all__ = [
    "CellNode",
    "PreservedTextNode",
    "RowNode",
    "SharedStringEntry",
    "StringItem",
    "TextNode",
    "TextRunNode",
    "WorksheetNode",
]

from typing import Optional, Tuple, Union

from .core import as_dataclass


@as_dataclass(readonly=True)
class PreservedTextNode:
    """`<t xml:space="preserve">`: the text is significant down to the last space"""

    text: str


TextNode = Union[str, PreservedTextNode]


@as_dataclass(readonly=True)
class TextRunNode:
    """`<r>`: one styled segment of a rich-text string"""

    texts: Tuple[TextNode, ...]


@as_dataclass(readonly=True)
class StringItem:
    """`<si>` of the shared-string table, or `<is>` of an inline-string cell"""

    texts: Tuple[TextNode, ...]
    runs: Tuple[TextRunNode, ...]


SharedStringEntry = StringItem


@as_dataclass(readonly=True)
class CellNode:
    ref: str
    "`r` attribute, empty when absent"

    type: Optional[str]
    "`t` attribute"

    values: Tuple[str, ...]
    "texts of `<v>` children"

    inline: Optional[StringItem]
    "`<is>` child of inline-string cells"


@as_dataclass(readonly=True)
class RowNode:
    cells: Tuple[CellNode, ...]


@as_dataclass(readonly=True)
class WorksheetNode:
    dimension: Optional[str]
    "`ref` attribute of `<dimension>`"

    rows: Tuple[RowNode, ...]
