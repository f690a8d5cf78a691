"""
XML adapter.

`parse_xml` turns an XML document into a tree of generic `XmlNode`; the
`to_*` functions then map such a tree onto the typed nodes of `nodes.py`.
Namespaces are resolved while parsing: element names keep only their local
part, namespaced attributes are keyed as `{uri}local` so that `r:id` is found
whatever prefix the document binds to the relationships namespace.
"""
from __future__ import annotations

__all__ = [
    "XmlNode",
    "parse_xml",
    "parse_xml_sync",
    "to_shared_strings",
    "to_string_item",
    "to_worksheet",
]

import asyncio
from typing import TYPE_CHECKING

from pyexpat import ExpatError, ParserCreate

from .constants import XML_SPACE_ATTR
from .errors import XmlDecodeError
from .nodes import (
    CellNode,
    PreservedTextNode,
    RowNode,
    StringItem,
    TextRunNode,
    WorksheetNode,
)

if TYPE_CHECKING:
    from typing import Iterator

    from .nodes import TextNode


class XmlNode:
    __slots__ = ("attrs", "children", "tag", "text")

    def __init__(self, tag: str, attrs: dict[str, str] | None = None) -> None:
        self.tag = tag
        self.attrs: dict[str, str] = attrs if attrs is not None else {}
        self.children: list[XmlNode] = []
        self.text: str = ""

    def find(self, tag: str) -> XmlNode | None:
        return next(self.find_all(tag), None)

    def find_all(self, tag: str) -> Iterator[XmlNode]:
        return (x for x in self.children if x.tag == tag)

    def __repr__(self) -> str:
        return f"XmlNode({self.tag!r}, {self.attrs!r}, children={len(self.children)})"


_NS_SEP = " "


def _attr_name(name: str) -> str:
    uri, sep, local = name.rpartition(_NS_SEP)
    return f"{{{uri}}}{local}" if sep else name


def parse_xml_sync(data: bytes | str, entry: str = "<xml>") -> XmlNode:
    """Build the element tree of `data`. `entry` names the document in errors"""
    root = XmlNode("")
    stack: list[XmlNode] = [root]

    def start_h(tag: str, attrs: dict[str, str]) -> None:
        node = XmlNode(tag.rsplit(_NS_SEP, 1)[-1], {_attr_name(k): v for k, v in attrs.items()})
        stack[-1].children.append(node)
        stack.append(node)

    def end_h(_: str) -> None:
        stack.pop()

    def text_h(txt: str) -> None:
        stack[-1].text += txt

    parser = ParserCreate(namespace_separator=_NS_SEP)
    parser.StartElementHandler = start_h
    parser.EndElementHandler = end_h
    parser.CharacterDataHandler = text_h
    parser.buffer_text = True

    try:
        parser.Parse(data, True)
    except ExpatError as e:
        raise XmlDecodeError(entry, str(e)) from e

    if not root.children:
        raise XmlDecodeError(entry, "no root element")

    return root.children[0]


async def parse_xml(data: bytes | str, entry: str = "<xml>") -> XmlNode:
    """Same as `parse_xml_sync`, off the event loop"""
    return await asyncio.to_thread(parse_xml_sync, data, entry)


def _text_node(t: XmlNode) -> TextNode:
    if t.attrs.get(XML_SPACE_ATTR) == "preserve":
        return PreservedTextNode(t.text)
    return t.text


def to_string_item(node: XmlNode) -> StringItem:
    """Map `<si>` or `<is>`. Phonetic runs (`<rPh>`) are not part of the text"""
    return StringItem(
        tuple(_text_node(t) for t in node.find_all("t")),
        tuple(
            TextRunNode(tuple(_text_node(t) for t in r.find_all("t")))
            for r in node.find_all("r")
        ),
    )


def _cell_node(c: XmlNode) -> CellNode:
    inline = c.find("is")
    return CellNode(
        c.attrs.get("r", ""),
        c.attrs.get("t"),
        tuple(v.text for v in c.find_all("v")),
        to_string_item(inline) if inline is not None else None,
    )


def to_worksheet(root: XmlNode) -> WorksheetNode:
    dimension = root.find("dimension")
    sheet_data = root.find("sheetData")

    rows: tuple[RowNode, ...] = ()
    if sheet_data is not None:
        rows = tuple(
            RowNode(tuple(_cell_node(c) for c in row.find_all("c")))
            for row in sheet_data.find_all("row")
        )

    return WorksheetNode(
        dimension.attrs.get("ref") if dimension is not None else None,
        rows,
    )


def to_shared_strings(root: XmlNode) -> list[StringItem]:
    return [to_string_item(si) for si in root.find_all("si")]
