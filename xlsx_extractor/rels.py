# ruff: noqa:D101, D102
from __future__ import annotations

__all__ = ["Relationship", "SheetEntry", "list_sheets"]

import logging
from typing import TYPE_CHECKING

from .constants import REL_ID_ATTRS, WORKBOOK_PATH, WORKBOOK_RELS_PATH, WORKSHEET_PATH
from .core import as_dataclass
from .errors import WorkbookError
from .xmltree import parse_xml_sync

if TYPE_CHECKING:
    from .archive import XlsxArchive
    from .xmltree import XmlNode

logger = logging.getLogger(__name__)


@as_dataclass(readonly=True)
class Relationship:
    Id: str
    Type: str
    Target: str

    @staticmethod
    def from_xml(root: XmlNode) -> list[Relationship]:
        return [
            Relationship(
                x.attrs["Id"],
                x.attrs["Type"].rsplit("/", 1)[-1],
                x.attrs["Target"],
            )
            for x in root.find_all("Relationship")
            if "Id" in x.attrs and "Type" in x.attrs and "Target" in x.attrs
        ]

    @property
    def path(self) -> str:
        """Archive entry the target points to; targets are relative to `xl/`"""
        if self.Target.startswith("/"):
            return self.Target[1:]
        return f"xl/{self.Target}"


@as_dataclass(readonly=True)
class SheetEntry:
    index: int
    "1-based position in the workbook"

    name: str
    path: str


def _rel_id(node: XmlNode) -> str | None:
    return next((node.attrs[k] for k in REL_ID_ATTRS if k in node.attrs), None)


def list_sheets(archive: XlsxArchive) -> list[SheetEntry]:
    """Sheets of the workbook, in tab order"""
    if not archive.has(WORKBOOK_PATH):
        msg = f"{archive.path}: {WORKBOOK_PATH} not found, not an xlsx file"
        raise WorkbookError(msg)

    book = parse_xml_sync(archive.read(WORKBOOK_PATH), WORKBOOK_PATH)
    sheets_node = book.find("sheets")
    declared = (
        [(x.attrs.get("name", ""), _rel_id(x)) for x in sheets_node.find_all("sheet")]
        if sheets_node is not None
        else []
    )

    rId_to_path: dict[str, str] = {}  # noqa: N806
    if archive.has(WORKBOOK_RELS_PATH):
        rels = parse_xml_sync(archive.read(WORKBOOK_RELS_PATH), WORKBOOK_RELS_PATH)
        rId_to_path = {x.Id: x.path for x in Relationship.from_xml(rels) if x.Type == "worksheet"}
    else:
        logger.debug("%s has no %s, assuming default sheet paths", archive.path, WORKBOOK_RELS_PATH)

    ret = []
    for i, (name, r_id) in enumerate(declared, start=1):
        path = rId_to_path.get(r_id or "") if rId_to_path else WORKSHEET_PATH.format(i)
        if path is None:
            # chartsheets and dialog sheets have no cells
            logger.debug("Skipping sheet %r: not a worksheet", name)
            continue
        ret.append(SheetEntry(len(ret) + 1, name, path))

    return ret
