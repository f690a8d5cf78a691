from __future__ import annotations

__all__ = ["Sheet", "XlsxExtractor", "extract_file"]

import asyncio
import logging
from typing import TYPE_CHECKING

import pyarrow as pa
from tqdm import tqdm

from .archive import unzip
from .cell import Range
from .codec import column_name
from .constants import SHARED_STRINGS_PATH
from .core import SHOW_PROGRESS, as_dataclass
from .extract import get_cells, get_sheet_size, place_cells
from .rels import list_sheets
from .richtext import flatten_string_item
from .xmltree import parse_xml, to_shared_strings, to_worksheet

if TYPE_CHECKING:
    from pathlib import Path
    from typing import IO, Any

    from typing_extensions import Self

    from .cell import SheetSize
    from .rels import SheetEntry

logger = logging.getLogger(__name__)


@as_dataclass
class Sheet:
    index: int
    "1-based position in the workbook"

    name: str

    cells: list[list[str]]
    "rows of the bounding box, top to bottom; empty string for a missing cell"

    size: SheetSize

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.index, "name": self.name, "cells": self.cells}

    def to_arrow(self) -> pa.Table:
        """One string column per sheet column, named by its letters"""
        names = [column_name(self.size.col.min + i) for i in range(self.size.cols)]
        arrays = [pa.array([row[i] for row in self.cells], pa.string()) for i in range(len(names))]
        return pa.table(arrays, names)


class XlsxExtractor:
    """
    Cell grids of the sheets of one workbook.

    Sheets are numbered from 1. Every sheet is decoded independently, so a
    malformed worksheet only fails its own extraction.

    >>> with XlsxExtractor("book.xlsx") as book:
    ...     sheets = asyncio.run(book.extract_all())
    """

    __slots__ = ("__dict__", "archive", "shared")

    def __init__(self, file: str | Path | IO[bytes]) -> None:
        self.archive = unzip(file)
        self.shared: list[str] | None = None

        try:
            self.sheets: list[SheetEntry] = list_sheets(self.archive)
        except BaseException:
            self.archive.close()
            raise

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *_) -> None:  # noqa: ANN002
        self.close()

    def close(self) -> None:
        self.archive.close()

    @property
    def count(self) -> int:
        return len(self.sheets)

    async def shared_strings(self) -> list[str]:
        """Flattened shared-string table, decoded on first use"""
        if self.shared is None:
            if self.archive.has(SHARED_STRINGS_PATH):
                root = await parse_xml(self.archive.read(SHARED_STRINGS_PATH), SHARED_STRINGS_PATH)
                self.shared = [flatten_string_item(x) for x in to_shared_strings(root)]
            else:
                self.shared = []
            logger.debug("Loaded %d shared strings", len(self.shared))

        return self.shared

    async def extract(self, index: int) -> Sheet:
        if not 1 <= index <= self.count:
            msg = f"Sheet {index} out of range 1..{self.count}"
            raise IndexError(msg)

        entry = self.sheets[index - 1]

        root = await parse_xml(self.archive.read(entry.path), entry.path)
        worksheet = to_worksheet(root)

        cells = get_cells(worksheet.rows)
        known = [x for x in cells if x.row > 0 and x.col > 0]
        if len(known) < len(cells):
            logger.warning(
                "Sheet %r: %d cells with unparseable reference dropped",
                entry.name,
                len(cells) - len(known),
            )

        size = get_sheet_size(worksheet, known)
        grid = place_cells(known, size, await self.shared_strings())

        logger.debug("Sheet %r: %d cells in %dx%d", entry.name, len(known), size.rows, size.cols)
        return Sheet(entry.index, entry.name, grid, size)

    async def extract_all(
        self,
        sheet_range: Range | None = None,
        *,
        return_exceptions: bool = False,
        progress: bool | None = None,
    ) -> list[Sheet | BaseException]:
        """
        Extract the sheets selected by `sheet_range` (all by default) concurrently.

        With `return_exceptions`, a sheet that fails is returned as its exception
        and the others are still extracted.
        """
        indices = [i + 1 for i in (sheet_range or Range(0, 0)).indices(self.count)]

        # decode the shared table once, not once per sheet
        await self.shared_strings()

        with tqdm(
            total=len(indices),
            desc=f"Extracting <{self.archive.path}>",
            unit=" sheets",
            disable=not (SHOW_PROGRESS if progress is None else progress),
        ) as tq:

            async def tracked(index: int) -> Sheet:
                try:
                    return await self.extract(index)
                finally:
                    tq.update()

            return await asyncio.gather(
                *(tracked(i) for i in indices),
                return_exceptions=return_exceptions,
            )


def extract_file(
    file: str | Path | IO[bytes],
    sheet_range: Range | None = None,
) -> list[Sheet]:
    """Blocking shortcut: extract the selected sheets of `file`"""
    with XlsxExtractor(file) as book:
        return asyncio.run(book.extract_all(sheet_range))  # type: ignore[return-value]
