from __future__ import annotations

__all__ = [
    "create_empty_cells",
    "get_cells",
    "get_sheet_size",
    "place_cells",
]

import logging
from typing import TYPE_CHECKING

from .cell import EMPTY_SIZE, Bounds, Cell, SheetSize
from .codec import get_position, parse_dimension
from .constants import TYPE_SHARED
from .richtext import flatten_string_item

if TYPE_CHECKING:
    from typing import Iterable, Sequence

    from .nodes import RowNode, WorksheetNode

logger = logging.getLogger(__name__)


def get_cells(rows: Iterable[RowNode]) -> list[Cell]:
    """
    Flatten worksheet rows into cells, in document order.

    Output is NOT sorted by position. Cells whose reference cannot be parsed
    come out at (0, 0).
    """
    cells: list[Cell] = []
    for row in rows:
        if not row.cells:
            continue

        for c in row.cells:
            position = get_position(c.ref)
            if c.values:
                value = c.values[0]
            elif c.inline is not None:
                value = flatten_string_item(c.inline)
            else:
                value = ""

            cells.append(Cell(position.row, position.col, c.type or "", value))

    return cells


def get_sheet_size(sheet: WorksheetNode | None, cells: Sequence[Cell]) -> SheetSize:
    """
    Bounding box of a sheet.

    A declared `<dimension>` wins and `cells` is not looked at. Without one the
    box is inferred from `cells`; no dimension and no cells gives `EMPTY_SIZE`.
    """
    if sheet is not None and sheet.dimension:
        corners = parse_dimension(sheet.dimension)
        if corners is not None:
            lo, hi = corners
            # corners may be written in either order ("C3:A1")
            return SheetSize(
                Bounds(min(lo.row, hi.row), max(lo.row, hi.row)),
                Bounds(min(lo.col, hi.col), max(lo.col, hi.col)),
            )

        logger.debug("Ignoring unparseable dimension %r", sheet.dimension)

    if not cells:
        return EMPTY_SIZE

    rows = sorted(x.row for x in cells)
    cols = sorted(x.col for x in cells)

    return SheetSize(Bounds(rows[0], rows[-1]), Bounds(cols[0], cols[-1]))


def create_empty_cells(rows: int, cols: int) -> list[list[str]]:
    if rows < 0 or cols < 0:
        msg = f"Grid size must not be negative: {rows}x{cols}"
        raise ValueError(msg)

    return [[""] * cols for _ in range(rows)]


def place_cells(
    cells: Iterable[Cell],
    size: SheetSize,
    shared_strings: Sequence[str] | None = None,
) -> list[list[str]]:
    """
    Lay `cells` out on an empty `size.rows` x `size.cols` grid.

    Shared-string cells are resolved against `shared_strings` when given.
    Cells without a position or outside of `size` are dropped.
    """
    grid = create_empty_cells(size.rows, size.cols)
    if size.is_empty:
        return grid

    for c in cells:
        if c.row <= 0 or c.col <= 0 or not size.contains(c.row, c.col):
            logger.debug("Dropping cell at (%d, %d): outside of %r", c.row, c.col, size)
            continue

        value = c.value
        if c.type == TYPE_SHARED and shared_strings is not None:
            try:
                idx = int(value, 10)
                if idx < 0:
                    raise IndexError(idx)
                value = shared_strings[idx]
            except (ValueError, IndexError):
                logger.warning(
                    "Cell at (%d, %d) refers to missing shared string %r",
                    c.row,
                    c.col,
                    value,
                )

        grid[c.row - size.row.min][c.col - size.col.min] = value

    return grid
