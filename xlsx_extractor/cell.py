from __future__ import annotations

__all__ = [
    "EMPTY_SIZE",
    "UNKNOWN_POSITION",
    "Bounds",
    "Cell",
    "Position",
    "Range",
    "SheetSize",
]

from typing import TYPE_CHECKING

from .core import as_dataclass

if TYPE_CHECKING:
    from typing import Iterator


@as_dataclass(readonly=True, hashable=True)
class Position:
    """Cell coordinates, both 1-based. (0, 0) stands for an unparseable reference"""

    row: int
    col: int

    @property
    def is_known(self) -> bool:
        return self.row > 0 and self.col > 0


UNKNOWN_POSITION = Position(0, 0)


@as_dataclass(readonly=True)
class Cell:  # noqa: D101
    row: int
    "1-based row index"

    col: int
    "1-based column index"

    type: str
    """
    ### `t` ATTRIBUTE OF THE CELL

    Empty string when the attribute is absent. See `constants.TYPE_*`.
    """

    value: str
    """
    ### RAW CELL DATA

    Shared-string indices are not resolved here.
    """


@as_dataclass(readonly=True)
class Bounds:
    min: int
    max: int


@as_dataclass(readonly=True)
class SheetSize:
    """Closed bounding box over the populated cells of one sheet"""

    row: Bounds
    col: Bounds

    @property
    def is_empty(self) -> bool:
        return self.row.max == 0 or self.col.max == 0

    @property
    def rows(self) -> int:
        return 0 if self.is_empty else self.row.max - self.row.min + 1

    @property
    def cols(self) -> int:
        return 0 if self.is_empty else self.col.max - self.col.min + 1

    def contains(self, row: int, col: int) -> bool:
        return self.row.min <= row <= self.row.max and self.col.min <= col <= self.col.max


EMPTY_SIZE = SheetSize(Bounds(0, 0), Bounds(0, 0))


@as_dataclass(readonly=True)
class Range:
    """1-based inclusive range of sheets. `Range(0, 0)` selects every sheet"""

    begin: int
    end: int

    @staticmethod
    def parse(text: str) -> Range:
        """Parse `"N"` or `"N-M"`"""
        head, sep, tail = text.strip().partition("-")
        try:
            begin = int(head)
            end = int(tail) if sep else begin
        except ValueError:
            msg = f"Invalid sheet range: {text!r} (expected N or N-M)"
            raise ValueError(msg) from None

        if begin < 0 or end < 0:
            msg = f"Invalid sheet range: {text!r} (numbers must not be negative)"
            raise ValueError(msg)

        return Range(begin, end)

    @property
    def is_all(self) -> bool:
        return self.begin == 0 and self.end == 0

    def indices(self, count: int) -> Iterator[int]:
        """0-based indices of the selected sheets among `count` sheets"""
        if self.is_all:
            yield from range(count)
            return

        yield from range(max(self.begin, 1) - 1, min(self.end, count))
