"""
Cell reference arithmetic.

Parsing is lenient on purpose: letters outside A-Z count as a zero digit, and
a reference without a letters/digits split maps to `UNKNOWN_POSITION`. None of
these functions raise on malformed input; callers test for the sentinel.
"""
from __future__ import annotations

__all__ = [
    "column_name",
    "get_position",
    "num_of_column",
    "parse_dimension",
]

import re

from .cell import UNKNOWN_POSITION, Position
from .constants import ALPHABET_BASE, ALPHABET_SIZE

re_ref = re.compile(r"([0-9]+)")


def num_of_column(text: str) -> int:
    """
    Convert column letters to a 1-based column number: "A" -> 1, "AA" -> 27.

    Returns 0 for an empty string.
    """
    num = 0
    for x in text.strip():
        digit = ord(x) - ALPHABET_BASE
        num = num * ALPHABET_SIZE + (digit if 0 < digit <= ALPHABET_SIZE else 0)
    return num


def column_name(num: int) -> str:
    """Inverse of `num_of_column` for positive numbers, empty string otherwise"""
    letters = []
    while num > 0:
        num, rem = divmod(num - 1, ALPHABET_SIZE)
        letters.append(chr(ALPHABET_BASE + 1 + rem))
    return "".join(reversed(letters))


def get_position(text: str) -> Position:
    """Split a reference such as "B12" into its row and column"""
    units = re_ref.split(text)  # 'A1' -> ['A', '1', '']
    if len(units) < 2:
        return UNKNOWN_POSITION

    return Position(int(units[1], 10), num_of_column(units[0]))


def parse_dimension(ref: str) -> tuple[Position, Position] | None:
    """
    Parse a `<dimension ref="A1:C45">` declaration into its two corners.

    Single-cell sheets declare just one reference ("A1"); it stands for both corners.
    """
    parts = ref.split(":")
    if len(parts) == 1 and parts[0]:
        corners = get_position(parts[0]), get_position(parts[0])
    elif len(parts) == 2:
        corners = get_position(parts[0]), get_position(parts[1])
    else:
        return None
    return corners if all(x.is_known for x in corners) else None
