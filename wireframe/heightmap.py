"""Reading height maps: rows of space-separated heights with optional colours."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable, Iterator, TextIO, Union

from wireframe.numbers import parse_int, parse_prefixed_int
from wireframe.textops import split_words

_BUFFER_SIZE = 1000
_MIN_Z = -500
_MAX_Z = 500

_HIGH_COLORS = (
    (80, 0xDC7B1A),
    (60, 0xE28101),
    (55, 0xFFCD00),
    (40, 0xFFEF04),
    (25, 0xE3F300),
    (15, 0xB4D003),
    (5, 0x5F8702),
)
_GROUND_COLOR = 0x005409
_LOW_COLORS = (
    (-15, 0x048164),
    (-25, 0x00B09F),
    (-40, 0x008DB0),
    (-55, 0x2B65DB),
    (-60, 0x0048D7),
    (-80, 0x3542FC),
)
_DEEPEST_COLOR = 0x3C41DB


class MapError(ValueError):
    """A map file that cannot be turned into a grid."""

    def __init__(self, message: str, code: int = 1) -> None:
        super().__init__(message)
        self.code = code


@dataclass(frozen=True)
class Point:
    """One grid node: column, row, height and colour."""

    x: int
    y: int
    z: int
    color: int


@dataclass
class HeightMap:
    """A rectangular grid of points, ``height`` rows of ``width`` points."""

    width: int
    height: int
    rows: list[list[Point]]

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "HeightMap":
        """Build a map from its text lines.

        Raises MapError when rows differ in length or the map is smaller
        than two by two.
        """
        lines = list(lines)
        width = 0
        for index, line in enumerate(lines):
            columns = count_columns(line)
            if index and columns != width:
                raise MapError(
                    "Every line must contains the same amount of elements", code=3
                )
            width = columns
        height = len(lines)
        if width < 2 or height < 2:
            raise MapError("The map is too small", code=4)
        rows = [_parse_row(line, row, width) for row, line in enumerate(lines)]
        return cls(width=width, height=height, rows=rows)

    @classmethod
    def from_file(cls, path: Union[str, os.PathLike]) -> "HeightMap":
        """Read a map from the file at ``path``."""
        with open(path, encoding="latin-1", newline="") as stream:
            return cls.from_lines(iter_lines(stream))

    def point(self, row: int, col: int) -> Point:
        """The point at ``row`` and ``col``."""
        return self.rows[row][col]


def _parse_row(line: str, row: int, width: int) -> list[Point]:
    words = split_words(line, " ")
    return [
        parse_cell(words[col], col, row) if col < len(words) else Point(col, row, 0, 0)
        for col in range(width)
    ]


def iter_lines(stream: TextIO) -> Iterator[str]:
    """Lines of ``stream`` without their newlines.

    Empty lines are kept; a final newline does not start an extra line.
    """
    pending = ""
    while True:
        chunk = stream.read(_BUFFER_SIZE)
        if not chunk:
            break
        pending += chunk
        *complete, pending = pending.split("\n")
        yield from complete
    if pending:
        yield pending


def count_columns(line: str) -> int:
    """Number of space-separated cells in ``line``, ignoring leading spaces."""
    stripped = line.lstrip(" ")
    count = 1
    for current, following in zip(stripped, stripped[1:]):
        if current == " " and following != " ":
            count += 1
    return count


def color_for_height(z: int) -> int:
    """Colour used for a cell of height ``z`` that names no colour itself."""
    if z >= -5:
        for threshold, color in _HIGH_COLORS:
            if z >= threshold:
                return color
        return _GROUND_COLOR
    for floor, color in _LOW_COLORS:
        if z >= floor:
            return color
    return _DEEPEST_COLOR


def parse_cell(text: str, col: int, row: int) -> Point:
    """Parse one cell such as ``12`` or ``12,0xFF0000`` into a point.

    Heights are clamped to -500..500. Raises MapError when a comma is
    not followed by a colour.
    """
    z = max(_MIN_Z, min(_MAX_Z, parse_int(text)))
    if "," in text:
        parts = split_words(text, ",")
        if len(parts) < 2:
            raise MapError(f"missing colour in cell {text!r}")
        color = parse_prefixed_int(parts[1], 16)
    else:
        color = color_for_height(z)
    return Point(col, row, z, color)