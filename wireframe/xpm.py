"""Reading XPM images into grids of 32-bit pixels."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Union

from wireframe.colornames import lookup_color
from wireframe.numbers import parse_int
from wireframe.textops import find_index, find_outside_quotes, word_table

TRANSPARENT = 0xFF000000
_DIRECT_LOOKUP_MAX_CPP = 2


class XpmError(ValueError):
    """Text that does not describe a usable XPM image."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded image: ``height`` rows of ``width`` pixels, row by row."""

    width: int
    height: int
    pixels: tuple[int, ...]

    def pixel(self, x: int, y: int) -> int:
        """The 32-bit value of the pixel at ``x``, ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) lies outside the image")
        return self.pixels[x + y * self.width]


def _blank(text: str, start: int, count: int) -> str:
    end = min(len(text), start + count)
    return text[:start] + " " * (end - start) + text[end:]


def strip_comments(text: str) -> str:
    """Replace C-style comments outside double quotes with spaces.

    Block comments are removed first, then line comments together with
    the newline that ends them. The length of the text is kept.
    """
    while (begin := find_outside_quotes(text, "/*")) is not None:
        end = find_index(text[begin + 2:], "*/")
        text = _blank(text, begin, (end if end is not None else -1) + 4)
    while (begin := find_outside_quotes(text, "//")) is not None:
        end = find_index(text[begin + 2:], "\n")
        text = _blank(text, begin, (end if end is not None else -1) + 3)
    return text


def _quoted_strings(text: str) -> Iterator[str]:
    pos = 0
    while True:
        opening = text.find('"', pos)
        if opening < 0:
            return
        closing = text.find('"', opening + 1)
        if closing < 0:
            return
        yield text[opening + 1:closing]
        pos = closing + 1


def _color_value(words: list[str]) -> int:
    try:
        index = words.index("c")
    except ValueError:
        raise XpmError("colour definition has no 'c' key") from None
    if index + 1 >= len(words):
        raise XpmError("colour definition has no value after 'c'")
    suffix: Optional[str] = words[index + 2] if index + 2 < len(words) else None
    return lookup_color(words[index + 1], suffix)


def parse_xpm_lines(lines: Iterable[str]) -> XpmImage:
    """Decode an image from its XPM strings: header, colours, then pixel rows.

    A colour of ``None`` gives the transparent value. Raises XpmError when
    the header, a colour definition or a pixel row is missing or malformed.
    """
    source = iter(lines)

    def next_line(what: str) -> str:
        try:
            return next(source)
        except StopIteration:
            raise XpmError(f"missing {what}") from None

    header = word_table(next_line("header"))
    if len(header) < 4:
        raise XpmError("header needs width, height, colour count and characters per pixel")
    width, height, ncolors, cpp = (parse_int(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError("header values must be positive")

    direct = cpp <= _DIRECT_LOOKUP_MAX_CPP
    table: dict[str, int] = {}
    for _ in range(ncolors):
        line = next_line("colour definition")
        if len(line) < cpp:
            raise XpmError(f"colour definition {line!r} is shorter than its key")
        key = line[:cpp]
        value = _color_value(word_table(line[cpp:]))
        if direct or key not in table:
            table[key] = value

    pixels: list[int] = []
    for _ in range(height):
        line = next_line("pixel row")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row {line!r} is too short")
        for start in range(0, width * cpp, cpp):
            color = table.get(line[start:start + cpp], 0)
            pixels.append(TRANSPARENT if color == -1 else color & 0xFFFFFFFF)
    return XpmImage(width=width, height=height, pixels=tuple(pixels))


def parse_xpm_text(text: str) -> XpmImage:
    """Decode an image from the text of an XPM file."""
    return parse_xpm_lines(_quoted_strings(strip_comments(text)))


def parse_xpm_file(path: Union[str, os.PathLike]) -> XpmImage:
    """Decode the XPM file at ``path``; unreadable files raise XpmError."""
    try:
        with open(path, encoding="latin-1", newline="") as stream:
            text = stream.read()
    except OSError as exc:
        raise XpmError(f"cannot read {os.fspath(path)!r}: {exc}") from exc
    return parse_xpm_text(text)