"""Integer parsing and formatting with fixed-width C-style semantics."""

from __future__ import annotations

import sys
from typing import TextIO

_SPACES = frozenset("\t\n\r\v\f ")
_U64 = 1 << 64
_LONG_MAX = 9223372036854775807


def _to_int32(value: int) -> int:
    """Wrap an integer into the signed 32-bit range."""
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _skip_spaces(text: str, pos: int = 0) -> int:
    while pos < len(text) and text[pos] in _SPACES:
        pos += 1
    return pos


def _read_sign(text: str, pos: int) -> tuple[int, int]:
    if pos < len(text) and text[pos] in "+-":
        return (-1 if text[pos] == "-" else 1), pos + 1
    return 1, pos


def _digit_value(ch: str) -> int:
    """Value of a digit in bases up to 36, or -1 if it is not one."""
    if "0" <= ch <= "9":
        return ord(ch) - ord("0")
    if "a" <= ch <= "z":
        return ord(ch) - ord("a") + 10
    if "A" <= ch <= "Z":
        return ord(ch) - ord("A") + 10
    return -1


def parse_int(text: str) -> int:
    """Parse a leading decimal integer as a 32-bit signed value.

    Leading whitespace and one sign are accepted; parsing stops at the
    first non-digit. Text with no digits gives 0. A value reaching the
    64-bit signed limit gives -1 when positive and 0 when negative.
    """
    pos = _skip_spaces(text)
    sign, pos = _read_sign(text, pos)
    result = 0
    for ch in text[pos:]:
        if not ("0" <= ch <= "9"):
            break
        result = (result * 10 + ord(ch) - ord("0")) % _U64
        if sign == 1 and result >= _LONG_MAX:
            return -1
        if sign == -1 and result > _LONG_MAX:
            return 0
    return _to_int32(result * sign)


def parse_prefixed_int(text: str, base: int) -> int:
    """Parse an integer in ``base`` that follows a two-character prefix.

    The first two characters (such as ``0x``) are skipped unread, then
    whitespace and an optional sign. Digits may be letters for bases
    above ten, in either case. The result wraps to 32 bits.
    """
    body = text[2:]
    pos = _skip_spaces(body)
    sign, pos = _read_sign(body, pos)
    number = 0
    for ch in body[pos:]:
        digit = _digit_value(ch)
        if not 0 <= digit < base:
            break
        number = _to_int32(number * base + digit)
    return _to_int32(sign * number)


def abs_int(n: int) -> int:
    """Absolute value of ``n``."""
    return n if n > 0 else -n


def format_int(n: int) -> str:
    """Decimal text of ``n``, with a leading minus when negative."""
    return str(n)


def write_int(n: int, stream: TextIO | None = None) -> None:
    """Write the decimal text of ``n`` to ``stream`` (standard output by default)."""
    (stream if stream is not None else sys.stdout).write(format_int(n))