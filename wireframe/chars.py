"""ASCII character classification and case conversion.

Every function accepts either a one-character string or an integer code.
Case conversion returns a value of the same kind as it was given.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def is_upper(c: CharLike) -> bool:
    """True for ``A``-``Z``."""
    return ord("A") <= _code(c) <= ord("Z")


def is_lower(c: CharLike) -> bool:
    """True for ``a``-``z``."""
    return ord("a") <= _code(c) <= ord("z")


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters."""
    return is_upper(c) or is_lower(c)


def is_digit(c: CharLike) -> bool:
    """True for ``0``-``9``."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


def is_blank(c: CharLike) -> bool:
    """True for space and tab."""
    return _code(c) in (ord(" "), ord("\t"))


def is_space(c: CharLike) -> bool:
    """True for space, tab, newline, vertical tab, form feed and carriage return."""
    return _code(c) in (ord(" "), ord("\t"), ord("\n"), ord("\v"), ord("\f"), ord("\r"))


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII capital; anything else is returned unchanged."""
    code = _code(c)
    return _same_kind(c, code + 32) if is_upper(code) else c


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII small letter; anything else is returned unchanged."""
    code = _code(c)
    return _same_kind(c, code - 32) if is_lower(code) else c