"""String helpers: splitting, trimming, searching and comparing text."""

from __future__ import annotations

from typing import Optional

_TRIM_CHARS = " \n\t"
_WORD_SEPARATORS = " \t"


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping the empty pieces that runs of it leave."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in text.split(sep) if word]


def trim(text: str) -> str:
    """Remove spaces, tabs and newlines from both ends of ``text``."""
    return text.strip(_TRIM_CHARS)


def substring(text: str, start: int, length: int) -> str:
    """Return ``length`` characters of ``text`` beginning at ``start``.

    Raises ValueError when the requested span runs past the end of the text.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start + length > len(text):
        raise ValueError(
            f"span {start}+{length} runs past the end of a text of length {len(text)}"
        )
    return text[start:start + length]


def prefix_before(text: str, ch: str) -> Optional[str]:
    """Text before the first ``ch``, or None when ``ch`` does not occur."""
    if ch == "\0":
        return text
    index = text.find(ch)
    if index < 0:
        return None
    return substring(text, 0, index)


def find_within(haystack: str, needle: str, limit: int) -> Optional[int]:
    """Index of the first ``needle`` lying wholly in the first ``limit`` characters.

    An empty needle is found at index 0. Returns None when there is no match.
    """
    if not needle:
        return 0
    if len(haystack) < len(needle) or limit < len(needle):
        return None
    index = haystack.find(needle, 0, limit)
    return index if index >= 0 else None


def find(haystack: str, needle: str) -> Optional[int]:
    """Index of the first ``needle`` in ``haystack``; an empty needle is found at 0."""
    index = haystack.find(needle)
    return index if index >= 0 else None


def _code_at(text: str, index: int) -> int:
    return ord(text[index]) if index < len(text) else 0


def compare(s1: str, s2: str) -> int:
    """Difference of the character codes at the first place the texts differ.

    Zero when they are equal, negative when ``s1`` sorts first.
    """
    index = 0
    while index < len(s1) and index < len(s2) and s1[index] == s2[index]:
        index += 1
    return _code_at(s1, index) - _code_at(s2, index)


def compare_prefix(s1: str, s2: str, n: int) -> int:
    """Like :func:`compare`, looking at no more than ``n`` characters."""
    if n <= 0:
        return 0
    return compare(s1[:n], s2[:n])


def equal(s1: Optional[str], s2: Optional[str]) -> bool:
    """True when both texts are given and identical."""
    if s1 is None or s2 is None:
        return False
    return s1 == s2


def equal_prefix(s1: Optional[str], s2: Optional[str], n: int) -> bool:
    """True when both texts are given and agree in their first ``n`` characters."""
    if s1 is None or s2 is None:
        return False
    return compare_prefix(s1, s2, n) == 0


def reverse_digits(text: str) -> str:
    """Reverse ``text``, keeping a leading minus sign in front."""
    if text.startswith("-"):
        return "-" + text[:0:-1]
    return text[::-1]


def join(s1: Optional[str], s2: Optional[str]) -> Optional[str]:
    """Concatenate two texts, treating a missing one as empty.

    Returns None only when both are missing.
    """
    if s1 is None and s2 is None:
        return None
    return (s1 or "") + (s2 or "")


def contains_char(text: str, ch: str) -> bool:
    """True when ``ch`` occurs in ``text``."""
    return ch in text


def word_table(text: str) -> list[str]:
    """Words of ``text`` separated by runs of spaces and tabs."""
    words: list[str] = []
    current: list[str] = []
    for ch in text:
        if ch in _WORD_SEPARATORS:
            if current:
                words.append("".join(current))
                current = []
        else:
            current.append(ch)
    if current:
        words.append("".join(current))
    return words


def find_index(text: str, needle: str) -> Optional[int]:
    """Position of the first ``needle`` in ``text``, or None.

    Raises ValueError for an empty needle.
    """
    if not needle:
        raise ValueError("needle must not be empty")
    index = text.find(needle)
    return index if index >= 0 else None


def find_outside_quotes(text: str, needle: str) -> Optional[int]:
    """Position of the first ``needle`` not inside a double-quoted stretch, or None.

    Each double quote toggles the quoted state before the match at its
    position is tried. Raises ValueError for an empty needle.
    """
    if not needle:
        raise ValueError("needle must not be empty")
    quoted = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return None