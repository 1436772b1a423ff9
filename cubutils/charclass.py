"""ASCII character classification and case conversion.

Each function takes either a one-character string or an integer
character code. The case converters return the same kind they are given.
"""

from __future__ import annotations

from typing import Union

Char = Union[str, int]


def _code(c: Char) -> int:
    """Return the integer code of a one-character string or an int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected str or int, got {type(c).__name__}")


def isalpha(c: Char) -> bool:
    """True for the ASCII letters A-Z and a-z."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def isdigit(c: Char) -> bool:
    """True for the ASCII digits 0-9."""
    code = _code(c)
    return ord("0") <= code <= ord("9")


def isalnum(c: Char) -> bool:
    """True for ASCII letters and digits."""
    return isdigit(c) or isalpha(c)


def isascii(c: Char) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def isprint(c: Char) -> bool:
    """True for printable ASCII, space (32) through tilde (126)."""
    return 32 <= _code(c) <= 126


def _convert(c: Char, low: str, high: str, shift: int) -> Char:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += shift
    return chr(code) if isinstance(c, str) else code


def toupper(c: Char) -> Char:
    """Map a-z to A-Z; anything else is returned unchanged."""
    return _convert(c, "a", "z", -32)


def tolower(c: Char) -> Char:
    """Map A-Z to a-z; anything else is returned unchanged."""
    return _convert(c, "A", "Z", 32)