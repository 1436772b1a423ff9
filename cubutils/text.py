"""Line-level text helpers: whitespace skipping, space collapsing and
strict integer parsing."""

from __future__ import annotations

from typing import Optional

_INT_MAX = 2**31 - 1
_INT_MIN = -(2**31)

_BLANKS = " \t"
_LEADING_WHITESPACE = " \t\n\v\f\r"


def skip_whitespace(line: str) -> str:
    """Return line without its leading spaces and tabs."""
    return line.lstrip(_BLANKS)


def trim_and_collapse_spaces(line: Optional[str]) -> Optional[str]:
    """Collapse each run of spaces and tabs into one space and trim both ends.

    None is passed through unchanged.
    """
    if line is None:
        return None
    out: list[str] = []
    in_space = True
    for ch in line:
        if ch in _BLANKS:
            if not in_space:
                out.append(" ")
                in_space = True
        else:
            out.append(ch)
            in_space = False
    if out and out[-1] == " ":
        out.pop()
    return "".join(out)


def parse_int(text: str, start: int = 0) -> int:
    """Parse a 32-bit signed decimal integer from text, beginning at start.

    Leading whitespace and one optional sign are accepted. After the digits
    only spaces and tabs may follow, up to the end of the text or a newline.
    Raises ValueError on trailing garbage or on a value outside 32 bits.
    Text holding no digits parses as 0.
    """
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    i = start
    length = len(text)
    while i < length and text[i] in _LEADING_WHITESPACE:
        i += 1
    sign = 1
    if i < length and text[i] in "+-":
        if text[i] == "-":
            sign = -1
        i += 1
    result = 0
    while i < length and "0" <= text[i] <= "9":
        result = result * 10 + (ord(text[i]) - ord("0"))
        i += 1
        if (sign == 1 and result > _INT_MAX) or (
            sign == -1 and -result < _INT_MIN
        ):
            raise ValueError(f"integer out of range in {text!r}")
    while i < length and text[i] in _BLANKS:
        i += 1
    if i < length and text[i] != "\n":
        raise ValueError(f"unexpected character {text[i]!r} in {text!r}")
    return result * sign