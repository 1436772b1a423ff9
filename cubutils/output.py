"""Write characters, strings and integers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO, Union


def _stream(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(ch: Union[str, int], stream: Optional[TextIO] = None) -> None:
    """Write one character, given as a string or a code, to stream."""
    if isinstance(ch, int) and not isinstance(ch, bool):
        ch = chr(ch)
    if not isinstance(ch, str) or len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    _stream(stream).write(ch)


def put_str(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write s to stream; None writes nothing."""
    if s is None:
        return
    _stream(stream).write(s)


def put_endl(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write s followed by a newline; None writes nothing."""
    if s is None:
        return
    out = _stream(stream)
    out.write(s)
    out.write("\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal form of the integer n."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected int, got {type(n).__name__}")
    _stream(stream).write(str(n))