"""String helpers with bounded copy, search, compare, trim and split.

Characters may be given as one-character strings or integer codes.
Where a search finds nothing the result is None. The terminator
character (code 0) is matched at the end of the string, at index len(s).
"""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, Union

Char = Union[str, int]

_TERMINATOR = "\0"


def _as_char(ch: Char) -> str:
    """Return ch as a one-character string; integer codes wrap to a byte."""
    if isinstance(ch, str):
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        return ch
    if isinstance(ch, int):
        return chr(ch % 256)
    raise TypeError(f"expected str or int, got {type(ch).__name__}")


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strlen(s: str) -> int:
    """Number of characters in s."""
    return len(s)


def strchr(s: str, ch: Char) -> Optional[int]:
    """Index of the first ch in s, len(s) for the terminator, else None."""
    target = _as_char(ch)
    if target == _TERMINATOR:
        return len(s)
    index = s.find(target)
    return None if index < 0 else index


def strrchr(s: str, ch: Char) -> Optional[int]:
    """Index of the last ch in s, len(s) for the terminator, else None."""
    target = _as_char(ch)
    if target == _TERMINATOR:
        return len(s)
    index = s.rfind(target)
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most n characters; the difference of the first mismatch.

    A string that ends early compares as if followed by code 0.
    """
    _check_non_negative("n", n)
    a = first[:n]
    b = second[:n]
    width = max(len(a), len(b))
    for x, y in zip(a.ljust(width, _TERMINATOR), b.ljust(width, _TERMINATOR)):
        if x != y:
            return ord(x) - ord(y)
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of needle lying wholly within the first length characters.

    An empty needle is found at index 0.
    """
    _check_non_negative("length", length)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters, terminator included.

    Returns the copied text (at most size - 1 characters) and len(src).
    """
    _check_non_negative("size", size)
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dest within a buffer of size characters.

    Returns the resulting text and the length the full result would have
    had. When size does not exceed len(dest), dest is left unchanged and
    len(src) + size is returned.
    """
    _check_non_negative("size", size)
    dest_len = len(dest)
    if size == 0 or size <= dest_len:
        return dest, len(src) + size
    room = size - dest_len - 1
    return dest + src[:room], dest_len + len(src)


def strdup(s: str) -> str:
    """A copy of s."""
    return "".join(s)


def substr(s: Optional[str], start: int, length: int) -> Optional[str]:
    """At most length characters of s from start; "" if start is past the end."""
    if s is None:
        return None
    _check_non_negative("start", start)
    _check_non_negative("length", length)
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(first: Optional[str], second: Optional[str]) -> Optional[str]:
    """Concatenate two strings; a missing one yields the other unchanged."""
    if first is None or second is None:
        return second if first is None else first
    return first + second


def strtrim(s: Optional[str], charset: Optional[str]) -> Optional[str]:
    """Strip characters found in charset from both ends of s."""
    if s is None:
        return None
    if charset is None:
        return s
    return s.strip(charset)


def strtrim_newline(s: Optional[str]) -> Optional[str]:
    """Remove a single trailing newline from s, if there is one."""
    if s is None:
        return None
    return s[:-1] if s.endswith("\n") else s


def split(s: Optional[str], sep: Char) -> Optional[list[str]]:
    """Words of s separated by runs of sep; empty words are dropped."""
    if s is None:
        return None
    delimiter = _as_char(sep)
    return [word for word in s.split(delimiter) if word]


def itoa(n: int) -> str:
    """Decimal text of the integer n."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected int, got {type(n).__name__}")
    return str(n)


def strmapi(
    s: Optional[str], func: Optional[Callable[[int, str], str]]
) -> Optional[str]:
    """A new string built from func(index, char) for each character of s."""
    if s is None or func is None:
        return None
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(
    chars: Optional[MutableSequence[str]],
    func: Optional[Callable[[int, str], Optional[str]]],
) -> None:
    """Call func(index, char) for each item of chars, in place.

    A non-None return value replaces the character at that index.
    """
    if chars is None or func is None:
        return
    for index, ch in enumerate(list(chars)):
        replacement = func(index, ch)
        if replacement is not None:
            chars[index] = replacement