# cubutils

Small helpers for characters, byte buffers, strings, linked lists, stream
output, integer parsing and line-by-line reading. Their edge cases follow
classic C-library rules, but errors are raised as exceptions and results
are ordinary Python values.

## Modules

- `cubutils.charclass`: ASCII tests and case conversion: `isalpha`, `isdigit`,
  `isalnum`, `isascii`, `isprint`, `toupper`, `tolower`. Each function takes a
  one-character string or an integer code. The case converters return the same
  kind they were given.
- `cubutils.memory`: operations on `bytearray` buffers: `memset`, `bzero`,
  `calloc(count, size)` (a zero-filled `bytearray`), `memchr` (the index of a
  byte, or `None`), `memcmp` (the difference of the first differing bytes),
  `memcpy`, and `memmove(buffer, dest, src, n)`, which moves bytes between
  offsets of one buffer even when the regions overlap.
- `cubutils.strings`: `strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`,
  `strlcpy`, `strlcat`, `strdup`, `substr`, `strjoin`, `strtrim`,
  `strtrim_newline`, `split`, `itoa`, `strmapi`, `striteri`. Searches return
  an index or `None`; searching for the terminator (code 0) gives `len(s)`.
  `strlcpy(src, size)` and `strlcat(dest, src, size)` return a
  `(text, length)` pair.
- `cubutils.linkedlist`: `Node` and `LinkedList`, a singly linked list with
  `push_front`, `push_back`, `last`, `len()`, iteration, `clear(delete)`,
  `for_each(func)` and `map(func, delete)`. If `func` raises during `map`, the
  results made so far are passed to `delete` and the error propagates.
- `cubutils.output`: `put_char`, `put_str`, `put_endl` and `put_nbr`, writing to
  a given text stream or to standard output.
- `cubutils.text`: `skip_whitespace`, `trim_and_collapse_spaces`, and
  `parse_int(text, start=0)`, which parses a 32-bit signed integer and rejects
  trailing characters other than spaces, tabs and a final newline.
- `cubutils.lines`: `LineReader` and `read_lines`, which read a text or binary
  stream through a fixed-size buffer (5 by default) and yield lines with their
  newline kept.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Examples

```python
import io

from cubutils.strings import split, itoa, strlcpy
from cubutils.text import parse_int, trim_and_collapse_spaces
from cubutils.lines import read_lines
from cubutils.linkedlist import LinkedList
from cubutils.memory import memmove

split("  NO ./north.xpm ", " ")        # ['NO', './north.xpm']
itoa(-2147483648)                      # '-2147483648'
strlcpy("hello", 3)                    # ('he', 5)

trim_and_collapse_spaces("  F   220,\t100 ,0  ")   # 'F 220, 100 ,0'
parse_int(" 42 ")                      # 42
parse_int("42x")                       # raises ValueError

list(read_lines(io.StringIO("111\n101\n111"), 5))
# ['111\n', '101\n', '111']

items = LinkedList([1, 2, 3])
doubled = items.map(lambda x: x * 2, lambda x: None)
list(doubled)                          # [2, 4, 6]

memmove(bytearray(b"abcdef"), 2, 0, 3) # bytearray(b'ababcf')
```

## Errors

Invalid arguments raise exceptions rather than returning status codes:
`ValueError` for negative lengths, out-of-range buffer lengths, malformed
characters and unparsable or out-of-range integers; `TypeError` for arguments
of the wrong kind; `OverflowError` when `calloc` is asked for more than a
64-bit size can hold.

## What it does not include

This is a library only. It has no command-line tool, and it does not read
configuration or map files, render anything or open windows; it supplies the
text and data helpers such a program would build on.