"""Character, byte-buffer, string, linked-list, output, integer-parsing and
line-reading helpers."""

__version__ = "0.1.0"
__all__ = ["charclass", "memory", "strings", "linkedlist", "output", "text", "lines"]