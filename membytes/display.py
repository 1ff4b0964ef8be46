"""
Console rendering of views, buffers and pinned pointers.

Every line is a label followed by each byte's decimal value. With the
default configuration each value is followed by a single space, so a
non-empty line ends with a space before the newline:

    >>> display_data(from_buffer(bytearray([42, 3])))
    Memory: 42 3

See ``membytes.config`` to change the separator or drop the trailing one.
"""

from collections.abc import Iterable
from typing import Any, TextIO

from .config import config
from .view import ByteView, PinnedView, from_buffer

__all__ = ["format_bytes", "display_data", "display_bytes", "display_pointer"]


def format_bytes(label: str, values: Iterable[int]) -> str:
    """
    Render ``values`` as ``label`` followed by decimal byte values.

    Example:
        >>> format_bytes("Bytes: ", [9, 12])
        'Bytes: 9 12 '
        >>> format_bytes("Memory: ", [])
        'Memory: '
    """
    sep = config.separator
    body = sep.join(str(v) for v in values)
    if body and config.trailing_space:
        body += sep
    return label + body


def display_data(view: ByteView, stream: TextIO | None = None) -> None:
    """Print the bytes seen through ``view`` with the ``Memory:`` label."""
    print(format_bytes("Memory: ", view.as_span()), file=stream)


def display_bytes(buffer: Any, stream: TextIO | None = None) -> None:
    """Print the raw contents of a backing buffer with the ``Bytes:`` label."""
    print(format_bytes("Bytes: ", from_buffer(buffer)), file=stream)


def display_pointer(pinned: PinnedView, stream: TextIO | None = None) -> None:
    """Print the bytes read one at a time through a pinned pointer."""
    pointer = pinned.pointer()
    print(format_bytes("Pointer: ", (pointer[i] for i in range(len(pinned)))), file=stream)
