"""
ByteView walkthrough.

Runs one linear demonstration of view semantics and prints the state after
each step:

1. An empty view (built from ``None``) reports itself empty.
2. A view over a buffer writes through to it, and the buffer's own writes
   show up in the view.
3. Rebinding the view leaves the buffer untouched.
4. A sub-range view aliases part of the buffer.
5. Dropping the buffer's only other reference, even across a garbage
   collection, leaves the data alive and writable through the view.
6. Pinning a view yields a raw pointer that writes into the same storage.

Run it with ``python -m membytes``.
"""

import gc
from typing import TextIO

from ._logging import scoped_logger
from .display import display_bytes, display_data, display_pointer
from .view import ByteView, from_buffer, from_range

log = scoped_logger("walkthrough")


def _show(view: ByteView, stream: TextIO | None) -> None:
    if view.is_empty:
        print("Memory is empty", file=stream)
    else:
        display_data(view, stream)


def run(stream: TextIO | None = None) -> None:
    """Print the walkthrough transcript to ``stream`` (stdout by default)."""
    print("Demonstration of ByteView usage", file=stream)

    memory = from_buffer(None)
    _show(memory, stream)

    two_bytes = bytearray([0, 3])
    memory = from_buffer(two_bytes)
    _show(memory, stream)

    memory.span[0] = 42
    display_data(memory, stream)
    display_bytes(two_bytes, stream)

    # Rebinding to an empty view does not touch the buffer
    memory = from_buffer(None)
    display_bytes(two_bytes, stream)
    display_data(memory, stream)
    if memory.span.is_empty:
        print("Memory is empty", file=stream)

    memory = from_buffer(two_bytes)
    display_data(memory, stream)
    two_bytes[0] = 5
    display_data(memory, stream)
    memory.span[0] = 9
    display_bytes(two_bytes, stream)

    memory = from_range(two_bytes, 1, 1)
    display_data(memory, stream)
    display_bytes(two_bytes, stream)
    memory.span[0] = 12
    display_data(memory, stream)
    display_bytes(two_bytes, stream)

    # The view is now the only reference to the buffer
    two_bytes = None
    _show(memory, stream)
    memory.span[0] = 142
    display_data(memory, stream)
    if two_bytes is None:
        print("The byte array is null", file=stream)
    else:
        display_bytes(two_bytes, stream)

    gc.collect()
    display_data(memory, stream)

    memory = from_buffer(bytearray([0, 2, 4, 6]))
    display_data(memory, stream)
    with memory.pin() as pinned:
        pointer = pinned.pointer()
        pointer[0] = 24
        display_pointer(pinned, stream)
    display_data(memory, stream)

    log.debug("Walkthrough finished")


def main() -> int:
    run()
    return 0
