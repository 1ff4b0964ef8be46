"""
Buffer-protocol and ctypes helpers for views.

Justification: Keeps every direct touch of exported buffers in one place.
Each helper opens a ``memoryview`` only for the duration of the call, so a
view never holds a buffer export of its own (a ``bytearray`` behind a view
can still be resized). Pinning is the exception: ``pin_buffer`` returns a
ctypes array that keeps an export alive until it is dropped.
"""

import ctypes
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from ..exceptions import ValidationError

# Formats memoryview.cast("B") accepts as a source (native, one byte wide)
_BYTE_FORMATS = frozenset({"B", "b", "c"})


@contextmanager
def _flat(obj: Any) -> Iterator[memoryview]:
    """Yield a one-byte-per-item view of ``obj``, released on exit."""
    with memoryview(obj) as mv, mv.cast("B") as flat:
        yield flat


def inspect_buffer(obj: Any) -> tuple[int, bool]:
    """Validate that ``obj`` exports a flat byte buffer.

    Returns
    -------
        Tuple of (size_in_bytes, read_only).

    Raises
    ------
        ValidationError: If ``obj`` has no buffer interface, or its buffer
            is multi-dimensional, non-contiguous or not in a native byte
            format (ctypes arrays export "<B" and are rejected).
    """
    try:
        mv = memoryview(obj)
    except TypeError:
        raise ValidationError(
            f"{type(obj).__name__} does not expose a byte buffer",
            code="INVALID_BUFFER",
            details={"type": type(obj).__name__},
        ) from None
    with mv:
        if mv.ndim != 1 or mv.format not in _BYTE_FORMATS or not mv.c_contiguous:
            raise ValidationError(
                "Backing buffer must be one-dimensional, contiguous, with native byte items",
                code="INVALID_BUFFER",
                details={
                    "type": type(obj).__name__,
                    "ndim": mv.ndim,
                    "itemsize": mv.itemsize,
                    "format": mv.format,
                },
            )
        return mv.nbytes, mv.readonly


def get_buffer_size(obj: Any) -> int:
    """Current size of ``obj`` in bytes."""
    with memoryview(obj) as mv:
        return mv.nbytes


def read_byte(obj: Any, index: int) -> int:
    with _flat(obj) as flat:
        return flat[index]


def write_byte(obj: Any, index: int, value: int) -> None:
    with _flat(obj) as flat:
        flat[index] = value


def read_bytes(obj: Any, start: int, stop: int) -> bytes:
    """Copy ``obj[start:stop]`` to a new ``bytes`` object."""
    with _flat(obj) as flat:
        return flat[start:stop].tobytes()


def write_bytes(obj: Any, start: int, data: bytes) -> None:
    """Overwrite ``len(data)`` bytes of ``obj`` starting at ``start``."""
    with _flat(obj) as flat:
        flat[start : start + len(data)] = data


def pin_buffer(obj: Any) -> Any:
    """Export ``obj`` as a ctypes ``c_ubyte`` array covering the whole buffer.

    While the returned array is alive the exporter cannot move or free its
    memory: a ``bytearray`` refuses to resize with ``BufferError``, and the
    array's reference keeps ``obj`` reachable.
    """
    size = get_buffer_size(obj)
    return (ctypes.c_ubyte * size).from_buffer(obj)


def get_ptr_address_offset(handle: Any, offset: int) -> int:
    """Get the address of a pinned handle plus a byte offset."""
    return ctypes.addressof(handle) + offset


def ptr_from_address(address: int) -> Any:
    """Build a ``POINTER(c_ubyte)`` for indexed reads and writes at ``address``."""
    return ctypes.cast(address, ctypes.POINTER(ctypes.c_ubyte))


def read_at(address: int, length: int) -> bytes:
    return ctypes.string_at(address, length)


def write_at(address: int, data: bytes) -> None:
    ctypes.memmove(address, data, len(data))
