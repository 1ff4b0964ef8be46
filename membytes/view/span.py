"""
ByteSpan - write-through access to the bytes of a ByteView.

A span is derived from a view and shares its backing buffer. It never
copies: every read and write goes straight to the buffer at
``view.offset + i``.

    >>> buf = bytearray([0, 3])
    >>> span = from_buffer(buf).as_span()
    >>> span[0] = 42
    >>> list(buf), list(span)
    ([42, 3], [42, 3])

An empty span (from an empty view) has length 0 and rejects every index
with ViewIndexError.
"""

from collections.abc import Iterable, Iterator, Sequence
from typing import overload

from ..exceptions import RangeError
from .byte_view import ByteView, _require_byte


class ByteSpan(Sequence[int]):
    """
    Lazy, zero-copy, restartable view of a ByteView's bytes.

    Each call to ``iter(span)`` starts from the first byte again, reading
    the current contents of the backing buffer as it goes.
    """

    __slots__ = ("_view",)

    def __init__(self, view: ByteView) -> None:
        self._view = view

    @property
    def view(self) -> ByteView:
        """The view this span was derived from."""
        return self._view

    @property
    def is_empty(self) -> bool:
        return self._view.is_empty

    def __len__(self) -> int:
        return len(self._view)

    @overload
    def __getitem__(self, idx: int) -> int: ...

    @overload
    def __getitem__(self, idx: slice) -> "ByteSpan": ...

    def __getitem__(self, idx: int | slice) -> "int | ByteSpan":
        if isinstance(idx, slice):
            return ByteSpan(self._view[idx])
        return self._view.element_at(idx)

    def __setitem__(self, idx: int | slice, value: "int | Iterable[int]") -> None:
        """
        Write one byte, or a same-length run of bytes for a slice.

        Raises
        ------
            ViewIndexError: If ``idx`` is outside ``[0, len(span))``.
            RangeError: If a slice assignment changes the length.
            ValidationError: If a value is not an int in ``range(0, 256)``.
            UnsupportedError: If the backing buffer is read-only.
        """
        if isinstance(idx, slice):
            target = self._view[idx]
            data = bytes(_require_byte(v) for v in value)  # type: ignore[union-attr]
            if len(data) != len(target):
                raise RangeError(
                    f"Slice assignment of {len(data)} bytes into a {len(target)}-byte range",
                    code="SPAN_LENGTH_MISMATCH",
                    details={"expected": len(target), "got": len(data)},
                )
            target._write_bytes(0, data)
            return
        self._view._write(idx, value)

    def __iter__(self) -> Iterator[int]:
        view = self._view
        for i in range(len(view)):
            yield view.element_at(i)

    def fill(self, value: int) -> None:
        """Set every byte of the span to ``value``."""
        value = _require_byte(value)
        self._view._write_bytes(0, bytes([value]) * len(self._view))

    def tolist(self) -> list[int]:
        """Copy the span's bytes into a list of ints."""
        return self._view.tolist()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ByteSpan):
            return self._view.tobytes() == other._view.tobytes()
        if isinstance(other, list):
            return self.tolist() == other
        if isinstance(other, (bytes, bytearray)):
            return self._view.tobytes() == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ByteSpan({self.tolist()}, len={len(self)})"
