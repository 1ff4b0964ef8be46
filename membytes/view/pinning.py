"""
Pinning - fix a view's backing buffer in place and expose its raw address.

``pin(view)`` exports the backing buffer as a ctypes array and returns a
PinnedView. While the PinnedView is active:

- The buffer cannot be moved or freed. A ``bytearray`` refuses to resize
  (``BufferError``), and the export keeps the object reachable.
- ``pinned.address`` is the address of the view's first byte
  (``offset``-adjusted). Reads and writes through it alias the view.

Use it as a context manager so the pin is released on every exit path:

    >>> view = from_buffer(bytearray([0, 2, 4, 6]))
    >>> with pin(view) as pinned:
    ...     pointer = pinned.pointer()
    ...     pointer[0] = 24
    >>> view.tolist()
    [24, 2, 4, 6]

Caller Contract:
- The PinnedView's own accessors raise StateError once released.
- An integer address or pointer obtained *inside* the scope is not
  tracked. Dereferencing it after the scope ends is undefined behaviour:
  the buffer may have been resized, moved or freed. Do not do this.
- Pinning fixes the address only. It provides no locking between threads.
"""

from typing import Any

from .._logging import scoped_logger
from ..exceptions import RangeError, StateError, UnsupportedError
from ._bindings import (
    get_ptr_address_offset,
    pin_buffer,
    ptr_from_address,
    read_at,
    write_at,
)
from .byte_view import Bound, ByteView, Empty

__all__ = ["PinnedView", "pin", "raw_address"]

log = scoped_logger("pin")


class PinnedView:
    """
    Scoped pin over a ByteView's backing buffer.

    Returned by ``pin(view)``; do not construct directly. Usable as a
    context manager: leaving the ``with`` block calls ``unpin()``.

    Attributes
    ----------
    source_view : ByteView
        The view this pin was derived from.
    length : int
        Number of bytes reachable from ``address``.
    """

    __slots__ = ("_source", "_handle", "_address", "_length")

    def __init__(self, source: ByteView, handle: Any, address: int, length: int) -> None:
        self._source = source
        self._handle = handle  # ctypes array holding the buffer export
        self._address = address
        self._length = length

    @property
    def source_view(self) -> ByteView:
        return self._source

    @property
    def length(self) -> int:
        return self._length

    def __len__(self) -> int:
        return self._length

    @property
    def is_active(self) -> bool:
        """True until ``unpin()`` runs."""
        return self._handle is not None

    def _require_active(self) -> None:
        if self._handle is None:
            raise StateError(
                "PinnedView was released; its address is no longer valid",
                code="PIN_RELEASED",
            )

    @property
    def address(self) -> int:
        """
        Address of the first logical byte of the source view.

        Raises
        ------
            StateError: If the pin was released (code="PIN_RELEASED").
        """
        self._require_active()
        return self._address

    @property
    def base_address(self) -> int:
        """Alias of ``address``."""
        return self.address

    def pointer(self) -> Any:
        """
        Return a ctypes ``POINTER(c_ubyte)`` at ``address``.

        ``pointer[i]`` reads and ``pointer[i] = v`` writes byte ``i`` of the
        view. The pointer is not bounds-checked and is not invalidated by
        ``unpin()``; keep ``0 <= i < len(pinned)`` and stop using it when
        the scope ends.
        """
        return ptr_from_address(self.address)

    def read(self) -> bytes:
        """Copy the pinned bytes through the raw address."""
        return read_at(self.address, self._length)

    def write(self, data: bytes, at: int = 0) -> None:
        """
        Copy ``data`` to ``address + at`` through the raw address.

        Raises
        ------
            RangeError: If the write would run past the end of the view.
            StateError: If the pin was released.
        """
        data = bytes(data)
        if at < 0 or at + len(data) > self._length:
            raise RangeError(
                f"Write of {len(data)} bytes at {at} exceeds pinned length {self._length}",
                details={"offset": at, "length": len(data), "size": self._length},
            )
        write_at(self.address + at, data)

    def unpin(self) -> None:
        """
        Release the pin. Safe to call multiple times (idempotent).

        Drops the buffer export; a ``bytearray`` backing becomes resizable
        again once no other pins or exports remain.
        """
        if self._handle is None:
            return
        self._handle = None
        log.debug("Unpinned buffer", extra={"address": self._address, "length": self._length})

    def __enter__(self) -> "PinnedView":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.unpin()

    def __repr__(self) -> str:
        if self._handle is None:
            return f"PinnedView(<released>, len={self._length})"
        return f"PinnedView(address=0x{self._address:x}, len={self._length})"


def pin(view: ByteView) -> PinnedView:
    """
    Pin the backing buffer of ``view`` and return a PinnedView.

    Raises
    ------
        UnsupportedError: If ``view`` is empty (code="PIN_EMPTY_VIEW") or
            its backing buffer is read-only (code="PIN_READ_ONLY").
        StateError: If the backing buffer shrank below the view.

    Example:
        >>> with pin(from_buffer(bytearray([1, 2]))) as pinned:
        ...     pinned.read()
        b'\\x01\\x02'
    """
    match view.state:
        case Empty() | Bound(length=0):
            raise UnsupportedError(
                "Cannot pin an empty view: there is no storage to fix in place",
                code="PIN_EMPTY_VIEW",
            )
        case Bound(read_only=True, backing=backing):
            raise UnsupportedError(
                f"Cannot pin a read-only {type(backing).__name__} buffer",
                code="PIN_READ_ONLY",
                details={"type": type(backing).__name__},
            )
        case Bound(backing=backing, offset=offset, length=length):
            view._bound()
            handle = pin_buffer(backing)
            address = get_ptr_address_offset(handle, offset)
            log.debug("Pinned buffer", extra={"address": address, "length": length})
            return PinnedView(view, handle, address, length)


def raw_address(pinned: PinnedView) -> int:
    """Return the address of the first logical byte of a pinned view."""
    return pinned.address
