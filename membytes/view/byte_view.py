"""
ByteView - a non-owning handle over a contiguous byte region.

A ByteView is either *empty* (no backing buffer) or *bound* to a backing
buffer with an ``offset`` and ``length``. The two states are an explicit
sum type, ``Empty | Bound``, and every operation matches on it:

    >>> from membytes import from_buffer, from_range, make_empty
    >>> make_empty().is_empty
    True
    >>> buf = bytearray([5, 3])
    >>> view = from_range(buf, 1, 1)
    >>> view.tolist()
    [3]

Aliasing Contract:
- A view never copies. Reads go to the backing buffer at ``offset + i``.
- Writes go through ``view.as_span()`` and land in the backing buffer, so
  they are visible through every overlapping view and through the buffer
  itself, and the other way round.
- Binding a name to a different view never touches the old backing buffer
  or any other view over it.

Lifetime:
- A bound view holds a strong reference to its backing buffer. Dropping
  every other reference does not free or zero the data; the view keeps it
  reachable.
- A view does not hold a buffer export. A ``bytearray`` behind a view can
  still be resized; if it shrinks below the viewed range, the next access
  raises StateError instead of reading out of bounds.
"""

import operator
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, overload

from ..exceptions import (
    RangeError,
    StateError,
    UnsupportedError,
    ValidationError,
    ViewIndexError,
)
from ._bindings import (
    get_buffer_size,
    inspect_buffer,
    read_byte,
    read_bytes,
    write_byte,
    write_bytes,
)

if TYPE_CHECKING:
    from .pinning import PinnedView
    from .span import ByteSpan

__all__ = ["ByteView", "Empty", "Bound", "make_empty", "from_buffer", "from_range"]


# =============================================================================
# View States
# =============================================================================


@dataclass(frozen=True, slots=True)
class Empty:
    """State of a view with no backing buffer."""


@dataclass(frozen=True, slots=True, eq=False)
class Bound:
    """State of a view over ``backing[offset:offset + length]``.

    ``eq=False``: two states are the same region only when they share the
    backing *object*, which ByteView.__eq__ checks by identity.
    """

    backing: Any
    offset: int
    length: int
    read_only: bool = False


_EMPTY = Empty()


def _require_int(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(
            f"{name} must be int, got {type(value).__name__}",
            code="INVALID_ARGUMENT",
            details={"param": name, "type": type(value).__name__},
        )
    return value


def _require_byte(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
        raise ValidationError(
            f"Byte value must be an int in range(0, 256), got {value!r}",
            code="INVALID_BYTE",
            details={"value": repr(value)},
        )
    return value


def _check_range(offset: int, length: int, size: int) -> None:
    if offset < 0 or length < 0 or offset + length > size:
        raise RangeError(
            f"Range [{offset}, {offset}+{length}) is outside a buffer of {size} bytes",
            details={"offset": offset, "length": length, "size": size},
        )


# =============================================================================
# Construction
# =============================================================================


def make_empty() -> "ByteView":
    """Return a view with no backing buffer and length 0. Never fails."""
    return ByteView(_EMPTY)


def from_buffer(buf: Any) -> "ByteView":
    """
    Create a view over the whole of ``buf``.

    ``None`` is accepted and yields an empty view, exactly like
    ``make_empty()``.

    Args:
        buf: Any object exporting a flat byte buffer (bytearray, bytes,
            array.array("B"), memoryview), or None. Item format must be
            one of "B", "b" or "c".

    Raises
    ------
        ValidationError: If ``buf`` does not export a flat byte buffer.

    Example:
        >>> buf = bytearray([0, 3])
        >>> from_buffer(buf).tolist()
        [0, 3]
        >>> from_buffer(None).is_empty
        True
    """
    if buf is None:
        return make_empty()
    size, read_only = inspect_buffer(buf)
    return ByteView(Bound(buf, 0, size, read_only))


def from_range(buf: Any, offset: int, length: int) -> "ByteView":
    """
    Create a view over ``buf[offset:offset + length]``.

    Unlike ``from_buffer``, a missing buffer is only accepted with an empty
    range: ``from_range(None, 0, 0)`` returns an empty view, any other range
    over ``None`` raises RangeError.

    Raises
    ------
        RangeError: If ``offset`` or ``length`` is negative, or
            ``offset + length`` is past the end of ``buf``.
        ValidationError: If ``offset``/``length`` are not ints, or ``buf``
            does not export a flat byte buffer.

    Example:
        >>> buf = bytearray([5, 3])
        >>> from_range(buf, 1, 1).tolist()
        [3]
        >>> from_range(bytearray(2), 1, 2)
        Traceback (most recent call last):
        ...
        membytes.exceptions.exceptions.RangeError: Range [1, 1+2) is outside a buffer of 2 bytes
    """
    offset = _require_int("offset", offset)
    length = _require_int("length", length)
    if buf is None:
        if offset == 0 and length == 0:
            return make_empty()
        raise RangeError(
            f"Range [{offset}, {offset}+{length}) requires a buffer, got None",
            details={"offset": offset, "length": length, "size": None},
        )
    size, read_only = inspect_buffer(buf)
    _check_range(offset, length, size)
    return ByteView(Bound(buf, offset, length, read_only))


# =============================================================================
# ByteView
# =============================================================================


class ByteView(Sequence[int]):
    """
    Non-owning view over a contiguous byte region.

    Created by ``make_empty()``, ``from_buffer()`` or ``from_range()``.
    Implements ``collections.abc.Sequence[int]`` for reads; writes go through
    ``as_span()``.

    Indexing is strict: valid indices are ``0 <= i < len(view)``. Negative
    indices raise ViewIndexError rather than wrapping.

    Equality compares regions, not contents: two views are equal when both
    are empty, or when they share the same backing object, offset and
    length.
    """

    __slots__ = ("_state",)

    def __init__(self, state: Empty | Bound = _EMPTY) -> None:
        self._state = state

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def state(self) -> Empty | Bound:
        """The underlying ``Empty`` or ``Bound`` state, for pattern matching."""
        return self._state

    @property
    def backing(self) -> Any:
        """The backing buffer, or None for an empty view."""
        match self._state:
            case Bound(backing=backing):
                return backing
            case _:
                return None

    @property
    def offset(self) -> int:
        match self._state:
            case Bound(offset=offset):
                return offset
            case _:
                return 0

    @property
    def length(self) -> int:
        match self._state:
            case Bound(length=length):
                return length
            case _:
                return 0

    @property
    def is_empty(self) -> bool:
        """True when the view covers zero bytes, with or without a backing buffer."""
        return self.length == 0

    @property
    def is_read_only(self) -> bool:
        match self._state:
            case Bound(read_only=read_only):
                return read_only
            case _:
                return False

    def _bound(self) -> Bound | None:
        """Return the Bound state after checking the buffer still covers it.

        Raises
        ------
            StateError: If a resizable backing buffer shrank below
                ``offset + length`` since the view was created.
        """
        match self._state:
            case Empty():
                return None
            case Bound(backing=backing, offset=offset, length=length) as bound:
                size = get_buffer_size(backing)
                if offset + length > size:
                    raise StateError(
                        f"Backing buffer shrank to {size} bytes; "
                        f"view covers [{offset}, {offset + length})",
                        code="VIEW_BACKING_SHRUNK",
                        details={"offset": offset, "length": length, "size": size},
                    )
                return bound

    def _check_index(self, index: Any) -> int:
        index = operator.index(index)
        if index < 0 or index >= self.length:
            raise ViewIndexError(
                f"Index {index} out of range [0, {self.length})",
                details={"index": index, "length": self.length},
            )
        return index

    # -------------------------------------------------------------------------
    # Observation
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return self.length

    def element_at(self, index: int) -> int:
        """
        Return the byte at logical ``index``, read from the backing buffer.

        Raises
        ------
            ViewIndexError: If ``index`` is outside ``[0, len(view))``.
            StateError: If the backing buffer shrank below the view.
        """
        index = self._check_index(index)
        bound = self._bound()
        assert bound is not None  # a non-empty view is always bound
        return read_byte(bound.backing, bound.offset + index)

    @overload
    def __getitem__(self, idx: int) -> int: ...

    @overload
    def __getitem__(self, idx: slice) -> "ByteView": ...

    def __getitem__(self, idx: int | slice) -> "int | ByteView":
        """Byte at ``idx``, or a sub-view for a step-1 slice."""
        if isinstance(idx, slice):
            if idx.step not in (None, 1):
                raise ValidationError(
                    "ByteView slices must be contiguous (step 1)",
                    code="INVALID_ARGUMENT",
                    details={"step": idx.step},
                )
            start, stop, _ = idx.indices(self.length)
            return self.slice(start, max(stop - start, 0))
        return self.element_at(idx)

    def __iter__(self) -> Iterator[int]:
        for i in range(self.length):
            yield self.element_at(i)

    def tolist(self) -> list[int]:
        """Copy the viewed bytes into a list of ints."""
        return list(self.tobytes())

    def tobytes(self) -> bytes:
        """Copy the viewed bytes into a new ``bytes`` object."""
        bound = self._bound()
        if bound is None:
            return b""
        return read_bytes(bound.backing, bound.offset, bound.offset + bound.length)

    def to_array(self) -> bytearray:
        """Copy the viewed bytes into a new, independent ``bytearray``."""
        return bytearray(self.tobytes())

    # -------------------------------------------------------------------------
    # Derived views
    # -------------------------------------------------------------------------

    def slice(self, start: int, length: int | None = None) -> "ByteView":
        """
        Return a sub-view starting at ``start`` relative to this view.

        Args:
            start: Offset into this view.
            length: Number of bytes, or None for the rest of the view.

        Raises
        ------
            RangeError: If the sub-range does not fit inside this view.

        Example:
            >>> view = from_buffer(bytearray([0, 2, 4, 6]))
            >>> view.slice(1, 2).tolist()
            [2, 4]
        """
        start = _require_int("start", start)
        if length is None:
            length = self.length - start
        length = _require_int("length", length)
        _check_range(start, length, self.length)
        match self._state:
            case Empty():
                return make_empty()
            case Bound(backing=backing, offset=offset, read_only=read_only):
                return ByteView(Bound(backing, offset + start, length, read_only))

    def as_span(self) -> "ByteSpan":
        """
        Return a lazy, zero-copy, write-through span over this view.

        Example:
            >>> buf = bytearray([0, 3])
            >>> view = from_buffer(buf)
            >>> view.as_span()[0] = 42
            >>> buf
            bytearray(b'*\\x03')
        """
        from .span import ByteSpan

        return ByteSpan(self)

    @property
    def span(self) -> "ByteSpan":
        """Shorthand for ``as_span()``."""
        return self.as_span()

    def pin(self) -> "PinnedView":
        """Shorthand for ``membytes.pin(view)``."""
        from .pinning import pin

        return pin(self)

    # -------------------------------------------------------------------------
    # Writes (used by ByteSpan)
    # -------------------------------------------------------------------------

    def _writable_bound(self) -> Bound | None:
        if self.is_read_only:
            raise UnsupportedError(
                "Cannot write through a view over a read-only buffer",
                code="VIEW_READ_ONLY",
                details={"type": type(self.backing).__name__},
            )
        return self._bound()

    def _write(self, index: Any, value: Any) -> None:
        index = self._check_index(index)
        value = _require_byte(value)
        bound = self._writable_bound()
        assert bound is not None
        write_byte(bound.backing, bound.offset + index, value)

    def _write_bytes(self, start: int, data: bytes) -> None:
        _check_range(start, len(data), self.length)
        if not data:
            return
        bound = self._writable_bound()
        if bound is None:
            return
        write_bytes(bound.backing, bound.offset + start, data)

    def copy_to(self, destination: "ByteView") -> None:
        """
        Copy this view's bytes into the start of ``destination``.

        Overlapping views over the same buffer are handled: the source is
        read completely before the destination is written.

        Raises
        ------
            RangeError: If ``destination`` is shorter than this view.
            UnsupportedError: If ``destination`` is read-only.
        """
        if len(destination) < self.length:
            raise RangeError(
                f"Destination holds {len(destination)} bytes, need {self.length}",
                code="VIEW_DESTINATION_TOO_SHORT",
                details={"source_length": self.length, "destination_length": len(destination)},
            )
        destination._write_bytes(0, self.tobytes())

    # -------------------------------------------------------------------------
    # Identity
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ByteView):
            return NotImplemented
        match self._state, other._state:
            case Empty(), Empty():
                return True
            case Bound() as a, Bound() as b:
                return a.backing is b.backing and a.offset == b.offset and a.length == b.length
            case _:
                return False

    def __hash__(self) -> int:
        match self._state:
            case Bound(backing=backing, offset=offset, length=length):
                return hash((id(backing), offset, length))
            case _:
                return hash(())

    def __repr__(self) -> str:
        match self._state:
            case Empty():
                return "ByteView(<empty>)"
            case Bound(offset=offset, length=length):
                values = self.tolist()
                if length <= 10:
                    shown = str(values)
                else:
                    head = ", ".join(map(str, values[:5]))
                    tail = ", ".join(map(str, values[-3:]))
                    shown = f"[{head}, ..., {tail}]"
                return f"ByteView({shown}, offset={offset}, len={length})"
