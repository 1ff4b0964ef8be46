"""
ByteView observation tests.

Tests for element access, iteration, sub-views, copies, equality and the
shrunk-backing guard.
"""

import pytest

from membytes import (
    RangeError,
    StateError,
    ValidationError,
    ViewIndexError,
    from_buffer,
    from_range,
    make_empty,
)


class TestElementAt:
    """Tests for element_at() and integer indexing."""

    def test_reads_through_offset(self):
        """element_at(i) reads backing[offset + i] for every valid i."""
        buf = bytearray(range(10, 20))
        view = from_range(buf, 3, 4)

        for i in range(len(view)):
            assert view.element_at(i) == buf[3 + i]

    def test_getitem_matches_element_at(self, four_bytes):
        """view[i] is element_at(i)."""
        view = from_buffer(four_bytes)

        assert [view[i] for i in range(4)] == [0, 2, 4, 6]

    def test_index_past_end_raises(self, two_bytes):
        """Index == length raises ViewIndexError."""
        view = from_buffer(two_bytes)

        with pytest.raises(ViewIndexError) as exc_info:
            view.element_at(2)

        assert exc_info.value.code == "VIEW_INDEX_OUT_OF_RANGE"
        assert exc_info.value.details == {"index": 2, "length": 2}

    def test_negative_index_raises(self, two_bytes):
        """Negative indices do not wrap around."""
        view = from_buffer(two_bytes)

        with pytest.raises(ViewIndexError):
            view[-1]

    def test_empty_view_rejects_every_index(self):
        """An empty view raises ViewIndexError, not AttributeError or TypeError."""
        with pytest.raises(ViewIndexError):
            make_empty().element_at(0)

    def test_view_index_error_is_index_error(self, two_bytes):
        """ViewIndexError can be caught as the builtin IndexError."""
        with pytest.raises(IndexError):
            from_buffer(two_bytes)[5]

    def test_non_integer_index_raises_type_error(self, two_bytes):
        """Indices must be integers, as for any Python sequence."""
        with pytest.raises(TypeError):
            from_buffer(two_bytes).element_at("0")


class TestIterationAndCopies:
    """Tests for iteration and the copying helpers."""

    def test_iter(self, four_bytes):
        """Iterating a view yields its bytes in order."""
        assert list(from_range(four_bytes, 1, 3)) == [2, 4, 6]

    def test_iter_is_lazy(self, two_bytes):
        """Iteration reads the buffer as it goes."""
        view = from_buffer(two_bytes)
        it = iter(view)

        assert next(it) == 0
        two_bytes[1] = 99
        assert next(it) == 99

    def test_tobytes(self, two_bytes):
        """tobytes() returns a bytes copy of the viewed region."""
        assert from_buffer(two_bytes).tobytes() == b"\x00\x03"
        assert make_empty().tobytes() == b""

    def test_to_array_is_independent(self, two_bytes):
        """to_array() returns a copy that does not alias the buffer."""
        copy = from_buffer(two_bytes).to_array()
        copy[0] = 77

        assert two_bytes[0] == 0

    def test_contains_and_index(self, four_bytes):
        """Sequence mixins work on views."""
        view = from_buffer(four_bytes)

        assert 4 in view
        assert 5 not in view
        assert view.index(6) == 3
        assert view.count(2) == 1


class TestSlicing:
    """Tests for slice() and slice indexing."""

    def test_slice_is_relative_to_view(self):
        """slice() offsets are relative to the view, not the buffer."""
        buf = bytearray([1, 2, 3, 4, 5])
        view = from_range(buf, 1, 4)

        sub = view.slice(1, 2)

        assert sub.offset == 2
        assert sub.tolist() == [3, 4]
        assert sub.backing is buf

    def test_slice_defaults_to_rest(self, four_bytes):
        """slice(start) covers the rest of the view."""
        assert from_buffer(four_bytes).slice(2).tolist() == [4, 6]

    def test_slice_past_end_raises(self, four_bytes):
        """A sub-range outside the view raises RangeError."""
        view = from_range(four_bytes, 0, 2)

        with pytest.raises(RangeError):
            view.slice(1, 2)

    def test_slice_of_empty_view(self):
        """slice(0, 0) of an empty view is empty; anything else raises."""
        assert make_empty().slice(0, 0).is_empty
        with pytest.raises(RangeError):
            make_empty().slice(0, 1)

    def test_slice_syntax(self, four_bytes):
        """view[a:b] is a sub-view."""
        view = from_buffer(four_bytes)

        assert view[1:3].tolist() == [2, 4]
        assert view[3:1].is_empty

    def test_stepped_slice_raises(self, four_bytes):
        """Views are contiguous; stepped slices are rejected."""
        with pytest.raises(ValidationError):
            from_buffer(four_bytes)[::2]


class TestEquality:
    """Tests for region equality and hashing."""

    def test_same_region_is_equal(self, two_bytes):
        """Views over the same object and range are equal."""
        assert from_buffer(two_bytes) == from_range(two_bytes, 0, 2)
        assert hash(from_buffer(two_bytes)) == hash(from_range(two_bytes, 0, 2))

    def test_equal_contents_in_different_buffers_differ(self):
        """Equality is by region, not by content."""
        assert from_buffer(bytearray([1])) != from_buffer(bytearray([1]))

    def test_empty_views_are_equal(self):
        """All empty-state views compare equal."""
        assert make_empty() == from_buffer(None) == from_range(None, 0, 0)

    def test_bound_empty_is_not_empty_state(self, two_bytes):
        """A zero-length bound view is not equal to the empty state."""
        assert from_range(two_bytes, 0, 0) != make_empty()

    def test_repr(self, two_bytes):
        """repr shows contents, offset and length."""
        assert repr(make_empty()) == "ByteView(<empty>)"
        assert repr(from_range(two_bytes, 1, 1)) == "ByteView([3], offset=1, len=1)"

    def test_repr_truncates_long_views(self):
        """Long views show the first five and last three bytes."""
        view = from_buffer(bytearray(range(20)))

        assert repr(view) == "ByteView([0, 1, 2, 3, 4, ..., 17, 18, 19], offset=0, len=20)"


class TestShrunkBacking:
    """Tests for the resizable-backing guard."""

    def test_shrunk_bytearray_raises_state_error(self):
        """Reading after the buffer shrank below the view raises StateError."""
        buf = bytearray([1, 2, 3, 4])
        view = from_range(buf, 2, 2)

        del buf[2:]

        with pytest.raises(StateError) as exc_info:
            view.element_at(0)
        assert exc_info.value.code == "VIEW_BACKING_SHRUNK"

    def test_growing_is_harmless(self):
        """Appending to the buffer does not disturb an existing view."""
        buf = bytearray([1, 2])
        view = from_buffer(buf)

        buf.extend([3, 4])

        assert view.tolist() == [1, 2]
