"""
membytes exceptions.

This module defines the exception hierarchy for membytes:

    MemBytesError (base)
    ├── RangeError - Offset/length outside the backing buffer
    ├── ViewIndexError - Element access outside [0, length)
    ├── UnsupportedError - Operation the backing storage cannot support
    ├── StateError - Invalid object state (released pin, shrunk buffer)
    └── ValidationError - Invalid parameter value

Each class also derives from the matching builtin, so plain Python
handlers keep working:

    try:
        view.element_at(7)
    except IndexError:
        print("index out of range")

Usage:
    try:
        membytes.from_range(buf, 1, 2)
    except membytes.RangeError as e:
        print(f"Error {e.code}: {e}")
        print(f"Details: {e.details}")
    except membytes.MemBytesError as e:
        # Catch any membytes error with structured details
        print(f"Error {e.code}: {e}")

See Also
--------
    MemBytesError : Base exception for all membytes errors.
"""

from typing import Any

__all__ = [
    # Base
    "MemBytesError",
    # Bounds
    "RangeError",
    "ViewIndexError",
    # Capability
    "UnsupportedError",
    # State
    "StateError",
    # Validation
    "ValidationError",
]


class MemBytesError(Exception):
    """
    Base exception for all membytes errors.

    All membytes-specific exceptions inherit from this class, enabling:
    - Catch-all handling: ``except membytes.MemBytesError``
    - Stable string-based error codes for programmatic handling
    - Structured details for debugging and logging

    Attributes
    ----------
    message : str
        Human-readable error description.
    code : str
        Stable, string-based error code (e.g., "VIEW_RANGE_INVALID").
        Use this for programmatic error handling.
    details : dict[str, Any]
        Structured context (e.g., {"offset": 1, "length": 2, "size": 2}).
    original_code : int | None
        Numeric code of the error family (for logging).

    Example
    -------
    >>> try:
    ...     membytes.from_range(bytearray(2), 1, 2)
    ... except membytes.MemBytesError as e:
    ...     print(f"Error code: {e.code}")
    ...     print(f"Details: {e.details}")
    Error code: VIEW_RANGE_INVALID
    Details: {'offset': 1, 'length': 2, 'size': 2}
    """

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        details: dict[str, Any] | None = None,
        original_code: int | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.details = details or {}
        self.original_code = original_code

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, code={self.code!r})"


# =============================================================================
# Bounds Errors
# =============================================================================


class RangeError(MemBytesError, ValueError):
    """
    Offset or length outside the bounds of the backing buffer.

    Raised when a view is constructed or sliced with:
    - A negative offset or length
    - ``offset + length`` past the end of the buffer
    - A non-zero range over a missing (``None``) buffer

    Also raised by ``copy_to`` when the destination is too short.
    """

    def __init__(
        self,
        message: str,
        code: str = "VIEW_RANGE_INVALID",
        details: dict[str, Any] | None = None,
        original_code: int | None = None,
    ):
        super().__init__(message, code, details, original_code or 100)


class ViewIndexError(MemBytesError, IndexError):
    """
    Element access outside ``[0, length)``.

    Negative indices are rejected as well: views do not wrap around.
    An empty view or span rejects every index.
    """

    def __init__(
        self,
        message: str,
        code: str = "VIEW_INDEX_OUT_OF_RANGE",
        details: dict[str, Any] | None = None,
        original_code: int | None = None,
    ):
        super().__init__(message, code, details, original_code or 101)


# =============================================================================
# Capability Errors
# =============================================================================


class UnsupportedError(MemBytesError, BufferError):
    """
    The backing storage cannot support the requested operation.

    Common causes:
    - Pinning an empty view (nothing to fix in place)
    - Pinning or writing through a view over a read-only buffer (``bytes``)
    """

    def __init__(
        self,
        message: str,
        code: str = "UNSUPPORTED",
        details: dict[str, Any] | None = None,
        original_code: int | None = None,
    ):
        super().__init__(message, code, details, original_code or 200)


# =============================================================================
# State Errors
# =============================================================================


class StateError(MemBytesError, RuntimeError):
    """
    Invalid object state.

    Raised when:
    - A PinnedView accessor is used after the pin scope ended
    - A resizable backing buffer shrank below the range a view covers
    """

    def __init__(
        self,
        message: str,
        code: str = "STATE_ERROR",
        details: dict[str, Any] | None = None,
        original_code: int | None = None,
    ):
        super().__init__(message, code, details, original_code or 300)


# =============================================================================
# Validation Errors
# =============================================================================


class ValidationError(MemBytesError, ValueError):
    """
    Invalid parameter value.

    Raised for arguments of the wrong type or outside their domain:
    - A backing object that does not export a flat byte buffer
    - Offsets or lengths that are not integers
    - Byte values outside ``0..255``
    - Configuration values of the wrong type
    """

    def __init__(
        self,
        message: str,
        code: str = "INVALID_ARGUMENT",
        details: dict[str, Any] | None = None,
        original_code: int | None = None,
    ):
        super().__init__(message, code, details, original_code or 901)
