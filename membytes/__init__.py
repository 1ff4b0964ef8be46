"""
membytes - non-owning byte views in Python.

A ByteView is a lightweight handle over a contiguous byte region. It can
point at a whole buffer, a slice of one, or nothing. It never copies and
never owns: writes through a view land in the backing buffer, and the
buffer stays alive for as long as any view still references it.

Quick Start
-----------

Views over a buffer:

    >>> import membytes
    >>> buf = bytearray([0, 3])
    >>> view = membytes.from_buffer(buf)
    >>> view.as_span()[0] = 42
    >>> list(buf), view.tolist()
    ([42, 3], [42, 3])

Sub-ranges alias part of the buffer:

    >>> buf = bytearray([5, 3])
    >>> tail = membytes.from_range(buf, 1, 1)
    >>> tail.as_span()[0] = 12
    >>> list(buf)
    [5, 12]

Empty views are safe to query:

    >>> membytes.make_empty().is_empty
    True
    >>> membytes.from_buffer(None).is_empty
    True

Pinning for raw-address access:

    >>> view = membytes.from_buffer(bytearray([0, 2, 4, 6]))
    >>> with membytes.pin(view) as pinned:
    ...     pinned.pointer()[0] = 24
    >>> view.tolist()
    [24, 2, 4, 6]


Core Classes
------------

- `ByteView` - Non-owning view (``Empty | Bound`` state)
- `ByteSpan` - Write-through span returned by ``ByteView.as_span()``
- `PinnedView` - Scoped pin with a raw address

Errors derive from `MemBytesError` and the matching builtin
(`RangeError` is a ValueError, `ViewIndexError` an IndexError,
`UnsupportedError` a BufferError).

Walkthrough
-----------

``python -m membytes`` prints the full demonstration of view aliasing,
lifetime and pinning.
"""

from membytes._logging import setup_logging as setup_logging
from membytes._version import __version__ as __version__
from membytes.config import config as config

# Display
from membytes.display import (
    display_bytes as display_bytes,
)
from membytes.display import (
    display_data as display_data,
)
from membytes.display import (
    format_bytes as format_bytes,
)

# Exceptions (all at root; also via membytes.exceptions)
from membytes.exceptions import (
    MemBytesError,
    RangeError,
    StateError,
    UnsupportedError,
    ValidationError,
    ViewIndexError,
)

# Views
from membytes.view import (
    ByteSpan,
    ByteView,
    PinnedView,
    from_buffer,
    from_range,
    make_empty,
    pin,
    raw_address,
)

# =============================================================================
# Public API - Mapped 1:1 to Documentation
# =============================================================================
#
# Guidelines for maintainers:
#   - Only add symbols that deserve top-level documentation
#   - Use comments to group related exports into sections
#   - Other symbols remain importable via submodules
#     (e.g., from membytes.view import Empty, Bound)
#
__all__ = [
    # Views
    "ByteView",
    "ByteSpan",
    "make_empty",
    "from_buffer",
    "from_range",
    # Pinning
    "PinnedView",
    "pin",
    "raw_address",
    # Exceptions
    "MemBytesError",
    "RangeError",
    "ViewIndexError",
    "UnsupportedError",
    "StateError",
    "ValidationError",
]
