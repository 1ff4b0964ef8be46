"""
View module - non-owning byte views, spans and pinning.

Provides:
- ByteView: Handle over a byte region (``Empty | Bound`` state)
- ByteSpan: Lazy, zero-copy, write-through access to a view's bytes
- PinnedView: Scoped pin exposing the raw address of a view
- make_empty / from_buffer / from_range: View constructors
- pin / raw_address: Pinning facility
"""

from .byte_view import Bound, ByteView, Empty, from_buffer, from_range, make_empty
from .pinning import PinnedView, pin, raw_address
from .span import ByteSpan

# =============================================================================
# Public API - See membytes/__init__.py for documentation mapping guidelines
# =============================================================================
__all__ = [
    # Views
    "ByteView",
    "ByteSpan",
    "Empty",
    "Bound",
    # Construction
    "make_empty",
    "from_buffer",
    "from_range",
    # Pinning
    "PinnedView",
    "pin",
    "raw_address",
]
