"""
membytes exceptions.

This module defines the exception hierarchy for membytes:

    MemBytesError (base)
    ├── RangeError - Offset/length outside the backing buffer
    ├── ViewIndexError - Element access outside [0, length)
    ├── UnsupportedError - Operation the backing storage cannot support
    ├── StateError - Invalid object state (released pin, shrunk buffer)
    └── ValidationError - Invalid parameter value
"""

from .exceptions import (
    MemBytesError,
    RangeError,
    StateError,
    UnsupportedError,
    ValidationError,
    ViewIndexError,
)

# =============================================================================
# Public API - See membytes/__init__.py for documentation mapping guidelines
# =============================================================================
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
