"""Errors - What a view refuses to do.

Primary API: membytes.MemBytesError
Scope: Single

Every failure raises a MemBytesError subclass that is also the matching
builtin, so callers can catch either. Each error carries a stable code.

Related:
    - examples/developers/view/pinning.py
"""

import membytes

buf = bytearray([0, 3])

# Out-of-range construction
try:
    membytes.from_range(buf, 1, 5)
except ValueError as e:
    print(f"{type(e).__name__} [{e.code}]: {e}")

# Out-of-bounds element access
try:
    membytes.from_buffer(buf)[2]
except IndexError as e:
    print(f"{type(e).__name__} [{e.code}]: {e}")

# Writing through a read-only view
try:
    membytes.from_buffer(b"\x00\x03").as_span()[0] = 1
except membytes.UnsupportedError as e:
    print(f"{type(e).__name__} [{e.code}]: {e}")

# Pinning an empty view
try:
    membytes.pin(membytes.make_empty())
except membytes.MemBytesError as e:
    print(f"{type(e).__name__} [{e.code}]: {e}")
