"""View Aliasing - Several views over one buffer.

Primary API: membytes.from_buffer, membytes.from_range
Scope: Single

Views never copy. A whole-buffer view, a sub-range view and the buffer
itself all observe the same bytes, so a write through any one of them is
visible through the others.

Related:
    - examples/developers/view/lifetime.py
"""

import membytes

# =============================================================================
# Whole buffer and sub-range
# =============================================================================

buf = bytearray([0, 2, 4, 6, 8])
whole = membytes.from_buffer(buf)
middle = membytes.from_range(buf, 1, 3)

print(f"whole:  {whole}")
print(f"middle: {middle}")

# Writes through the sub-range land at offset + index in the buffer
middle.as_span()[0] = 99
print(f"\nAfter middle.span[0] = 99: buf = {list(buf)}")
print(f"whole[1] = {whole[1]}")

# =============================================================================
# Writing to the buffer directly
# =============================================================================

buf[3] = 77
print(f"\nAfter buf[3] = 77: middle = {middle.tolist()}")

# =============================================================================
# Slicing a view yields another view, not a copy
# =============================================================================

inner = middle[1:]
inner.as_span().fill(1)
print(f"\nAfter inner.fill(1): buf = {list(buf)}")

# Copies are explicit
snapshot = whole.tobytes()
buf[0] = 200
print(f"snapshot[0] = {snapshot[0]}, whole[0] = {whole[0]}")
