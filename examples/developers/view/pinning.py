"""Pinning - Raw-address access to a view's bytes.

Primary API: membytes.pin
Scope: Single

pin() fixes the backing buffer for the duration of a with-block and
exposes the address of the view's first byte. Writes through the raw
pointer are visible through the view afterwards. While pinned, a
bytearray cannot be resized.

Related:
    - examples/developers/view/errors.py
"""

import membytes

buf = bytearray([0, 2, 4, 6])
view = membytes.from_buffer(buf)

# =============================================================================
# Pointer writes
# =============================================================================

with membytes.pin(view) as pinned:
    print(f"Pinned at 0x{pinned.address:x} ({len(pinned)} bytes)")
    pointer = pinned.pointer()
    pointer[0] = 24
    membytes.display.display_pointer(pinned)

membytes.display_data(view)

# =============================================================================
# Resizing is refused while pinned
# =============================================================================

with membytes.pin(view):
    try:
        buf.append(8)
    except BufferError as e:
        print(f"\nResize refused while pinned: {e}")

buf.append(8)
print(f"Resize allowed after unpin: {list(buf)}")

# =============================================================================
# Sub-range pins point into the middle of the buffer
# =============================================================================

with membytes.pin(membytes.from_buffer(buf)) as base, membytes.pin(view[2:]) as inner:
    print(f"\nOffset between pins: {inner.address - base.address}")
