"""View Lifetime - Views keep their backing buffer alive.

Primary API: membytes.ByteView
Scope: Single

A view holds a reference to its buffer. Dropping every other name for the
buffer, even across a garbage collection, leaves the view fully usable.
Rebinding a view variable never touches the bytes it pointed at.

Related:
    - examples/developers/view/aliasing.py
"""

import gc

import membytes

# =============================================================================
# Dropping the owner
# =============================================================================

data = bytearray([5, 12])
tail = membytes.from_range(data, 1, 1)

data = None
gc.collect()

tail.as_span()[0] = 142
print(f"Owner dropped, view still works: {tail.tolist()}")

# =============================================================================
# Rebinding a view
# =============================================================================

buf = bytearray([1, 2])
view = membytes.from_buffer(buf)
view = membytes.make_empty()

print(f"\nRebound view is empty: {view.is_empty}")
print(f"Buffer untouched: {list(buf)}")

# =============================================================================
# Pattern matching on the view state
# =============================================================================

for candidate in (membytes.make_empty(), membytes.from_range(buf, 1, 1)):
    match candidate.state:
        case membytes.view.Empty():
            print("empty view")
        case membytes.view.Bound(offset=offset, length=length):
            print(f"bound view at offset {offset}, length {length}")
