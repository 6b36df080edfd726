"""
Dynamic-array stack with doubling / halving.

The elements live in one list buffer of length `capacity`; `top` is the index
of the current top element (`-1` when empty).

Resize policy
-------------
- **Grow:** a push that finds `top == capacity - 1` first doubles the buffer.
- **Shrink:** a pop that leaves exactly `capacity / 4` elements halves the
  buffer, never going below `MIN_CAPACITY`.

Growing and shrinking copy every live element (O(size)), but the gap between
the two thresholds means each resize is paid for by Ω(size) cheap operations
since the previous one, so any sequence of n operations costs O(n) in total:
amortized O(1) per push/pop. `copy_work` counts element copies so that bound
can be observed directly.

Conventions & Notes
-------------------
- Vacated slots are reset to `None` so popped values are not kept alive.
- `mod_count` is bumped on every push and pop (resizes are part of that
  operation, not separate modifications).
"""

from .errors import EmptyStackError
from .stack_iterator import ArrayStackIterator


MIN_CAPACITY = 1


class ArrayStack:
  __slots__ = ("buffer", "top", "mod_count", "copy_work")

  def __init__(self, items=(), capacity=MIN_CAPACITY):
    if capacity < MIN_CAPACITY:
      raise ValueError(f"capacity must be at least {MIN_CAPACITY}")
    self.buffer = [None] * capacity
    self.top = -1
    self.mod_count = 0
    self.copy_work = 0
    for item in items:
      self.push(item)


  @property
  def capacity(self):
    return len(self.buffer)


  def _resize(self, capacity):
    """Move the live elements into a fresh buffer of `capacity` slots."""
    fresh = [None] * capacity
    n = self.top + 1
    fresh[:n] = self.buffer[:n]
    self.buffer = fresh
    self.copy_work += n


  def push(self, item):
    """Add `item` as the new top. Amortized O(1)."""
    if self.top == len(self.buffer) - 1:
      self._resize(2 * len(self.buffer))
    self.top += 1
    self.buffer[self.top] = item
    self.mod_count += 1


  def pop(self):
    """Remove and return the top element, shrinking at quarter occupancy.

    Raises
    ------
    EmptyStackError
        If the stack is empty.
    """
    if self.top < 0:
      raise EmptyStackError("pop from empty stack")
    item = self.buffer[self.top]
    self.buffer[self.top] = None
    self.top -= 1
    self.mod_count += 1

    n = self.top + 1
    cap = len(self.buffer)
    if n > 0 and 4 * n == cap and cap // 2 >= MIN_CAPACITY:
      self._resize(cap // 2)
    return item


  def peek(self):
    """Return the top element without removing it."""
    if self.top < 0:
      raise EmptyStackError("peek at empty stack")
    return self.buffer[self.top]


  def is_empty(self):
    return self.top < 0

  def size(self):
    return self.top + 1

  def __len__(self):
    return self.top + 1

  def __iter__(self):
    return ArrayStackIterator(self)

  def __repr__(self):
    return f"ArrayStack({list(self)!r}, capacity={len(self.buffer)})"
