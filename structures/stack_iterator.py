"""
Fail-fast iterators over the stack backings.

Each iterator keeps an explicit reference to the stack it walks plus a
snapshot of two things taken at creation time:

- the traversal position (a node for `LinkedStack`, an index for `ArrayStack`)
- the stack's `mod_count`

Every `has_next()` and `next()` first compares the snapshot counter with the
live one and raises `ConcurrentModificationError` on mismatch. Nothing is
copied up front, so creation and each step are O(1).

Both iterators also implement the Python iterator protocol; `__next__` raises
`IteratorExhaustedError` (a `StopIteration`) once the bottom is passed.
"""

from .errors import ConcurrentModificationError, IteratorExhaustedError


class _FailFastIterator:
  __slots__ = ("_stack", "_expected")

  def __init__(self, stack):
    self._stack = stack
    self._expected = stack.mod_count

  def _check(self):
    if self._stack.mod_count != self._expected:
      raise ConcurrentModificationError(
          "stack was modified during iteration")

  def __iter__(self):
    return self

  def __next__(self):
    return self.next()


class LinkedStackIterator(_FailFastIterator):
  __slots__ = ("_current",)

  def __init__(self, stack):
    super().__init__(stack)
    self._current = stack.head

  def has_next(self):
    self._check()
    return self._current is not None

  def next(self):
    self._check()
    node = self._current
    if node is None:
      raise IteratorExhaustedError()
    self._current = node.next
    return node.value


class ArrayStackIterator(_FailFastIterator):
  __slots__ = ("_index",)

  def __init__(self, stack):
    super().__init__(stack)
    self._index = stack.top

  def has_next(self):
    self._check()
    return self._index >= 0

  def next(self):
    self._check()
    i = self._index
    if i < 0:
      raise IteratorExhaustedError()
    self._index = i - 1
    return self._stack.buffer[i]
