"""
Linked-node stack.

A singly linked chain of `StackNode`s where the head is the top of the stack.
Push and pop only ever touch the head, so both are O(1) worst case and the
stack never copies elements.

Classes
-------
StackNode
    Minimal node holding `value` and `next` (StackNode or None at the tail).
LinkedStack
    Public API: push, pop, peek, is_empty, size, fail-fast iteration.

Conventions & Notes
-------------------
- **Ownership:** the stack owns `head`; each node owns `next`. Nodes are never
  shared between stacks and the chain never has cycles.
- **Modification counter:** `mod_count` is bumped on every push and pop. It is
  not part of the logical state; iterators compare against it to fail fast.
- **Iteration order:** top to bottom (the order `pop` would return).
"""

from .errors import EmptyStackError
from .stack_iterator import LinkedStackIterator


class StackNode:
  __slots__ = ("value", "next")

  def __init__(self, value, next=None):
    self.value = value
    self.next = next


class LinkedStack:
  __slots__ = ("head", "_size", "mod_count")

  def __init__(self, items=()):
    self.head = None
    self._size = 0
    self.mod_count = 0
    for item in items:
      self.push(item)


  def push(self, item):
    """Add `item` as the new top. O(1)."""
    self.head = StackNode(item, self.head)
    self._size += 1
    self.mod_count += 1


  def pop(self):
    """Remove and return the top element.

    Raises
    ------
    EmptyStackError
        If the stack is empty.
    """
    node = self.head
    if node is None:
      raise EmptyStackError("pop from empty stack")
    self.head = node.next
    node.next = None
    self._size -= 1
    self.mod_count += 1
    return node.value


  def peek(self):
    """Return the top element without removing it."""
    if self.head is None:
      raise EmptyStackError("peek at empty stack")
    return self.head.value


  def is_empty(self):
    return self.head is None

  def size(self):
    return self._size

  def __len__(self):
    return self._size

  def __iter__(self):
    return LinkedStackIterator(self)

  def __repr__(self):
    return f"LinkedStack({list(self)!r})"
