"""Exceptions raised by the stack structures and their iterators."""


class EmptyStackError(IndexError):
  """`pop` or `peek` was called on an empty stack."""


class ConcurrentModificationError(RuntimeError):
  """The stack was pushed or popped after the iterator was created."""


class IteratorExhaustedError(StopIteration):
  """`next` was called after the last element.

  Subclasses `StopIteration` so a plain `for` loop over a stack ends normally.
  """
