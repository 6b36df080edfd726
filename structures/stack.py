"""
Stack capability interface and backing selection.

`Stack` describes what every backing offers; `LinkedStack` and `ArrayStack`
satisfy it structurally and share no base class. Pick one with `make_stack`.
"""

from typing import Iterator, Protocol, TypeVar

from .array_stack import ArrayStack
from .linked_stack import LinkedStack


T = TypeVar("T")

BACKINGS = {
    "linked": LinkedStack,
    "array": ArrayStack,
}


class Stack(Protocol[T]):
  mod_count: int

  def push(self, item: T) -> None: ...
  def pop(self) -> T: ...
  def peek(self) -> T: ...
  def is_empty(self) -> bool: ...
  def size(self) -> int: ...
  def __len__(self) -> int: ...
  def __iter__(self) -> Iterator[T]: ...


def make_stack(kind="linked", items=()):
  """Return an empty (or pre-filled) stack using the `kind` backing.

  Parameters
  ----------
  kind : {"linked", "array"}, default="linked"
  items : Iterable, optional
      Pushed in order, so the last item ends on top.
  """
  try:
    cls = BACKINGS[kind]
  except KeyError:
    raise ValueError(
        f"unknown stack backing {kind!r}; expected one of {sorted(BACKINGS)}"
    ) from None
  return cls(items)
