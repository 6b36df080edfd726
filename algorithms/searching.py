"""
Linear and binary search.

Both return the index of a matching element or `NOT_FOUND` (-1) and never
mutate their input.

Complexity
----------
- linear_search: Θ(1) best (match at index 0), Θ(n) worst.
- binary_search: Θ(1) best (match at the first midpoint), Θ(log n) worst.
"""

NOT_FOUND = -1


def linear_search(seq, target):
  """Return the first index `i` with `seq[i] == target`, else -1."""
  for i, item in enumerate(seq):
    if item == target:
      return i
  return NOT_FOUND


def binary_search(sorted_seq, target):
  """Return an index of `target` in `sorted_seq`, else -1.

  Parameters
  ----------
  sorted_seq : Sequence
      Must be sorted ascending. This is not checked; unsorted input gives
      meaningless results.
  target
      Value to locate.

  Notes
  -----
  Invariant: if `target` is present, it lies within `sorted_seq[left:right+1]`.
  The midpoint is `left + (right - left) // 2` rather than
  `(left + right) // 2`, which overflows fixed-width indices.
  """
  left, right = 0, len(sorted_seq) - 1
  while left <= right:
    mid = left + (right - left) // 2
    value = sorted_seq[mid]
    if value == target:
      return mid
    if value < target:
      left = mid + 1
    else:
      right = mid - 1
  return NOT_FOUND
