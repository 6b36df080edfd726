"""
Insertion sort and two merge sort variants.

All three sort ascending and are stable. Each accepts an optional `key`
callable (like `sorted`) to plug in a different ordering.

Functions
---------
insertion_sort(seq, key=None)
    In place. Θ(n²) worst case (reverse-sorted input), Θ(n) best case
    (already sorted: one comparison per element).
merge_sort(seq, key=None)
    Naive recursive variant: every call slices fresh halves and merges into a
    fresh list. Returns a new list and leaves `seq` untouched.
    Θ(n log n) time, Θ(n log n) total allocation across all levels.
merge_sort_buffered(seq, key=None)
    Allocates a single auxiliary buffer of length n and sorts index ranges of
    `seq` in place. Θ(n log n) time, Θ(n) auxiliary space.

Merge rule
----------
When the front elements of the two halves compare equal, the left one is
taken first (`left <= right`). That is what makes both merge sorts stable.

Recursion depth of both merge sorts is Θ(log n).
"""


def _identity(x):
  return x


def insertion_sort(seq, key=None):
  """Sort the mutable sequence `seq` in place.

  Invariant: before iteration `i`, `seq[:i]` is sorted.
  """
  key = key or _identity
  for i in range(1, len(seq)):
    item = seq[i]
    k = key(item)
    j = i - 1
    while j >= 0 and key(seq[j]) > k:
      seq[j + 1] = seq[j]
      j -= 1
    seq[j + 1] = item


def merge_sort(seq, key=None):
  """Return a new ascending list with the elements of `seq`."""
  return _merge_sort(list(seq), key or _identity)


def _merge_sort(items, key):
  if len(items) <= 1:
    return items
  mid = len(items) // 2
  left = _merge_sort(items[:mid], key)
  right = _merge_sort(items[mid:], key)

  merged = []
  i = j = 0
  while i < len(left) and j < len(right):
    if key(left[i]) <= key(right[j]):
      merged.append(left[i])
      i += 1
    else:
      merged.append(right[j])
      j += 1
  merged.extend(left[i:])
  merged.extend(right[j:])
  return merged


def merge_sort_buffered(seq, key=None):
  """Sort the mutable sequence `seq` in place using one shared buffer."""
  n = len(seq)
  if n <= 1:
    return
  temp = [None] * n
  _sort(seq, temp, 0, n - 1, key or _identity)


def _sort(arr, temp, low, high, key):
  """Sort `arr[low:high+1]` in place."""
  if low >= high:
    return
  mid = low + (high - low) // 2
  _sort(arr, temp, low, mid, key)
  _sort(arr, temp, mid + 1, high, key)
  _merge(arr, temp, low, mid, high, key)


def _merge(arr, temp, low, mid, high, key):
  """Merge sorted runs `arr[low:mid+1]` and `arr[mid+1:high+1]` via `temp`."""
  i, j, k = low, mid + 1, low
  while i <= mid and j <= high:
    if key(arr[i]) <= key(arr[j]):
      temp[k] = arr[i]
      i += 1
    else:
      temp[k] = arr[j]
      j += 1
    k += 1
  while i <= mid:
    temp[k] = arr[i]
    i += 1
    k += 1
  while j <= high:
    temp[k] = arr[j]
    j += 1
    k += 1
  arr[low:high + 1] = temp[low:high + 1]
