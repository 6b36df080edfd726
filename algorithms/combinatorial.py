"""
Brute-force combinatorial searches, and recursive factorial.

These are deliberately naive: they exist to show polynomial versus
exponential growth, not to be fast.

- has_triple_sum_zero: Θ(1) best, Θ(n³) worst (all C(n, 3) triples tried).
- has_subset_sum_zero: Θ(1) best, Θ(2ⁿ) worst (no non-empty subset sums to
  zero, every subset is enumerated). Subset-sum is NP-complete; no polynomial
  algorithm is claimed. Recursion depth is Θ(n).
- factorial: Θ(n) time and Θ(n) recursion depth.
"""


def has_triple_sum_zero(seq):
  """Return True if some `seq[i] + seq[j] + seq[k] == 0` with `i < j < k`."""
  n = len(seq)
  for i in range(n):
    for j in range(i + 1, n):
      for k in range(j + 1, n):
        if seq[i] + seq[j] + seq[k] == 0:
          return True
  return False


def has_subset_sum_zero(seq):
  """Return True if a non-empty subset of `seq` sums to zero."""
  return _subset_sum(seq, 0, 0)


def _subset_sum(seq, i, total):
  # Each branch either takes seq[i] or skips it; taking it makes the subset
  # non-empty, so a zero sum there is a hit.
  if i == len(seq):
    return False
  taken = total + seq[i]
  if taken == 0:
    return True
  return _subset_sum(seq, i + 1, taken) or _subset_sum(seq, i + 1, total)


def factorial(n):
  """Return n! computed recursively."""
  if n < 0:
    raise ValueError("factorial is undefined for negative numbers")
  if n <= 1:
    return 1
  return n * factorial(n - 1)
