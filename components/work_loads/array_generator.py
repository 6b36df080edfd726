import logging
import random

logger = logging.getLogger(__name__)

ORDERS = ("random", "sorted", "reversed", "nearly_sorted")

# Fraction of positions disturbed by adjacent swaps in "nearly_sorted" arrays
nearly_sorted_swaps = 0.05


def generate_int_array(num_items, seed=None, low=-10**6, high=10**6, order="random"):
  """
  Return a list of `num_items` random integers in [low, high].
  - order="random": as drawn
  - order="sorted" / "reversed": ascending / descending (best / worst case
    for insertion sort)
  - order="nearly_sorted": ascending, then a few adjacent swaps
  """
  if num_items < 0:
    raise ValueError("num_items must be non-negative")
  if low > high:
    raise ValueError(f"low ({low}) must not exceed high ({high})")
  if order not in ORDERS:
    raise ValueError(f"order must be one of {ORDERS}")

  rng = random.Random(seed)
  arr = [rng.randint(low, high) for _ in range(num_items)]

  if order == "sorted":
    arr.sort()
  elif order == "reversed":
    arr.sort(reverse=True)
  elif order == "nearly_sorted":
    arr.sort()
    for _ in range(int(num_items * nearly_sorted_swaps)):
      i = rng.randrange(num_items - 1)
      arr[i], arr[i + 1] = arr[i + 1], arr[i]

  logger.debug("generated %d ints (%s, seed=%s)", num_items, order, seed)
  return arr
