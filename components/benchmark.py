"""
Empirical running-time measurements for the algorithm library.

Every benchmarked algorithm is registered as a `Case`: a `prepare` step that
turns a generated integer array into call arguments (run outside the timer,
and again before every repeat so in-place sorts always see unsorted input)
and the `fn` being timed.

Results come back as tidy pandas DataFrames (`algorithm, n, seconds`) so the
dashboard can plot them directly, and `fit_growth` estimates each
algorithm's polynomial degree from the slope of log(seconds) over log(n).
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Optional, Tuple

import numpy as np
import pandas as pd

from algorithms.combinatorial import has_subset_sum_zero, has_triple_sum_zero
from algorithms.searching import binary_search, linear_search
from algorithms.sorting import insertion_sort, merge_sort, merge_sort_buffered
from components.work_loads.array_generator import ORDERS
from components.workload import WorkLoad
from structures.array_stack import ArrayStack
from structures.stack import make_stack

logger = logging.getLogger(__name__)


DEFAULT_SIZES = (250, 500, 1000, 2000)


@dataclass
class BenchConfig:
    """
    Configuration for run_benchmark
        sizes: tuple[int], input sizes to measure
        repeats: int, runs per size; the fastest is kept
        order: str, array order passed to the workload generator
        seed: int, seed for the workload generator
    """
    sizes: Tuple[int, ...] = DEFAULT_SIZES
    repeats: int = 3
    order: str = "random"
    seed: Optional[int] = None

    def __post_init__(self):
        self.sizes = tuple(self.sizes)
        if not self.sizes:
            raise ValueError("sizes must not be empty")
        if any(n < 1 for n in self.sizes):
            raise ValueError("sizes must all be positive")
        if self.repeats < 1:
            raise ValueError("repeats must be at least 1")
        if self.order not in ORDERS:
            raise ValueError(f"order must be one of {ORDERS}")


@dataclass(frozen=True)
class Case:
    fn: Callable
    prepare: Callable = field(default=lambda data: (list(data),))
    complexity: str = ""


def _missing_target(data):
    return (max(data) + 1) if data else 0


def _positive(data):
    # Shift to strictly positive values so no combination sums to zero
    return ([abs(x) + 1 for x in data],)


def _push_pop_all(kind, data):
    stack = make_stack(kind)
    for x in data:
        stack.push(x)
    while not stack.is_empty():
        stack.pop()


SORTS = {
    "insertion sort": Case(insertion_sort, complexity="Θ(n²)"),
    "merge sort (naive)": Case(merge_sort, complexity="Θ(n log n)"),
    "merge sort (buffered)": Case(merge_sort_buffered, complexity="Θ(n log n)"),
}

SEARCHES = {
    "linear search": Case(
        linear_search,
        prepare=lambda data: (data, _missing_target(data)),
        complexity="Θ(n)"),
    "binary search": Case(
        binary_search,
        prepare=lambda data: (sorted(data), _missing_target(data)),
        complexity="Θ(log n)"),
}

STACKS = {
    "linked stack": Case(
        _push_pop_all, prepare=lambda data: ("linked", data), complexity="Θ(n)"),
    "array stack": Case(
        _push_pop_all, prepare=lambda data: ("array", data), complexity="Θ(n) amortized"),
}

COMBINATORIAL = {
    "triple sum": Case(has_triple_sum_zero, prepare=_positive, complexity="Θ(n³)"),
    "subset sum": Case(has_subset_sum_zero, prepare=_positive, complexity="Θ(2ⁿ)"),
}

REGISTRY = {**SORTS, **SEARCHES, **STACKS, **COMBINATORIAL}


def time_call(case, data, repeats=3):
    """Return the fastest of `repeats` timed runs of `case` on `data`, in seconds."""
    if repeats < 1:
        raise ValueError("repeats must be at least 1")
    best = float("inf")
    for _ in range(repeats):
        args = case.prepare(data)
        start = time.perf_counter()
        case.fn(*args)
        best = min(best, time.perf_counter() - start)
    return best


def run_benchmark(names, config=None, registry=REGISTRY):
    """Time every algorithm in `names` at every size in `config.sizes`.

    Returns
    -------
    pandas.DataFrame
        One row per (algorithm, n) with columns ``algorithm, n, seconds``.
    """
    config = config or BenchConfig()
    unknown = [name for name in names if name not in registry]
    if unknown:
        raise ValueError(f"unknown algorithms: {unknown}")

    workload = WorkLoad(config.seed)
    rows = []
    for n in config.sizes:
        data = workload.arrays(n, order=config.order)
        for name in names:
            seconds = time_call(registry[name], data, config.repeats)
            rows.append({"algorithm": name, "n": n, "seconds": seconds})
        logger.info("benchmarked %d algorithm(s) at n=%d", len(names), n)
    return pd.DataFrame(rows, columns=["algorithm", "n", "seconds"])


def fit_growth(results):
    """Estimate each algorithm's growth exponent k in seconds ≈ c·nᵏ.

    Fits a line to log(seconds) over log(n); algorithms with fewer than two
    distinct sizes (or no positive timings) are skipped.
    """
    rows = []
    for name, group in results.groupby("algorithm", sort=False):
        group = group[(group["seconds"] > 0) & (group["n"] > 0)]
        if group["n"].nunique() < 2:
            logger.debug("skipping %s: not enough sizes to fit", name)
            continue
        slope, intercept = np.polyfit(np.log(group["n"]), np.log(group["seconds"]), 1)
        rows.append({"algorithm": name, "exponent": float(slope), "log_coefficient": float(intercept)})
    return pd.DataFrame(rows, columns=["algorithm", "exponent", "log_coefficient"])


def stack_resize_profile(num_ops):
    """Per-operation copy cost of an ArrayStack over `num_ops` pushes then pops.

    The ``cumulative_copies`` column stays below ``3 * op_index``: the
    amortized O(1) bound of doubling/halving.
    """
    if num_ops < 1:
        raise ValueError("num_ops must be positive")
    stack = ArrayStack()
    rows = []
    ops = ["push"] * num_ops + ["pop"] * num_ops
    for i, op in enumerate(ops, start=1):
        before = stack.copy_work
        if op == "push":
            stack.push(i)
        else:
            stack.pop()
        rows.append({
            "op_index": i,
            "op": op,
            "size": stack.size(),
            "capacity": stack.capacity,
            "copies": stack.copy_work - before,
            "cumulative_copies": stack.copy_work,
        })
    return pd.DataFrame(rows)
