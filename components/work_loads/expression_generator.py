import logging
import random
from typing import Dict, Optional
from dataclasses import dataclass
from faker import Faker

logger = logging.getLogger(__name__)

## === Config Class === ##

@dataclass
class ExprConfig:
    """
    Configuration for ExprGenerator
        depth: int, number of nested operator levels (0 yields a bare number)
        min_operand / max_operand: int, inclusive range of operand values
        operator_weights: dict, weights for {'+', '-', '*', '/'}
        seed: int, seed for random number generator
    """
    depth: int = 3
    min_operand: int = 1
    max_operand: int = 99
    operator_weights: Optional[Dict[str, float]] = None
    seed: Optional[int] = None

    def __post_init__(self):
        if self.depth < 0:
            raise ValueError("depth must be non-negative")
        if self.min_operand > self.max_operand:
            raise ValueError("min_operand must not exceed max_operand")
        if self.operator_weights is None:
            self.operator_weights = {'+': 0.3, '-': 0.3, '*': 0.25, '/': 0.15}
        else:
            unknown = [k for k in self.operator_weights if k not in ('+', '-', '*', '/')]
            if unknown:
                raise ValueError(f"operator_weights has unknown operators: {unknown}")
            if any(w < 0 for w in self.operator_weights.values()):
                raise ValueError("operator_weights must be non-negative")
            if sum(self.operator_weights.values()) == 0:
                raise ValueError("Sum of operator_weights must be > 0")
            self.operator_weights = {op: self.operator_weights[op] for op in sorted(self.operator_weights)}


class ExprGenerator:
    """Builds random fully parenthesized, space separated expressions."""

    def __init__(self, config: ExprConfig):
        self.config = config
        self.rng = random.Random(self.config.seed)

        self.fake = Faker()
        if self.config.seed is not None:
            self.fake.seed_instance(self.config.seed)
        self.operators, self.weights = zip(*self.config.operator_weights.items())

    def _operand(self):
        return str(self.fake.random_int(min=self.config.min_operand, max=self.config.max_operand))

    def _operator(self):
        return self.rng.choices(self.operators, weights=self.weights, k=1)[0]

    def _build(self, depth):
        if depth == 0:
            return self._operand()
        # at least one side carries the full remaining depth
        deep_left = self.rng.random() < 0.5
        left = self._build(depth - 1 if deep_left else self.rng.randint(0, depth - 1))
        right = self._build(depth - 1 if not deep_left else self.rng.randint(0, depth - 1))
        return f"( {left} {self._operator()} {right} )"

    def single(self):
        return self._build(self.config.depth)

    def batch(self, n):
        if n <= 0:
            raise ValueError("n must be positive")
        exprs = [self.single() for _ in range(n)]
        logger.debug("generated %d expressions of depth %d", n, self.config.depth)
        return exprs


def token_count(expression):
    """Number of whitespace separated tokens in `expression`."""
    return len(expression.split())
