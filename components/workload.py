#!/usr/bin/env python3
from components.work_loads.array_generator import generate_int_array
from components.work_loads.expression_generator import ExprConfig, ExprGenerator


class WorkLoad:
    def __init__(self, seed=None):
        self.seed = seed

    def arrays(self, num_items, order="random"):
        return generate_int_array(num_items, self.seed, order=order)

    def expressions(self, num_exprs, depth=3):
        return ExprGenerator(ExprConfig(depth=depth, seed=self.seed)).batch(num_exprs)
