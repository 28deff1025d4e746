"""
Probability evaluation package exports.

This package provides the exact inclusion-exclusion evaluator used for every
availability figure, and a numpy truth-table oracle that cross-checks it on
small trees.
"""

from slacalc.probability.evaluator import calc, calc_minimum_unit, inner_calc
from slacalc.probability.exhaustive import atoms, evaluate, exhaustive_probability, verify

__all__ = [
    "calc", "calc_minimum_unit", "inner_calc",
    "atoms", "evaluate", "exhaustive_probability", "verify",
]
