"""
Truth-table oracle for failure terms. Enumerates every failed/up assignment of
the distinct atoms, evaluates the term on all of them at once with numpy, and
sums the weights of the assignments in which the term holds. Exponential in
the number of atoms; used to cross-check the inclusion-exclusion evaluator on
small topologies.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Optional

import numpy as np

from config import settings
from slacalc.exceptions import TermError
from slacalc.term.atom import Atom
from slacalc.term.model import AtomTerm, Intersect, Not, NoneTerm, Term, Union

log = logging.getLogger(__name__)


def atoms(term: Term) -> List[Atom]:
    seen: Dict[str, Atom] = {}
    stack: List[Term] = [term]
    while stack:
        current = stack.pop()
        if isinstance(current, AtomTerm):
            seen.setdefault(current.name, current.atom)
        else:
            stack.extend(reversed(current.children))
    return list(seen.values())


def evaluate(term: Term, failed: Mapping[str, bool]) -> bool:
    if isinstance(term, NoneTerm):
        return False
    if isinstance(term, AtomTerm):
        return bool(failed[term.name])
    if isinstance(term, Not):
        return not evaluate(term.operand, failed)
    if isinstance(term, Union):
        return any(evaluate(t, failed) for t in term.operands)
    if isinstance(term, Intersect):
        return all(evaluate(t, failed) for t in term.operands)
    raise TermError(f"unknown term {term!r}")


def _evaluate_columns(term: Term, columns: Mapping[str, np.ndarray], rows: int) -> np.ndarray:
    if isinstance(term, NoneTerm):
        return np.zeros(rows, dtype=bool)
    if isinstance(term, AtomTerm):
        return columns[term.name]
    if isinstance(term, Not):
        return ~_evaluate_columns(term.operand, columns, rows)
    if isinstance(term, Union):
        result = np.zeros(rows, dtype=bool)
        for operand in term.operands:
            result |= _evaluate_columns(operand, columns, rows)
        return result
    if isinstance(term, Intersect):
        result = np.ones(rows, dtype=bool)
        for operand in term.operands:
            result &= _evaluate_columns(operand, columns, rows)
        return result
    raise TermError(f"unknown term {term!r}")


def exhaustive_probability(term: Term) -> float:
    leaves = atoms(term)
    k = len(leaves)
    if k > settings.exhaustive_max_atoms:
        raise TermError(
            f"{k} atoms exceed exhaustive_max_atoms={settings.exhaustive_max_atoms}"
        )

    rows = 1 << k
    index = np.arange(rows, dtype=np.int64)
    # bit i of the row index set means atom i has failed
    states = ((index[:, None] >> np.arange(k, dtype=np.int64)) & 1).astype(bool)
    p = np.array([a.probability for a in leaves], dtype=np.float64)
    weights = np.prod(np.where(states, p, 1.0 - p), axis=1)

    columns = {a.name: states[:, i] for i, a in enumerate(leaves)}
    holds = _evaluate_columns(term, columns, rows)
    return float(weights[holds].sum())


def verify(term: Term, tolerance: Optional[float] = None) -> bool:
    from slacalc.probability.evaluator import calc

    if tolerance is None:
        tolerance = settings.conformance_tolerance
    exact = calc(term)
    oracle = exhaustive_probability(term)
    if abs(exact - oracle) > tolerance:
        log.warning("evaluator %.12f disagrees with truth table %.12f", exact, oracle)
        return False
    return True
