"""
Exact probability of a failure term. Unions are expanded with the
inclusion-exclusion principle and intersections of composite operands through
the complement identity P(A and B) = 1 - P(not A or not B), so correlated and
overlapping sub-events (shared atoms) are counted exactly. An intersection of
plain literals takes an O(n) fast path that assumes independent atoms.

Both expansions enumerate the powerset of a node's operands, so a node with n
operands costs 2^n - 1 recursive evaluations. Callers that need bounded
latency must cap fan-out themselves.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from itertools import combinations
from typing import Dict, Iterator, Optional, Sequence, Tuple

import numpy as np

from config import settings
from slacalc.exceptions import TermError
from slacalc.term.atom import Atom
from slacalc.term.model import AtomTerm, Intersect, Not, NoneTerm, Term, Union
from slacalc.term.normalize import flat, not_push_down, prepare

log = logging.getLogger(__name__)


def _powerset(operands: Sequence[Term]) -> Iterator[Tuple[Term, ...]]:
    # non-empty subsets, by size then by operand position
    for size in range(1, len(operands) + 1):
        yield from combinations(operands, size)


def _check_fanout(kind: str, count: int) -> None:
    if count > settings.fanout_warn_threshold:
        log.warning(
            "%s with %d operands needs %d sub-evaluations",
            kind, count, (1 << count) - 1,
        )


def calc_minimum_unit(children: Sequence[Term]) -> Optional[float]:
    """Probability that all ``children`` hold, when every child is a literal.

    Atoms are assumed independent. An atom required both to hold and not to
    hold makes the combination impossible, which yields exactly ``0.0``.
    Returns ``None`` if any child is composite.
    """
    signs: Dict[str, Tuple[bool, Atom]] = {}
    for child in children:
        if isinstance(child, AtomTerm):
            atom, positive = child.atom, True
        elif isinstance(child, Not) and isinstance(child.operand, AtomTerm):
            atom, positive = child.operand.atom, False
        else:
            return None

        seen = signs.get(atom.name)
        if seen is None:
            signs[atom.name] = (positive, atom)
        elif seen[0] != positive:
            return 0.0

    factors = [
        atom.probability if positive else 1.0 - atom.probability
        for _, (positive, atom) in sorted(signs.items())
    ]
    return float(np.prod(np.asarray(factors, dtype=np.float64)))


def _union(operands: Sequence[Term]) -> float:
    _check_fanout("union", len(operands))
    total = 0.0
    for subset in _powerset(operands):
        sign = 1.0 if len(subset) % 2 == 1 else -1.0
        total += sign * inner_calc(flat(Intersect(subset)))
    return total


def _intersect(operands: Sequence[Term]) -> float:
    direct = calc_minimum_unit(operands)
    if direct is not None:
        return direct

    log.debug("no direct product for %d operands, expanding complement", len(operands))
    _check_fanout("intersect", len(operands))
    total = 1.0
    for subset in _powerset(operands):
        sign = -1.0 if len(subset) % 2 == 1 else 1.0
        negated = Intersect([Not(t) for t in subset])
        total += sign * inner_calc(flat(not_push_down(negated)))
    return total


def inner_calc(term: Term) -> float:
    """Evaluate a term that is already pushed down, flattened and None-free."""
    if isinstance(term, AtomTerm):
        return term.probability
    if isinstance(term, Not):
        return 1.0 - inner_calc(term.operand)
    if isinstance(term, Union):
        return _union(term.operands)
    if isinstance(term, Intersect):
        return _intersect(term.operands)
    if isinstance(term, NoneTerm):
        raise TermError("None reached the evaluator; call remove_none first")
    raise TermError(f"unknown term {term!r}")


def calc(term: Term) -> float:
    """Probability that the failure event described by ``term`` happens."""
    prepared = prepare(term)
    if prepared is None:
        # vacuous: never fails
        return 0.0
    return inner_calc(prepared)
