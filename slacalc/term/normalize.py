"""
Pure tree-to-tree transforms over failure terms: vacuous-branch removal,
associativity flattening, De Morgan negation push-down, and distribution into
disjunctive normal form. Every function returns a new tree and leaves its
input untouched.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import List, Optional

from slacalc.exceptions import EmptyOperandError, TermError
from slacalc.term.model import (
    NONE,
    AtomTerm,
    Intersect,
    Not,
    NoneTerm,
    Term,
    Union,
    is_literal,
)


def _rebuild(kind: type, operands: List[Term]) -> Optional[Term]:
    if not operands:
        return None
    if len(operands) == 1:
        return operands[0]
    return kind(operands)


def remove_none(term: Term) -> Optional[Term]:
    """Strip ``None`` branches, returning ``None`` when the whole term is vacuous.

    ``None`` is the event that never happens: it vanishes from a union, and it
    absorbs an intersection (nothing can co-occur with it). A node left with a
    single operand is replaced by that operand. A ``Union`` or ``Intersect``
    built with no operands at all is malformed and raises
    ``EmptyOperandError``; it is not the same as one whose operands all vanish.
    """
    if isinstance(term, NoneTerm):
        return None
    if isinstance(term, AtomTerm):
        return term
    if isinstance(term, Not):
        inner = remove_none(term.operand)
        return Not(inner) if inner is not None else None
    if term.kind.is_multi() and not term.operands:
        raise EmptyOperandError(f"{term.kind.value} with no operands")
    if isinstance(term, Union):
        kept = [c for c in (remove_none(t) for t in term.operands) if c is not None]
        return _rebuild(Union, kept)
    if isinstance(term, Intersect):
        required = [remove_none(t) for t in term.operands]
        if any(c is None for c in required):
            return None
        return _rebuild(Intersect, required)
    raise TermError(f"unknown term {term!r}")


def flat(term: Term) -> Term:
    """Flatten nested same-kind operators and collapse singletons.

    Afterwards no ``Union`` has a ``Union`` operand, no ``Intersect`` has an
    ``Intersect`` operand, and every multi-ary node has at least two operands.
    """
    if isinstance(term, (NoneTerm, AtomTerm)):
        return term
    if isinstance(term, Not):
        return Not(flat(term.operand))
    if term.kind.is_multi():
        if not term.operands:
            raise EmptyOperandError(f"{term.kind.value} with no operands")
        if len(term.operands) == 1:
            return flat(term.operands[0])

        merged: List[Term] = []
        for operand in term.operands:
            child = flat(operand)
            if type(child) is type(term):
                merged.extend(child.operands)
            else:
                merged.append(child)
        return type(term)(merged)
    raise TermError(f"unknown term {term!r}")


def not_push_down(term: Term) -> Term:
    """Apply De Morgan's laws until every negation sits directly on an atom."""
    if isinstance(term, (NoneTerm, AtomTerm)):
        return term
    if isinstance(term, Union):
        return Union([not_push_down(t) for t in term.operands])
    if isinstance(term, Intersect):
        return Intersect([not_push_down(t) for t in term.operands])
    if not isinstance(term, Not):
        raise TermError(f"unknown term {term!r}")

    inner = term.operand
    if isinstance(inner, NoneTerm):
        return NONE
    if isinstance(inner, AtomTerm):
        return term
    if isinstance(inner, Not):
        return not_push_down(inner.operand)
    if isinstance(inner, Intersect):
        return Union([not_push_down(Not(t)) for t in inner.operands])
    if isinstance(inner, Union):
        return Intersect([not_push_down(Not(t)) for t in inner.operands])
    raise TermError(f"unknown term {inner!r}")


def prepare(term: Term) -> Optional[Term]:
    """Strip, push down and flatten ``term`` into the shape the evaluator expects.

    Returns ``None`` when the term is vacuous and can never fail.
    """
    cleaned = remove_none(term)
    if cleaned is None:
        return None
    return flat(not_push_down(cleaned))


def _disjuncts(term: Term) -> List[Term]:
    return list(term.operands) if isinstance(term, Union) else [term]


def _distribute(left: Term, right: Term) -> Term:
    products = [flat(Intersect([a, b])) for a in _disjuncts(left) for b in _disjuncts(right)]
    return flat(Union(products))


def _dnf(term: Term) -> Term:
    if is_literal(term):
        return term
    if isinstance(term, Union):
        return flat(Union([_dnf(t) for t in term.operands]))
    if isinstance(term, Intersect):
        acc = _dnf(term.operands[0])
        for operand in term.operands[1:]:
            acc = _distribute(acc, _dnf(operand))
        return acc
    raise TermError(f"term not in negation normal form: {term}")


def dnf(term: Term) -> Term:
    """Rewrite ``term`` as a Union of Intersects of literals.

    Used for canonical comparison; the evaluator works on the flat tree
    directly and never needs this.
    """
    prepared = prepare(term)
    if prepared is None:
        return NONE
    return _dnf(prepared)
