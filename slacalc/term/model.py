"""
Closed tagged-union representation of failure logic. A term is one of
``NoneTerm`` (the event that never happens), ``AtomTerm`` (a leaf failure
event), ``Not``, ``Union`` (any operand holds) or ``Intersect`` (all operands
hold). Terms are immutable value trees; only ``Atom`` leaves are shared.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple

from slacalc.enums import TermKind
from slacalc.term.atom import Atom


class Term:
    kind: ClassVar[TermKind]

    @property
    def children(self) -> Tuple[Term, ...]:
        return ()

    def is_none(self) -> bool:
        return self.kind is TermKind.none

    def remove_none(self) -> Optional[Term]:
        from slacalc.term.normalize import remove_none
        return remove_none(self)

    def flat(self) -> Term:
        from slacalc.term.normalize import flat
        return flat(self)

    def not_push_down(self) -> Term:
        from slacalc.term.normalize import not_push_down
        return not_push_down(self)

    def dnf(self) -> Term:
        from slacalc.term.normalize import dnf
        return dnf(self)

    def calc(self) -> float:
        from slacalc.probability.evaluator import calc
        return calc(self)


@dataclass(frozen=True)
class NoneTerm(Term):
    kind: ClassVar[TermKind] = TermKind.none

    def __str__(self) -> str:
        return "None"


NONE = NoneTerm()


@dataclass(frozen=True)
class AtomTerm(Term):
    atom: Atom
    kind: ClassVar[TermKind] = TermKind.atom

    @property
    def name(self) -> str:
        return self.atom.name

    @property
    def probability(self) -> float:
        return self.atom.probability

    def __str__(self) -> str:
        return self.atom.name


@dataclass(frozen=True)
class Not(Term):
    operand: Term
    kind: ClassVar[TermKind] = TermKind.not_

    @property
    def children(self) -> Tuple[Term, ...]:
        return (self.operand,)

    def is_literal(self) -> bool:
        return isinstance(self.operand, AtomTerm)

    def __str__(self) -> str:
        return f"!{self.operand}"


@dataclass(frozen=True)
class _MultiTerm(Term):
    operands: Tuple[Term, ...]

    def __post_init__(self) -> None:
        # accept any iterable so callers can pass lists
        object.__setattr__(self, "operands", tuple(self.operands))

    @property
    def children(self) -> Tuple[Term, ...]:
        return self.operands


@dataclass(frozen=True)
class Union(_MultiTerm):
    kind: ClassVar[TermKind] = TermKind.union

    def __str__(self) -> str:
        return "(" + " | ".join(str(t) for t in self.operands) + ")"


@dataclass(frozen=True)
class Intersect(_MultiTerm):
    kind: ClassVar[TermKind] = TermKind.intersect

    def __str__(self) -> str:
        return "(" + " & ".join(str(t) for t in self.operands) + ")"


def is_literal(term: Term) -> bool:
    return isinstance(term, AtomTerm) or (isinstance(term, Not) and term.is_literal())
