"""
Service dependency topology and its translation into failure terms. A service
is either a leaf with a known SLA or a list of hard dependencies; a group is a
redundant set of dependencies that stays available while at least ``quorum``
of them are available.

Every atom denotes a failure event, so the dumped term describes when the
target is unavailable. The topology must be acyclic; a cycle recurses without
bound.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from itertools import combinations
from typing import Iterable, List, Tuple

from slacalc.exceptions import TopologyError
from slacalc.term.atom import AtomRegistry
from slacalc.term.model import NONE, AtomTerm, Intersect, Term, Union

log = logging.getLogger(__name__)


class Service:
    def dump_term(self, registry: AtomRegistry) -> Term:
        raise NotImplementedError

    @classmethod
    def known_sla(cls, name: str, availability: float) -> KnownSLA:
        return KnownSLA(name=name, availability=availability)

    @classmethod
    def dependencies(cls, dependencies: Iterable[Dependency | Service | Group]) -> Dependencies:
        return Dependencies(dependencies=tuple(dependencies))


@dataclass(frozen=True)
class KnownSLA(Service):
    name: str
    availability: float

    def __post_init__(self) -> None:
        try:
            value = float(self.availability)
        except (TypeError, ValueError) as exc:
            raise TopologyError(f"service {self.name!r}: availability {self.availability!r} is not a number") from exc
        if not math.isfinite(value) or value < 0.0 or value > 1.0:
            raise TopologyError(f"service {self.name!r}: availability {value} outside [0, 1]")
        object.__setattr__(self, "availability", value)

    @property
    def failure_probability(self) -> float:
        return 1.0 - self.availability

    def dump_term(self, registry: AtomRegistry) -> Term:
        return AtomTerm(registry.new_atom(self.name, self.failure_probability))


@dataclass(frozen=True, eq=False)
class Dependency:
    target: Service | Group

    def __post_init__(self) -> None:
        if not isinstance(self.target, (Service, Group)):
            raise TopologyError(f"cannot depend on {type(self.target).__name__}")

    def dump_term(self, registry: AtomRegistry) -> Term:
        return self.target.dump_term(registry)


def _as_dependency(item: Dependency | Service | Group) -> Dependency:
    return item if isinstance(item, Dependency) else Dependency(target=item)


@dataclass(frozen=True, eq=False)
class Dependencies(Service):
    dependencies: Tuple[Dependency, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "dependencies", tuple(_as_dependency(d) for d in self.dependencies)
        )

    def dump_term(self, registry: AtomRegistry) -> Term:
        # any failing hard dependency fails the whole service
        if not self.dependencies:
            return NONE
        return Union([d.dump_term(registry) for d in self.dependencies])


@dataclass(frozen=True, eq=False)
class Group:
    dependencies: Tuple[Dependency, ...]
    quorum: int

    def __post_init__(self) -> None:
        members = tuple(_as_dependency(d) for d in self.dependencies)
        if not members:
            raise TopologyError("group has no dependencies")
        if isinstance(self.quorum, bool) or not isinstance(self.quorum, int):
            raise TopologyError(f"group quorum {self.quorum!r} is not an integer")
        if self.quorum < 0:
            raise TopologyError(f"group quorum {self.quorum} is negative")
        if self.quorum > len(members):
            raise TopologyError(
                f"group quorum {self.quorum} exceeds its {len(members)} dependencies"
            )
        object.__setattr__(self, "dependencies", members)

    @classmethod
    def new(cls, dependencies: Iterable[Dependency | Service | Group], quorum: int) -> Group:
        return cls(dependencies=tuple(dependencies), quorum=quorum)

    @property
    def tolerated_failures(self) -> int:
        return len(self.dependencies) - self.quorum

    def dump_term(self, registry: AtomRegistry) -> Term:
        """Union of every combination of members whose joint failure breaks quorum.

        The group fails once fewer than ``quorum`` members remain up, i.e. when
        any ``n - quorum + 1`` or more of its ``n`` members fail together.
        """
        member_terms = [d.dump_term(registry) for d in self.dependencies]
        total = len(member_terms)

        failing: List[Term] = []
        for fail_count in range(self.tolerated_failures + 1, total + 1):
            for combination in combinations(member_terms, fail_count):
                failing.append(Intersect(combination))

        log.debug(
            "group of %d with quorum %d expands to %d failure combinations",
            total, self.quorum, len(failing),
        )
        if not failing:
            return NONE
        return Union(failing)


def dump_term(target: Service | Group | Dependency, registry: AtomRegistry) -> Term:
    return target.dump_term(registry)
