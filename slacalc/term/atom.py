"""
Named leaf failure events and the registry that interns them, so that repeated
references to the same physical resource resolve to one shared probability.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Dict, Iterator, Optional

from slacalc.exceptions import InvalidProbability

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Atom:
    name: str
    probability: float


def _coerce_probability(name: str, value: float) -> float:
    try:
        numeric = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidProbability(f"atom {name!r}: probability {value!r} is not a number") from exc
    if not math.isfinite(numeric) or numeric < 0.0 or numeric > 1.0:
        raise InvalidProbability(f"atom {name!r}: probability {numeric} outside [0, 1]")
    return numeric


class AtomRegistry:
    def __init__(self) -> None:
        self._atoms: Dict[str, Atom] = {}

    def new_atom(self, name: str, probability: float) -> Atom:
        existing = self._atoms.get(name)
        if existing is not None:
            # first registration wins
            if existing.probability != probability:
                log.debug(
                    "atom %s already registered with p=%s, ignoring p=%s",
                    name, existing.probability, probability,
                )
            return existing

        atom = Atom(name=name, probability=_coerce_probability(name, probability))
        self._atoms[name] = atom
        return atom

    def get(self, name: str) -> Optional[Atom]:
        return self._atoms.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._atoms

    def __len__(self) -> int:
        return len(self._atoms)

    def __iter__(self) -> Iterator[Atom]:
        return iter(list(self._atoms.values()))
