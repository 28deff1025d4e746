"""
Availability summary for one target in a topology: the exact probability that
it is unavailable, its complement, and the size of the failure logic that was
evaluated.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional

from slacalc.probability.evaluator import inner_calc
from slacalc.probability.exhaustive import atoms
from slacalc.term.atom import AtomRegistry
from slacalc.term.normalize import prepare
from slacalc.term.traverse import nodes
from slacalc.topology.model import Group, Service

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class AvailabilityReport:
    unavailability: float
    availability: float
    nines: float
    atom_count: int
    node_count: int


def analyze(target: Service | Group, registry: Optional[AtomRegistry] = None) -> AvailabilityReport:
    if registry is None:
        registry = AtomRegistry()

    # count only what the target uses; a shared registry may hold more atoms
    normalized = prepare(target.dump_term(registry))
    if normalized is None:
        unavailability, atom_count, node_count = 0.0, 0, 0
    else:
        unavailability = inner_calc(normalized)
        atom_count = len(atoms(normalized))
        node_count = len(nodes(normalized))

    nines = -math.log10(unavailability) if unavailability > 0.0 else math.inf
    report = AvailabilityReport(
        unavailability=unavailability,
        availability=1.0 - unavailability,
        nines=nines,
        atom_count=atom_count,
        node_count=node_count,
    )
    log.info(
        "availability %.9f (%.2f nines) over %d atoms, %d term nodes",
        report.availability, report.nines, report.atom_count, report.node_count,
    )
    return report
