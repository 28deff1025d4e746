"""
slacalc: exact unavailability of composite systems from SLA dependency topologies

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from slacalc.enums import TermKind
from slacalc.term import AtomRegistry, Term
from slacalc.probability import calc
from slacalc.topology import Group, Service, analyze, dump_term

__all__ = ["TermKind", "AtomRegistry", "Term", "calc", "Group", "Service", "analyze", "dump_term"]
