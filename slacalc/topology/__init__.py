"""
Topology package exports.

This package provides the service/group dependency model, its translation into
failure terms, builders for host-plus-connections programs, and the
availability report.
"""

from slacalc.topology.model import Dependencies, Dependency, Group, KnownSLA, Service, dump_term
from slacalc.topology.builders import connection, infra, program
from slacalc.topology.report import AvailabilityReport, analyze

__all__ = [
    "Dependencies", "Dependency", "Group", "KnownSLA", "Service", "dump_term",
    "connection", "infra", "program",
    "AvailabilityReport", "analyze",
]
