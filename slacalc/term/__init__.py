"""
Term algebra package exports.

This package provides the failure-logic term tree, the atom registry that
interns its leaves, the normalizing transforms, and a read-only traversal used
by external renderers.
"""

from slacalc.term.atom import Atom, AtomRegistry
from slacalc.term.model import NONE, AtomTerm, Intersect, Not, NoneTerm, Term, Union
from slacalc.term.normalize import dnf, flat, not_push_down, prepare, remove_none
from slacalc.term.traverse import TermEdge, TermNode, edges, nodes, walk

__all__ = [
    "Atom", "AtomRegistry",
    "NONE", "AtomTerm", "Intersect", "Not", "NoneTerm", "Term", "Union",
    "dnf", "flat", "not_push_down", "prepare", "remove_none",
    "TermEdge", "TermNode", "edges", "nodes", "walk",
]
