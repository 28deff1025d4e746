"""
Read-only traversal of a finished term tree for external renderers. Each node
gets a pre-order id and a kind label; edges link a parent id to a child id.
Nothing here renders or writes files.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from config import LABEL_ATOM_PREFIX
from slacalc.enums import TermKind
from slacalc.term.model import AtomTerm, Term


@dataclass(frozen=True)
class TermNode:
    id: int
    kind: TermKind
    label: str


@dataclass(frozen=True)
class TermEdge:
    source: int
    target: int


def label(term: Term) -> str:
    if isinstance(term, AtomTerm):
        return f"{LABEL_ATOM_PREFIX}{term.name}"
    return term.kind.label()


def walk(term: Term) -> Iterator[Tuple[TermNode, Optional[int]]]:
    """Yield ``(node, parent_id)`` in pre-order; the root's parent is ``None``."""
    next_id = 0
    stack: List[Tuple[Term, Optional[int]]] = [(term, None)]
    while stack:
        current, parent = stack.pop()
        node = TermNode(id=next_id, kind=current.kind, label=label(current))
        next_id += 1
        yield node, parent
        for child in reversed(current.children):
            stack.append((child, node.id))


def nodes(term: Term) -> List[TermNode]:
    return [node for node, _ in walk(term)]


def edges(term: Term) -> List[TermEdge]:
    return [
        TermEdge(source=parent, target=node.id)
        for node, parent in walk(term)
        if parent is not None
    ]


def graph(term: Term) -> Tuple[str, List[TermNode], List[TermEdge]]:
    from config import settings

    walked = list(walk(term))
    return (
        settings.root_label,
        [node for node, _ in walked],
        [TermEdge(source=p, target=n.id) for n, p in walked if p is not None],
    )
