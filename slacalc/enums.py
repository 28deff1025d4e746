"""
Enumerations for the node kinds of a failure-logic term tree.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from enum import Enum


class TermKind(str, Enum):
    none = "none"
    atom = "atom"
    not_ = "not"
    union = "union"
    intersect = "intersect"

    def is_multi(self) -> bool:
        return self in (TermKind.union, TermKind.intersect)

    def label(self) -> str:
        from config import LABEL_INTERSECT, LABEL_NONE, LABEL_NOT, LABEL_UNION

        labels = {
            TermKind.none: LABEL_NONE,
            TermKind.not_: LABEL_NOT,
            TermKind.union: LABEL_UNION,
            TermKind.intersect: LABEL_INTERSECT,
        }
        if self is TermKind.atom:
            raise ValueError("atom labels carry the atom name")
        return labels[self]
