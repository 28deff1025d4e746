"""
Constants and configuration for slacalc.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import os

from pydantic import Field
from pydantic_settings import BaseSettings


SLACALC_FANOUT_WARN_THRESHOLD: int = int(os.getenv("SLACALC_FANOUT_WARN_THRESHOLD", "12"))
SLACALC_EXHAUSTIVE_MAX_ATOMS: int = int(os.getenv("SLACALC_EXHAUSTIVE_MAX_ATOMS", "20"))

# labels emitted by the read-only term traversal
LABEL_NONE = "None"
LABEL_ATOM_PREFIX = "Atom:"
LABEL_NOT = "Not"
LABEL_UNION = "Union"
LABEL_INTERSECT = "Intersect"


class Settings(BaseSettings):
    # inclusion-exclusion costs 2^n per n-ary node; above this we only warn
    fanout_warn_threshold: int = Field(default=SLACALC_FANOUT_WARN_THRESHOLD, ge=1)

    # the truth-table oracle enumerates 2^k assignments
    exhaustive_max_atoms: int = Field(default=SLACALC_EXHAUSTIVE_MAX_ATOMS, ge=1)

    # agreement between the evaluator and the exhaustive oracle
    conformance_tolerance: float = Field(default=1e-7, gt=0.0)

    # graph id handed to external renderers
    root_label: str = "logic_tree"

    model_config = {
        "env_prefix": "SLACALC_",
        "extra": "ignore",
    }


settings = Settings()
