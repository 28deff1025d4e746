"""
Helpers for the common deployment shape: a program runs on one piece of
infrastructure and reaches each upstream service over its own connection.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Iterable, List, Tuple

from slacalc.topology.model import Dependencies, Group, KnownSLA, Service


def infra(name: str, sla: float) -> KnownSLA:
    return Service.known_sla(name, sla)


def connection(name: str, sla: float) -> KnownSLA:
    return Service.known_sla(name, sla)


def program(host: KnownSLA, links: Iterable[Tuple[KnownSLA, Service | Group]] = ()) -> Dependencies:
    # a program is down when its host is down, or any link or upstream is down
    parts: List[Service | Group] = [host]
    for conn, target in links:
        parts.append(conn)
        parts.append(target)
    return Service.dependencies(parts)
