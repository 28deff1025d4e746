"""
Test cases for the service/group topology and its translation into failure
terms, including the quorum boundary and an end-to-end comparison against a
brute-force enumeration of every atom state.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import itertools
from math import comb

import pytest

from slacalc.exceptions import TopologyError
from slacalc.probability import calc, verify
from slacalc.term import NONE, AtomRegistry, AtomTerm, Intersect, Union
from slacalc.topology import (
    Dependencies,
    Dependency,
    Group,
    KnownSLA,
    Service,
    connection,
    dump_term,
    infra,
    program,
)


def test_known_sla_dumps_failure_atom(registry):
    svc = Service.known_sla("db", 0.99)
    term = dump_term(svc, registry)
    assert isinstance(term, AtomTerm)
    assert term.name == "db"
    assert term.probability == pytest.approx(0.01)
    assert registry.get("db") is term.atom


@pytest.mark.parametrize("bad", [-0.01, 1.01, float("inf"), None])
def test_known_sla_rejects_bad_availability(bad):
    with pytest.raises(TopologyError):
        Service.known_sla("db", bad)


def test_hard_dependencies_union_failures(registry):
    svc = Service.dependencies([Service.known_sla("a", 0.9), Service.known_sla("b", 0.8)])
    term = svc.dump_term(registry)
    assert isinstance(term, Union)
    # available only when both are up
    assert calc(term) == pytest.approx(1 - 0.9 * 0.8)


def test_empty_dependencies_never_fail(registry):
    empty = Service.dependencies([])
    assert empty.dump_term(registry) == NONE
    outer = Service.dependencies([empty, Service.known_sla("a", 0.9)])
    assert calc(outer.dump_term(registry)) == pytest.approx(0.1)


def test_dependency_wrapping():
    leaf = Service.known_sla("a", 0.9)
    svc = Dependencies(dependencies=(leaf, Dependency(target=leaf)))
    assert all(isinstance(d, Dependency) for d in svc.dependencies)
    assert svc.dependencies[0].target is leaf
    with pytest.raises(TopologyError):
        Dependency(target="a")


def test_group_validation():
    a = Service.known_sla("a", 0.9)
    with pytest.raises(TopologyError):
        Group.new([], 1)
    with pytest.raises(TopologyError):
        Group.new([a], 2)
    with pytest.raises(TopologyError):
        Group.new([a], -1)


@pytest.mark.parametrize("quorum", [1.5, "1", None, True])
def test_group_rejects_non_integer_quorum(quorum):
    with pytest.raises(TopologyError):
        Group.new([Service.known_sla("a", 0.9), Service.known_sla("b", 0.9)], quorum)


def test_group_with_zero_quorum_never_fails(registry):
    group = Group.new([Service.known_sla("a", 0.5)], 0)
    assert group.tolerated_failures == 1
    assert Group.new([Service.known_sla("b", 0.5)], 1).tolerated_failures == 0
    assert group.dump_term(registry) == NONE


def test_group_expands_breaking_combinations(registry):
    members = [Service.known_sla(n, 0.9) for n in ("a", "b", "c")]
    term = Group.new(members, 2).dump_term(registry)
    assert isinstance(term, Union)
    # two-of-three failing, plus all three
    assert len(term.operands) == 3 + 1
    assert all(isinstance(t, Intersect) for t in term.operands)
    assert [len(t.operands) for t in term.operands] == [2, 2, 2, 3]


@pytest.mark.parametrize("n,quorum", [(3, 1), (3, 2), (3, 3), (4, 2), (4, 3)])
def test_group_matches_binomial(registry, n, quorum):
    q = 0.1
    members = [Service.known_sla(f"m{i}", 1 - q) for i in range(n)]
    expected = sum(comb(n, i) * q ** i * (1 - q) ** (n - i) for i in range(n - quorum + 1, n + 1))
    term = Group.new(members, quorum).dump_term(registry)
    assert calc(term) == pytest.approx(expected, abs=1e-7)


def test_quorum_chain_matches_brute_force():
    q = 0.1
    sla = {
        "g1": 1 - q, "g2": 1 - q, "g3": 1 - q, "g4": 1 - q,
        "infra-mid": 0.99, "conn-mid": 0.995,
        "infra-top": 0.999, "conn-top": 0.98,
    }
    group = Group.new([Service.known_sla(n, sla[n]) for n in ("g1", "g2", "g3", "g4")], 2)
    mid = program(infra("infra-mid", sla["infra-mid"]), [(connection("conn-mid", sla["conn-mid"]), group)])
    top = program(infra("infra-top", sla["infra-top"]), [(connection("conn-top", sla["conn-top"]), mid)])

    names = list(sla)
    expected = 0.0
    for state in itertools.product([False, True], repeat=len(names)):
        failed = dict(zip(names, state))
        weight = 1.0
        for name in names:
            p_fail = 1 - sla[name]
            weight *= p_fail if failed[name] else 1 - p_fail
        group_down = sum(failed[g] for g in ("g1", "g2", "g3", "g4")) > 4 - 2
        mid_down = failed["infra-mid"] or failed["conn-mid"] or group_down
        top_down = failed["infra-top"] or failed["conn-top"] or mid_down
        if top_down:
            expected += weight

    registry = AtomRegistry()
    assert calc(top.dump_term(registry)) == pytest.approx(expected, abs=1e-7)
    assert len(registry) == len(names)


def test_shared_host_is_one_atom():
    host = infra("rack-1", 0.99)
    upstream = Service.known_sla("store", 0.995)
    replicas = [program(host, [(connection(f"link-{i}", 0.999), upstream)]) for i in range(3)]
    group = Group.new(replicas, 2)

    registry = AtomRegistry()
    term = group.dump_term(registry)
    assert [a.name for a in registry] == ["rack-1", "link-0", "store", "link-1", "link-2"]
    assert verify(term)
    # the shared host dominates: replicas cannot fail independently of it
    assert calc(term) > 0.01


def test_nested_group_with_shared_atom_matches_truth_table():
    shared = Service.known_sla("dns", 0.999)
    pair = Group.new([Service.known_sla("z1", 0.9), Service.known_sla("z2", 0.9)], 1)
    members = [
        Service.dependencies([Service.known_sla("x", 0.95), shared]),
        Service.dependencies([Service.known_sla("y", 0.95), shared]),
        pair,
    ]
    term = Group.new(members, 2).dump_term(AtomRegistry())
    assert verify(term)


def test_known_sla_is_value_object():
    assert KnownSLA(name="a", availability=0.9) == Service.known_sla("a", 0.9)
    assert Service.known_sla("a", 1).availability == 1.0
