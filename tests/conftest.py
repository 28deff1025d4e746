import os
import sys
import pytest

# ensure workspace root is on sys.path so our application packages can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from slacalc.term import AtomRegistry, AtomTerm


@pytest.fixture
def registry():
    return AtomRegistry()


@pytest.fixture
def atom(registry):
    """Factory returning an AtomTerm interned in the per-test registry."""

    def make(name: str, probability: float) -> AtomTerm:
        return AtomTerm(registry.new_atom(name, probability))

    return make
