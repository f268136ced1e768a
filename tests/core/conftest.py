"""Core test fixtures: registry with fake gates and list-backed sinks.

Invariants:
    - No IO: fakes satisfy the core Protocols structurally
    - The default registry is administered by "admin"
"""

import pytest

from tokenregistry.core.authorization import SingleAdministratorGate
from tokenregistry.core.domain_types import Identity
from tokenregistry.core.registry import TokenRegistry


class _ListSink:
    """Collects every notified event."""

    def __init__(self):
        self.events = []

    def notify(self, event):
        self.events.append(event)


class _ExplodingSink:
    """Raises on every notification."""

    def __init__(self):
        self.calls = 0

    def notify(self, event):
        self.calls += 1
        raise RuntimeError("sink is down")


class _FixedGate:
    def __init__(self, allow: bool):
        self._allow = allow

    def is_authorized(self, caller):
        return self._allow


@pytest.fixture
def sink():
    return _ListSink()


@pytest.fixture
def exploding_sink():
    return _ExplodingSink()


@pytest.fixture
def allow_all_gate():
    return _FixedGate(True)


@pytest.fixture
def deny_all_gate():
    return _FixedGate(False)


@pytest.fixture
def gate():
    return SingleAdministratorGate(Identity("admin"))


@pytest.fixture
def registry(gate, sink):
    return TokenRegistry(gate, sink)
