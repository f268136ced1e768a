"""Non-Transferable Policy: the always-rejecting transfer surface.

Tests cover:
    - transfer / approve / take_ownership each emit exactly one NotTransferable
    - no ownership, balance or message change, for any caller or argument
    - never raises, even for unknown ids and null identities
"""

import pytest

from tokenregistry.core.domain_types import NULL_IDENTITY, DisabledOperation, Identity
from tokenregistry.core.events import NotTransferable
from tokenregistry.core.non_transferable import (
    NOT_TRANSFERABLE_TEXT, NonTransferablePolicy,
)
from tokenregistry.core.registry import TokenRegistry
from tokenregistry.core.registry_protocols import TransferCapability

ADMIN = Identity("admin")
ALICE = Identity("alice")
BOB = Identity("bob")


# --- Policy in isolation ------------------------------------------------------

def test_policy_and_registry_cover_transfer_capability():
    declared = {name for name in vars(TransferCapability) if not name.startswith("_")}
    assert declared == {"transfer", "approve", "take_ownership"}
    for name in declared:
        assert callable(getattr(NonTransferablePolicy, name))
        assert callable(getattr(TokenRegistry, name))


def test_policy_emits_and_returns_event():
    emitted = []
    policy = NonTransferablePolicy(emitted.append)
    event = policy.transfer(ALICE, BOB, 0)
    assert event == NotTransferable(NOT_TRANSFERABLE_TEXT[DisabledOperation.TRANSFER])
    assert emitted == [event]


def test_each_operation_has_its_own_text():
    emitted = []
    policy = NonTransferablePolicy(emitted.append)
    policy.transfer(ALICE, BOB, 0)
    policy.approve(ALICE, BOB, 0)
    policy.take_ownership(ALICE, 0)
    assert [e.text for e in emitted] == [
        NOT_TRANSFERABLE_TEXT[DisabledOperation.TRANSFER],
        NOT_TRANSFERABLE_TEXT[DisabledOperation.APPROVE],
        NOT_TRANSFERABLE_TEXT[DisabledOperation.TAKE_OWNERSHIP],
    ]


# --- Through the registry -----------------------------------------------------

@pytest.mark.parametrize("caller", [ALICE, BOB, ADMIN, None])
def test_transfer_never_moves_token(registry, sink, caller):
    token_id = registry.issue(ADMIN, ALICE, "hello")
    sink.events.clear()

    registry.transfer(caller, BOB, token_id)

    assert registry.owner_of(token_id) == ALICE
    assert registry.balance_of(ALICE) == 1
    assert registry.balance_of(BOB) == 0
    assert registry.message_of(token_id) == "hello"
    assert len(sink.events) == 1
    assert isinstance(sink.events[0], NotTransferable)


def test_approve_never_mutates(registry, sink):
    token_id = registry.issue(ADMIN, ALICE, "hello")
    sink.events.clear()
    event = registry.approve(ALICE, BOB, token_id)
    assert registry.owner_of(token_id) == ALICE
    assert sink.events == [event]


def test_take_ownership_never_mutates(registry, sink):
    token_id = registry.issue(ADMIN, ALICE, "hello")
    sink.events.clear()
    event = registry.take_ownership(BOB, token_id)
    assert registry.owner_of(token_id) == ALICE
    assert registry.tokens_of(BOB) == []
    assert sink.events == [event]


def test_disabled_operations_accept_invalid_arguments(registry, sink):
    registry.transfer(None, NULL_IDENTITY, 999)
    registry.approve(None, None, -5)
    registry.take_ownership(NULL_IDENTITY, 12345)
    assert len(sink.events) == 3
    assert registry.issued_count() == 0


def test_disabled_operation_on_burned_token(registry, sink):
    token_id = registry.issue(ADMIN, ALICE, "x")
    registry.burn(ADMIN, token_id)
    registry.transfer(ADMIN, BOB, token_id)
    assert registry.owner_of(token_id) == NULL_IDENTITY
    assert registry.balance_of(BOB) == 0
