"""Ownership & Balance Indexes: tests for the two sparse mappings.

Tests cover:
    - owner_of returns the null identity for absent entries
    - clear_owner on an absent entry is harmless
    - increment/decrement counting and zero-drop
    - decrement at zero raises BalanceUnderflowError
"""

import pytest

from tokenregistry.core.domain_types import NULL_IDENTITY, Identity, TokenId
from tokenregistry.core.errors import BalanceUnderflowError, ErrorCategory
from tokenregistry.core.ownership_index import BalanceIndex, OwnershipIndex

ALICE = Identity("alice")
BOB = Identity("bob")


# --- OwnershipIndex -----------------------------------------------------------

def test_owner_of_unknown_id_is_null_identity():
    assert OwnershipIndex().owner_of(42) == NULL_IDENTITY


def test_set_then_read_owner():
    index = OwnershipIndex()
    index.set_owner(TokenId(0), ALICE)
    assert index.owner_of(0) == ALICE


def test_set_owner_overwrites():
    index = OwnershipIndex()
    index.set_owner(TokenId(0), ALICE)
    index.set_owner(TokenId(0), BOB)
    assert index.owner_of(0) == BOB


def test_clear_owner_restores_sentinel():
    index = OwnershipIndex()
    index.set_owner(TokenId(3), ALICE)
    index.clear_owner(TokenId(3))
    assert index.owner_of(3) == NULL_IDENTITY


def test_clear_owner_on_absent_entry_is_noop():
    index = OwnershipIndex()
    index.clear_owner(TokenId(7))
    assert index.owner_of(7) == NULL_IDENTITY


# --- BalanceIndex -------------------------------------------------------------

def test_unknown_owner_has_zero_balance():
    balances = BalanceIndex()
    assert balances.count(ALICE) == 0
    assert balances.count(NULL_IDENTITY) == 0
    assert balances.count(None) == 0


def test_increment_and_decrement():
    balances = BalanceIndex()
    balances.increment(ALICE)
    balances.increment(ALICE)
    balances.increment(BOB)
    balances.decrement(ALICE)
    assert balances.count(ALICE) == 1
    assert balances.count(BOB) == 1


def test_owners_drops_zero_balances():
    balances = BalanceIndex()
    balances.increment(ALICE)
    balances.increment(BOB)
    balances.decrement(ALICE)
    assert balances.owners() == [BOB]


def test_decrement_at_zero_raises_underflow():
    with pytest.raises(BalanceUnderflowError) as exc:
        BalanceIndex().decrement(ALICE)
    assert exc.value.category == ErrorCategory.INTERNAL
    assert exc.value.http_status == 500


def test_decrement_past_zero_raises_and_keeps_zero():
    balances = BalanceIndex()
    balances.increment(ALICE)
    balances.decrement(ALICE)
    with pytest.raises(BalanceUnderflowError):
        balances.decrement(ALICE)
    assert balances.count(ALICE) == 0
