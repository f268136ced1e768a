"""Domain Types: identity sentinel and enum values."""

from tokenregistry.core.domain_types import (
    NULL_IDENTITY, DisabledOperation, EventKind, Identity, TokenId, is_null_identity,
)


def test_null_identity_detection():
    assert is_null_identity(NULL_IDENTITY)
    assert is_null_identity(None)
    assert not is_null_identity(Identity("alice"))
    assert not is_null_identity("")


def test_token_id_wraps_int():
    assert TokenId(3) == 3


def test_event_kinds_serialize_to_names():
    assert [k.value for k in EventKind] == ["NewToken", "BurnToken", "NotTransferable"]


def test_disabled_operations():
    assert {op.value for op in DisabledOperation} == {
        "transfer", "approve", "take_ownership",
    }
