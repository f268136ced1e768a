"""Registry Events: value semantics and JSON shape of notifications."""

import json

from tokenregistry.core.domain_types import EventKind, Identity, TokenId
from tokenregistry.core.events import BurnToken, NewToken, NotTransferable


def test_new_token_to_dict():
    event = NewToken(to=Identity("alice"), token_id=TokenId(0), message="hi")
    assert event.to_dict() == {
        "kind": "NewToken", "to": "alice", "token_id": 0, "message": "hi",
    }


def test_burn_token_to_dict():
    assert BurnToken(TokenId(4)).to_dict() == {"kind": "BurnToken", "token_id": 4}


def test_not_transferable_to_dict_is_json_safe():
    payload = NotTransferable("nope").to_dict()
    assert json.loads(json.dumps(payload)) == {"kind": "NotTransferable", "text": "nope"}


def test_kind_is_not_a_field():
    assert NewToken(Identity("a"), TokenId(1), "").kind == EventKind.NEW_TOKEN
    assert "kind" not in NewToken.__dataclass_fields__


def test_events_compare_by_value():
    assert BurnToken(TokenId(1)) == BurnToken(TokenId(1))
    assert BurnToken(TokenId(1)) != BurnToken(TokenId(2))
