"""Registry Events: notification payloads emitted after state changes.

Invariants:
    - Events are immutable value objects
    - to_dict() is JSON-safe and always carries "kind"
    - NewToken and BurnToken are only built after the mutation committed

Design Decisions:
    - One frozen dataclass per kind instead of a generic dict: sinks can
      isinstance-dispatch and tests compare with ==
"""

from dataclasses import dataclass, asdict
from typing import Union

from tokenregistry.core.domain_types import EventKind, Identity, TokenId


@dataclass(frozen=True)
class NewToken:
    to: Identity
    token_id: TokenId
    message: str

    kind = EventKind.NEW_TOKEN

    def to_dict(self) -> dict:
        return {"kind": self.kind.value, **asdict(self)}


@dataclass(frozen=True)
class BurnToken:
    token_id: TokenId

    kind = EventKind.BURN_TOKEN

    def to_dict(self) -> dict:
        return {"kind": self.kind.value, **asdict(self)}


@dataclass(frozen=True)
class NotTransferable:
    text: str

    kind = EventKind.NOT_TRANSFERABLE

    def to_dict(self) -> dict:
        return {"kind": self.kind.value, **asdict(self)}


RegistryEvent = Union[NewToken, BurnToken, NotTransferable]
