"""Domain Types: identity and id types shared across the registry.

Invariants:
    - TokenId is a non-negative int; ids are assigned in creation order from 0
    - Identity is an opaque string compared by equality only
    - NULL_IDENTITY is the single "no owner" sentinel; None is read as the sentinel too

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

TokenId = NewType("TokenId", int)
Identity = NewType("Identity", str)

NULL_IDENTITY = Identity("0x0000000000000000000000000000000000000000")


def is_null_identity(identity: str | None) -> bool:
    """True for the sentinel (or a missing identity)."""
    return identity is None or identity == NULL_IDENTITY


# ─── Collection Metadata ─────────────────────────────────────────

DEFAULT_REGISTRY_NAME = "Badge"
DEFAULT_REGISTRY_SYMBOL = "BDG"


# ─── Enums ───────────────────────────────────────────────────────

class EventKind(str, Enum):
    """Notification kinds emitted by the registry."""
    NEW_TOKEN = "NewToken"
    BURN_TOKEN = "BurnToken"
    NOT_TRANSFERABLE = "NotTransferable"


class DisabledOperation(str, Enum):
    """Entry points that exist for interface compatibility but never mutate."""
    TRANSFER = "transfer"
    APPROVE = "approve"
    TAKE_OWNERSHIP = "take_ownership"
