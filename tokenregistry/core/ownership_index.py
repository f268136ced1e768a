"""Ownership & Balance Indexes: token->owner and owner->count mappings.

Invariants:
    - OwnershipIndex has no entry for unissued or burned ids; owner_of returns NULL_IDENTITY
    - BalanceIndex counts are never negative; zero counts are dropped from the dict
    - decrement at zero raises BalanceUnderflowError (indexes out of sync)

Design Decisions:
    - Sparse dicts: absence is the sentinel, so clear_owner is a pop
    - No cross-index checks here: the Registry is the only caller and keeps
      the two in step
"""

from tokenregistry.core.domain_types import Identity, TokenId, NULL_IDENTITY
from tokenregistry.core.errors import BalanceUnderflowError


class OwnershipIndex:
    """Token id -> current owner identity."""

    def __init__(self) -> None:
        self._owners: dict[TokenId, Identity] = {}

    def set_owner(self, token_id: TokenId, owner: Identity) -> None:
        self._owners[token_id] = owner

    def clear_owner(self, token_id: TokenId) -> None:
        self._owners.pop(token_id, None)

    def owner_of(self, token_id: int) -> Identity:
        return self._owners.get(token_id, NULL_IDENTITY)


class BalanceIndex:
    """Owner identity -> number of tokens currently owned."""

    def __init__(self) -> None:
        self._counts: dict[Identity, int] = {}

    def count(self, owner: str | None) -> int:
        if owner is None:
            return 0
        return self._counts.get(owner, 0)

    def increment(self, owner: Identity) -> None:
        self._counts[owner] = self._counts.get(owner, 0) + 1

    def decrement(self, owner: Identity) -> None:
        current = self._counts.get(owner, 0)
        if current == 0:
            raise BalanceUnderflowError(owner)
        if current == 1:
            del self._counts[owner]
        else:
            self._counts[owner] = current - 1

    def owners(self) -> list[Identity]:
        """Identities holding at least one token, sorted."""
        return sorted(self._counts)
