"""Token Catalog: append-only store of token records.

Invariants:
    - A record's id equals its position in the catalog (0, 1, 2, ...)
    - Records are never removed; ids are never reused
    - tombstoned goes False -> True at most once
    - get() raises TokenNotFoundError for any id outside [0, len)

Design Decisions:
    - Plain list, not dict: the position-equals-id invariant holds structurally
    - The catalog does not know about owners; the Registry keeps the stores in sync
"""

from dataclasses import dataclass

from tokenregistry.core.domain_types import TokenId
from tokenregistry.core.errors import TokenNotFoundError


@dataclass
class TokenRecord:
    """One issued token. Mutated only through TokenCatalog."""
    id: TokenId
    message: str = ""
    tombstoned: bool = False


class TokenCatalog:
    """Append-only list of TokenRecord, indexed by id."""

    def __init__(self) -> None:
        self._records: list[TokenRecord] = []

    def __len__(self) -> int:
        return len(self._records)

    def ids(self) -> range:
        """Every id ever issued, ascending."""
        return range(len(self._records))

    def append(self, message: str) -> TokenId:
        """Create a live record and return its id (the prior length)."""
        token_id = TokenId(len(self._records))
        self._records.append(TokenRecord(id=token_id, message=message))
        return token_id

    def get(self, token_id: int) -> TokenRecord:
        if not 0 <= token_id < len(self._records):
            raise TokenNotFoundError(token_id)
        return self._records[token_id]

    def clear_message(self, token_id: int) -> None:
        self.get(token_id).message = ""

    def mark_tombstoned(self, token_id: int) -> None:
        self.get(token_id).tombstoned = True

    def restore(self, record: TokenRecord) -> None:
        """Re-append a record read from a snapshot. Caller checks id order."""
        self._records.append(record)
