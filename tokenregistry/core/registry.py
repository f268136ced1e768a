"""Token Registry: orchestrates catalog, ownership and balance stores.

Invariants:
    - balance_of(o) == len(tokens_of(o)) for every identity o, at every query
    - Ids strictly increase from 0 and are never reissued
    - Live record <=> non-sentinel owner; tombstoned record <=> sentinel owner
    - Every precondition is checked before any store is touched (all-or-nothing)
    - Failing operations emit no notification
    - A raising sink never reverts or blocks a committed mutation

Design Decisions:
    - One RLock around every read and write: readers see pre- or post-state only
    - Notifications emitted after the lock is released
    - tokens_of is a linear scan of the catalog; no per-owner id index to keep
      in step on burn
    - owner_of returns the sentinel while message_of raises for the same
      unknown/burned id; callers rely on both behaviours
"""

import logging
import threading

from tokenregistry.core.domain_types import (
    Identity, TokenId, NULL_IDENTITY, is_null_identity,
    DEFAULT_REGISTRY_NAME, DEFAULT_REGISTRY_SYMBOL,
)
from tokenregistry.core.errors import (
    ErrorContext, InvalidRecipientError, TokenNotFoundError, UnauthorizedError,
)
from tokenregistry.core.events import BurnToken, NewToken, NotTransferable, RegistryEvent
from tokenregistry.core.non_transferable import NonTransferablePolicy
from tokenregistry.core.ownership_index import BalanceIndex, OwnershipIndex
from tokenregistry.core.registry_protocols import (
    AuthorizationGate, NotificationSink, TransferCapability,
)
from tokenregistry.core.token_catalog import TokenCatalog, TokenRecord

logger = logging.getLogger(__name__)


class TokenRegistry:
    """Issue, burn and query non-transferable tokens."""

    def __init__(
        self,
        gate: AuthorizationGate,
        sink: NotificationSink | None = None,
        name: str = DEFAULT_REGISTRY_NAME,
        symbol: str = DEFAULT_REGISTRY_SYMBOL,
    ):
        self.name = name
        self.symbol = symbol
        self._gate = gate
        self._sink = sink
        self._lock = threading.RLock()
        self._catalog = TokenCatalog()
        self._owners = OwnershipIndex()
        self._balances = BalanceIndex()
        self._transfers: TransferCapability = NonTransferablePolicy(self._emit)

    # --- Mutations -------------------------------------------------------------

    def issue(
        self, caller: Identity | None, to: Identity | None, message: str = "",
    ) -> TokenId:
        """Mint a token to `to`. Returns the new id."""
        with self._lock:
            self.check_issue(caller, to)
            token_id = self._catalog.append(message)
            self._owners.set_owner(token_id, to)
            self._balances.increment(to)
        logger.info(
            f"Issued token {token_id}",
            extra={"token_id": token_id, "owner": to, "caller": caller},
        )
        self._emit(NewToken(to=to, token_id=token_id, message=message))
        return token_id

    def burn(self, caller: Identity | None, token_id: int) -> None:
        """Permanently revoke a live token. Burning twice fails."""
        with self._lock:
            owner = self.check_burn(caller, token_id)
            record = self._catalog.get(token_id)
            if record.message:
                self._catalog.clear_message(token_id)
            self._catalog.mark_tombstoned(token_id)
            self._owners.clear_owner(record.id)
            self._balances.decrement(owner)
        logger.info(
            f"Burned token {token_id}",
            extra={"token_id": token_id, "owner": owner, "caller": caller},
        )
        self._emit(BurnToken(token_id=record.id))

    # --- Preconditions ---------------------------------------------------------

    def check_issue(self, caller: Identity | None, to: Identity | None) -> None:
        """Raise what issue() would raise, without mutating."""
        with self._lock:
            self._require_authorized(caller, "issue")
            if is_null_identity(to):
                raise InvalidRecipientError(ErrorContext(caller=caller))

    def check_burn(self, caller: Identity | None, token_id: int) -> Identity:
        """Raise what burn() would raise, without mutating. Returns the owner."""
        with self._lock:
            self._require_authorized(caller, "burn")
            owner = self._owners.owner_of(token_id)
            if owner == NULL_IDENTITY:
                raise TokenNotFoundError(token_id, ErrorContext(caller=caller))
            return owner

    # --- Disabled transfer surface ----------------------------------------------

    def transfer(
        self, caller: Identity | None, to: Identity | None, token_id: int,
    ) -> NotTransferable:
        return self._transfers.transfer(caller, to, token_id)

    def approve(
        self, caller: Identity | None, to: Identity | None, token_id: int,
    ) -> NotTransferable:
        return self._transfers.approve(caller, to, token_id)

    def take_ownership(
        self, caller: Identity | None, token_id: int,
    ) -> NotTransferable:
        return self._transfers.take_ownership(caller, token_id)

    # --- Queries ---------------------------------------------------------------

    def owner_of(self, token_id: int) -> Identity:
        """Current owner, or NULL_IDENTITY for unknown and burned ids."""
        with self._lock:
            return self._owners.owner_of(token_id)

    def message_of(self, token_id: int) -> str:
        """Message of a live token. Raises TokenNotFoundError otherwise."""
        with self._lock:
            if self._owners.owner_of(token_id) == NULL_IDENTITY:
                raise TokenNotFoundError(token_id)
            return self._catalog.get(token_id).message

    def balance_of(self, owner: Identity | None) -> int:
        with self._lock:
            return self._balances.count(owner)

    def tokens_of(self, owner: Identity | None) -> list[TokenId]:
        """Ids currently owned by `owner`, ascending."""
        with self._lock:
            if is_null_identity(owner):
                return []
            return [
                TokenId(i) for i in self._catalog.ids()
                if self._owners.owner_of(i) == owner
            ]

    def is_live(self, token_id: int) -> bool:
        return self.owner_of(token_id) != NULL_IDENTITY

    def total_supply(self) -> int:
        """Number of tokens currently owned (issued minus burned)."""
        with self._lock:
            return sum(
                1 for i in self._catalog.ids() if not self._catalog.get(i).tombstoned
            )

    def issued_count(self) -> int:
        """Tokens ever issued; also the id the next issue will get."""
        with self._lock:
            return len(self._catalog)

    @property
    def administrator(self) -> Identity | None:
        return getattr(self._gate, "administrator", None)

    @property
    def gate(self) -> AuthorizationGate:
        return self._gate

    # --- Snapshot support ------------------------------------------------------

    def record(self, token_id: int) -> tuple[TokenRecord, Identity]:
        """Copy of one record (live or burned) with its owner."""
        with self._lock:
            r = self._catalog.get(token_id)
            return TokenRecord(r.id, r.message, r.tombstoned), self._owners.owner_of(r.id)

    def records(self) -> list[tuple[TokenRecord, Identity]]:
        """Copy of every record with its owner, ascending id."""
        with self._lock:
            return [
                (
                    TokenRecord(r.id, r.message, r.tombstoned),
                    self._owners.owner_of(r.id),
                )
                for r in (self._catalog.get(i) for i in self._catalog.ids())
            ]

    def load_record(self, record: TokenRecord, owner: Identity) -> None:
        """Append one validated snapshot record. No events, no gate."""
        with self._lock:
            self._catalog.restore(record)
            if not record.tombstoned:
                self._owners.set_owner(record.id, owner)
                self._balances.increment(owner)

    # --- Internals -------------------------------------------------------------

    def _require_authorized(self, caller: Identity | None, operation: str) -> None:
        if not self._gate.is_authorized(caller):
            raise UnauthorizedError(caller, operation)

    def _emit(self, event: RegistryEvent) -> None:
        """Deliver to the sink. Sink failures are logged, never raised."""
        if self._sink is None:
            return
        try:
            self._sink.notify(event)
        except Exception as e:
            logger.error(
                f"Notification sink failed for {event.kind.value}: {e}",
                extra={"event_kind": event.kind.value},
                exc_info=True,
            )
