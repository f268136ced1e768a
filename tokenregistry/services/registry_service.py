"""Registry Service: async facade over TokenRegistry with write-through persistence.

Invariants:
    - The in-memory TokenRegistry is the source of truth for the running process
    - A mutation commits in memory only after its database row committed
    - A failed database write raises DatabaseError and leaves memory untouched
    - Mutations and hand-overs run under one asyncio.Lock, so rows are written
      in id order and no check can go stale between write and commit
    - restore() rebuilds the registry and its administrator from the database
      without emitting events

Design Decisions:
    - Check, persist, then commit: the core exposes check_issue/check_burn so the
      row is written with the exact id and owner the registry is about to commit
    - Per-token upsert instead of a whole-registry blob: burn touches one row
    - Administrator kept in a one-row registry_state table; settings only seed it
"""

import asyncio
import logging
from datetime import datetime, timezone

from sqlalchemy import select

from tokenregistry.config import Settings
from tokenregistry.core.authorization import SingleAdministratorGate
from tokenregistry.core.domain_types import Identity, TokenId
from tokenregistry.core.errors import DatabaseError, HandOverUnsupportedError
from tokenregistry.core.registry import TokenRegistry
from tokenregistry.core.registry_snapshot import registry_from_snapshot
from tokenregistry.infrastructure.database import DatabaseSessionManager
from tokenregistry.infrastructure.notifications import (
    FanOutNotificationSink, LoggingNotificationSink, RecordingNotificationSink,
)
from tokenregistry.models.registry_state import STATE_ROW_ID, RegistryStateRow
from tokenregistry.models.token import TokenRow

logger = logging.getLogger(__name__)


class RegistryService:
    """Serializes registry mutations and writes them through to the database."""

    def __init__(
        self,
        registry: TokenRegistry,
        recorder: RecordingNotificationSink,
        db: DatabaseSessionManager | None = None,
    ):
        self.registry = registry
        self.recorder = recorder
        self._db = db
        self._write_lock = asyncio.Lock()

    @classmethod
    async def restore(
        cls, settings: Settings, db: DatabaseSessionManager | None = None,
    ) -> "RegistryService":
        """Build the service, loading persisted tokens and administrator when db is given."""
        recorder = RecordingNotificationSink(settings.event_buffer_size)
        sink = FanOutNotificationSink([LoggingNotificationSink(), recorder])
        administrator = Identity(settings.registry_administrator)
        tokens: list[dict] = []
        if db is not None:
            async with db.session() as session:
                state = await session.get(RegistryStateRow, STATE_ROW_ID)
                result = await session.execute(select(TokenRow).order_by(TokenRow.id))
                tokens = [row.to_snapshot_entry() for row in result.scalars().all()]
            if state is not None:
                administrator = Identity(state.administrator)
        registry = registry_from_snapshot(
            {
                "name": settings.registry_name,
                "symbol": settings.registry_symbol,
                "tokens": tokens,
            },
            SingleAdministratorGate(administrator), sink,
        )
        logger.info(
            f"Registry restored with {registry.issued_count()} token(s), "
            f"{registry.total_supply()} live, administrator {administrator}",
        )
        return cls(registry, recorder, db)

    async def issue(
        self, caller: Identity | None, to: Identity | None, message: str = "",
    ) -> TokenId:
        async with self._write_lock:
            self.registry.check_issue(caller, to)
            token_id = TokenId(self.registry.issued_count())
            await self._write_issued(token_id, to, message)
            return self.registry.issue(caller, to, message)

    async def burn(self, caller: Identity | None, token_id: int) -> None:
        async with self._write_lock:
            self.registry.check_burn(caller, token_id)
            await self._write_burned(token_id)
            self.registry.burn(caller, token_id)

    async def transfer_administration(
        self, caller: Identity | None, new_administrator: Identity | None,
    ) -> Identity:
        async with self._write_lock:
            gate = self.registry.gate
            if not isinstance(gate, SingleAdministratorGate):
                raise HandOverUnsupportedError(type(gate).__name__)
            gate.check_transfer(caller, new_administrator)
            await self._write_administrator(new_administrator)
            gate.transfer_administration(caller, new_administrator)
            return gate.administrator

    # --- Persistence -----------------------------------------------------------

    async def _write_issued(
        self, token_id: TokenId, owner: Identity, message: str,
    ) -> None:
        if self._db is None:
            return
        try:
            async with self._db.session() as session:
                row = await session.get(TokenRow, token_id)
                if row is None:
                    row = TokenRow(id=token_id)
                    session.add(row)
                row.owner = owner
                row.message = message
                row.tombstoned = False
                row.burned_at = None
                await session.commit()
        except DatabaseError:
            logger.error(
                f"Token {token_id} not issued: database write failed",
                extra={"token_id": token_id, "owner": owner},
            )
            raise

    async def _write_burned(self, token_id: int) -> None:
        if self._db is None:
            return
        try:
            async with self._db.session() as session:
                row = await session.get(TokenRow, token_id)
                if row is None:
                    row = TokenRow(id=token_id)
                    session.add(row)
                row.owner = None
                row.message = ""
                row.tombstoned = True
                row.burned_at = datetime.now(timezone.utc)
                await session.commit()
        except DatabaseError:
            logger.error(
                f"Token {token_id} not burned: database write failed",
                extra={"token_id": token_id},
            )
            raise

    async def _write_administrator(self, administrator: Identity) -> None:
        if self._db is None:
            return
        async with self._db.session() as session:
            state = await session.get(RegistryStateRow, STATE_ROW_ID)
            if state is None:
                state = RegistryStateRow(id=STATE_ROW_ID)
                session.add(state)
            state.administrator = administrator
            await session.commit()
