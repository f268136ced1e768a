"""TokenRow ORM: persisted copy of one catalog record plus its owner.

Invariants:
    - id is the registry token id (not autoincremented by the database)
    - owner is NULL exactly when tombstoned is true
    - burned_at is set once, when the token is burned

Design Decisions:
    - One table for catalog + ownership: the balance index is derived on restore
    - Owner stored as String(128): identities are opaque strings
"""

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from tokenregistry.db.base import Base


class TokenRow(Base):
    """Persisted token record."""
    __tablename__ = "tokens"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=False,
    )
    owner: Mapped[str | None] = mapped_column(
        String(128), nullable=True, index=True,
    )
    message: Mapped[str] = mapped_column(Text, nullable=False, default="")
    tombstoned: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    issued_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    burned_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )

    def to_snapshot_entry(self) -> dict:
        return {
            "id": self.id,
            "owner": self.owner,
            "message": self.message,
            "tombstoned": self.tombstoned,
        }
