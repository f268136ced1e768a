"""RegistryStateRow ORM: registry-wide state that is not tied to one token.

Invariants:
    - At most one row, id == STATE_ROW_ID
    - administrator is never NULL and never the null identity
    - Absent row means no hand-over has happened; settings decide the administrator
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from tokenregistry.db.base import Base

STATE_ROW_ID = 1


class RegistryStateRow(Base):
    """Persisted administrator."""
    __tablename__ = "registry_state"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=False, default=STATE_ROW_ID,
    )
    administrator: Mapped[str] = mapped_column(String(128), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
