"""Boundary Protocols: contracts between the registry and its collaborators.

Invariants:
    - The Registry depends on these Protocols only, never on concrete classes
    - Gates and sinks are injected at construction
    - NotificationSink.notify may raise; the Registry absorbs it

Design Decisions:
    - Protocol over ABC: structural subtyping, so tests pass plain fakes
    - TransferCapability is the shape of a generic ownership-transfer contract;
      the registry satisfies it with an explicit no-op implementation
"""

from typing import Protocol

from tokenregistry.core.domain_types import Identity
from tokenregistry.core.events import NotTransferable, RegistryEvent


class AuthorizationGate(Protocol):
    """Decides whether a caller may issue or burn."""
    def is_authorized(self, caller: Identity | None) -> bool: ...


class NotificationSink(Protocol):
    """Receives registry events. Delivery is fire-and-forget."""
    def notify(self, event: RegistryEvent) -> None: ...


class TransferCapability(Protocol):
    """Transfer-style entry points expected by external callers."""
    def transfer(
        self, caller: Identity | None, to: Identity | None, token_id: int,
    ) -> NotTransferable: ...
    def approve(
        self, caller: Identity | None, to: Identity | None, token_id: int,
    ) -> NotTransferable: ...
    def take_ownership(
        self, caller: Identity | None, token_id: int,
    ) -> NotTransferable: ...
