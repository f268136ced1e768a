"""Non-Transferable Policy: the always-rejecting TransferCapability.

Invariants:
    - transfer / approve / take_ownership never touch registry state
    - Each call emits exactly one NotTransferable event and returns it
    - Never raises, whatever the caller or arguments

Design Decisions:
    - Standalone class satisfying TransferCapability, composed into the
      Registry: the "always rejects" contract is tested directly instead of
      being an override buried in a base class
"""

from typing import Callable

from tokenregistry.core.domain_types import DisabledOperation, Identity
from tokenregistry.core.events import NotTransferable, RegistryEvent

NOT_TRANSFERABLE_TEXT: dict[DisabledOperation, str] = {
    DisabledOperation.TRANSFER: "Tokens are not transferable",
    DisabledOperation.APPROVE: "Tokens cannot be approved for transfer",
    DisabledOperation.TAKE_OWNERSHIP: "Token ownership cannot be taken",
}


class NonTransferablePolicy:
    """No-op transfer surface. Holds only the emit callback."""

    def __init__(self, emit: Callable[[RegistryEvent], None]):
        self._emit = emit

    def transfer(
        self, caller: Identity | None, to: Identity | None, token_id: int,
    ) -> NotTransferable:
        return self._reject(DisabledOperation.TRANSFER)

    def approve(
        self, caller: Identity | None, to: Identity | None, token_id: int,
    ) -> NotTransferable:
        return self._reject(DisabledOperation.APPROVE)

    def take_ownership(
        self, caller: Identity | None, token_id: int,
    ) -> NotTransferable:
        return self._reject(DisabledOperation.TAKE_OWNERSHIP)

    def _reject(self, operation: DisabledOperation) -> NotTransferable:
        event = NotTransferable(NOT_TRANSFERABLE_TEXT[operation])
        self._emit(event)
        return event
