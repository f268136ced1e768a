"""Authorization Gate: single-administrator policy for mutating operations.

Invariants:
    - Exactly one administrator at any time; it is never the null identity
    - Only the current administrator may hand administration over
    - The gate holds no token state

Design Decisions:
    - Injected into the Registry as a policy object rather than inherited,
      so tests can swap in an always-allow or always-deny fake
"""

import logging
import threading

from tokenregistry.core.domain_types import Identity, is_null_identity
from tokenregistry.core.errors import InvalidRecipientError, UnauthorizedError

logger = logging.getLogger(__name__)


class SingleAdministratorGate:
    """Authorizes exactly one identity."""

    def __init__(self, administrator: Identity):
        if is_null_identity(administrator):
            raise InvalidRecipientError()
        self._administrator = administrator
        self._lock = threading.Lock()

    @property
    def administrator(self) -> Identity:
        return self._administrator

    def is_authorized(self, caller: Identity | None) -> bool:
        return caller is not None and caller == self._administrator

    def check_transfer(
        self, caller: Identity | None, new_administrator: Identity | None,
    ) -> None:
        """Raise what transfer_administration() would raise, without mutating."""
        if not self.is_authorized(caller):
            raise UnauthorizedError(caller, "transfer administration")
        if is_null_identity(new_administrator):
            raise InvalidRecipientError()

    def transfer_administration(
        self, caller: Identity | None, new_administrator: Identity | None,
    ) -> None:
        """Hand administration to another identity."""
        with self._lock:
            self.check_transfer(caller, new_administrator)
            previous = self._administrator
            self._administrator = new_administrator
        logger.info(
            f"Administration handed over from {previous} to {new_administrator}",
            extra={"caller": caller},
        )
