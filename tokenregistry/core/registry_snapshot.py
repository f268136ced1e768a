"""Registry Snapshot: serialization / reconstruction for TokenRegistry.

Invariants:
    - registry_to_snapshot produces a JSON-safe dict, tokens ascending by id
    - registry_from_snapshot emits no events and bypasses the gate
    - Restored ids must run 0..n-1 without gaps
    - A live record must have an owner; a tombstoned one must not
    - Missing name/symbol fall back to defaults
    - Malformed shapes (non-list tokens, entries without an integer id) are corrupt

Design Decisions:
    - Extracted from registry.py so the orchestrator stays small
    - Validation raises CorruptSnapshotError before the first record loads
"""

from tokenregistry.core.domain_types import (
    Identity, TokenId, NULL_IDENTITY, is_null_identity,
    DEFAULT_REGISTRY_NAME, DEFAULT_REGISTRY_SYMBOL,
)
from tokenregistry.core.errors import CorruptSnapshotError
from tokenregistry.core.registry import TokenRegistry
from tokenregistry.core.registry_protocols import AuthorizationGate, NotificationSink
from tokenregistry.core.token_catalog import TokenRecord


def registry_to_snapshot(registry: TokenRegistry) -> dict:
    """Serialize registry state. Pure, no IO."""
    return {
        "name": registry.name,
        "symbol": registry.symbol,
        "tokens": [
            {
                "id": record.id,
                "owner": None if owner == NULL_IDENTITY else owner,
                "message": record.message,
                "tombstoned": record.tombstoned,
            }
            for record, owner in registry.records()
        ],
    }


def registry_from_snapshot(
    data: dict | None,
    gate: AuthorizationGate,
    sink: NotificationSink | None = None,
) -> TokenRegistry:
    """Rebuild a registry from snapshot dict. Pure, no IO."""
    data = data or {}
    registry = TokenRegistry(
        gate, sink,
        name=data.get("name") or DEFAULT_REGISTRY_NAME,
        symbol=data.get("symbol") or DEFAULT_REGISTRY_SYMBOL,
    )
    entries = sorted(_checked_entries(data.get("tokens", [])), key=lambda t: t["id"])
    for record, owner in _validated_records(entries):
        registry.load_record(record, owner)
    return registry


def _checked_entries(tokens) -> list[dict]:
    if not isinstance(tokens, list):
        raise CorruptSnapshotError(f"tokens must be a list, got {type(tokens).__name__}")
    for position, entry in enumerate(tokens):
        if not isinstance(entry, dict):
            raise CorruptSnapshotError(f"token entry {position} is not an object")
        token_id = entry.get("id")
        if not isinstance(token_id, int) or isinstance(token_id, bool):
            raise CorruptSnapshotError(f"token entry {position} has no integer id")
    return tokens


def _validated_records(entries: list[dict]) -> list[tuple[TokenRecord, Identity]]:
    records = []
    for position, entry in enumerate(entries):
        if entry["id"] != position:
            raise CorruptSnapshotError(
                f"expected token id {position}, found {entry['id']}",
            )
        tombstoned = bool(entry.get("tombstoned", False))
        owner = entry.get("owner")
        if tombstoned and not is_null_identity(owner):
            raise CorruptSnapshotError(f"burned token {position} still has an owner")
        if not tombstoned and is_null_identity(owner):
            raise CorruptSnapshotError(f"live token {position} has no owner")
        message = "" if tombstoned else entry.get("message", "")
        records.append((
            TokenRecord(TokenId(position), message, tombstoned),
            NULL_IDENTITY if tombstoned else Identity(owner),
        ))
    return records
