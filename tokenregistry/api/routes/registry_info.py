"""Registry Routes: collection metadata, administration hand-over, event feed.

Invariants:
    - GET endpoints are open to any caller
    - Administration hand-over requires the current administrator
    - /events returns the most recent notifications, oldest first
"""

from fastapi import APIRouter, Depends, Query

from tokenregistry.api.dependencies import get_caller, get_registry_service
from tokenregistry.core.domain_types import Identity
from tokenregistry.schemas.token import (
    AdministrationResponse, AdministrationTransfer, RegistryInfoResponse,
)
from tokenregistry.services.registry_service import RegistryService

router = APIRouter(prefix="/api/v1", tags=["registry"])


@router.get("/registry", response_model=RegistryInfoResponse)
async def get_registry_info(
    service: RegistryService = Depends(get_registry_service),
):
    registry = service.registry
    return RegistryInfoResponse(
        name=registry.name,
        symbol=registry.symbol,
        total_supply=registry.total_supply(),
        issued_count=registry.issued_count(),
        administrator=registry.administrator,
    )


@router.post("/registry/administration", response_model=AdministrationResponse)
async def transfer_administration(
    body: AdministrationTransfer,
    caller: Identity | None = Depends(get_caller),
    service: RegistryService = Depends(get_registry_service),
):
    """Hand administration to another identity (administrator only)."""
    administrator = await service.transfer_administration(
        caller, Identity(body.new_administrator),
    )
    return AdministrationResponse(administrator=administrator)


@router.get("/events")
async def list_events(
    limit: int = Query(50, ge=1, le=1000),
    service: RegistryService = Depends(get_registry_service),
):
    events = service.recorder.recent(limit)
    return {"events": [e.to_dict() for e in events], "count": len(events)}
