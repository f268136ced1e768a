"""Token Routes: issue, burn, lookup and the disabled transfer surface.

Invariants:
    - POST /tokens and DELETE /tokens/{id} require the administrator caller
    - GET /tokens/{id}/owner never 404s (null identity for unknown/burned ids)
    - GET /tokens/{id} and /tokens/{id}/message 404 for unknown/burned ids
    - transfer / approve / take-ownership always 200 with a NotTransferable event
"""

from fastapi import APIRouter, Depends, status

from tokenregistry.api.dependencies import get_caller, get_registry_service
from tokenregistry.core.domain_types import Identity
from tokenregistry.schemas.token import (
    NotTransferableResponse, TokenBurnResponse, TokenIssue,
    TokenMessageResponse, TokenOwnerResponse, TokenResponse, TransferRequest,
)
from tokenregistry.services.registry_service import RegistryService

router = APIRouter(prefix="/api/v1/tokens", tags=["tokens"])


@router.post(
    "", response_model=TokenResponse, status_code=status.HTTP_201_CREATED,
)
async def issue_token(
    body: TokenIssue,
    caller: Identity | None = Depends(get_caller),
    service: RegistryService = Depends(get_registry_service),
):
    """Mint a token to `to` (administrator only)."""
    token_id = await service.issue(caller, Identity(body.to), body.message)
    return TokenResponse(id=token_id, owner=body.to, message=body.message)


@router.delete("/{token_id}", response_model=TokenBurnResponse)
async def burn_token(
    token_id: int,
    caller: Identity | None = Depends(get_caller),
    service: RegistryService = Depends(get_registry_service),
):
    """Permanently revoke a token (administrator only)."""
    await service.burn(caller, token_id)
    return TokenBurnResponse(id=token_id)


@router.get("/{token_id}", response_model=TokenResponse)
async def get_token(
    token_id: int, service: RegistryService = Depends(get_registry_service),
):
    registry = service.registry
    message = registry.message_of(token_id)
    return TokenResponse(
        id=token_id, owner=registry.owner_of(token_id), message=message,
    )


@router.get("/{token_id}/owner", response_model=TokenOwnerResponse)
async def get_token_owner(
    token_id: int, service: RegistryService = Depends(get_registry_service),
):
    return TokenOwnerResponse(
        id=token_id, owner=service.registry.owner_of(token_id),
    )


@router.get("/{token_id}/message", response_model=TokenMessageResponse)
async def get_token_message(
    token_id: int, service: RegistryService = Depends(get_registry_service),
):
    return TokenMessageResponse(
        id=token_id, message=service.registry.message_of(token_id),
    )


# --- Disabled transfer surface ------------------------------------------------

@router.post("/{token_id}/transfer", response_model=NotTransferableResponse)
async def transfer_token(
    token_id: int,
    body: TransferRequest | None = None,
    caller: Identity | None = Depends(get_caller),
    service: RegistryService = Depends(get_registry_service),
):
    to = Identity(body.to) if body and body.to else None
    event = service.registry.transfer(caller, to, token_id)
    return NotTransferableResponse(event=event.to_dict())


@router.post("/{token_id}/approve", response_model=NotTransferableResponse)
async def approve_token(
    token_id: int,
    body: TransferRequest | None = None,
    caller: Identity | None = Depends(get_caller),
    service: RegistryService = Depends(get_registry_service),
):
    to = Identity(body.to) if body and body.to else None
    event = service.registry.approve(caller, to, token_id)
    return NotTransferableResponse(event=event.to_dict())


@router.post("/{token_id}/take-ownership", response_model=NotTransferableResponse)
async def take_token_ownership(
    token_id: int,
    caller: Identity | None = Depends(get_caller),
    service: RegistryService = Depends(get_registry_service),
):
    event = service.registry.take_ownership(caller, token_id)
    return NotTransferableResponse(event=event.to_dict())
