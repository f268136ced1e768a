"""Owner Routes: balance and holdings per identity. Read-only, never 404."""

from fastapi import APIRouter, Depends

from tokenregistry.api.dependencies import get_registry_service
from tokenregistry.core.domain_types import Identity
from tokenregistry.schemas.token import OwnerBalanceResponse, OwnerTokensResponse
from tokenregistry.services.registry_service import RegistryService

router = APIRouter(prefix="/api/v1/owners", tags=["owners"])


@router.get("/{owner}/balance", response_model=OwnerBalanceResponse)
async def get_balance(
    owner: str, service: RegistryService = Depends(get_registry_service),
):
    return OwnerBalanceResponse(
        owner=owner, balance=service.registry.balance_of(Identity(owner)),
    )


@router.get("/{owner}/tokens", response_model=OwnerTokensResponse)
async def get_owned_tokens(
    owner: str, service: RegistryService = Depends(get_registry_service),
):
    """Ids owned by `owner`, ascending."""
    return OwnerTokensResponse(
        owner=owner, token_ids=service.registry.tokens_of(Identity(owner)),
    )
