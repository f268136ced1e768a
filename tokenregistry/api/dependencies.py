"""Request Dependencies: caller identity and registry service lookup.

Invariants:
    - Caller identity comes only from the X-Caller-Identity header
    - A missing header yields caller=None, which no gate authorizes
    - The RegistryService lives on app.state, set by the lifespan (or tests)
"""

from fastapi import Header, Request

from tokenregistry.core.domain_types import Identity
from tokenregistry.services.registry_service import RegistryService

CALLER_HEADER = "X-Caller-Identity"


def get_caller(
    x_caller_identity: str | None = Header(default=None, alias=CALLER_HEADER),
) -> Identity | None:
    if x_caller_identity is None or not x_caller_identity.strip():
        return None
    return Identity(x_caller_identity.strip())


def get_registry_service(request: Request) -> RegistryService:
    service = getattr(request.app.state, "registry_service", None)
    if service is None:
        raise RuntimeError("Registry service not initialized")
    return service
