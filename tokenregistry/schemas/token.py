"""Token Schemas: Pydantic models with field-level validation for API boundaries.

Invariants:
    - Identities are 1-128 chars, stripped, non-empty
    - Messages are at most 1000 chars; empty is allowed
    - Null-identity checks stay in the core (InvalidRecipientError), not here

Design Decisions:
    - field_validator for side-effect-free transforms (strip)
"""

from pydantic import BaseModel, Field, field_validator


def _strip_identity(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("identity cannot be empty or whitespace")
    return v


class TokenIssue(BaseModel):
    """Issue request: recipient and optional message."""
    to: str = Field(min_length=1, max_length=128)
    message: str = Field("", max_length=1000)

    @field_validator("to")
    @classmethod
    def strip_to(cls, v: str) -> str:
        return _strip_identity(v)


class TokenResponse(BaseModel):
    """A live token."""
    id: int
    owner: str
    message: str


class TokenOwnerResponse(BaseModel):
    """Owner lookup; owner is the null identity for unknown or burned ids."""
    id: int
    owner: str


class TokenMessageResponse(BaseModel):
    id: int
    message: str


class TokenBurnResponse(BaseModel):
    id: int
    burned: bool = True


class TransferRequest(BaseModel):
    """Body of transfer/approve. Accepted and ignored beyond validation."""
    to: str | None = Field(None, max_length=128)


class NotTransferableResponse(BaseModel):
    event: dict


class OwnerBalanceResponse(BaseModel):
    owner: str
    balance: int


class OwnerTokensResponse(BaseModel):
    owner: str
    token_ids: list[int]


class RegistryInfoResponse(BaseModel):
    name: str
    symbol: str
    total_supply: int
    issued_count: int
    administrator: str | None


class AdministrationTransfer(BaseModel):
    new_administrator: str = Field(min_length=1, max_length=128)

    @field_validator("new_administrator")
    @classmethod
    def strip_new_administrator(cls, v: str) -> str:
        return _strip_identity(v)


class AdministrationResponse(BaseModel):
    administrator: str
