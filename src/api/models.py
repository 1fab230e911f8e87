"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
Verification codes never appear in any response model.
"""

from pydantic import BaseModel, Field

from src.domain.ports import IdentityRecord

PHONE_PATTERN = r"^\+?[0-9]{7,17}$"


class CreateKeyResponse(BaseModel):
    """Response model for key creation."""

    key_id: str


class RegisterRequest(BaseModel):
    """Request model for identity registration."""

    phone: str = Field(..., pattern=PHONE_PATTERN, description="Phone number, optional leading '+'")
    key_id: str = Field(..., min_length=1, description="Key id returned by POST /v1/keys")


class CodeSentResponse(BaseModel):
    """Response model for actions that deliver a verification code."""

    message: str
    phone: str


class VerifyRequest(BaseModel):
    """Request model for identity verification."""

    phone: str = Field(..., pattern=PHONE_PATTERN)
    code: str = Field(
        ...,
        min_length=6,
        max_length=6,
        pattern=r"^\d{6}$",
        description="6-digit verification code",
    )


class IdentityResponse(BaseModel):
    """Public view of an identity record."""

    phone: str
    type: str
    key_id: str
    verified: bool

    @classmethod
    def from_record(cls, record: IdentityRecord) -> "IdentityResponse":
        return cls(
            phone=record.id,
            type=record.type.value,
            key_id=record.key_id,
            verified=record.verified,
        )


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str
