"""
API v1 routes.

Defines REST endpoints for the identity verification API.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from src.api.dependencies import get_code_sender, get_identity_manager, get_key_manager
from src.api.models import (
    CodeSentResponse,
    CreateKeyResponse,
    ErrorResponse,
    IdentityResponse,
    RegisterRequest,
    VerifyRequest,
)
from src.domain.exceptions import NotFound
from src.domain.identity import IdentityManager
from src.domain.keys import KeyManager
from src.domain.ports import CodeSender

router = APIRouter(tags=["v1"])


@router.post(
    "/keys",
    response_model=CreateKeyResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an encryption key",
    description="Mint a new encryption key record and return its id.",
)
async def create_key(
    keys: KeyManager = Depends(get_key_manager),
) -> CreateKeyResponse:
    return CreateKeyResponse(key_id=keys.create())


@router.post(
    "/identities",
    response_model=CodeSentResponse,
    status_code=status.HTTP_201_CREATED,
    responses={422: {"description": "Validation error"}},
    summary="Register a phone number",
    description="Bind a phone number to a key. A 6-digit verification code "
    "is sent to the phone number out-of-band.",
)
async def register_identity(
    request_data: RegisterRequest,
    identities: IdentityManager = Depends(get_identity_manager),
    sender: CodeSender = Depends(get_code_sender),
) -> CodeSentResponse:
    """
    Register a phone number and send its verification code.

    - **phone**: Phone number to register
    - **key_id**: Key id from POST /v1/keys
    """
    code = identities.create(request_data.phone, request_data.key_id)
    sender.send_code(request_data.phone, code)
    return CodeSentResponse(message="Verification code sent", phone=request_data.phone)


@router.post(
    "/identities/verify",
    response_model=IdentityResponse,
    responses={
        401: {"model": ErrorResponse, "description": "Invalid phone or code"},
        422: {"description": "Validation error"},
    },
    summary="Verify a phone number",
    description="Submit the 6-digit code received out-of-band to prove ownership.",
)
async def verify_identity(
    request_data: VerifyRequest,
    identities: IdentityManager = Depends(get_identity_manager),
) -> IdentityResponse:
    record = identities.verify(request_data.phone, request_data.code)
    if record is None:
        # Unknown phone and wrong code are indistinguishable to callers
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid phone or code",
        )
    return IdentityResponse.from_record(record)


@router.get(
    "/identities/{phone}",
    response_model=IdentityResponse,
    responses={404: {"model": ErrorResponse, "description": "Identity not found"}},
    summary="Get a verified identity",
    description="Return the identity only if it has been verified.",
)
async def get_identity(
    phone: str,
    identities: IdentityManager = Depends(get_identity_manager),
) -> IdentityResponse:
    record = identities.get_verified(phone)
    if record is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Identity not found",
        )
    return IdentityResponse.from_record(record)


@router.post(
    "/identities/{phone}/code",
    response_model=CodeSentResponse,
    status_code=status.HTTP_202_ACCEPTED,
    responses={404: {"model": ErrorResponse, "description": "Identity not found"}},
    summary="Send a new verification code",
    description="Rotate the verification code of a registered phone number and resend it.",
)
async def resend_code(
    phone: str,
    identities: IdentityManager = Depends(get_identity_manager),
    sender: CodeSender = Depends(get_code_sender),
) -> CodeSentResponse:
    try:
        code = identities.set_new_code(phone)
    except NotFound:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Identity not found",
        ) from None
    sender.send_code(phone, code)
    return CodeSentResponse(message="Verification code sent", phone=phone)
