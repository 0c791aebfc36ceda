"""
Auth endpoints — account signup and email/password login.
"""

from fastapi import APIRouter, Depends, Request

from app.api.deps import get_credential_store
from app.core.config import settings
from app.core.rate_limit import limiter
from app.schemas.common import CreatedResponse
from app.schemas.user import LoginRequest, LoginResponse, SignupRequest
from app.services.credentials import CredentialStore

router = APIRouter(tags=["auth"])


@router.post("/signup", response_model=CreatedResponse, status_code=201)
@limiter.limit(settings.SIGNUP_RATE_LIMIT)
async def signup(
    request: Request,
    body: SignupRequest,
    store: CredentialStore = Depends(get_credential_store),
) -> CreatedResponse:
    """Register a new account. 409 if the email is already taken."""
    user_id = await store.register(body.full_name, body.email, body.password)
    return CreatedResponse(message="User registered successfully!", id=user_id)


@router.post("/login", response_model=LoginResponse)
@limiter.limit(settings.LOGIN_RATE_LIMIT)
async def login(
    request: Request,
    body: LoginRequest,
    store: CredentialStore = Depends(get_credential_store),
) -> LoginResponse:
    """Check email/password and return the user's public summary."""
    user = await store.authenticate(body.email, body.password)
    return LoginResponse(message="Login successful!", user=user)
