"""Authentication endpoints."""

import structlog
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_credential_store, get_current_identity, get_settings
from app.config import Settings
from app.core.authorization import Identity
from app.core.exceptions import Forbidden, InvalidCredentials, NotFound
from app.core.security import get_password_hash, issue_token, verify_password
from app.db.session import get_db
from app.models.user import User
from app.schemas.auth import (
    AuthResponse,
    ForgotPasswordRequest,
    LoginRequest,
    MessageResponse,
    PasswordResetRequest,
    RegisterRequest,
    UserResponse,
)
from app.services.credential_store import CredentialStore

logger = structlog.get_logger(__name__)

router = APIRouter()


def _auth_response(user: User, settings: Settings) -> AuthResponse:
    token = issue_token(
        user,
        secret=settings.SECRET_KEY,
        algorithm=settings.ALGORITHM,
        expires_minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES,
    )
    return AuthResponse(token=token, user=UserResponse.model_validate(user))


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    request: RegisterRequest,
    db: AsyncSession = Depends(get_db),
    store: CredentialStore = Depends(get_credential_store),
    settings: Settings = Depends(get_settings),
):
    """Register a new user and create its profile."""
    user = await store.create(
        username=request.username,
        email=request.email,
        password_hash=get_password_hash(request.password),
        phone=request.phone,
    )
    # On a fresh install with no admin the first registrant is promoted here
    await store.ensure_bootstrap_admin()
    await db.commit()

    logger.info("user_registered", user_id=str(user.id), role=user.role)
    return _auth_response(user, settings)


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginRequest,
    store: CredentialStore = Depends(get_credential_store),
    settings: Settings = Depends(get_settings),
):
    """Login with username or email and password."""
    user = await store.find_by_login_identifier(request.identifier)

    if not user or not verify_password(request.password, user.password_hash):
        logger.info("login_failed", identifier=request.identifier)
        raise InvalidCredentials("Invalid credentials")

    if user.is_suspended:
        raise Forbidden("Account suspended")

    logger.info("login_succeeded", user_id=str(user.id))
    return _auth_response(user, settings)


@router.post("/reset-password", response_model=MessageResponse)
async def reset_password(
    request: PasswordResetRequest,
    db: AsyncSession = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
    store: CredentialStore = Depends(get_credential_store),
):
    """Change the caller's own password."""
    await store.set_password_hash(identity.id, get_password_hash(request.new_password))
    await db.commit()

    logger.info("password_changed", user_id=str(identity.id))
    return MessageResponse(message="Password updated successfully")


@router.post("/forgot-password", response_model=MessageResponse)
async def forgot_password(
    request: ForgotPasswordRequest,
    store: CredentialStore = Depends(get_credential_store),
):
    """Acknowledge a reset request. No mail is sent."""
    user = await store.find_by_email(request.email)
    if user is None:
        raise NotFound("User not found")
    return MessageResponse(message="If an account exists, a reset link has been sent")


@router.get("/me", response_model=UserResponse)
async def get_current_user_info(
    identity: Identity = Depends(get_current_identity),
    store: CredentialStore = Depends(get_credential_store),
):
    """Get current user information."""
    return await store.get_or_404(identity.id)
