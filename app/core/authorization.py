"""Authorization pipeline.

Each request that needs an identity goes through up to three stages:

1. ``authenticate``: a bearer token must be present and carry a valid
   signature. Missing credentials are ``Unauthorized``, bad ones ``Forbidden``.
2. ``reauthorize``: the user named by the token is re-read from the store and
   rejected if it no longer exists or is suspended. Tokens carry no expiry, so
   this is the only point where revocation takes effect.
3. ``require_admin``: for admin routes the live role must be ``admin``; the
   role claim inside the token is never trusted for this decision.

The stages are plain functions so each can be exercised without FastAPI.
"""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

import structlog
from fastapi.security import HTTPAuthorizationCredentials

from app.config import Settings
from app.core.exceptions import Forbidden, Unauthorized
from app.core.security import InvalidToken, TokenClaims, verify_token
from app.models.user import Role
from app.services.credential_store import CredentialStore

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Identity:
    """Resolved caller handed to route handlers."""

    id: UUID
    username: str
    email: str
    role: str

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN.value


def authenticate(
    credentials: Optional[HTTPAuthorizationCredentials], settings: Settings
) -> TokenClaims:
    """Stage 1: verify the bearer token."""
    if credentials is None or credentials.scheme.lower() != "bearer" or not credentials.credentials:
        raise Unauthorized("Unauthorized")

    try:
        return verify_token(
            credentials.credentials, secret=settings.SECRET_KEY, algorithm=settings.ALGORITHM
        )
    except InvalidToken as e:
        logger.info("token_rejected", reason=str(e))
        raise Forbidden("Forbidden") from e


async def reauthorize(claims: TokenClaims, store: CredentialStore) -> Identity:
    """Stage 2: re-check live suspension state for the token's user."""
    user = await store.get(claims.user_id)
    if user is None:
        raise Forbidden("Account no longer exists")
    if user.is_suspended:
        logger.info("suspended_user_rejected", user_id=str(user.id))
        raise Forbidden("Account suspended")

    # Username and email are taken from the token as issued; role is live.
    return Identity(
        id=claims.user_id,
        username=claims.username,
        email=claims.email,
        role=user.role,
    )


async def require_admin(identity: Identity, store: CredentialStore) -> Identity:
    """Stage 3: re-check the live role for admin routes."""
    user = await store.get(identity.id)
    if user is None or user.role != Role.ADMIN.value:
        raise Forbidden("Admin access required")
    return identity
