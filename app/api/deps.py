"""
API Dependencies
Common dependencies for API endpoints (settings, sessions, authentication, authorization)
"""

from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import Settings
from app.core.authorization import Identity, authenticate, reauthorize, require_admin
from app.core.security import TokenClaims
from app.db.session import get_db
from app.services.credential_store import CredentialStore

# auto_error is off so a missing header becomes 401 rather than FastAPI's default
bearer_scheme = HTTPBearer(auto_error=False)


def get_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    return request.app.state.settings


def get_credential_store(db: AsyncSession = Depends(get_db)) -> CredentialStore:
    return CredentialStore(db)


def get_token_claims(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> TokenClaims:
    """Stage 1: bearer token present and validly signed."""
    return authenticate(credentials, settings)


async def get_current_identity(
    claims: TokenClaims = Depends(get_token_claims),
    store: CredentialStore = Depends(get_credential_store),
) -> Identity:
    """Stages 1+2: valid token for an existing, non-suspended user."""
    return await reauthorize(claims, store)


async def get_current_admin(
    identity: Identity = Depends(get_current_identity),
    store: CredentialStore = Depends(get_credential_store),
) -> Identity:
    """Stages 1+2+3: additionally require the live admin role."""
    return await require_admin(identity, store)
