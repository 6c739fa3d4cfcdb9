"""
Profile endpoints
GET/PUT for the caller's own profile
"""

import structlog
from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_credential_store, get_current_identity
from app.core.authorization import Identity
from app.core.exceptions import NotFound
from app.db.base import utcnow
from app.db.session import get_db
from app.models.profile import EDITABLE_FIELDS, Profile
from app.models.user import User
from app.schemas.auth import MessageResponse
from app.schemas.profile import ProfileResponse, ProfileUpdate
from app.services.credential_store import CredentialStore

logger = structlog.get_logger(__name__)

router = APIRouter()


async def get_profile_with_user(db: AsyncSession, user_id) -> tuple[Profile, User]:
    """Helper to load a profile together with its owner."""
    result = await db.execute(
        select(Profile, User).join(User, Profile.user_id == User.id).where(Profile.user_id == user_id)
    )
    row = result.first()
    if row is None:
        raise NotFound("Profile not found")
    return row[0], row[1]


@router.get("/me", response_model=ProfileResponse)
async def get_my_profile(
    db: AsyncSession = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
):
    """Get the caller's profile."""
    profile, user = await get_profile_with_user(db, identity.id)
    return ProfileResponse(
        user_id=user.id,
        username=user.username,
        email=user.email,
        role=user.role,
        is_public=user.is_public,
        updated_at=profile.updated_at,
        **{field: getattr(profile, field) for field in EDITABLE_FIELDS},
    )


@router.put("/me", response_model=MessageResponse)
async def update_my_profile(
    request: ProfileUpdate,
    db: AsyncSession = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
    store: CredentialStore = Depends(get_credential_store),
):
    """
    Replace the caller's profile.
    The client always submits the full object, so omitted fields are cleared.
    """
    profile, user = await get_profile_with_user(db, identity.id)

    for field in EDITABLE_FIELDS:
        setattr(profile, field, getattr(request, field))
    # name is required on the row; an omitted name falls back to the username
    profile.name = request.name or user.username
    profile.updated_at = utcnow()

    if request.is_public is not None:
        await store.set_public(identity.id, request.is_public)

    await db.commit()

    logger.info("profile_updated", user_id=str(identity.id))
    return MessageResponse(message="Profile updated")
