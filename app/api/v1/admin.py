"""Admin API endpoints for user and content moderation."""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_credential_store, get_current_admin
from app.core.authorization import Identity
from app.db.session import get_db
from app.schemas.admin import AdminUserResponse, DashboardStats, SuspendRequest
from app.schemas.auth import MessageResponse, PasswordResetRequest
from app.services.credential_store import CredentialStore
from app.services.moderation_service import ModerationService

router = APIRouter()


def get_moderation_service(
    db: AsyncSession = Depends(get_db),
    store: CredentialStore = Depends(get_credential_store),
) -> ModerationService:
    return ModerationService(db, store)


# ==================== Users ====================

@router.get("/users", response_model=List[AdminUserResponse])
async def list_users(
    admin: Identity = Depends(get_current_admin),
    store: CredentialStore = Depends(get_credential_store),
):
    """All users, newest first."""
    return await store.list_users()


@router.put("/users/{user_id}/suspend", response_model=AdminUserResponse)
async def suspend_user(
    user_id: UUID,
    request: SuspendRequest,
    db: AsyncSession = Depends(get_db),
    admin: Identity = Depends(get_current_admin),
    service: ModerationService = Depends(get_moderation_service),
):
    """Suspend or reinstate a user. Takes effect on the user's very next request."""
    user = await service.set_suspended(user_id, request.is_suspended, actor_id=admin.id)
    await db.commit()
    return user


@router.delete("/users/{user_id}", response_model=MessageResponse)
async def delete_user(
    user_id: UUID,
    db: AsyncSession = Depends(get_db),
    admin: Identity = Depends(get_current_admin),
    service: ModerationService = Depends(get_moderation_service),
):
    """Delete a user together with its profile and job postings."""
    await service.delete_user(user_id, actor_id=admin.id)
    await db.commit()
    return MessageResponse(message="User deleted")


@router.put("/users/{user_id}/reset-password", response_model=MessageResponse)
async def reset_user_password(
    user_id: UUID,
    request: PasswordResetRequest,
    db: AsyncSession = Depends(get_db),
    admin: Identity = Depends(get_current_admin),
    service: ModerationService = Depends(get_moderation_service),
):
    """Set a new password without knowing the old one."""
    await service.reset_password(user_id, request.new_password, actor_id=admin.id)
    await db.commit()
    return MessageResponse(message="Password reset successful")


@router.put("/users/{user_id}/clear-socials", response_model=MessageResponse)
async def clear_user_socials(
    user_id: UUID,
    db: AsyncSession = Depends(get_db),
    admin: Identity = Depends(get_current_admin),
    service: ModerationService = Depends(get_moderation_service),
):
    """Remove every link from a user's profile."""
    await service.clear_socials(user_id, actor_id=admin.id)
    await db.commit()
    return MessageResponse(message="Social links removed")


@router.put("/users/{user_id}/clear-profile", response_model=MessageResponse)
async def clear_user_profile(
    user_id: UUID,
    db: AsyncSession = Depends(get_db),
    admin: Identity = Depends(get_current_admin),
    service: ModerationService = Depends(get_moderation_service),
):
    """Remove spam or abusive free-text content from a user's profile."""
    await service.clear_profile(user_id, actor_id=admin.id)
    await db.commit()
    return MessageResponse(message="Profile content cleared")


# ==================== Jobs ====================

@router.delete("/jobs/{job_id}", response_model=MessageResponse)
async def delete_job(
    job_id: UUID,
    db: AsyncSession = Depends(get_db),
    admin: Identity = Depends(get_current_admin),
    service: ModerationService = Depends(get_moderation_service),
):
    """Remove a job posting."""
    await service.delete_job(job_id, actor_id=admin.id)
    await db.commit()
    return MessageResponse(message="Job removed")


# ==================== Dashboard ====================

@router.get("/stats", response_model=DashboardStats)
async def get_stats(
    admin: Identity = Depends(get_current_admin),
    service: ModerationService = Depends(get_moderation_service),
):
    """Counters for the admin dashboard."""
    return await service.stats()
