"""Administrative moderation: narrow, irreversible mutations on other users' data."""

from datetime import timedelta
from typing import Iterable
from uuid import UUID

import structlog
from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import Forbidden, NotFound
from app.core.security import get_password_hash
from app.db.base import utcnow
from app.models.job import Job
from app.models.profile import CONTENT_FIELDS, SOCIAL_FIELDS, Profile
from app.models.user import User
from app.schemas.admin import DashboardStats
from app.services.credential_store import CredentialStore
from app.utils.constants import RECENT_JOBS_DAYS

logger = structlog.get_logger(__name__)


class ModerationService:
    """Operations behind the /admin routes. Callers must already be admin-gated."""

    def __init__(self, db: AsyncSession, store: CredentialStore):
        self.db = db
        self.store = store

    async def _target(self, user_id: UUID) -> User:
        """Load a non-admin moderation target."""
        user = await self.store.get_or_404(user_id)
        if user.is_admin:
            raise Forbidden("Administrators cannot be moderated")
        return user

    async def set_suspended(self, user_id: UUID, suspended: bool, actor_id: UUID) -> User:
        await self._target(user_id)
        user = await self.store.set_suspended(user_id, suspended)
        logger.info(
            "user_suspension_changed",
            user_id=str(user_id),
            is_suspended=suspended,
            actor_id=str(actor_id),
        )
        return user

    async def delete_user(self, user_id: UUID, actor_id: UUID) -> None:
        await self._target(user_id)
        await self.store.delete(user_id)
        logger.info("user_removed_by_admin", user_id=str(user_id), actor_id=str(actor_id))

    async def reset_password(self, user_id: UUID, new_password: str, actor_id: UUID) -> None:
        await self.store.set_password_hash(user_id, get_password_hash(new_password))
        logger.info("password_reset_by_admin", user_id=str(user_id), actor_id=str(actor_id))

    async def _clear_profile_fields(self, user_id: UUID, fields: Iterable[str]) -> None:
        await self.store.get_or_404(user_id)
        values = {field: None for field in fields}
        values["updated_at"] = utcnow()
        await self.db.execute(update(Profile).where(Profile.user_id == user_id).values(**values))

    async def clear_profile(self, user_id: UUID, actor_id: UUID) -> None:
        """Blank the free-text content of a profile; name and links survive."""
        await self._clear_profile_fields(user_id, CONTENT_FIELDS)
        logger.info("profile_cleared", user_id=str(user_id), actor_id=str(actor_id))

    async def clear_socials(self, user_id: UUID, actor_id: UUID) -> None:
        """Blank only the link fields of a profile."""
        await self._clear_profile_fields(user_id, SOCIAL_FIELDS)
        logger.info("socials_cleared", user_id=str(user_id), actor_id=str(actor_id))

    async def delete_job(self, job_id: UUID, actor_id: UUID) -> None:
        result = await self.db.execute(delete(Job).where(Job.id == job_id))
        if not result.rowcount:
            raise NotFound("Job not found")
        logger.info("job_removed_by_admin", job_id=str(job_id), actor_id=str(actor_id))

    async def stats(self) -> DashboardStats:
        async def count(stmt) -> int:
            return (await self.db.execute(stmt)).scalar() or 0

        recent_cutoff = utcnow() - timedelta(days=RECENT_JOBS_DAYS)
        return DashboardStats(
            totalUsers=await count(select(func.count()).select_from(User)),
            totalJobs=await count(select(func.count()).select_from(Job)),
            suspendedUsers=await count(
                select(func.count()).select_from(User).where(User.is_suspended.is_(True))
            ),
            recentJobs=await count(
                select(func.count()).select_from(Job).where(Job.created_at >= recent_cutoff)
            ),
        )
