"""Credential store: durable lookup and mutation of user identity state."""

from typing import List, Optional
from uuid import UUID

import structlog
from sqlalchemy import delete, func, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import Conflict, NotFound
from app.models.job import Job
from app.models.profile import Profile
from app.models.user import Role, User
from app.utils.validators import normalize_email

logger = structlog.get_logger(__name__)


class CredentialStore:
    """User records plus the cascades that hang off them.

    All methods flush but never commit; the calling route handler commits.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, user_id: UUID) -> Optional[User]:
        result = await self.db.execute(select(User).where(User.id == user_id))
        return result.scalar_one_or_none()

    async def get_or_404(self, user_id: UUID) -> User:
        user = await self.get(user_id)
        if user is None:
            raise NotFound("User not found")
        return user

    async def find_by_login_identifier(self, identifier: str) -> Optional[User]:
        """Look a user up by username or email."""
        email = normalize_email(identifier) if "@" in identifier else identifier
        result = await self.db.execute(
            select(User).where(or_(User.username == identifier, User.email == email))
        )
        return result.scalars().first()

    async def find_by_email(self, email: str) -> Optional[User]:
        email = normalize_email(email)
        result = await self.db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def list_users(self) -> List[User]:
        result = await self.db.execute(select(User).order_by(User.created_at.desc()))
        return list(result.scalars().all())

    async def create(
        self,
        username: str,
        email: str,
        password_hash: str,
        phone: Optional[str] = None,
        role: Role = Role.USER,
    ) -> User:
        """Insert a user and its initial profile.

        Raises Conflict if the username or email is already taken.
        """
        email = normalize_email(email)
        result = await self.db.execute(
            select(User.id).where(or_(User.username == username, User.email == email))
        )
        if result.first() is not None:
            raise Conflict("Username or email already exists")

        user = User(
            username=username,
            email=email,
            password_hash=password_hash,
            phone=phone,
            role=role.value,
        )
        self.db.add(user)
        try:
            await self.db.flush()
        except IntegrityError as e:
            # Lost a race against a concurrent registration
            await self.db.rollback()
            raise Conflict("Username or email already exists") from e

        self.db.add(Profile(user_id=user.id, name=username))
        await self.db.flush()
        await self.db.refresh(user)

        logger.info("user_created", user_id=str(user.id), username=username, role=user.role)
        return user

    async def set_suspended(self, user_id: UUID, suspended: bool) -> User:
        user = await self.get_or_404(user_id)
        user.is_suspended = suspended
        await self.db.flush()
        return user

    async def set_role(self, user_id: UUID, role: Role) -> User:
        user = await self.get_or_404(user_id)
        user.role = role.value
        await self.db.flush()
        return user

    async def set_password_hash(self, user_id: UUID, password_hash: str) -> User:
        user = await self.get_or_404(user_id)
        user.password_hash = password_hash
        await self.db.flush()
        return user

    async def set_public(self, user_id: UUID, is_public: bool) -> None:
        await self.db.execute(update(User).where(User.id == user_id).values(is_public=is_public))

    async def delete(self, user_id: UUID) -> None:
        """Delete a user together with its profile and job postings."""
        await self.get_or_404(user_id)

        jobs = await self.db.execute(delete(Job).where(Job.user_id == user_id))
        await self.db.execute(delete(Profile).where(Profile.user_id == user_id))
        await self.db.execute(delete(User).where(User.id == user_id))
        await self.db.flush()

        logger.info("user_deleted", user_id=str(user_id), jobs_removed=jobs.rowcount)

    async def count_admins(self) -> int:
        result = await self.db.execute(
            select(func.count()).select_from(User).where(User.role == Role.ADMIN.value)
        )
        return result.scalar() or 0

    async def ensure_bootstrap_admin(
        self,
        seed_username: Optional[str] = None,
        seed_email: Optional[str] = None,
        seed_password_hash: Optional[str] = None,
    ) -> Optional[User]:
        """Guarantee at least one admin exists.

        With no users at all, the seed account is created as admin when one is
        configured. Otherwise the earliest-created user is promoted. Returns the
        user that was created or promoted, or None if nothing changed.
        """
        if await self.count_admins() > 0:
            return None

        result = await self.db.execute(
            select(User).order_by(User.created_at.asc(), User.id.asc()).limit(1)
        )
        earliest = result.scalar_one_or_none()

        if earliest is None:
            if not (seed_email and seed_password_hash):
                return None
            admin = await self.create(
                username=seed_username or "admin",
                email=seed_email,
                password_hash=seed_password_hash,
                role=Role.ADMIN,
            )
            logger.info("bootstrap_admin_seeded", user_id=str(admin.id), username=admin.username)
            return admin

        earliest.role = Role.ADMIN.value
        await self.db.flush()
        logger.info("bootstrap_admin_promoted", user_id=str(earliest.id), username=earliest.username)
        return earliest
