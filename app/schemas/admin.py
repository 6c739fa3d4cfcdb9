"""Admin schemas for user and content moderation."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class AdminUserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
    email: str
    role: str
    is_suspended: bool
    is_public: bool
    created_at: datetime


class SuspendRequest(BaseModel):
    is_suspended: bool


class DashboardStats(BaseModel):
    """Counters shown on the admin dashboard, keyed as the web client expects."""

    totalUsers: int
    totalJobs: int
    suspendedUsers: int
    recentJobs: int
