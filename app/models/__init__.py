"""Database models."""

# Base models (no foreign keys)
from app.models.user import Role, User

# Models with foreign keys to users
from app.models.profile import Profile
from app.models.job import Job

# Export all models
__all__ = [
    "Role",
    "User",
    "Profile",
    "Job",
]
