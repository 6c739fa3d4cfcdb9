"""Profile schemas."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field


class ProfileUpdate(BaseModel):
    """
    Full replacement of the caller's profile.
    Every field omitted here is cleared on save; only is_public is left
    untouched when absent.
    """

    name: Optional[str] = Field(None, max_length=255)
    photo_url: Optional[str] = Field(None, max_length=500)
    contact_details: Optional[str] = None
    location: Optional[str] = Field(None, max_length=255)
    skills: Optional[str] = None
    experience: Optional[str] = None
    education: Optional[str] = None
    resume_url: Optional[str] = Field(None, max_length=500)
    portfolio_url: Optional[str] = Field(None, max_length=500)
    linkedin_url: Optional[str] = Field(None, max_length=500)
    github_url: Optional[str] = Field(None, max_length=500)
    is_public: Optional[bool] = None


class ProfileResponse(BaseModel):
    """Profile joined with the owning user's account fields."""

    user_id: UUID
    username: str
    email: str
    role: str
    is_public: bool
    name: str
    photo_url: Optional[str] = None
    contact_details: Optional[str] = None
    location: Optional[str] = None
    skills: Optional[str] = None
    experience: Optional[str] = None
    education: Optional[str] = None
    resume_url: Optional[str] = None
    portfolio_url: Optional[str] = None
    linkedin_url: Optional[str] = None
    github_url: Optional[str] = None
    updated_at: Optional[datetime] = None


class UploadResponse(BaseModel):
    url: str
