"""Job schemas."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.utils.constants import EXPERIENCE_LEVELS, JOB_CATEGORIES, LINK_TYPES


class JobCreate(BaseModel):
    """Fields a user submits when posting a job."""

    title: str = Field(..., min_length=1, max_length=500)
    company: str = Field(..., min_length=1, max_length=255)
    category: str = Field(..., description=f"One of: {', '.join(JOB_CATEGORIES)}")
    link: str = Field(..., min_length=1)
    location: Optional[str] = Field(None, max_length=255)
    experience: Optional[str] = Field(None, description=f"One of: {', '.join(EXPERIENCE_LEVELS)}")
    salary: Optional[str] = Field(None, max_length=100)
    requirements: Optional[str] = None
    link_type: Optional[str] = Field(None, description="Detected from the link when omitted")
    posted_by: Optional[str] = Field(None, max_length=150, description="Defaults to the poster's username")

    @field_validator("category")
    @classmethod
    def validate_category(cls, v):
        if v not in JOB_CATEGORIES:
            raise ValueError(f"Category must be one of: {', '.join(JOB_CATEGORIES)}")
        return v

    @field_validator("experience")
    @classmethod
    def validate_experience(cls, v):
        if v and v not in EXPERIENCE_LEVELS:
            raise ValueError(f"Experience must be one of: {', '.join(EXPERIENCE_LEVELS)}")
        return v or None

    @field_validator("link_type")
    @classmethod
    def validate_link_type(cls, v):
        if v and v not in LINK_TYPES:
            raise ValueError(f"Link type must be one of: {', '.join(LINK_TYPES)}")
        return v or None


class JobResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    company: str
    category: str
    location: Optional[str] = None
    experience: Optional[str] = None
    salary: Optional[str] = None
    requirements: Optional[str] = None
    link: str
    link_type: str
    posted_by: str
    user_id: UUID
    created_at: datetime
