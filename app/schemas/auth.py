"""Authentication schemas."""

from __future__ import annotations  # Enable forward references

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class RegisterRequest(BaseModel):
    """Register request schema."""

    username: str = Field(..., min_length=1, max_length=150)
    email: EmailStr
    password: str = Field(..., min_length=1)
    phone: Optional[str] = Field(None, max_length=20)


class LoginRequest(BaseModel):
    """Login accepts either the username or the email as identifier."""

    identifier: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class PasswordResetRequest(BaseModel):
    """New password, used by both the self-service and the admin reset."""

    model_config = ConfigDict(populate_by_name=True)

    new_password: str = Field(..., min_length=1, alias="newPassword")


class ForgotPasswordRequest(BaseModel):
    email: EmailStr


class UserResponse(BaseModel):
    """User response schema."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
    email: str
    role: str
    is_public: bool
    created_at: datetime


class AuthResponse(BaseModel):
    """Returned by register and login."""

    token: str
    user: UserResponse


class MessageResponse(BaseModel):
    message: str


# Rebuild models to resolve forward references
AuthResponse.model_rebuild()
