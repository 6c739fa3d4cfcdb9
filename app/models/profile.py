"""Profile model."""

from sqlalchemy import Column, ForeignKey, String, Text, Uuid

from app.db.base import Base

# Free-text fields wiped by the clear-profile moderation action
CONTENT_FIELDS = ("contact_details", "location", "skills", "experience", "education")

# Link fields wiped by the clear-socials moderation action
SOCIAL_FIELDS = ("portfolio_url", "linkedin_url", "github_url")

# Everything the owner can overwrite through PUT /profile/me
EDITABLE_FIELDS = ("name", "photo_url", "resume_url") + CONTENT_FIELDS + SOCIAL_FIELDS


class Profile(Base):
    """Public profile of a job seeker, one per user."""

    __tablename__ = "profiles"

    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )
    name = Column(String(255), nullable=False)
    photo_url = Column(String(500))
    contact_details = Column(Text)
    location = Column(String(255))
    skills = Column(Text)
    experience = Column(Text)
    education = Column(Text)
    resume_url = Column(String(500))
    portfolio_url = Column(String(500))
    linkedin_url = Column(String(500))
    github_url = Column(String(500))

    def __repr__(self):
        return f"<Profile {self.name}>"
