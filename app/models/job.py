"""Job model."""

from sqlalchemy import Column, ForeignKey, String, Text, Uuid

from app.db.base import Base


class Job(Base):
    """Job posting model."""

    __tablename__ = "jobs"

    title = Column(String(500), nullable=False, index=True)
    company = Column(String(255), nullable=False)
    category = Column(String(50), nullable=False, index=True)
    location = Column(String(255))
    experience = Column(String(50))
    salary = Column(String(100))
    requirements = Column(Text)
    link = Column(Text, nullable=False)
    link_type = Column(String(20), nullable=False, default="Other")
    posted_by = Column(String(150), nullable=False)
    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    def __repr__(self):
        return f"<Job {self.title} at {self.company}>"
