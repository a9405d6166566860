"""Notice model definitions."""

from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from lms_backend.database import Base


class Notice(Base):
    """Represents an announcement, either general or scoped to a course."""
    __tablename__ = "notices"

    id = Column(Integer, primary_key=True)
    title = Column(String, nullable=False)
    body = Column(Text)
    course_id = Column(String, ForeignKey("courses.id"), nullable=True)
    posted_by = Column(Integer, ForeignKey("users.id"))
    created_at = Column(DateTime, default=datetime.now)
