"""Meeting model definitions."""

from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from lms_backend.database import Base


class Meeting(Base):
    """Represents an online class meeting."""
    __tablename__ = "meetings"

    id = Column(Integer, primary_key=True)
    title = Column(String, nullable=False)
    meet_link = Column(String)
    course_id = Column(String, ForeignKey("courses.id"))
    created_by = Column(Integer, ForeignKey("users.id"))
    created_at = Column(DateTime, default=datetime.now)
