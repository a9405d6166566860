"""Course model definitions."""

import uuid
from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Table, Text
from sqlalchemy.orm import relationship
from lms_backend.database import Base
from lms_backend.models.user import User


course_teachers = Table(
    "course_teachers",
    Base.metadata,
    Column("course_id", String, ForeignKey("courses.id"), primary_key=True),
    Column("teacher_id", Integer, ForeignKey("users.id"), primary_key=True),
)


def _new_course_id() -> str:
    return uuid.uuid4().hex


class Course(Base):
    """Represents a course offered on the LMS."""
    __tablename__ = "courses"

    id = Column(String, primary_key=True, default=_new_course_id)
    title = Column(String, nullable=False)
    description = Column(Text)
    active = Column(Boolean, default=True)
    created_at = Column(DateTime, default=datetime.now)

    teachers = relationship(User, secondary=course_teachers)
