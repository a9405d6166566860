"""User model definitions."""

import enum
from datetime import datetime

from sqlalchemy import Column, DateTime, Integer, String
from lms_backend.database import Base


class Role(str, enum.Enum):
    STUDENT = "STUDENT"
    TEACHER = "TEACHER"
    ADMIN = "ADMIN"
    HEAD = "HEAD"
    MANAGEMENT = "MANAGEMENT"


class User(Base):
    """Represents an LMS account."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    name = Column(String)
    hashed_password = Column(String, nullable=False)
    role = Column(String, nullable=False, default=Role.STUDENT.value)
    created_at = Column(DateTime, default=datetime.now)
