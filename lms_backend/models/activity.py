"""Activity model definitions."""

from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from lms_backend.database import Base


class Activity(Base):
    """Represents an entry in the activity feed."""
    __tablename__ = "activities"

    id = Column(Integer, primary_key=True)
    actor_id = Column(Integer, ForeignKey("users.id"))
    action = Column(String, nullable=False)
    entity = Column(String)
    entity_id = Column(String)
    created_at = Column(DateTime, default=datetime.now)
