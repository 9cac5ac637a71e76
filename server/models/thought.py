# server/models/thought.py

from datetime import datetime
from sqlalchemy import Column, Integer, String, Text, DateTime
from . import Base


class Thought(Base):
    __tablename__ = "thoughts"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, nullable=True)
    message = Column(Text, nullable=False)
    created_at = Column(DateTime, default=datetime.now, index=True, nullable=False)
    hearts = Column(Integer, default=0, nullable=False)
    # Authorization header the post arrived with; kept as-is, never checked or returned.
    access_token = Column(String, nullable=True)

    def public(self) -> dict:
        return {
            "id": self.id,
            "username": self.username,
            "message": self.message,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "hearts": self.hearts,
        }
