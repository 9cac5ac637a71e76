# server/models/user.py

import secrets
from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime
from . import Base


def generate_access_token() -> str:
    return secrets.token_hex(128)


# -------------------------------
# User Model
# -------------------------------

class User(Base):
    """
    Database model for application users.
    Stores the username, the hashed password and the access token
    issued once at registration.
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    access_token = Column(String, unique=True, index=True, nullable=False, default=generate_access_token)
    created_at = Column(DateTime, default=datetime.now, nullable=False)

    def public(self) -> dict:
        return {
            "username": self.username,
            "id": self.id,
            "accessToken": self.access_token,
        }
