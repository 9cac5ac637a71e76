# server/api/auth.py

import logging
from datetime import datetime, timedelta
from pydantic import BaseModel
from passlib.context import CryptContext
from fastapi import APIRouter, Depends, Header, Request, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from server.core.errors import APIError
from server.database import get_db
from server.models.user import User as UserModel


MIN_PASSWORD_LENGTH = 8


logger = logging.getLogger(__name__)

router = APIRouter()
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


class Credentials(BaseModel):
    username: str
    password: str


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def authenticate_user(db: Session, username: str, password: str):
    user = db.query(UserModel).filter(UserModel.username == username).first()
    if not user or not verify_password(password, user.hashed_password):
        return None
    return user


def token_expired(user: UserModel, ttl_minutes: int | None) -> bool:
    if ttl_minutes is None:
        return False
    return user.created_at + timedelta(minutes=ttl_minutes) < datetime.now()


def get_current_user(
    request: Request,
    authorization: str | None = Header(default=None),
    db: Session = Depends(get_db),
) -> UserModel:
    """
    Looks up the user whose access token equals the raw Authorization header.
    """
    if not authorization:
        raise APIError(status.HTTP_401_UNAUTHORIZED, "Please log in")

    try:
        user = db.query(UserModel).filter(UserModel.access_token == authorization).first()
    except SQLAlchemyError as e:
        logger.exception("Token lookup failed")
        raise APIError(status.HTTP_400_BAD_REQUEST, str(e))

    settings = request.app.state.settings
    if user is None or token_expired(user, settings.ACCESS_TOKEN_TTL_MINUTES):
        raise APIError(status.HTTP_401_UNAUTHORIZED, "Please log in")
    return user


@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(req: Credentials, db: Session = Depends(get_db)):
    if len(req.password) < MIN_PASSWORD_LENGTH:
        raise APIError(400, f"Password must be at least {MIN_PASSWORD_LENGTH} characters long.")

    username = req.username
    if not username.strip():
        raise APIError(400, "Username is required")

    try:
        user_exists = db.query(UserModel).filter(UserModel.username == username).first()
        if user_exists:
            raise APIError(400, "Username already in use")

        new_user = UserModel(username=username, hashed_password=get_password_hash(req.password))
        db.add(new_user)
        db.commit()
        db.refresh(new_user)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Registration of %r failed", username)
        raise APIError(400, str(e))

    logger.info("Registered user %r (id=%s)", new_user.username, new_user.id)
    return {
        "success": True,
        "response": {
            "username": new_user.username,
            "accessToken": new_user.access_token,
            "id": new_user.id,
        },
    }


@router.post("/login")
def login(req: Credentials, db: Session = Depends(get_db)):
    try:
        user = authenticate_user(db, req.username, req.password)
    except SQLAlchemyError as e:
        logger.exception("Login lookup for %r failed", req.username)
        raise APIError(500, str(e))

    if not user:
        logger.info("Rejected login for %r", req.username)
        raise APIError(400, "Credentials didn't match")
    return {"success": True, "response": user.public()}
