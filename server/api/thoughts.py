# server/api/thoughts.py

import logging
from pydantic import BaseModel
from fastapi import APIRouter, Depends, Header, Request, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from server.api.auth import get_current_user
from server.core.errors import APIError
from server.database import get_db
from server.models.thought import Thought


THOUGHTS_LIMIT = 20

# Ids are stored as signed 64-bit integers.
MAX_THOUGHT_ID = 2**63 - 1


logger = logging.getLogger(__name__)

router = APIRouter()


class ThoughtCreateRequest(BaseModel):
    username: str | None = None
    message: str | None = None


# -------------------------------
# Feed
# -------------------------------

@router.get("/thoughts", status_code=status.HTTP_201_CREATED, dependencies=[Depends(get_current_user)])
def list_thoughts(db: Session = Depends(get_db)):
    """
    Returns the most recent thoughts, newest first.
    Answers 201 rather than 200; existing clients expect it.
    """
    try:
        thoughts = (
            db.query(Thought)
            .order_by(Thought.created_at.desc(), Thought.id.desc())
            .limit(THOUGHTS_LIMIT)
            .all()
        )
    except SQLAlchemyError as e:
        logger.exception("Listing thoughts failed")
        raise APIError(400, str(e))
    return [t.public() for t in thoughts]


@router.post("/thoughts", status_code=status.HTTP_201_CREATED)
def post_thought(
    req: ThoughtCreateRequest,
    request: Request,
    authorization: str | None = Header(default=None),
    db: Session = Depends(get_db),
):
    if request.app.state.settings.REQUIRE_AUTH_TO_POST:
        get_current_user(request, authorization, db)

    if not req.message:
        raise APIError(400, "Can't post new thoughts", {"message": "Path `message` is required."})

    try:
        thought = Thought(username=req.username, message=req.message, access_token=authorization)
        db.add(thought)
        db.commit()
        db.refresh(thought)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Saving thought failed")
        raise APIError(400, "Can't post new thoughts", str(e))

    logger.info("Thought %s posted by %r", thought.id, thought.username)
    return {"success": True, "response": thought.public()}


# -------------------------------
# Likes
# -------------------------------

@router.post("/thoughts/{thought_id}/like", dependencies=[Depends(get_current_user)])
def like_thought(thought_id: str, db: Session = Depends(get_db)):
    """
    Adds one heart in a single UPDATE and returns the record as it is
    after the increment.
    """
    try:
        pk = int(thought_id)
    except ValueError:
        pk = None
    if pk is None or not -MAX_THOUGHT_ID <= pk <= MAX_THOUGHT_ID:
        raise APIError(400, "Can't update Likes", f"Invalid thought id: {thought_id}")

    try:
        updated = (
            db.query(Thought)
            .filter(Thought.id == pk)
            .update({Thought.hearts: Thought.hearts + 1}, synchronize_session=False)
        )
        if not updated:
            db.rollback()
            raise APIError(400, "Can't update Likes", f"Thought not found: {thought_id}")
        db.commit()
        thought = db.get(Thought, pk)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Liking thought %s failed", thought_id)
        raise APIError(400, "Can't update Likes", str(e))

    return {"success": True, "response": thought.public()}
