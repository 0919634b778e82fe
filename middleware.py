from fastapi import Cookie, Depends
from jose import JWTError
from sqlalchemy.orm import Session
from typing import Optional
from config import Env, get_env
from database import get_db
from errors import NotFound, Unauthorized
from models import User
from utils import decode_token
import logging

logger = logging.getLogger(__name__)


def protect_route(
    token: Optional[str] = Cookie(default=None),
    env: Env = Depends(get_env),
    db: Session = Depends(get_db),
) -> User:
    """Resolve the user behind the session cookie or reject the request."""
    if not token:
        raise Unauthorized("Unauthorized - No token provided")
    try:
        payload = decode_token(token, env)
    except JWTError:
        logger.debug("Rejected session token", exc_info=True)
        raise Unauthorized("Unauthorized - Invalid token")

    user_id = payload.get("UserId")
    if user_id is None:
        raise Unauthorized("Unauthorized - Invalid token")

    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise NotFound("User not found")
    return user
