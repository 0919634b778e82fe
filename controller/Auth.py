from fastapi import APIRouter, BackgroundTasks, Depends, Response
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, field_validator
from typing import Optional
from sqlalchemy.orm import Session
from config import Env, get_env
from database import get_db
from emails import welcome_new_user
from errors import APIError, Conflict, Internal, InvalidInput
from middleware import protect_route
from models import PASSWORD_MIN_LENGTH, User
from utils import generate_token, hash_password
import logging
import re

logger = logging.getLogger(__name__)


router = APIRouter(
    prefix="",
    tags=["Auth"]
)

EMAIL_REGEX = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class SignupRequest(BaseModel):
    fullName: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None

    @field_validator("fullName", "email", "password", mode="before")
    @classmethod
    def non_text_is_missing(cls, value):
        # null, numbers and objects count as a missing field
        return value if isinstance(value, str) else None


def get_user_by_email(db: Session, email: str):
    return db.query(User).filter(User.email == email).first()


def build_user(fullName: str, email: str, hashed_password: str):
    return User(
        fullName=fullName,
        email=email,
        password=hashed_password,
        profilePic="",
    )


def validate_signup(user: Optional[SignupRequest]):
    if user is None or not user.fullName or not user.email or not user.password:
        raise InvalidInput("All fields are required.")
    if len(user.password) < PASSWORD_MIN_LENGTH:
        raise InvalidInput(f"Password must be at least {PASSWORD_MIN_LENGTH} characters long.")
    if not EMAIL_REGEX.match(user.email):
        raise InvalidInput("Invalid email format")


@router.post('/signup', status_code=201)
def signup(
    response: Response,
    background_tasks: BackgroundTasks,
    user: Optional[SignupRequest] = None,
    db: Session = Depends(get_db),
    env: Env = Depends(get_env),
):
    validate_signup(user)
    try:
        if get_user_by_email(db, email=user.email):
            raise Conflict("Email already exists")

        new_user = build_user(user.fullName, user.email, hash_password(user.password))
        if not new_user:
            raise InvalidInput("Invalid user data")

        db.add(new_user)
        db.flush()
        generate_token(new_user, response, env)
        db.commit()
        db.refresh(new_user)
    except APIError:
        raise
    except Exception:
        db.rollback()
        logger.exception("Error in signup controller")
        raise Internal("Internal server error")

    background_tasks.add_task(welcome_new_user, new_user.email, new_user.fullName, env)
    return new_user.to_public()


@router.post('/login', response_class=PlainTextResponse)
def login():
    return "Login endpoint"


@router.post('/logout', response_class=PlainTextResponse)
def logout():
    return "Logout endpoint"


@router.get('/check')
def check(current_user: User = Depends(protect_route)):
    return current_user.to_public()
