from datetime import datetime, timedelta, timezone
from jose import jwt
from passlib.context import CryptContext
from config import Env
from errors import ConfigurationError

ALGORITHM = "HS256"

TOKEN_COOKIE = "token"

TOKEN_EXPIRE = timedelta(days=7)

# NODE_ENV value that turns the cookie's secure flag off. The spelling is what
# deployed environments set and must not be corrected here.
INSECURE_ENV = "devlopment"

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=10)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def cookie_is_secure(node_env) -> bool:
    return node_env != INSECURE_ENV


def generate_token(user, response, env: Env) -> str:
    """Sign a 7 day token for ``user`` and set it as the session cookie.

    ``user`` needs an ``id`` attribute and ``response`` a ``set_cookie``
    method. Returns the signed token.
    """
    if not env.JWT_SECRET:
        raise ConfigurationError("JWT_SECRET is not set")

    to_encode = {
        "UserId": getattr(user, "id", None),
        "exp": datetime.now(timezone.utc) + TOKEN_EXPIRE,
    }
    token = jwt.encode(to_encode, env.JWT_SECRET, algorithm=ALGORITHM)

    response.set_cookie(
        TOKEN_COOKIE,
        token,
        max_age=int(TOKEN_EXPIRE.total_seconds()),
        httponly=True,
        secure=cookie_is_secure(env.NODE_ENV),
        samesite="strict",
    )
    return token


def decode_token(token: str, env: Env) -> dict:
    if not env.JWT_SECRET:
        raise ConfigurationError("JWT_SECRET is not set")
    return jwt.decode(token, env.JWT_SECRET, algorithms=[ALGORITHM])
