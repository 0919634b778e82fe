from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping, Optional
from dotenv import load_dotenv
import os

load_dotenv()


DEFAULT_PORT = 3000


def parse_port(value: Optional[str]) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return DEFAULT_PORT


@dataclass(frozen=True)
class Env:
    """Process configuration, read once at startup."""

    PORT: int = DEFAULT_PORT
    DATABASE_URL: Optional[str] = None
    JWT_SECRET: Optional[str] = None
    NODE_ENV: Optional[str] = None
    EMAIL_FROM_NAME: Optional[str] = None
    CLIENT_URL: Optional[str] = None
    EMAIL_USER: Optional[str] = None
    EMAIL_PASS: Optional[str] = None

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None) -> "Env":
        environ = os.environ if environ is None else environ
        return cls(
            PORT=parse_port(environ.get("PORT")),
            DATABASE_URL=environ.get("DATABASE_URL") or environ.get("MONGO_URI"),
            JWT_SECRET=environ.get("JWT_SECRET"),
            NODE_ENV=environ.get("NODE_ENV"),
            EMAIL_FROM_NAME=environ.get("EMAIL_FROM_NAME"),
            CLIENT_URL=environ.get("CLIENT_URL"),
            EMAIL_USER=environ.get("EMAIL_USER"),
            EMAIL_PASS=environ.get("EMAIL_PASS"),
        )

    @property
    def is_production(self) -> bool:
        return self.NODE_ENV == "production"


@lru_cache
def get_env() -> Env:
    return Env.from_environ()
