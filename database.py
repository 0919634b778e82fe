from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from config import Env
from errors import ConfigurationError
import logging
import sys

logger = logging.getLogger(__name__)


SessionLocal = sessionmaker(autocommit=False, autoflush=False)

Base = declarative_base()


def make_engine(url: str) -> Engine:
    if url.startswith("sqlite"):
        return create_engine(url, connect_args={"check_same_thread": False})
    return create_engine(url, pool_pre_ping=True)


def connect_db(env: Env) -> Engine:
    """Connect to the configured database and create the tables.

    The URI always comes from ``env``. Any failure here is fatal: it is
    logged and the process exits with status 1.
    """
    import models  # noqa: F401  registers the tables on Base

    try:
        if not env.DATABASE_URL:
            raise ConfigurationError("DATABASE_URL is not set")
        engine = make_engine(env.DATABASE_URL)
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        SessionLocal.configure(bind=engine)
        Base.metadata.create_all(bind=engine)
        logger.info("Database connected: %s", engine.url.host or engine.url.database)
        return engine
    except Exception:
        logger.exception("Error connecting to the database")
        sys.exit(1)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
