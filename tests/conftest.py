import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import models  # noqa: F401  registers the tables on Base
from config import Env
from database import Base, get_db
from main import create_app


@pytest.fixture
def env():
    return Env(JWT_SECRET="test-secret", NODE_ENV="test", CLIENT_URL="http://localhost:5173")


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    yield session
    session.close()
    engine.dispose()


@pytest.fixture
def make_client(db_session, env):
    """Build a TestClient for an app bound to the in-memory database."""

    def _make(app_env=None, **kwargs):
        app = create_app(app_env or env, **kwargs)

        def override_get_db():
            yield db_session

        app.dependency_overrides[get_db] = override_get_db
        return TestClient(app)

    return _make


@pytest.fixture
def client(make_client):
    return make_client()
