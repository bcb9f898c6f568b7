import os

# Must be set before the service modules build their settings and engine
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from users_platform.users_platform.auth_service.db import init_db
from users_platform.users_platform.auth_service.hashing import HashService
from users_platform.users_platform.auth_service.main import app, build_auth_service
from users_platform.users_platform.auth_service.repository import InMemoryUserRepository
from users_platform.users_platform.auth_service.routes.auth import get_auth_service
from users_platform.users_platform.auth_service.service import AuthService
from users_platform.users_platform.auth_service.tokens import TokenService


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield sessionmaker(bind=engine, autocommit=False, autoflush=False)
    engine.dispose()


@pytest.fixture
def hash_service():
    return HashService()


@pytest.fixture
def token_service():
    return TokenService(secret_key="test-access-secret", refresh_secret_key="test-refresh-secret")


@pytest.fixture
def memory_service(hash_service, token_service):
    return AuthService(
        users=InMemoryUserRepository(),
        hash_service=hash_service,
        token_service=token_service,
    )


@pytest.fixture
def client(session_factory):
    service = build_auth_service(session_factory)
    app.dependency_overrides[get_auth_service] = lambda: service
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
