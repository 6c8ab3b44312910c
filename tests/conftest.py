"""Pytest configuration and fixtures."""

import os

# Settings are cached on first use, so the test environment must be in place
# before anything from codekickstart is imported.
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["ENVIRONMENT"] = "test"
os.environ["SECRET_KEY"] = "test-secret-key"  # noqa: S105
os.environ["COOKIE_SECURE"] = "false"
os.environ["SEED_LANGUAGES_ON_STARTUP"] = "false"
os.environ.pop("AI_PROVIDER", None)

from collections.abc import Generator  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from dependency_injector import providers  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from pydantic_ai import models as pydantic_ai_models  # noqa: E402
from pydantic_ai.models.function import AgentInfo, FunctionModel  # noqa: E402
from pydantic_ai.messages import ModelMessage, ModelResponse  # noqa: E402
from pydantic_ai.models.test import TestModel  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from codekickstart import models  # noqa: E402
from codekickstart.core import container  # noqa: E402
from codekickstart.database import Base, get_db  # noqa: E402
from codekickstart.domain.catalog.reference_languages import get_reference_languages  # noqa: E402
from codekickstart.infrastructure.ai.tutor_gateway import TutorGateway  # noqa: E402
from codekickstart.infrastructure.catalog.repositories import LanguageRepository  # noqa: E402
from codekickstart.infrastructure.identity.auth.password_service import (  # noqa: E402
    hash_password,
)
from codekickstart.infrastructure.identity.auth.token_service import (  # noqa: E402
    create_access_token,
)
from codekickstart.main import app  # noqa: E402

# Never let a test reach a real model provider
pydantic_ai_models.ALLOW_MODEL_REQUESTS = False

TEST_PASSWORD = "password123"  # noqa: S105

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"

# Create test engine
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

# Create test session factory
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    # Create all tables
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        # Drop all tables after test
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Create a test client with database session."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def test_user(db_session: Session) -> models.User:
    """Create a user with a known password."""
    user = models.User(email="test@example.com", hashed_password=hash_password(TEST_PASSWORD))
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def other_user(db_session: Session) -> models.User:
    """Create a second user for isolation checks."""
    user = models.User(email="other@example.com", hashed_password=hash_password(TEST_PASSWORD))
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


def auth_headers_for(user: models.User) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(user.id)}"}


@pytest.fixture
def auth_headers(test_user: models.User) -> dict[str, str]:
    """Bearer headers for test_user."""
    return auth_headers_for(test_user)


@pytest.fixture
def other_auth_headers(other_user: models.User) -> dict[str, str]:
    """Bearer headers for other_user."""
    return auth_headers_for(other_user)


@pytest.fixture
def seeded_catalog(db_session: Session) -> list[str]:
    """Seed the reference languages and return their slugs."""
    entries = get_reference_languages()
    LanguageRepository(db_session).seed_if_empty(entries)
    return [entry.slug for entry in entries]


def _raise_connection_error(messages: list[ModelMessage], info: AgentInfo) -> ModelResponse:
    raise ConnectionError("connection refused")


@pytest.fixture
def tutor_reply() -> Generator[str, None, None]:
    """Make the tutor answer every prompt with a fixed text."""
    reply = "Hi!"
    gateway = TutorGateway(model_factory=lambda: TestModel(custom_output_text=reply))
    container.tutor_gateway.override(providers.Object(gateway))
    try:
        yield reply
    finally:
        container.tutor_gateway.reset_override()


@pytest.fixture
def tutor_down() -> Generator[None, None, None]:
    """Make every tutor call fail as if the upstream service was unreachable."""
    gateway = TutorGateway(model_factory=lambda: FunctionModel(_raise_connection_error))
    container.tutor_gateway.override(providers.Object(gateway))
    try:
        yield
    finally:
        container.tutor_gateway.reset_override()
