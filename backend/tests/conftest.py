"""Pytest configuration and fixtures."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT", "test")

from collections.abc import Generator  # noqa: E402
from typing import Any  # noqa: E402
from unittest.mock import AsyncMock  # noqa: E402

import pytest  # noqa: E402
from dependency_injector import providers  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402

from notedeck import models  # noqa: E402
from notedeck.core import container  # noqa: E402
from notedeck.database import Base, create_database_engine, get_db  # noqa: E402
from notedeck.main import app  # noqa: E402

OWNER = "owner-1"
OTHER_OWNER = "owner-2"


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh in-memory database and session for each test."""
    engine = create_database_engine("sqlite:///:memory:")
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()

    # Full-text indexes are per database; start each test cold
    container.note_full_text_index.reset()
    container.flashcard_set_full_text_index.reset()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()
        container.note_full_text_index.reset()
        container.flashcard_set_full_text_index.reset()


@pytest.fixture
def generation_client() -> Generator[AsyncMock, None, None]:
    """Replace the AI-backed generation client with a mock."""
    mock_client = AsyncMock()
    mock_client.generate.return_value = '{"cards": []}'
    container.generation_client.override(providers.Object(mock_client))
    try:
        yield mock_client
    finally:
        container.generation_client.reset_override()


@pytest.fixture
def ai_enabled(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        "notedeck.infrastructure.common.dependencies.is_ai_enabled", lambda: True
    )


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Create a test client acting as OWNER."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app, headers={"X-Owner-Id": OWNER}) as test_client:
        yield test_client

    app.dependency_overrides.clear()


def create_test_note(
    db_session: Session, name: str, body: str = "", owner: str = OWNER
) -> models.Note:
    """Create a note row directly in the database."""
    note = models.Note(owner=owner, name=name, body=body)
    db_session.add(note)
    db_session.commit()
    db_session.refresh(note)
    return note


def create_test_flashcard_set(
    db_session: Session,
    name: str,
    cards: list[tuple[str, str]] | None = None,
    owner: str = OWNER,
) -> models.FlashcardSet:
    """Create a flashcard set row with cards directly in the database."""
    flashcard_set = models.FlashcardSet(
        owner=owner,
        name=name,
        cards=[models.Card(question=q, answer=a) for q, a in cards or []],
    )
    db_session.add(flashcard_set)
    db_session.commit()
    db_session.refresh(flashcard_set)
    return flashcard_set
