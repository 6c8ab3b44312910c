"""Tests for the catalog, bookmark and chat message repositories."""

from collections.abc import Generator
from pathlib import Path
from unittest.mock import patch

import pytest
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from codekickstart import models
from codekickstart.database import Base, _build_engine
from codekickstart.domain.bookmarks.exceptions import BookmarkToggleConflictError
from codekickstart.domain.catalog.reference_languages import (
    REFERENCE_SLUGS,
    get_reference_languages,
)
from codekickstart.domain.common.value_objects.ids import UserId
from codekickstart.domain.tutor.entities.chat_message import ChatMessage
from codekickstart.infrastructure.bookmarks.repositories import BookmarkRepository
from codekickstart.infrastructure.bookmarks.repositories.bookmark_repository import (
    MAX_TOGGLE_ATTEMPTS,
)
from codekickstart.infrastructure.catalog.repositories import LanguageRepository
from codekickstart.infrastructure.tutor.repositories import ChatMessageRepository


class TestLanguageRepository:
    def test_seed_if_empty_inserts_once(self, db_session: Session) -> None:
        repo = LanguageRepository(db_session)

        assert repo.seed_if_empty(get_reference_languages()) is True
        assert repo.seed_if_empty(get_reference_languages()) is False
        assert [entry.slug for entry in repo.list_all()] == list(REFERENCE_SLUGS)

    def test_seed_loses_race(self, db_session: Session) -> None:
        """Test a seeder that saw an empty catalog backs off when another seeder won."""
        repo = LanguageRepository(db_session)
        repo.seed_if_empty(get_reference_languages())

        # Stale emptiness check, as if the other seed committed right after it
        with patch.object(repo, "count", return_value=0):
            assert repo.seed_if_empty(get_reference_languages()) is False

        assert repo.count() == len(REFERENCE_SLUGS)

    def test_find_by_slug_round_trips_nested_content(self, db_session: Session) -> None:
        repo = LanguageRepository(db_session)
        repo.seed_if_empty(get_reference_languages())

        rust = repo.find_by_slug("rust")

        assert rust is not None
        assert rust.id.is_persisted()
        assert rust.created_at is not None
        expected = next(e for e in get_reference_languages() if e.slug == "rust")
        assert rust.concepts == expected.concepts
        assert rust.resources == expected.resources

    def test_find_by_slug_miss(self, db_session: Session) -> None:
        assert LanguageRepository(db_session).find_by_slug("cobol") is None


class TestBookmarkRepository:
    @pytest.fixture
    def user_id(self, test_user: models.User) -> UserId:
        return UserId(test_user.id)

    def test_toggle_parity(self, db_session: Session, user_id: UserId) -> None:
        repo = BookmarkRepository(db_session)

        results = [repo.toggle(user_id, "python") for _ in range(4)]

        assert results == [True, False, True, False]
        assert not repo.exists(user_id, "python")

    def test_toggle_recovers_from_concurrent_insert(
        self, db_session: Session, user_id: UserId
    ) -> None:
        """Test a lost insert race is retried against the row the other toggle added."""
        repo = BookmarkRepository(db_session)
        repo.toggle(user_id, "python")
        real_delete = repo._delete_pair
        calls: list[str] = []

        def stale_then_real(uid: UserId, slug: str) -> bool:
            calls.append(slug)
            if len(calls) == 1:
                return False
            return real_delete(uid, slug)

        with patch.object(repo, "_delete_pair", side_effect=stale_then_real):
            added = repo.toggle(user_id, "python")

        assert added is False
        assert len(calls) == 2
        assert not repo.exists(user_id, "python")

    def test_toggle_gives_up_after_repeated_conflicts(
        self, db_session: Session, user_id: UserId
    ) -> None:
        repo = BookmarkRepository(db_session)
        repo.toggle(user_id, "python")

        with (
            patch.object(repo, "_delete_pair", return_value=False) as delete_pair,
            pytest.raises(BookmarkToggleConflictError),
        ):
            repo.toggle(user_id, "python")

        assert delete_pair.call_count == MAX_TOGGLE_ATTEMPTS
        assert repo.exists(user_id, "python")

    def test_slugs_are_scoped_to_user(
        self, db_session: Session, user_id: UserId, other_user: models.User
    ) -> None:
        repo = BookmarkRepository(db_session)
        repo.toggle(user_id, "python")
        repo.toggle(user_id, "dart")
        repo.toggle(UserId(other_user.id), "java")

        assert repo.find_slugs_by_user(user_id) == ["python", "dart"]
        assert repo.find_slugs_by_user(UserId(other_user.id)) == ["java"]
        assert not repo.exists(user_id, "java")


class TestChatMessageRepository:
    @pytest.fixture
    def user_id(self, test_user: models.User) -> UserId:
        return UserId(test_user.id)

    def test_append_assigns_id_and_timestamp(self, db_session: Session, user_id: UserId) -> None:
        repo = ChatMessageRepository(db_session)

        saved = repo.append(
            ChatMessage.create(user_id=user_id, message="Hi", response="Hello!")
        )

        assert saved.id.is_persisted()
        assert saved.created_at is not None
        assert saved.language_slug is None

    def test_append_rejects_persisted_message(self, db_session: Session, user_id: UserId) -> None:
        repo = ChatMessageRepository(db_session)
        saved = repo.append(ChatMessage.create(user_id=user_id, message="Hi", response="Hello!"))

        with pytest.raises(ValueError, match="cannot be updated"):
            repo.append(saved)

    def test_filter_by_language(self, db_session: Session, user_id: UserId) -> None:
        repo = ChatMessageRepository(db_session)
        for message, slug in [("a", "rust"), ("b", None), ("c", "rust"), ("d", "python")]:
            repo.append(
                ChatMessage.create(
                    user_id=user_id, message=message, response="ok", language_slug=slug
                )
            )

        assert [m.message for m in repo.find_by_user(user_id)] == ["a", "b", "c", "d"]
        assert [m.message for m in repo.find_by_user(user_id, "rust")] == ["a", "c"]
        assert repo.find_by_user(user_id, "java") == []

    def test_scoped_to_user(
        self, db_session: Session, user_id: UserId, other_user: models.User
    ) -> None:
        repo = ChatMessageRepository(db_session)
        repo.append(ChatMessage.create(user_id=user_id, message="mine", response="ok"))

        assert repo.find_by_user(UserId(other_user.id)) == []
        assert [m.message for m in repo.find_by_user(user_id)] == ["mine"]


@pytest.fixture
def file_sessions(tmp_path: Path) -> Generator[sessionmaker[Session], None, None]:
    """Session factory on a SQLite file, built the way the application builds its engine."""
    engine = _build_engine(f"sqlite:///{tmp_path / 'codekickstart.db'}")
    Base.metadata.create_all(bind=engine)
    try:
        yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    finally:
        engine.dispose()


@pytest.fixture
def file_user_id(file_sessions: sessionmaker[Session]) -> UserId:
    with file_sessions() as session:
        user = models.User(email="file@example.com", hashed_password="x")  # noqa: S106
        session.add(user)
        session.commit()
        return UserId(user.id)


class TestConcurrentSessions:
    """Two sessions on a file database must not share a transaction."""

    def test_uncommitted_removal_is_invisible_and_survives_other_close(
        self, file_sessions: sessionmaker[Session], file_user_id: UserId
    ) -> None:
        with file_sessions() as setup:
            BookmarkRepository(setup).toggle(file_user_id, "python")

        session_a = file_sessions()
        session_b = file_sessions()
        try:
            assert BookmarkRepository(session_a)._delete_pair(file_user_id, "python")
            assert BookmarkRepository(session_b).exists(file_user_id, "python")
            session_b.close()
            session_a.commit()
        finally:
            session_a.close()
            session_b.close()

        with file_sessions() as check:
            assert not BookmarkRepository(check).exists(file_user_id, "python")

    def test_rollback_does_not_undo_other_session_commit(
        self, file_sessions: sessionmaker[Session], file_user_id: UserId
    ) -> None:
        session_a = file_sessions()
        session_b = file_sessions()
        try:
            session_a.add(
                models.LanguageBookmark(user_id=file_user_id.value, language_slug="rust")
            )
            session_a.flush()
            assert not BookmarkRepository(session_b).exists(file_user_id, "rust")
            session_b.rollback()
            session_a.commit()
        finally:
            session_a.close()
            session_b.close()

        with file_sessions() as check:
            assert BookmarkRepository(check).find_slugs_by_user(file_user_id) == ["rust"]

    def test_seed_losing_race_keeps_reference_slugs(
        self, file_sessions: sessionmaker[Session]
    ) -> None:
        session_a = file_sessions()
        session_b = file_sessions()
        try:
            repo_a = LanguageRepository(session_a)
            repo_b = LanguageRepository(session_b)
            real_count = repo_a.count

            def count_then_other_seeds() -> int:
                # The other seeder commits between our emptiness check and our insert
                seen = real_count()
                assert repo_b.seed_if_empty(get_reference_languages()) is True
                return seen

            with patch.object(repo_a, "count", side_effect=count_then_other_seeds):
                assert repo_a.seed_if_empty(get_reference_languages()) is False
        finally:
            session_a.close()
            session_b.close()

        with file_sessions() as check:
            slugs = [entry.slug for entry in LanguageRepository(check).list_all()]
        assert slugs == list(REFERENCE_SLUGS)


class TestBuildEngine:
    def test_memory_database_shares_one_connection(self) -> None:
        engine = _build_engine("sqlite:///:memory:")
        try:
            assert isinstance(engine.pool, StaticPool)
        finally:
            engine.dispose()

    def test_file_database_uses_connection_per_session(self, tmp_path: Path) -> None:
        engine = _build_engine(f"sqlite:///{tmp_path / 'codekickstart.db'}")
        try:
            assert not isinstance(engine.pool, StaticPool)
            with engine.connect() as first, engine.connect() as second:
                assert first.connection.dbapi_connection is not second.connection.dbapi_connection
        finally:
            engine.dispose()
