"""Tests for language bookmark API endpoints."""

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from codekickstart import models


class TestListBookmarks:
    """Test suite for GET /bookmarks endpoint."""

    def test_anonymous_gets_empty_list(self, client: TestClient) -> None:
        """Test an anonymous caller has no bookmarks."""
        response = client.get("/api/v1/bookmarks")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"language_slugs": []}

    def test_lists_in_insertion_order(
        self,
        client: TestClient,
        seeded_catalog: list[str],
        auth_headers: dict[str, str],
    ) -> None:
        """Test bookmarks come back in the order they were added."""
        for slug in ("rust", "python", "dart"):
            client.post(f"/api/v1/bookmarks/{slug}/toggle", headers=auth_headers)

        response = client.get("/api/v1/bookmarks", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"language_slugs": ["rust", "python", "dart"]}

    def test_bookmarks_are_per_user(
        self,
        client: TestClient,
        seeded_catalog: list[str],
        auth_headers: dict[str, str],
        other_auth_headers: dict[str, str],
    ) -> None:
        """Test one user's bookmarks are invisible to another."""
        client.post("/api/v1/bookmarks/python/toggle", headers=auth_headers)

        response = client.get("/api/v1/bookmarks", headers=other_auth_headers)

        assert response.json() == {"language_slugs": []}

    def test_invalid_token_is_rejected(self, client: TestClient) -> None:
        """Test a present but invalid token is not treated as anonymous."""
        response = client.get(
            "/api/v1/bookmarks", headers={"Authorization": "Bearer not-a-jwt"}
        )
        assert response.status_code == status.HTTP_401_UNAUTHORIZED


class TestBookmarkStatus:
    """Test suite for GET /bookmarks/{slug} endpoint."""

    def test_anonymous_is_never_bookmarked(
        self, client: TestClient, seeded_catalog: list[str]
    ) -> None:
        response = client.get("/api/v1/bookmarks/python")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"language_slug": "python", "bookmarked": False}

    def test_reflects_toggle(
        self,
        client: TestClient,
        seeded_catalog: list[str],
        auth_headers: dict[str, str],
    ) -> None:
        """Test the status follows each toggle."""
        client.post("/api/v1/bookmarks/java/toggle", headers=auth_headers)
        response = client.get("/api/v1/bookmarks/java", headers=auth_headers)
        assert response.json()["bookmarked"] is True

        client.post("/api/v1/bookmarks/java/toggle", headers=auth_headers)
        response = client.get("/api/v1/bookmarks/java", headers=auth_headers)
        assert response.json()["bookmarked"] is False

    def test_unknown_slug_is_not_an_error(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        response = client.get("/api/v1/bookmarks/cobol", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["bookmarked"] is False


class TestToggleBookmark:
    """Test suite for POST /bookmarks/{slug}/toggle endpoint."""

    def test_anonymous_toggle_requires_auth(
        self, client: TestClient, db_session: Session, seeded_catalog: list[str]
    ) -> None:
        """Test an anonymous toggle is rejected and writes nothing."""
        response = client.post("/api/v1/bookmarks/python/toggle")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert db_session.query(models.LanguageBookmark).count() == 0

    def test_toggle_adds_then_removes(
        self,
        client: TestClient,
        db_session: Session,
        seeded_catalog: list[str],
        auth_headers: dict[str, str],
    ) -> None:
        """Test two toggles leave no bookmark behind."""
        first = client.post("/api/v1/bookmarks/python/toggle", headers=auth_headers)
        assert first.status_code == status.HTTP_200_OK
        assert first.json() == {"language_slug": "python", "bookmarked": True}
        assert db_session.query(models.LanguageBookmark).count() == 1

        second = client.post("/api/v1/bookmarks/python/toggle", headers=auth_headers)
        assert second.json() == {"language_slug": "python", "bookmarked": False}
        assert db_session.query(models.LanguageBookmark).count() == 0

    def test_toggle_parity(
        self,
        client: TestClient,
        db_session: Session,
        seeded_catalog: list[str],
        auth_headers: dict[str, str],
        test_user: models.User,
    ) -> None:
        """Test N toggles leave N mod 2 rows for the pair."""
        for _ in range(5):
            client.post("/api/v1/bookmarks/cpp/toggle", headers=auth_headers)

        rows = (
            db_session.query(models.LanguageBookmark)
            .filter_by(user_id=test_user.id, language_slug="cpp")
            .count()
        )
        assert rows == 1

    def test_toggle_does_not_touch_other_users(
        self,
        client: TestClient,
        db_session: Session,
        seeded_catalog: list[str],
        auth_headers: dict[str, str],
        other_auth_headers: dict[str, str],
        other_user: models.User,
    ) -> None:
        """Test removing one user's bookmark keeps another user's bookmark of the same slug."""
        client.post("/api/v1/bookmarks/rust/toggle", headers=other_auth_headers)
        client.post("/api/v1/bookmarks/rust/toggle", headers=auth_headers)
        client.post("/api/v1/bookmarks/rust/toggle", headers=auth_headers)

        remaining = db_session.query(models.LanguageBookmark).all()
        assert [(b.user_id, b.language_slug) for b in remaining] == [(other_user.id, "rust")]

    def test_toggle_unknown_slug(
        self,
        client: TestClient,
        db_session: Session,
        seeded_catalog: list[str],
        auth_headers: dict[str, str],
    ) -> None:
        """Test a slug outside the catalog returns 404."""
        response = client.post("/api/v1/bookmarks/cobol/toggle", headers=auth_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert db_session.query(models.LanguageBookmark).count() == 0
