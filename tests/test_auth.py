"""Tests for registration, login and token refresh."""

from unittest.mock import patch

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from codekickstart import models
from codekickstart.infrastructure.identity.auth.token_service import create_refresh_token

TEST_PASSWORD = "password123"  # noqa: S105  # matches the conftest users


class TestRegister:
    """Test suite for POST /users/register endpoint."""

    def test_register_success(self, client: TestClient, db_session: Session) -> None:
        """Test registration creates the user and signs them in."""
        response = client.post(
            "/api/v1/users/register",
            json={"email": "new@example.com", "password": "longenough"},
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["token_type"] == "bearer"
        assert data["access_token"]
        assert data["refresh_token"]

        user = db_session.query(models.User).filter_by(email="new@example.com").one()
        assert user.hashed_password != "longenough"

    def test_register_duplicate_email(
        self, client: TestClient, test_user: models.User
    ) -> None:
        response = client.post(
            "/api/v1/users/register",
            json={"email": test_user.email, "password": "longenough"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Email already registered"

    def test_register_short_password(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/users/register",
            json={"email": "new@example.com", "password": "short"},
        )
        assert response.status_code == 422

    def test_register_disabled(self, client: TestClient) -> None:
        """Test registration is refused when the feature flag is off."""
        with patch(
            "codekickstart.application.identity.use_cases.register_user_use_case."
            "is_user_registrations_enabled",
            return_value=False,
        ):
            response = client.post(
                "/api/v1/users/register",
                json={"email": "new@example.com", "password": "longenough"},
            )

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_registered_user_can_use_token(self, client: TestClient) -> None:
        register = client.post(
            "/api/v1/users/register",
            json={"email": "new@example.com", "password": "longenough"},
        )
        token = register.json()["access_token"]

        response = client.get("/api/v1/users/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["email"] == "new@example.com"


class TestLogin:
    """Test suite for POST /auth/login endpoint."""

    def test_login_success(self, client: TestClient, test_user: models.User) -> None:
        response = client.post(
            "/api/v1/auth/login",
            data={"username": test_user.email, "password": TEST_PASSWORD},
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["access_token"]
        assert "refresh_token" in response.cookies

    def test_login_wrong_password(self, client: TestClient, test_user: models.User) -> None:
        response = client.post(
            "/api/v1/auth/login",
            data={"username": test_user.email, "password": "wrong-password"},
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_login_unknown_email(self, client: TestClient, test_user: models.User) -> None:
        response = client.post(
            "/api/v1/auth/login",
            data={"username": "nobody@example.com", "password": TEST_PASSWORD},
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


class TestRefresh:
    """Test suite for POST /auth/refresh endpoint."""

    def test_refresh_with_body(self, client: TestClient, test_user: models.User) -> None:
        """Test non-browser clients can send the refresh token in the body."""
        response = client.post(
            "/api/v1/auth/refresh",
            json={"refresh_token": create_refresh_token(test_user.id)},
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["access_token"]

    def test_refresh_with_cookie(self, client: TestClient, test_user: models.User) -> None:
        """Test the cookie set by login is enough to refresh."""
        client.post(
            "/api/v1/auth/login",
            data={"username": test_user.email, "password": TEST_PASSWORD},
        )

        response = client.post("/api/v1/auth/refresh")

        assert response.status_code == status.HTTP_200_OK

    def test_refresh_without_token(self, client: TestClient) -> None:
        response = client.post("/api/v1/auth/refresh")
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_access_token_cannot_refresh(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        """Test an access token is not accepted as a refresh token."""
        access_token = auth_headers["Authorization"].removeprefix("Bearer ")

        response = client.post("/api/v1/auth/refresh", json={"refresh_token": access_token})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_refresh_token_cannot_authenticate(
        self, client: TestClient, test_user: models.User
    ) -> None:
        """Test a refresh token is not accepted as a bearer token."""
        refresh_token = create_refresh_token(test_user.id)

        response = client.get(
            "/api/v1/users/me", headers={"Authorization": f"Bearer {refresh_token}"}
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


class TestMe:
    """Test suite for GET /users/me endpoint."""

    def test_me(
        self, client: TestClient, test_user: models.User, auth_headers: dict[str, str]
    ) -> None:
        response = client.get("/api/v1/users/me", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"id": test_user.id, "email": test_user.email}

    def test_me_anonymous(self, client: TestClient) -> None:
        response = client.get("/api/v1/users/me")
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_token_for_deleted_user(
        self,
        client: TestClient,
        db_session: Session,
        test_user: models.User,
        auth_headers: dict[str, str],
    ) -> None:
        """Test a valid token for a user that no longer exists is rejected."""
        db_session.delete(test_user)
        db_session.commit()

        response = client.get("/api/v1/bookmarks", headers=auth_headers)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_logout_clears_cookie(self, client: TestClient, test_user: models.User) -> None:
        client.post(
            "/api/v1/auth/login",
            data={"username": test_user.email, "password": TEST_PASSWORD},
        )

        response = client.post("/api/v1/auth/logout")

        assert response.status_code == status.HTTP_200_OK
        assert client.post("/api/v1/auth/refresh").status_code == status.HTTP_401_UNAUTHORIZED
