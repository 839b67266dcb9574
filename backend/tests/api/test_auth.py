"""
Tests for JWT authentication middleware.
"""

import pytest
from fastapi.testclient import TestClient
from unittest.mock import patch

from api import app
from api.middleware.auth import decode_token
from modules.auth.exceptions import ExpiredTokenError, InvalidTokenError
from helpers import TEST_JWT_SECRET, create_test_token

client = TestClient(app)


class TestDecodeToken:

    @patch("api.middleware.auth.get_settings")
    def test_valid_token(self, mock_settings):
        """Valid token should decode successfully."""
        mock_settings.return_value.supabase_jwt_secret = TEST_JWT_SECRET
        mock_settings.return_value.jwt_audience = "authenticated"
        token = create_test_token()
        payload = decode_token(token)
        assert payload.sub == "test-user-123"
        assert payload.email == "test@example.com"

    @patch("api.middleware.auth.get_settings")
    def test_extra_claims_are_kept(self, mock_settings):
        mock_settings.return_value.supabase_jwt_secret = TEST_JWT_SECRET
        mock_settings.return_value.jwt_audience = "authenticated"
        payload = decode_token(create_test_token())
        assert payload.model_dump()["role"] == "authenticated"

    @patch("api.middleware.auth.get_settings")
    def test_expired_token(self, mock_settings):
        """Expired token should raise ExpiredTokenError."""
        mock_settings.return_value.supabase_jwt_secret = TEST_JWT_SECRET
        mock_settings.return_value.jwt_audience = "authenticated"
        token = create_test_token(expired=True)
        with pytest.raises(ExpiredTokenError) as exc_info:
            decode_token(token)
        assert exc_info.value.code == "TOKEN_EXPIRED"

    @patch("api.middleware.auth.get_settings")
    def test_invalid_token(self, mock_settings):
        """Invalid token should raise InvalidTokenError."""
        mock_settings.return_value.supabase_jwt_secret = TEST_JWT_SECRET
        mock_settings.return_value.jwt_audience = "authenticated"
        with pytest.raises(InvalidTokenError) as exc_info:
            decode_token("invalid-token")
        assert "Invalid token" in exc_info.value.message

    @patch("api.middleware.auth.get_settings")
    def test_wrong_audience(self, mock_settings):
        mock_settings.return_value.supabase_jwt_secret = TEST_JWT_SECRET
        mock_settings.return_value.jwt_audience = "authenticated"
        with pytest.raises(InvalidTokenError):
            decode_token(create_test_token(audience="anon"))

    @patch("api.middleware.auth.get_settings")
    def test_missing_jwt_secret(self, mock_settings):
        mock_settings.return_value.supabase_jwt_secret = ""
        with pytest.raises(InvalidTokenError) as exc_info:
            decode_token(create_test_token())
        assert "not configured" in exc_info.value.message


class TestProtectedRoutes:

    def test_missing_auth_header(self):
        """Request without auth header should return 401."""
        response = client.get("/api/users/me")
        assert response.status_code == 401
        assert response.json()["code"] == "MISSING_TOKEN"

    def test_expired_token(self, jwt_secret):
        """Protected route should return 401 with expired token."""
        token = create_test_token(expired=True)
        response = client.get(
            "/api/users/me",
            headers={"Authorization": f"Bearer {token}"},
        )
        assert response.status_code == 401
        assert response.json()["code"] == "TOKEN_EXPIRED"

    def test_missing_jwt_secret(self, jwt_secret):
        """Missing JWT secret should return 401."""
        jwt_secret.return_value.supabase_jwt_secret = ""
        response = client.get(
            "/api/users/me",
            headers={"Authorization": f"Bearer {create_test_token()}"},
        )
        assert response.status_code == 401
        assert "not configured" in response.json()["message"].lower()


class TestHookSecret:

    def test_missing_secret(self):
        response = client.post(
            "/api/hooks/pre-authentication",
            json={"triggerSource": "PreAuthentication_Authentication", "userName": "user-1"},
        )
        assert response.status_code == 401

    def test_wrong_secret(self, jwt_secret):
        response = client.post(
            "/api/hooks/pre-authentication",
            json={"triggerSource": "PreAuthentication_Authentication", "userName": "user-1"},
            headers={"Authorization": "Bearer not-the-secret"},
        )
        assert response.status_code == 401
        assert response.json()["code"] == "INVALID_TOKEN"
