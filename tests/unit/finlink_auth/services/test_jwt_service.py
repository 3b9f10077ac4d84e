"""Unit tests for JWTService."""

from datetime import timedelta
from uuid import uuid4

import jwt
import pytest

from finlink_auth.exceptions import InvalidTokenError
from finlink_auth.services import JWTService


class TestJWTServiceInit:
    """Tests for JWTService initialization."""

    def test_init_with_empty_secret_raises(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            JWTService(secret_key="")


class TestAccessTokens:
    """Tests for access token creation and verification."""

    def setup_method(self):
        self.service = JWTService(secret_key="test-secret-key-12345")
        self.user_id = uuid4()
        self.email = "test@example.com"

    def test_verify_valid_access_token(self):
        token = self.service.create_access_token(self.user_id, self.email)

        payload = self.service.verify_token(token)

        assert payload.user_id == self.user_id
        assert payload.email == self.email
        assert payload.is_access_token()

    def test_token_type_is_preserved(self):
        token = self.service.create_access_token(
            self.user_id,
            self.email,
            token_type="refresh",
        )

        payload = self.service.verify_token(token)

        assert payload.token_type == "refresh"
        assert not payload.is_access_token()

    def test_expired_token_raises(self):
        token = self.service.create_access_token(
            self.user_id,
            self.email,
            expires_delta=timedelta(seconds=-10),
        )

        with pytest.raises(InvalidTokenError, match="expired"):
            self.service.verify_token(token)

    def test_wrong_secret_raises(self):
        other = JWTService(secret_key="a-different-secret")
        token = other.create_access_token(self.user_id, self.email)

        with pytest.raises(InvalidTokenError):
            self.service.verify_token(token)

    def test_garbage_raises(self):
        with pytest.raises(InvalidTokenError):
            self.service.verify_token("not.a.token")


class TestSubjectClaim:
    """Tokens must name a user in ``sub``."""

    SECRET = "subject-secret"

    def _encode(self, claims: dict) -> str:
        claims.setdefault("exp", 4102444800)
        return jwt.encode(claims, self.SECRET, algorithm=JWTService.ALGORITHM)

    def test_missing_subject_raises(self):
        service = JWTService(secret_key=self.SECRET)

        with pytest.raises(InvalidTokenError):
            service.verify_token(self._encode({"email": "a@example.com"}))

    def test_blank_subject_raises(self):
        service = JWTService(secret_key=self.SECRET)

        with pytest.raises(InvalidTokenError):
            service.verify_token(self._encode({"sub": "   "}))

    def test_non_uuid_subject_raises(self):
        service = JWTService(secret_key=self.SECRET)

        with pytest.raises(InvalidTokenError, match="Malformed"):
            service.verify_token(self._encode({"sub": "user-42"}))

    def test_email_is_optional(self):
        service = JWTService(secret_key=self.SECRET)
        user_id = uuid4()

        payload = service.verify_token(self._encode({"sub": str(user_id)}))

        assert payload.user_id == user_id
        assert payload.email == ""
        assert payload.is_access_token()
