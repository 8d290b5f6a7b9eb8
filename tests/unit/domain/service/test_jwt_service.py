"""Unit tests for JWTService."""

from datetime import timedelta

import pytest

from wedding.config import AuthSettings
from wedding.domain.service import JWTService
from wedding.util.jwt import JWTError, create_token
from tests.conftest import make_user_id

SETTINGS = AuthSettings(jwt_secret="test-secret")


class TestJWTService:
    def test_user_id_from_valid_token(self):
        user_id = make_user_id()
        token = create_token(str(user_id), SETTINGS, email="siti@example.com")

        assert JWTService(SETTINGS).get_user_id_from_token(token) == user_id

    def test_verify_token_returns_payload(self):
        user_id = make_user_id()
        token = create_token(str(user_id), SETTINGS, email="siti@example.com")

        payload = JWTService(SETTINGS).verify_token(token)

        assert payload.user_id == str(user_id)
        assert payload.email == "siti@example.com"
        assert payload.aud == "authenticated"

    @pytest.mark.parametrize("token", [None, "", "not-a-jwt"])
    def test_missing_or_malformed_token(self, token):
        assert JWTService(SETTINGS).get_user_id_from_token(token) is None

    def test_token_signed_with_other_secret(self):
        token = create_token(str(make_user_id()), AuthSettings(jwt_secret="other"))

        assert JWTService(SETTINGS).get_user_id_from_token(token) is None

    def test_token_for_other_audience(self):
        token = create_token(
            str(make_user_id()),
            AuthSettings(jwt_secret="test-secret", jwt_audience="anon"),
        )

        assert JWTService(SETTINGS).get_user_id_from_token(token) is None

    def test_expired_token(self):
        token = create_token(
            str(make_user_id()), SETTINGS, expires_in=timedelta(seconds=-10)
        )

        with pytest.raises(JWTError, match="expired"):
            JWTService(SETTINGS).verify_token(token)

    def test_non_uuid_subject(self):
        token = create_token("service-role", SETTINGS)

        assert JWTService(SETTINGS).get_user_id_from_token(token) is None
