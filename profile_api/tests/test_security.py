"""
Tests for password hashing and access tokens.
"""

from datetime import timedelta

from profile_api.core.config import Settings
from profile_api.core.security import (
    create_access_token,
    decode_token,
    get_password_hash,
    verify_password,
)


class TestPasswords:

    def test_hash_verifies(self):
        hashed = get_password_hash("correct horse")

        assert hashed != "correct horse"
        assert verify_password("correct horse", hashed)
        assert not verify_password("wrong horse", hashed)

    def test_malformed_hash_does_not_verify(self):
        assert not verify_password("anything", "not-a-bcrypt-hash")


class TestTokens:

    def test_round_trip(self):
        token = create_access_token({"sub": "user-1"})

        payload = decode_token(token, expected_type="access")

        assert payload["sub"] == "user-1"
        assert payload["type"] == "access"

    def test_wrong_type_is_rejected(self):
        token = create_access_token({"sub": "user-1"})

        assert decode_token(token, expected_type="refresh") is None

    def test_expired_token_is_rejected(self):
        token = create_access_token({"sub": "user-1"}, expires_delta=timedelta(seconds=-5))

        assert decode_token(token) is None

    def test_garbage_is_rejected(self):
        assert decode_token("not.a.token") is None

    def test_signing_key_comes_from_given_settings(self):
        settings = Settings(app_env="test", jwt_secret="per-app-key", jwt_alg="HS512")
        token = create_access_token({"sub": "user-1"}, settings=settings)

        assert decode_token(token, settings=settings)["sub"] == "user-1"
        assert decode_token(token) is None
