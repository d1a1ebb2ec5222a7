from datetime import timedelta

import pytest
from jose import JWTError, jwt

from catalog_admin.config import settings
from catalog_admin.core.security import (
    hash_password, verify_password, create_access_token, decode_access_token
)


class TestPasswords:

    def test_hash_and_verify(self):
        hashed = hash_password("secret-password")

        assert hashed != "secret-password"
        assert verify_password("secret-password", hashed) is True
        assert verify_password("other-password", hashed) is False

    def test_malformed_or_missing_hash_never_matches(self):
        assert verify_password("secret-password", "not-a-bcrypt-hash") is False
        assert verify_password("secret-password", None) is False

    def test_long_passwords(self):
        hashed = hash_password("x" * 100)

        assert verify_password("x" * 100, hashed) is True


class TestTokens:

    def test_token_carries_the_user(self):
        payload = decode_access_token(create_access_token(7, email="admin@catalog.io"))

        assert payload["user_id"] == 7
        assert payload["email"] == "admin@catalog.io"
        assert payload["exp"] > payload["iat"]

    def test_expired_token(self):
        token = create_access_token(7, expires_delta=timedelta(seconds=-5))

        with pytest.raises(JWTError):
            decode_access_token(token)

    def test_token_without_user_is_rejected(self):
        token = jwt.encode({"email": "admin@catalog.io"}, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

        with pytest.raises(JWTError):
            decode_access_token(token)

    def test_token_signed_with_another_key(self):
        token = jwt.encode({"user_id": 7}, "another-secret", algorithm=settings.ALGORITHM)

        with pytest.raises(JWTError):
            decode_access_token(token)
