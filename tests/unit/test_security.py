"""
Unit tests for snapfind.core.security
"""
import pytest
from snapfind.core.security import (
    hash_password,
    verify_password,
    create_jwt_token,
    decode_jwt_token,
)


class TestHashPassword:
    def test_returns_non_empty_string(self):
        result = hash_password("mypassword")
        assert isinstance(result, str)
        assert len(result) > 0

    def test_different_salts_per_call(self):
        assert hash_password("same") != hash_password("same")


class TestVerifyPassword:
    def test_matching_password_returns_true(self):
        hashed = hash_password("correct")
        assert verify_password("correct", hashed) is True

    def test_wrong_password_returns_false(self):
        hashed = hash_password("correct")
        assert verify_password("wrong", hashed) is False

    def test_malformed_hash_returns_false(self):
        assert verify_password("anything", "not-a-bcrypt-hash") is False


class TestJwtToken:
    def test_create_and_decode_roundtrip(self, mock_settings):
        token = create_jwt_token({"sub": "user-123", "email": "test@example.com"})
        decoded = decode_jwt_token(token)
        assert decoded["sub"] == "user-123"
        assert decoded["email"] == "test@example.com"
        assert decoded["exp"] - decoded["iat"] == 1440 * 60

    def test_custom_lifetime(self, mock_settings):
        decoded = decode_jwt_token(create_jwt_token({"sub": "u"}, expires_in_seconds=30))
        assert decoded["exp"] - decoded["iat"] == 30

    def test_expired_token_raises(self, mock_settings):
        token = create_jwt_token({"sub": "u"}, expires_in_seconds=-10)
        with pytest.raises(ValueError, match="Invalid token"):
            decode_jwt_token(token)

    def test_decode_tampered_token_raises(self, mock_settings):
        token = create_jwt_token({"sub": "user-1"})
        with pytest.raises(ValueError):
            decode_jwt_token(token[:-5] + "xxxxx")
