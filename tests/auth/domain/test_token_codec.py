"""Tests for issuing and verifying credential tokens."""

import pytest
from jose import jwt

from storefront.auth.tokens import TokenCodec
from storefront.exceptions import InvalidTokenError


@pytest.fixture()
def codec():
    return TokenCodec(secret="test-secret")


class TestTokenIssue:
    def test_token_carries_user_id_claim(self, codec):
        token = codec.issue("user-1")

        claims = jwt.decode(token, "test-secret", algorithms=["HS256"])
        assert claims == {"userId": "user-1"}

    def test_token_has_no_expiry(self, codec):
        claims = jwt.get_unverified_claims(codec.issue("user-1"))
        assert "exp" not in claims

    def test_decode_returns_user_id(self, codec):
        assert codec.decode(codec.issue("user-1")) == "user-1"


class TestTokenRejection:
    def test_wrong_secret(self, codec):
        forged = TokenCodec(secret="other-secret").issue("user-1")

        with pytest.raises(InvalidTokenError):
            codec.decode(forged)

    def test_malformed_token(self, codec):
        with pytest.raises(InvalidTokenError):
            codec.decode("not-a-token")

    def test_missing_user_id_claim(self, codec):
        token = jwt.encode({"sub": "user-1"}, "test-secret", algorithm="HS256")

        with pytest.raises(InvalidTokenError) as exc:
            codec.decode(token)
        assert exc.value.message == "Token carries no user id"


class TestCodecFromEnvironment:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("STOREFRONT_JWT_SECRET", raising=False)
        monkeypatch.delenv("STOREFRONT_JWT_ALGORITHM", raising=False)

        codec = TokenCodec.from_environment()
        assert codec.secret == "secret"
        assert codec.algorithm == "HS256"

    def test_secret_from_environment(self, monkeypatch):
        monkeypatch.setenv("STOREFRONT_JWT_SECRET", "rotated")

        codec = TokenCodec.from_environment()
        assert codec.decode(TokenCodec(secret="rotated").issue("user-1")) == "user-1"
