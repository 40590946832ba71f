import pytest
from pydantic import ValidationError
from jose import JWTError

from app.core.config import Settings
from app.core.security import TokenSigner, hash_password, verify_password


def test_hash_password_is_one_way():
    hashed = hash_password("secret1")
    assert hashed != "secret1"
    assert verify_password("secret1", hashed)
    assert not verify_password("secret2", hashed)


def test_access_token_round_trip(signer):
    token = signer.create_access_token("abc123")
    assert signer.decode_access_token(token) == "abc123"


def test_token_types_are_not_interchangeable(signer):
    with pytest.raises(JWTError):
        signer.decode_reset_token(signer.create_access_token("abc123"))
    with pytest.raises(JWTError):
        signer.decode_access_token(signer.create_reset_token("abc123"))


def test_expired_token_is_rejected():
    signer = TokenSigner(Settings(jwt_secret_key="s", jwt_expires_minutes=-1))
    with pytest.raises(JWTError):
        signer.decode_access_token(signer.create_access_token("abc123"))


def test_foreign_secret_is_rejected(signer):
    other = TokenSigner(Settings(jwt_secret_key="someone-else"))
    with pytest.raises(JWTError):
        signer.decode_access_token(other.create_access_token("abc123"))


def test_settings_are_immutable(settings):
    with pytest.raises(ValidationError):
        settings.jwt_secret_key = "changed"


def test_tokens_issued_together_are_distinct(signer):
    assert signer.create_reset_token("abc123") != signer.create_reset_token("abc123")
    assert signer.create_access_token("abc123") != signer.create_access_token("abc123")
