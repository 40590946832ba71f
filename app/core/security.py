import secrets
from datetime import datetime, timedelta, timezone
from passlib.context import CryptContext
from jose import JWTError, jwt
from app.core.config import Settings

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

ACCESS_TOKEN_TYPE = "access"
RESET_TOKEN_TYPE = "password_reset"


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


class TokenSigner:
    """Signs and verifies the bearer and password-reset JWTs.

    Both kinds share one secret; the ``type`` claim keeps a session token from
    being accepted where a reset grant is expected and the other way round.
    """

    def __init__(self, settings: Settings):
        self._secret = settings.jwt_secret_key
        self._algorithm = settings.jwt_algorithm
        self._access_ttl = timedelta(minutes=settings.jwt_expires_minutes)
        self._reset_ttl = timedelta(minutes=settings.reset_token_expires_minutes)

    def _encode(self, subject: str, token_type: str, ttl: timedelta) -> str:
        expire = datetime.now(timezone.utc) + ttl
        to_encode = {
            "sub": subject,
            "type": token_type,
            "exp": expire,
            "jti": secrets.token_urlsafe(16),
        }
        return jwt.encode(to_encode, self._secret, algorithm=self._algorithm)

    def _decode(self, token: str, token_type: str) -> str:
        payload = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        if payload.get("type") != token_type:
            raise JWTError("Unexpected token type")
        subject = payload.get("sub")
        if not subject:
            raise JWTError("Token has no subject")
        return subject

    def create_access_token(self, subject: str) -> str:
        return self._encode(subject, ACCESS_TOKEN_TYPE, self._access_ttl)

    def create_reset_token(self, subject: str) -> str:
        return self._encode(subject, RESET_TOKEN_TYPE, self._reset_ttl)

    def decode_access_token(self, token: str) -> str:
        """Return the user id carried by a session token, or raise ``JWTError``."""
        return self._decode(token, ACCESS_TOKEN_TYPE)

    def decode_reset_token(self, token: str) -> str:
        return self._decode(token, RESET_TOKEN_TYPE)
