"""Security utilities"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, Optional

from jose import jwt, JWTError
from passlib.context import CryptContext

from .config import settings


logger = logging.getLogger(__name__)

# Password context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def get_password_hash(password: str) -> str:
    """Hash password"""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password"""
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        # Stored value is not a hash passlib recognises
        logger.warning("Password verification against unrecognised hash format")
        return False


class TokenInvalid(Exception):
    """Raised when a token's signature or structure cannot be trusted."""


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TokenService:
    """Issues and reads signed, time-limited identity tokens.

    Claims carried: ``sub`` (username), ``role``, ``iat`` and ``exp``.
    Reading a claim verifies the signature but not the expiry, so callers
    can still ask an expired token who it belonged to; use ``validate``
    to get the combined check.
    """

    ROLE_CLAIM = "role"

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expire_minutes: int = 60,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expires_delta = timedelta(minutes=expire_minutes)
        self.clock = clock

    def issue(self, username: str, role: str) -> str:
        """Create access token"""
        now = self.clock()
        to_encode = {
            "sub": username,
            self.ROLE_CLAIM: role,
            "iat": now,
            "exp": now + self.expires_delta,
        }
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def get_username(self, token: str) -> str:
        return self._claim(token, "sub")

    def get_role(self, token: str) -> str:
        return self._claim(token, self.ROLE_CLAIM)

    def get_expiration(self, token: str) -> datetime:
        exp = self._claim(token, "exp")
        return datetime.fromtimestamp(exp, tz=timezone.utc)

    def is_expired(self, token: str) -> bool:
        return self.clock() >= self.get_expiration(token)

    def validate(self, token: str, username: str) -> bool:
        """Token belongs to ``username`` and has not expired"""
        return self.get_username(token) == username and not self.is_expired(token)

    def _claim(self, token: str, name: str) -> Any:
        value = self._decode(token).get(name)
        if value is None:
            raise TokenInvalid(f"Token has no '{name}' claim")
        return value

    def _decode(self, token: str) -> Dict[str, Any]:
        try:
            return jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                options={"verify_exp": False},
            )
        except JWTError as e:
            raise TokenInvalid(str(e)) from e


def build_token_service(clock: Optional[Callable[[], datetime]] = None) -> TokenService:
    """Token service configured from settings"""
    return TokenService(
        secret_key=settings.SECRET_KEY,
        algorithm=settings.ALGORITHM,
        expire_minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES,
        clock=clock or _utcnow,
    )


token_service = build_token_service()
