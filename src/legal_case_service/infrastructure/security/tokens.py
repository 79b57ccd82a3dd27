"""Signed bearer tokens (JWT)."""

import logging
from datetime import datetime, timedelta, timezone
from typing import Iterable, List, Optional

from jose import JWTError, jwt
from pydantic import BaseModel, Field

from legal_case_service.exceptions import UnauthorizedError

logger = logging.getLogger(__name__)


class TokenData(BaseModel):
    """Claims carried by a decoded access token."""

    username: str
    roles: List[str] = Field(default_factory=list)
    expires_at: Optional[datetime] = None


class TokenIssuer:
    """Issues and validates time-bounded tokens binding a username to its roles."""

    def __init__(self, secret_key: str, algorithm: str = "HS256", expire_minutes: int = 60):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expires_delta = timedelta(minutes=expire_minutes)

    def issue(self, username: str, roles: Iterable[str], expires_delta: Optional[timedelta] = None) -> str:
        """Creates a new JWT access token."""
        now = datetime.now(timezone.utc)
        expire = now + (expires_delta if expires_delta is not None else self.expires_delta)
        claims = {
            "sub": username,
            "roles": sorted(roles),
            "iat": now,
            "exp": expire,
        }
        return jwt.encode(claims, self.secret_key, algorithm=self.algorithm)

    def decode(self, token: str) -> TokenData:
        """Validate signature and expiry, then return the token's claims.

        Raises:
            UnauthorizedError: If the token cannot be trusted
        """
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError as e:
            logger.warning(f"Rejected access token: {e}")
            raise UnauthorizedError("Could not validate credentials") from e

        username = payload.get("sub")
        if not username:
            raise UnauthorizedError("Could not validate credentials")

        exp = payload.get("exp")
        return TokenData(
            username=username,
            roles=list(payload.get("roles") or []),
            expires_at=datetime.fromtimestamp(exp, tz=timezone.utc) if exp else None,
        )
