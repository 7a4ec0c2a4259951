"""Bearer token issuing and verification for exhibitors."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import jwt

from exhibitions.domain import ExhibitorId
from exhibitions.domain.errors import InvalidTokenError


@dataclass(frozen=True)
class TokenIssuer:
    """Signs and verifies HS256 tokens carrying an exhibitor ID."""

    secret: str
    algorithm: str = "HS256"
    ttl: timedelta = timedelta(hours=24)
    issuer: str = "exhibition-api"
    clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc)

    def issue(self, exhibitor_id: ExhibitorId) -> str:
        now = self.clock()
        payload = {
            "sub": str(exhibitor_id),
            "iss": self.issuer,
            "iat": now,
            "exp": now + self.ttl,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> ExhibitorId:
        """Return the exhibitor ID carried by a valid token.

        Raises:
            InvalidTokenError: If the token is expired, tampered with or malformed.
        """
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                issuer=self.issuer,
                options={"require": ["sub", "exp"]},
            )
        except jwt.ExpiredSignatureError:
            raise InvalidTokenError("Authentication token has expired") from None
        except jwt.InvalidTokenError:
            raise InvalidTokenError() from None

        try:
            return ExhibitorId.from_string(payload["sub"])
        except ValueError:
            raise InvalidTokenError() from None
