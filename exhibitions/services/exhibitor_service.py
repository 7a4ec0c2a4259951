"""Exhibitor registration and login."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from django.contrib.auth.hashers import check_password, make_password

from exhibitions.domain import Exhibitor, ExhibitorId
from exhibitions.domain.errors import (
    ExhibitorNameTakenError,
    FieldValidationError,
    InvalidCredentialsError,
)
from exhibitions.services.exhibition_service import utc_now
from exhibitions.services.tokens import TokenIssuer
from exhibitions.stores.interfaces import ExhibitorStore

logger = logging.getLogger(__name__)

NAME_MAX_LENGTH = 100
PASSWORD_MIN_LENGTH = 8


@dataclass(frozen=True)
class AuthResult:
    token: str
    exhibitor: Exhibitor


class ExhibitorService:
    """Service for exhibitor accounts."""

    def __init__(
        self,
        store: ExhibitorStore,
        tokens: TokenIssuer,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._store = store
        self._tokens = tokens
        self._clock = clock

    async def register(self, name: str, password: str) -> AuthResult:
        """Create a new exhibitor account and issue a bearer token for it.

        Raises:
            FieldValidationError: If the name or password is invalid.
            ExhibitorNameTakenError: If the name is already registered.
        """
        name = (name or "").strip()
        if not name:
            raise FieldValidationError("name", "name is required")
        if len(name) > NAME_MAX_LENGTH:
            raise FieldValidationError(
                "name", f"name must be {NAME_MAX_LENGTH} characters or less"
            )
        if not password or len(password) < PASSWORD_MIN_LENGTH:
            raise FieldValidationError(
                "password", f"password must be at least {PASSWORD_MIN_LENGTH} characters"
            )

        if await self._store.find_by_name(name) is not None:
            raise ExhibitorNameTakenError()

        now = self._clock()
        exhibitor = Exhibitor(
            id=ExhibitorId.new(),
            name=name,
            password_hash=make_password(password),
            created_at=now,
            updated_at=now,
        )
        await self._store.save(exhibitor)
        logger.info("Registered exhibitor %s", exhibitor.id)
        return AuthResult(token=self._tokens.issue(exhibitor.id), exhibitor=exhibitor)

    async def login(self, name: str, password: str) -> AuthResult:
        """Verify credentials and issue a bearer token.

        Raises:
            InvalidCredentialsError: If the name is unknown or the password is wrong.
        """
        exhibitor = await self._store.find_by_name((name or "").strip())
        if exhibitor is None or not check_password(password, exhibitor.password_hash):
            raise InvalidCredentialsError()
        return AuthResult(token=self._tokens.issue(exhibitor.id), exhibitor=exhibitor)

    def authenticate(self, token: str) -> ExhibitorId:
        """Return the exhibitor a bearer token was issued to.

        Raises:
            InvalidTokenError: If the token is malformed, expired or forged.
        """
        return self._tokens.verify(token)
