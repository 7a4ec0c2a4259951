"""Bearer token authentication for exhibitor endpoints."""

from dataclasses import dataclass

from rest_framework.authentication import BaseAuthentication, get_authorization_header

from exhibitions.dependencies import get_exhibitor_service
from exhibitions.domain import ExhibitorId
from exhibitions.domain.errors import InvalidTokenError


@dataclass(frozen=True)
class AuthenticatedExhibitor:
    """The caller identity attached to ``request.user``."""

    id: ExhibitorId

    @property
    def is_authenticated(self) -> bool:
        return True


class ExhibitorTokenAuthentication(BaseAuthentication):
    """Require an ``Authorization: Bearer <token>`` header.

    A missing or invalid token raises InvalidTokenError, which the exception
    handler renders as 401 like any other domain error.
    """

    keyword = b"bearer"

    def authenticate(self, request):
        parts = get_authorization_header(request).split()
        if not parts or parts[0].lower() != self.keyword:
            raise InvalidTokenError("Authentication token is required")
        if len(parts) != 2:
            raise InvalidTokenError()

        try:
            token = parts[1].decode("ascii")
        except UnicodeDecodeError:
            raise InvalidTokenError() from None
        exhibitor_id = get_exhibitor_service().authenticate(token)
        return AuthenticatedExhibitor(id=exhibitor_id), token

    def authenticate_header(self, request) -> str:
        return 'Bearer realm="api"'
