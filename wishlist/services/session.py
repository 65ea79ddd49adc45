"""Session authentication and role authorization.

A session is never stored: it is rebuilt from the bearer token on every
request and trusted only when the token verifies.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from wishlist.services.errors import ServiceError
from wishlist.services.tokens import TokenExpiredError, TokenInvalidError, TokenService

BEARER_PREFIX = "Bearer "

SIGN_IN_REQUIRED = "You need to be signed in"
INVALID_TOKEN = "Invalid authentication token"
NOT_ALLOWED = "You are not allowed to view this part of the application"


@dataclass(frozen=True)
class AuthSession:
    """Verified claims of the caller."""

    user_id: str
    roles: list[str] = field(default_factory=list)
    token: str = ""


@dataclass(frozen=True)
class BearerToken:
    """Successfully parsed ``Authorization`` header."""

    token: str


@dataclass(frozen=True)
class HeaderRejected:
    """``Authorization`` header that cannot carry a session."""

    reason: str


ParsedAuthorization = BearerToken | HeaderRejected


def parse_authorization_header(value: str | None) -> ParsedAuthorization:
    """Split a raw ``Authorization`` header into its bearer token.

    The prefix match is case-sensitive and the remainder is taken as-is,
    without trimming.
    """
    if not value:
        return HeaderRejected(SIGN_IN_REQUIRED)
    if not value.startswith(BEARER_PREFIX):
        return HeaderRejected(INVALID_TOKEN)
    return BearerToken(value[len(BEARER_PREFIX) :])


class SessionAuthenticator:
    """Turn an ``Authorization`` header into a verified :class:`AuthSession`."""

    def __init__(self, token_service: TokenService, logger: logging.Logger):
        self.token_service = token_service
        self.logger = logger

    def authenticate(self, authorization: str | None) -> AuthSession:
        """Verify the header and return the caller's session.

        Raises:
            ServiceError: UNAUTHORIZED when the header is missing, malformed,
                or carries a token that does not verify.
        """
        parsed = parse_authorization_header(authorization)
        if isinstance(parsed, HeaderRejected):
            raise ServiceError.unauthorized(parsed.reason)

        try:
            claims = self.token_service.verify(parsed.token)
        except TokenExpiredError as e:
            self.logger.info(f"Rejected expired session token: {e}")
            raise ServiceError.unauthorized(INVALID_TOKEN, {"reason": e.reason}) from e
        except TokenInvalidError as e:
            self.logger.warning(f"Rejected invalid session token: {e}")
            raise ServiceError.unauthorized(INVALID_TOKEN, {"reason": e.reason}) from e

        return AuthSession(user_id=claims.user_id, roles=claims.roles, token=parsed.token)


def require_role(role: str, roles: Iterable[str]) -> None:
    """Fail with FORBIDDEN unless ``role`` is one of the session's roles."""
    if role not in roles:
        raise ServiceError.forbidden(NOT_ALLOWED, {"required_role": str(role)})
