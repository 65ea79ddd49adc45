"""Signed session tokens (JWT) carrying a user id and roles."""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import Any, Protocol

from jose import ExpiredSignatureError, JWTError, jwt

from wishlist.config import Settings


class TokenSubject(Protocol):
    """Anything a token can be issued for."""

    id: Any
    roles: Any


@dataclass(frozen=True)
class TokenClaims:
    """Verified claims reconstructed from a token."""

    user_id: str
    roles: list[str] = field(default_factory=list)


class TokenError(Exception):
    """Base class for token verification failures."""

    reason = "INVALID"


class TokenExpiredError(TokenError):
    """The token is correctly signed but past its expiry."""

    reason = "EXPIRED"


class TokenInvalidError(TokenError):
    """The token is malformed, tampered with or was issued for someone else."""

    reason = "INVALID"


class TokenService:
    """Issue and verify JWTs signed with the server-held secret."""

    def __init__(self, settings: Settings):
        self.secret = settings.jwt_secret
        self.algorithm = settings.jwt_algorithm
        self.expiration = timedelta(minutes=settings.jwt_expiration_minutes)
        self.issuer = settings.jwt_issuer
        self.audience = settings.jwt_audience

    def issue(self, user: TokenSubject, expires_delta: timedelta | None = None) -> str:
        """Create a signed token for the given user."""
        issued_at = datetime.now(UTC)
        expire = issued_at + (expires_delta if expires_delta is not None else self.expiration)
        to_encode = {
            "sub": str(user.id),
            "roles": [str(getattr(role, "value", role)) for role in user.roles or []],
            "iat": issued_at,
            "exp": expire,
            "iss": self.issuer,
            "aud": self.audience,
        }
        return jwt.encode(to_encode, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenClaims:
        """Check signature, expiry, issuer and audience of a token.

        Raises:
            TokenExpiredError: the signature is valid but the token expired.
            TokenInvalidError: anything else is wrong with the token.
        """
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                audience=self.audience,
                issuer=self.issuer,
            )
        except ExpiredSignatureError as e:
            raise TokenExpiredError(str(e)) from e
        except JWTError as e:
            raise TokenInvalidError(str(e)) from e

        user_id = payload.get("sub")
        roles = payload.get("roles")
        if not user_id or not isinstance(roles, list):
            raise TokenInvalidError("Token payload is missing the subject or roles")

        return TokenClaims(user_id=str(user_id), roles=[str(role) for role in roles])
