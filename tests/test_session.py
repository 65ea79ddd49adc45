"""Tests for session authentication and role checks."""

import logging
from datetime import timedelta
from types import SimpleNamespace

import pytest

from wishlist.services.errors import ErrorCode, ServiceError
from wishlist.services.session import (
    BearerToken,
    HeaderRejected,
    SessionAuthenticator,
    parse_authorization_header,
    require_role,
)
from wishlist.services.tokens import TokenService

USER_ID = "8d6f9a5c-e12f-42c5-9fd2-dc6dd390399e"


@pytest.fixture
def token_service(settings):
    return TokenService(settings)


@pytest.fixture
def authenticator(token_service):
    return SessionAuthenticator(token_service, logging.getLogger("wishlist.test-session"))


@pytest.fixture
def token(token_service):
    return token_service.issue(SimpleNamespace(id=USER_ID, roles=["user"]))


@pytest.mark.parametrize("header", [None, ""])
def test_missing_header(authenticator, header):
    """Test that a missing header asks the caller to sign in."""
    with pytest.raises(ServiceError) as exc_info:
        authenticator.authenticate(header)

    assert exc_info.value.code == ErrorCode.UNAUTHORIZED
    assert exc_info.value.message == "You need to be signed in"


@pytest.mark.parametrize(
    "header",
    ["bearer abc", "Basic dXNlcjpwYXNz", "Bearer", "BEARER abc", "Token abc", " Bearer abc"],
)
def test_wrong_prefix(authenticator, header):
    """Test that headers without the exact 'Bearer ' prefix are rejected."""
    with pytest.raises(ServiceError) as exc_info:
        authenticator.authenticate(header)

    assert exc_info.value.code == ErrorCode.UNAUTHORIZED
    assert exc_info.value.message == "Invalid authentication token"


def test_parse_header_results():
    """Test the parsed header result variants."""
    assert parse_authorization_header("Bearer abc.def") == BearerToken("abc.def")
    assert parse_authorization_header("Bearer  abc") == BearerToken(" abc")
    assert parse_authorization_header("Bearer ") == BearerToken("")
    assert isinstance(parse_authorization_header(None), HeaderRejected)
    assert isinstance(parse_authorization_header("Bearerabc"), HeaderRejected)


def test_authenticate_valid_token(authenticator, token):
    """Test that a valid bearer token yields the session."""
    session = authenticator.authenticate(f"Bearer {token}")

    assert session.user_id == USER_ID
    assert session.roles == ["user"]
    assert session.token == token


def test_authenticate_is_repeatable(authenticator, token):
    """Test that authenticating the same header twice gives the same session."""
    header = f"Bearer {token}"
    assert authenticator.authenticate(header) == authenticator.authenticate(header)


def test_extra_whitespace_is_not_trimmed(authenticator, token):
    """Test that the token is taken verbatim after the prefix."""
    with pytest.raises(ServiceError) as exc_info:
        authenticator.authenticate(f"Bearer  {token}")
    assert exc_info.value.code == ErrorCode.UNAUTHORIZED


def test_expired_token_is_unauthorized(authenticator, token_service, caplog):
    """Test that expired tokens are unauthorized and logged as expired."""
    caplog.set_level(logging.INFO)
    expired = token_service.issue(
        SimpleNamespace(id=USER_ID, roles=["user"]), expires_delta=timedelta(seconds=-10)
    )

    with pytest.raises(ServiceError) as exc_info:
        authenticator.authenticate(f"Bearer {expired}")

    assert exc_info.value.code == ErrorCode.UNAUTHORIZED
    assert exc_info.value.message == "Invalid authentication token"
    assert exc_info.value.context == {"reason": "EXPIRED"}
    records = [r for r in caplog.records if r.name == "wishlist.test-session"]
    assert [r.levelno for r in records] == [logging.INFO]
    assert "expired" in records[0].getMessage()


def test_tampered_token_is_unauthorized(authenticator, token, caplog):
    """Test that tampered tokens get the same external error as expired ones."""
    caplog.set_level(logging.INFO)
    header, payload, signature = token.split(".")
    tampered = f"{header}.{payload}.{signature[::-1]}"

    with pytest.raises(ServiceError) as exc_info:
        authenticator.authenticate(f"Bearer {tampered}")

    assert exc_info.value.code == ErrorCode.UNAUTHORIZED
    assert exc_info.value.message == "Invalid authentication token"
    assert exc_info.value.context == {"reason": "INVALID"}
    records = [r for r in caplog.records if r.name == "wishlist.test-session"]
    assert [r.levelno for r in records] == [logging.WARNING]


def test_require_role_forbidden():
    """Test that a missing role is forbidden."""
    with pytest.raises(ServiceError) as exc_info:
        require_role("ADMIN", ["USER"])

    assert exc_info.value.code == ErrorCode.FORBIDDEN
    assert exc_info.value.message == "You are not allowed to view this part of the application"


def test_require_role_allowed():
    """Test that a held role passes silently."""
    assert require_role("ADMIN", ["USER", "ADMIN"]) is None


def test_require_role_is_exact():
    """Test that role checks do not match case-insensitively or by prefix."""
    with pytest.raises(ServiceError):
        require_role("admin", ["ADMIN"])
    with pytest.raises(ServiceError):
        require_role("admin", ["administrator"])
