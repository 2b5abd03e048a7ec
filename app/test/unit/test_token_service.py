# app/test/unit/test_token_service.py

# pytest app/test/unit/test_token_service.py -v

from datetime import timedelta

import pytest
from jose import jwt

from app.adapters.outbound.security.token_service import TokenService
from app.application.ports.outbound import InvalidToken, TokenClaims
from app.domain.exceptions import SigningKeyMissingException

SECRET = "unit-test-secret"


@pytest.fixture
def token_service():
    return TokenService(secret_key=SECRET)


def test_issue_then_verify_returns_user_id(token_service):
    token = token_service.issue(42)
    result = token_service.verify(token)

    assert isinstance(result, TokenClaims)
    assert result.user_id == 42
    assert result.expires_at - result.issued_at == timedelta(hours=1)


def test_token_carries_expected_claims(token_service):
    payload = jwt.decode(token_service.issue(7), SECRET, algorithms=["HS256"])
    assert payload["sub"] == "7"
    assert payload["userId"] == 7
    assert {"iat", "exp", "jti"} <= payload.keys()


def test_two_tokens_for_same_user_differ(token_service):
    assert token_service.issue(1) != token_service.issue(1)


def test_expired_token_is_invalid(token_service):
    token = token_service.issue(1, expires_delta=timedelta(seconds=-1))
    result = token_service.verify(token)

    assert isinstance(result, InvalidToken)
    assert result.reason == "expired"
    assert not result


def test_token_signed_with_other_secret_is_invalid(token_service):
    other = TokenService(secret_key="another-secret").issue(1)
    assert isinstance(token_service.verify(other), InvalidToken)


@pytest.mark.parametrize("token", ["", "not-a-jwt", "a.b.c"])
def test_malformed_token_is_invalid(token_service, token):
    assert isinstance(token_service.verify(token), InvalidToken)


def test_token_missing_claims_is_invalid(token_service):
    token = jwt.encode({"sub": "1"}, SECRET, algorithm="HS256")
    result = token_service.verify(token)
    assert isinstance(result, InvalidToken)
    assert result.reason == "missing claims"


def test_issue_without_secret_raises():
    service = TokenService(secret_key=None)
    assert not service.is_configured
    with pytest.raises(SigningKeyMissingException):
        service.issue(1)


def test_verify_without_secret_is_invalid(token_service):
    token = token_service.issue(1)
    assert isinstance(TokenService(secret_key="").verify(token), InvalidToken)
