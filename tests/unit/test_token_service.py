"""
Unit tests for account_service.core.tokens
"""
from datetime import timedelta

import jwt
import pytest
from account_service.core.exceptions import TokenError, TokenErrorKind, TokenSigningError
from account_service.core.tokens import TokenService


def _kind_of(token_service, token):
    with pytest.raises(TokenError) as exc_info:
        token_service.verify(token)
    return exc_info.value.kind


class TestIssue:
    """Tests for TokenService.issue"""

    def test_claims_layout(self, token_service, secret_key, clock):
        start = clock.now
        token = token_service.issue(42)
        payload = jwt.decode(token, secret_key, algorithms=["HS256"], options={"verify_exp": False})
        assert payload["sub"] == "42"
        assert payload["iat"] == start
        assert payload["exp"] == start + 3600

    def test_custom_ttl(self, secret_key, clock):
        service = TokenService(secret_key=secret_key, ttl=timedelta(minutes=5), clock=clock)
        claims = service.verify(service.issue(1))
        assert claims.expires_at - claims.issued_at == 300

    def test_empty_key_rejected(self):
        with pytest.raises(ValueError):
            TokenService(secret_key="")

    def test_unknown_algorithm_raises_signing_error(self, secret_key, clock):
        service = TokenService(secret_key=secret_key, algorithm="NOPE", clock=clock)
        with pytest.raises(TokenSigningError):
            service.issue(1)


class TestVerify:
    """Tests for TokenService.verify"""

    def test_round_trip(self, token_service, clock):
        start = clock.now
        claims = token_service.verify(token_service.issue(7))
        assert claims.subject == 7
        assert claims.issued_at == start
        assert claims.expires_at == start + 3600

    def test_accepts_bearer_prefix(self, token_service):
        token = token_service.issue(7)
        assert token_service.verify(f"Bearer {token}").subject == 7

    def test_valid_until_just_before_expiry(self, token_service, clock):
        token = token_service.issue(7)
        clock.advance(3599)
        assert token_service.verify(token).subject == 7

    def test_expired_at_expiry(self, token_service, clock):
        token = token_service.issue(7)
        clock.advance(3600)
        assert _kind_of(token_service, token) == TokenErrorKind.EXPIRED

    def test_expired_after_clock_advance(self, token_service, clock):
        token = token_service.issue(7)
        clock.advance(3601)
        assert _kind_of(token_service, token) == TokenErrorKind.EXPIRED

    @pytest.mark.parametrize("token", ["", "   ", "Bearer", "Bearer ", None])
    def test_missing_token(self, token_service, token):
        assert _kind_of(token_service, token) == TokenErrorKind.MISSING

    def test_garbage_is_malformed(self, token_service):
        assert _kind_of(token_service, "invalid.jwt.token") == TokenErrorKind.MALFORMED

    def test_other_key_is_bad_signature(self, token_service, clock):
        other = TokenService(secret_key="another_secret_key_that_is_long_enough_0000", clock=clock)
        assert _kind_of(token_service, other.issue(7)) == TokenErrorKind.BAD_SIGNATURE

    def test_tampered_signature(self, token_service):
        header, payload, signature = token_service.issue(7).split(".")
        replacement = "A" if signature[0] != "A" else "B"
        tampered = ".".join([header, payload, replacement + signature[1:]])
        assert _kind_of(token_service, tampered) == TokenErrorKind.BAD_SIGNATURE

    def test_non_integer_subject_is_malformed(self, token_service, secret_key, clock):
        token = jwt.encode(
            {"sub": "user-abc", "iat": int(clock.now), "exp": int(clock.now) + 3600},
            secret_key,
            algorithm="HS256",
        )
        assert _kind_of(token_service, token) == TokenErrorKind.MALFORMED

    def test_missing_expiry_is_malformed(self, token_service, secret_key, clock):
        token = jwt.encode({"sub": "7", "iat": int(clock.now)}, secret_key, algorithm="HS256")
        assert _kind_of(token_service, token) == TokenErrorKind.MALFORMED

    def test_expiry_checked_against_service_clock(self, token_service):
        """The fake clock sits years in the past; the token stays valid because exp is judged by it."""
        token = token_service.issue(7)
        assert token_service.verify(token).subject == 7
