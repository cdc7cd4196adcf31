# Standard library imports
import time
from datetime import timedelta
from typing import Any, Callable, Dict

# External package imports
import jwt
from jwt.exceptions import InvalidSignatureError, InvalidTokenError, PyJWTError

# Local application imports
from ..domain.models.token_claims import TokenClaims
from .exceptions import TokenError, TokenErrorKind, TokenSigningError


BEARER_SCHEME = "bearer"
REQUIRED_CLAIMS = ("sub", "iat", "exp")


class TokenService:
    """
    Issues and verifies signed, time-bounded bearer tokens.

    The signing key is handed in once at construction and only read afterwards,
    so one instance can be shared by every request.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        ttl: timedelta = timedelta(hours=1),
        clock: Callable[[], float] = time.time,
    ) -> None:
        if not secret_key:
            raise ValueError("Token signing key must not be empty")
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._ttl_seconds = int(ttl.total_seconds())
        self._clock = clock

    def issue(self, subject_id: int) -> str:
        """
        Create a signed token for a user

        Args:
            subject_id: Identifier of the authenticated user

        Returns:
            Encoded JWT string carrying sub, iat and exp

        Raises:
            TokenSigningError: If the token cannot be signed
        """
        issued_at = int(self._clock())
        payload: Dict[str, Any] = {
            "sub": str(subject_id),
            "iat": issued_at,
            "exp": issued_at + self._ttl_seconds,
        }
        try:
            return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        except (PyJWTError, NotImplementedError, TypeError, ValueError) as e:
            raise TokenSigningError(f"Failed to sign token: {str(e)}") from e

    def verify(self, token: str) -> TokenClaims:
        """
        Decode a token, check its signature and its expiry

        Expiry is compared against this service's clock rather than left to
        the JWT library, so the check is explicit and testable.

        Args:
            token: Raw token, optionally prefixed with "Bearer "

        Returns:
            TokenClaims of a valid, unexpired token

        Raises:
            TokenError: With the kind of failure (missing, malformed, bad signature, expired)
        """
        raw = self._strip_scheme(token)
        if not raw:
            raise TokenError(TokenErrorKind.MISSING, "Missing authorization token")

        try:
            payload = jwt.decode(
                raw,
                self._secret_key,
                algorithms=[self._algorithm],
                options={
                    "verify_exp": False,
                    "verify_iat": False,
                    "require": list(REQUIRED_CLAIMS),
                },
            )
        except InvalidSignatureError as e:
            raise TokenError(TokenErrorKind.BAD_SIGNATURE, "Token signature does not match") from e
        except InvalidTokenError as e:
            raise TokenError(TokenErrorKind.MALFORMED, f"Malformed token: {str(e)}") from e

        claims = self._to_claims(payload)
        if claims.is_expired(self._clock()):
            raise TokenError(TokenErrorKind.EXPIRED, "Token has expired")
        return claims

    @staticmethod
    def _strip_scheme(token: str) -> str:
        value = (token or "").strip()
        scheme, _, credentials = value.partition(" ")
        if scheme.lower() == BEARER_SCHEME:
            value = credentials.strip()
        return value

    @staticmethod
    def _to_claims(payload: Dict[str, Any]) -> TokenClaims:
        # bool is an int subclass; a subject of True is not a user id
        subject = payload.get("sub")
        if isinstance(subject, bool):
            raise TokenError(TokenErrorKind.MALFORMED, "Token subject is not a user identifier")
        try:
            subject_id = int(subject)
        except (TypeError, ValueError) as e:
            raise TokenError(TokenErrorKind.MALFORMED, "Token subject is not a user identifier") from e

        try:
            issued_at = int(payload["iat"])
            expires_at = int(payload["exp"])
        except (TypeError, ValueError) as e:
            raise TokenError(TokenErrorKind.MALFORMED, "Token timestamps are invalid") from e

        return TokenClaims(subject=subject_id, issued_at=issued_at, expires_at=expires_at)
