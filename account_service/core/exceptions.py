"""
Exception hierarchy for the account service.

Raised by the token service, the user store and the use cases. Every error
inherits from AccountServiceError and carries a user-facing message; the API
layer maps each class onto one HTTP status.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from enum import Enum
from typing import Any, Dict, List, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class AccountServiceError(Exception):
    """Base exception for all account service errors."""

    def __init__(
        self,
        message: str,
        user_message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.user_message = user_message or message
        self.details = details or {}


# -----------------------------------------------------------------------------
# Caller input
# -----------------------------------------------------------------------------


class ValidationError(AccountServiceError):
    """Raised when caller input breaks one or more rules."""

    def __init__(self, errors: List[str], message: str = "Validation failed"):
        super().__init__(message, details={"errors": list(errors)})
        self.errors = list(errors)


class InvalidCredentialsError(AccountServiceError):
    """Raised when a login is rejected. Unknown phone and wrong password look the same."""

    def __init__(self, message: str = "Invalid phone number or password"):
        super().__init__(message)


class ConflictError(AccountServiceError):
    """Raised when an update would break phone number uniqueness."""
    pass


class NotFoundError(AccountServiceError):
    """Raised when a user lookup misses."""
    pass


# -----------------------------------------------------------------------------
# Tokens
# -----------------------------------------------------------------------------


class TokenErrorKind(str, Enum):
    """Why a bearer token was rejected."""
    MISSING = "missing"
    MALFORMED = "malformed"
    BAD_SIGNATURE = "bad_signature"
    EXPIRED = "expired"


class TokenError(AccountServiceError):
    """Raised by TokenService.verify."""

    def __init__(self, kind: TokenErrorKind, message: str):
        super().__init__(message, details={"kind": kind.value})
        self.kind = kind


class UnauthorizedError(AccountServiceError):
    """Raised by use cases when the caller's token does not authenticate them."""

    def __init__(self, kind: TokenErrorKind, message: str = "Invalid or expired token"):
        super().__init__(message, details={"kind": kind.value})
        self.kind = kind


# -----------------------------------------------------------------------------
# Operational
# -----------------------------------------------------------------------------


class PersistenceError(AccountServiceError):
    """Raised when the user store fails for a reason not classified above."""

    def __init__(self, message: str, user_message: str = "Failed to access user data"):
        super().__init__(message, user_message=user_message)


class LoginRecordError(PersistenceError):
    """Raised when the login counter cannot be incremented after credentials were accepted."""

    def __init__(self, message: str = "Failed to record successful login"):
        super().__init__(message, user_message=message)


class InternalError(AccountServiceError):
    """Raised on hashing or signing failures."""

    def __init__(self, message: str, user_message: str = "Internal server error"):
        super().__init__(message, user_message=user_message)


class PasswordHashingError(InternalError):
    pass


class TokenSigningError(InternalError):
    pass
