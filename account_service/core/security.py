# Standard library imports
from typing import Optional

# External package imports
import bcrypt

# Local application imports
from .config import get_settings
from .exceptions import PasswordHashingError


def hash_password(plain_password: str, rounds: Optional[int] = None) -> str:
    """
    Hash a plain password using bcrypt

    The returned string embeds the salt and the cost factor, so verification
    needs nothing but the hash itself.

    Args:
        plain_password: The plain text password to hash
        rounds: bcrypt work factor, defaults to the configured BCRYPT_ROUNDS

    Returns:
        Hashed password string

    Raises:
        PasswordHashingError: If bcrypt refuses the input or fails
    """
    work_factor = rounds if rounds is not None else get_settings().bcrypt_rounds
    try:
        salt = bcrypt.gensalt(rounds=work_factor)
        hashed = bcrypt.hashpw(plain_password.encode("utf-8"), salt)
    except (ValueError, TypeError) as e:
        raise PasswordHashingError(f"Failed to hash password: {str(e)}") from e
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password

    Args:
        plain_password: The plain text password to verify
        hashed_password: The hashed password to compare against

    Returns:
        True if passwords match, False otherwise
    """
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"),
            hashed_password.encode("utf-8")
        )
    except (ValueError, TypeError):
        return False
