"""
Credential rules for registration and profile changes.

Every check returns a list of violation messages; an empty list means the
value is acceptable. Checks never stop at the first failure.
"""
from typing import List

PHONE_NUMBER_MIN_LENGTH = 10
PHONE_NUMBER_MAX_LENGTH = 13
PHONE_NUMBER_PREFIX = "+62"

FULL_NAME_MIN_LENGTH = 3
FULL_NAME_MAX_LENGTH = 60

PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_LENGTH = 64
PASSWORD_SPECIAL_CHARACTERS = frozenset("!@#$%&")

PHONE_NUMBER_LENGTH_MESSAGE = (
    f"Phone number must be between {PHONE_NUMBER_MIN_LENGTH} and {PHONE_NUMBER_MAX_LENGTH} characters"
)
PHONE_NUMBER_PREFIX_MESSAGE = (
    f"Phone number must start with the Indonesia country code '{PHONE_NUMBER_PREFIX}'"
)
FULL_NAME_LENGTH_MESSAGE = (
    f"Full name must be between {FULL_NAME_MIN_LENGTH} and {FULL_NAME_MAX_LENGTH} characters"
)
PASSWORD_LENGTH_MESSAGE = (
    f"Password must be between {PASSWORD_MIN_LENGTH} and {PASSWORD_MAX_LENGTH} characters"
)
PASSWORD_STRENGTH_MESSAGE = (
    "Password must contain at least 1 uppercase letter, 1 number, and 1 special character"
)


def phone_number_length(phone_number: str) -> int:
    """Length of the number itself; the leading '+' of the international format is not counted."""
    if phone_number.startswith("+"):
        return len(phone_number) - 1
    return len(phone_number)


def password_length(password: str) -> int:
    """Length of the password as bcrypt sees it, in UTF-8 bytes."""
    return len(password.encode("utf-8"))


def validate_phone_number(phone_number: str) -> List[str]:
    errors: List[str] = []
    if not PHONE_NUMBER_MIN_LENGTH <= phone_number_length(phone_number) <= PHONE_NUMBER_MAX_LENGTH:
        errors.append(PHONE_NUMBER_LENGTH_MESSAGE)
    if not phone_number.startswith(PHONE_NUMBER_PREFIX):
        errors.append(PHONE_NUMBER_PREFIX_MESSAGE)
    return errors


def validate_full_name(full_name: str) -> List[str]:
    if not FULL_NAME_MIN_LENGTH <= len(full_name) <= FULL_NAME_MAX_LENGTH:
        return [FULL_NAME_LENGTH_MESSAGE]
    return []


def validate_password(password: str) -> List[str]:
    """
    Check password length, then character classes.

    Length is counted in UTF-8 bytes so every accepted password stays under
    bcrypt's 72-byte input limit. The class check only runs when the length
    is acceptable, and a missing uppercase letter, digit or special character
    is reported as one message.
    """
    if not PASSWORD_MIN_LENGTH <= password_length(password) <= PASSWORD_MAX_LENGTH:
        return [PASSWORD_LENGTH_MESSAGE]

    has_uppercase = any("A" <= ch <= "Z" for ch in password)
    has_number = any("0" <= ch <= "9" for ch in password)
    has_special = any(ch in PASSWORD_SPECIAL_CHARACTERS for ch in password)
    if not (has_uppercase and has_number and has_special):
        return [PASSWORD_STRENGTH_MESSAGE]
    return []


def validate_registration(phone_number: str, full_name: str, password: str) -> List[str]:
    """
    Run every registration rule and collect all violations

    Args:
        phone_number: Phone number in international format
        full_name: User's full name
        password: Plain text password

    Returns:
        Violation messages in rule order, empty when the input is valid
    """
    return (
        validate_phone_number(phone_number)
        + validate_full_name(full_name)
        + validate_password(password)
    )
