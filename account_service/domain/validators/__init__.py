from .credentials import (
    validate_registration,
    validate_phone_number,
    validate_full_name,
    validate_password,
)

__all__ = [
    "validate_registration",
    "validate_phone_number",
    "validate_full_name",
    "validate_password",
]
