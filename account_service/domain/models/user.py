from dataclasses import dataclass
from enum import Enum
from typing import List, Optional


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies"""
    id: Optional[int]
    phone_number: str
    full_name: str
    hashed_password: str
    successful_logins: int = 0

    def __post_init__(self):
        """Business validations"""
        if not self.phone_number:
            raise ValueError("Phone number is required")
        if not self.hashed_password:
            raise ValueError("Password hash is required")
        if self.successful_logins < 0:
            raise ValueError("Successful login counter cannot be negative")


class ProfileField(str, Enum):
    """Profile fields a user may change after registration"""
    PHONE_NUMBER = "phone_number"
    FULL_NAME = "full_name"


@dataclass(frozen=True)
class ProfilePatch:
    """One field of a partial profile update"""
    field: ProfileField
    value: str


def build_profile_patches(
    phone_number: Optional[str] = None,
    full_name: Optional[str] = None,
) -> List[ProfilePatch]:
    """
    Turn optional profile values into patches.

    Absent and empty values are left out, so the result lists only the
    fields that should change.
    """
    patches: List[ProfilePatch] = []
    if phone_number:
        patches.append(ProfilePatch(ProfileField.PHONE_NUMBER, phone_number))
    if full_name:
        patches.append(ProfilePatch(ProfileField.FULL_NAME, full_name))
    return patches
