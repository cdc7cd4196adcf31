from typing import Optional

from pydantic import BaseModel


class ProfileResponse(BaseModel):
    """DTO for profile response (no password, no login counter)"""
    name: str
    phone_number: str


class UpdateProfileRequest(BaseModel):
    """DTO for partial profile update - omitted fields stay unchanged"""
    phone_number: Optional[str] = None
    full_name: Optional[str] = None


class MessageResponse(BaseModel):
    """DTO for plain acknowledgements"""
    message: str
