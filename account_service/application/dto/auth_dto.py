from pydantic import BaseModel


class UserRegistrationRequest(BaseModel):
    """DTO for user registration request

    Field rules are enforced by the credential validator so that every
    violation is reported at once.
    """
    phone_number: str
    full_name: str
    password: str


class UserRegistrationResponse(BaseModel):
    """DTO for user registration response"""
    id: int


class UserLoginRequest(BaseModel):
    """DTO for user login request"""
    phone_number: str
    password: str


class LoginResponse(BaseModel):
    """DTO for login response carrying the bearer token"""
    id: int
    token: str
