# Standard library imports
from typing import Optional

# External package imports
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer


# auto_error is off so a missing header reaches the use case and is reported
# as an UnauthorizedError like any other token failure
security_scheme = HTTPBearer(auto_error=False)


async def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme),
) -> str:
    """
    FastAPI dependency returning the raw bearer token

    Args:
        credentials: HTTP Bearer token credentials, None when the header is absent

    Returns:
        The token string, or an empty string when no token was sent
    """
    if credentials is None:
        return ""
    return credentials.credentials
