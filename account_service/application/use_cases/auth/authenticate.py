# Standard library imports
import logging

# Local application imports
from ....core.exceptions import TokenError, UnauthorizedError
from ....core.tokens import TokenService

logger = logging.getLogger(__name__)


def authenticate(token_service: TokenService, token: str) -> int:
    """
    Resolve a bearer token to the authenticated user's ID

    Args:
        token_service: Service holding the signing key
        token: Bearer token taken from the request header

    Returns:
        User ID carried in the token subject

    Raises:
        UnauthorizedError: If the token is missing, malformed, badly signed or expired
    """
    try:
        claims = token_service.verify(token)
    except TokenError as exception:
        logger.warning(f"Rejected bearer token: {exception.kind.value}")
        raise UnauthorizedError(exception.kind) from exception
    return claims.subject
