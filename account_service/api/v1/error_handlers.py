# Standard library imports
import logging
from typing import Any, Dict, List, Tuple, Type

# External package imports
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

# Local application imports
from ...core.exceptions import (
    AccountServiceError,
    ConflictError,
    InternalError,
    InvalidCredentialsError,
    NotFoundError,
    PersistenceError,
    UnauthorizedError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Most specific classes first; the first isinstance match wins
STATUS_BY_ERROR: List[Tuple[Type[AccountServiceError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (InvalidCredentialsError, status.HTTP_401_UNAUTHORIZED),
    (UnauthorizedError, status.HTTP_401_UNAUTHORIZED),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (PersistenceError, status.HTTP_500_INTERNAL_SERVER_ERROR),
    (InternalError, status.HTTP_500_INTERNAL_SERVER_ERROR),
]


def status_for(exception: AccountServiceError) -> int:
    for error_class, status_code in STATUS_BY_ERROR:
        if isinstance(exception, error_class):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def account_service_error_handler(request: Request, exception: AccountServiceError) -> JSONResponse:
    """
    Translate an AccountServiceError into a structured JSON response

    Only the user-facing message is returned; server-side failures log the
    internal one.
    """
    status_code = status_for(exception)
    headers: Dict[str, str] = {}
    body: Dict[str, Any] = {"detail": exception.user_message}

    if isinstance(exception, ValidationError):
        body["errors"] = exception.errors
    if isinstance(exception, UnauthorizedError):
        body["reason"] = exception.kind.value
    if status_code == status.HTTP_401_UNAUTHORIZED:
        headers["WWW-Authenticate"] = "Bearer"
    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(f"{request.method} {request.url.path} failed: {exception.message}")

    return JSONResponse(status_code=status_code, content=body, headers=headers or None)


def register_exception_handlers(application: FastAPI) -> None:
    application.add_exception_handler(AccountServiceError, account_service_error_handler)
