# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI

# Local application imports
from .api.v1 import auth_router, profile_router, register_exception_handlers
from .core.config import get_settings
from .core.exceptions import PersistenceError
from .di.container import get_container
from .domain.repositories.user_repository import UserRepository
from .infrastructure.db.mongo_connection import close_database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Ensures the user store indexes exist at startup. An unreachable store is
    logged and does not stop the application from starting.
    """
    try:
        user_repository = get_container().get(UserRepository)
        await user_repository.ensure_indexes()
        logger.info("User store indexes verified")
    except PersistenceError as e:
        logger.error(f"Failed to ensure user store indexes: {e}", exc_info=True)

    yield

    close_database()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging configuration
    - Exception handlers for the account error hierarchy
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    logging.basicConfig(
        level=get_settings().log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    application = FastAPI(
        title="Account Service API",
        version="1.0.0",
        description="User registration, login and profile management",
        lifespan=lifespan
    )

    register_exception_handlers(application)

    application.include_router(auth_router, prefix="/api/v1/auth")
    application.include_router(profile_router, prefix="/api/v1/profile")

    @application.get("/health", tags=["monitoring"])
    async def health_check() -> dict:
        return {"status": "ok", "service": "account_service"}

    return application


# Create application instance
app = create_application()
