# Standard library imports
import os
from typing import Final, Optional


def _env_int(name: str, default: int) -> int:
    return int(os.getenv(name, str(default)))


class Settings:
    """
    Runtime configuration of the account service.

    Values come from the process environment (a .env file is loaded into it
    by the app factory). Each attribute is read once when the object is built.
    """

    def __init__(self) -> None:
        # User store
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "account_service")
        self.mongo_server_selection_timeout_ms: Final[int] = _env_int(
            "MONGO_SERVER_SELECTION_TIMEOUT_MS", 5000
        )

        # Bearer tokens
        self.jwt_secret_key: Final[str] = os.getenv("JWT_SECRET_KEY", "dev-only-account-service-signing-key")
        self.jwt_algorithm: Final[str] = os.getenv("JWT_ALGORITHM", "HS256")
        self.access_token_expire_minutes: Final[int] = _env_int("ACCESS_TOKEN_EXPIRE_MINUTES", 60)

        # bcrypt cost factor
        self.bcrypt_rounds: Final[int] = _env_int("BCRYPT_ROUNDS", 12)

        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the process-wide Settings, building it on first use"""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
