"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API starts against a local MongoDB without any setup.  In a
production deployment you should override these via environment
variables.
"""

import os
from dataclasses import dataclass
from urllib.parse import quote_plus


def _default_mongodb_uri() -> str:
    """Build the MongoDB connection string.

    ``MONGODB_URI`` wins when set.  Otherwise, if ``DB_USERNAME`` and
    ``DB_PASSWORD`` are present, an Atlas style ``mongodb+srv`` URI is
    composed from them and ``DB_HOST``.  The fallback is a local
    server on the default port.
    """
    uri = os.getenv("MONGODB_URI")
    if uri:
        return uri
    username = os.getenv("DB_USERNAME")
    password = os.getenv("DB_PASSWORD")
    if username and password:
        host = os.getenv("DB_HOST", "localhost")
        return (
            f"mongodb+srv://{quote_plus(username)}:{quote_plus(password)}@{host}/"
            "?retryWrites=true&w=majority"
        )
    return "mongodb://localhost:27017"


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Techinsight Hub API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Connection string and database name for MongoDB.  The timeout
    # bounds how long the driver waits to find a reachable server.
    mongodb_uri: str = _default_mongodb_uri()
    db_name: str = os.getenv("DB_NAME", "techinsight")
    mongodb_timeout_ms: int = int(os.getenv("MONGODB_TIMEOUT_MS", "5000"))

    # Work factor for PBKDF2 password hashing.  The count is stored in
    # every hash, so raising it later does not invalidate old accounts.
    password_hash_iterations: int = int(os.getenv("PASSWORD_HASH_ITERATIONS", "100000"))

    # Comma-separated list of allowed CORS origins.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
