import logging
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

_config_logger = logging.getLogger(__name__)

_PROJECT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Article CMS API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    cors_origins: list[str] = ["http://localhost:3000"]

    # Remote content API. Disabled by default: every call is served from the
    # in-memory store until a real backend is switched on.
    remote_api_enabled: bool = False
    remote_api_base_url: str = "https://test-fe.mysellerpintar.com/api"
    remote_api_timeout_ms: int = 5000

    # Listing
    page_size: int = 5

    # Logging: per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_http: str = "WARNING"          # httpx / httpcore, outbound HTTP
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_services: str = "INFO"         # article/category services, fallbacks
    log_level_transport: str = "INFO"        # outbound fetch attempts and failures
    log_level_store: str = "INFO"            # in-memory store seeding and writes

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    def model_post_init(self, __context: object) -> None:
        if self.remote_api_timeout_ms <= 0:
            _config_logger.warning(
                "REMOTE_API_TIMEOUT_MS=%d is not positive; using 5000",
                self.remote_api_timeout_ms,
            )
            object.__setattr__(self, "remote_api_timeout_ms", 5000)


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance: reads .env once."""
    return Settings()
