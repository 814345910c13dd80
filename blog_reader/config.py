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

    app_title: str = "CA Monk"
    app_tagline: str = "Finance & Accounting Excellence"
    app_version: str = "0.1.0"
    app_env: str = "development"

    # External blog API (list / get / create)
    blog_api_base_url: str = "http://localhost:3001"

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_http: str = "WARNING"          # httpx / httpcore — outbound HTTP
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_blog_api: str = "INFO"         # BlogApiClient

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    def model_post_init(self, __context: object) -> None:
        """Normalise the API base URL so endpoint paths can be appended."""
        stripped = self.blog_api_base_url.rstrip("/")
        if stripped != self.blog_api_base_url:
            _config_logger.debug("Trimmed trailing slash from blog_api_base_url")
            object.__setattr__(self, "blog_api_base_url", stripped)


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
