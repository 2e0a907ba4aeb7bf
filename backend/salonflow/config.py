import json
import logging
from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

_config_logger = logging.getLogger(__name__)

_OVERRIDES_FILE = Path("data/settings.json")
_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)
_LOG_LEVEL_KEYS = frozenset({
    "log_level",
    "log_level_sql",
    "log_level_http",
    "log_level_uvicorn",
    "log_level_handlers",
    "log_level_client",
})


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "SalonFlow API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///./salonflow.db"
    cors_origins: list[str] = ["http://localhost:3000"]

    # Identity provider (token → principal)
    auth_provider_url: str = "http://localhost:54321"
    auth_provider_key: str = ""
    auth_timeout_seconds: float = 10.0

    # Client layer (cache + mutation executor)
    api_base_url: str = "http://localhost:8000/api/v1"
    client_timeout_seconds: float = 15.0
    ui_state_file: str = "data/ui-state.json"

    # Logging: per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine SQL queries
    log_level_http: str = "WARNING"          # httpx / httpcore outbound calls
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_handlers: str = "WARNING"      # ResourceHandler stage tracing
    log_level_client: str = "INFO"           # cache store / mutation executor

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    def model_post_init(self, __context: object) -> None:
        """Merge runtime log-level overrides from data/settings.json."""
        if _OVERRIDES_FILE.exists():
            try:
                overrides = json.loads(_OVERRIDES_FILE.read_text("utf-8"))
                for key in _LOG_LEVEL_KEYS:
                    if key in overrides and isinstance(overrides[key], str):
                        object.__setattr__(self, key, overrides[key])
            except Exception as exc:
                _config_logger.warning("Could not load settings overrides: %s", exc)


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
