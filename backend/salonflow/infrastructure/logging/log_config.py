"""Per-category logging setup for the API process.

Each category is a Settings field holding a level name; the loggers listed
for it are pinned to that level so that, for example, SQL echo can be
turned on without drowning the handler stage trace.

Call ``setup_logging()`` once at startup (the FastAPI lifespan does).
"""

import logging
import sys

from salonflow.config import Settings, get_settings

_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Settings field → loggers it controls.
_CATEGORY_MAP: dict[str, tuple[str, ...]] = {
    "log_level_sql": ("sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite", "asyncpg"),
    "log_level_http": ("httpx", "httpcore", "salonflow.infrastructure.auth"),
    "log_level_uvicorn": ("uvicorn", "uvicorn.access", "uvicorn.error"),
    "log_level_handlers": ("ResourceHandler",),
    "log_level_client": ("salonflow.client",),
}


def resolve_levels(settings: Settings) -> dict[str, int]:
    """Logger name → numeric level for every configured category."""
    levels: dict[str, int] = {}
    for field_name, logger_names in _CATEGORY_MAP.items():
        level = _parse_level(getattr(settings, field_name))
        for name in logger_names:
            levels[name] = level
    return levels


def setup_logging(settings: Settings | None = None) -> dict[str, int]:
    """Apply the root level, attach a stderr handler if none exists, pin category levels."""
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level))
    # uvicorn normally installs its own handler; scripts and tests may not.
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)

    levels = resolve_levels(settings)
    for name, level in levels.items():
        logging.getLogger(name).setLevel(level)

    logging.getLogger(__name__).debug(
        "Logging configured (root=%s, %s)",
        settings.log_level,
        ", ".join(f"{f}={getattr(settings, f)}" for f in _CATEGORY_MAP),
    )
    return levels


def _parse_level(raw: str) -> int:
    """Level name → logging constant; unknown names fall back to INFO."""
    numeric = logging.getLevelName(str(raw).upper())
    return numeric if isinstance(numeric, int) else logging.INFO
