"""Logging setup for the content API.

Levels come from Settings, one field per area:

    LOG_LEVEL            root logger
    LOG_LEVEL_HTTP       httpx / httpcore internals
    LOG_LEVEL_UVICORN    uvicorn server and access logs
    LOG_LEVEL_SERVICES   remote-first services and their fallback warnings
    LOG_LEVEL_TRANSPORT  "Attempting to fetch" lines and transport errors
    LOG_LEVEL_STORE      in-memory store seeding and writes

Call ``setup_logging()`` once from the FastAPI lifespan.
"""

import logging
import sys

from article_cms.config import Settings, get_settings

LOG_FORMAT = "%(levelname)-8s %(name)s: %(message)s"

_LOGGERS_BY_SETTING: dict[str, tuple[str, ...]] = {
    "log_level_http": ("httpx", "httpcore"),
    "log_level_uvicorn": ("uvicorn", "uvicorn.access", "uvicorn.error"),
    "log_level_services": ("article_cms.application",),
    "log_level_transport": ("article_cms.infrastructure.http",),
    "log_level_store": ("article_cms.infrastructure.memory",),
}


def setup_logging(settings: Settings | None = None) -> dict[str, int]:
    """Apply the configured levels and return them keyed by logger name."""
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level))
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    applied: dict[str, int] = {}
    for field, logger_names in _LOGGERS_BY_SETTING.items():
        level = _parse_level(getattr(settings, field))
        for name in logger_names:
            logging.getLogger(name).setLevel(level)
            applied[name] = level

    logging.getLogger(__name__).debug(
        "Log levels: root=%s services=%s transport=%s store=%s",
        settings.log_level,
        settings.log_level_services,
        settings.log_level_transport,
        settings.log_level_store,
    )
    return applied


def _parse_level(raw: str) -> int:
    """Level constant for a name such as ``"debug"``; unknown names mean INFO."""
    numeric = getattr(logging, raw.upper(), None)
    return numeric if isinstance(numeric, int) else logging.INFO
