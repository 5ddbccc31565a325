"""Logging setup for the assignment tracker.

Three categories can be tuned independently of the root level:

* ``store``: the JSON file store (loads, writes, write failures)
* ``http``: httpx/httpcore traffic made by the board client
* ``uvicorn``: server and access logs

Call :func:`setup_logging` once at startup; the app lifespan does.
"""

import logging
import sys

from assignment_tracker.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Settings field -> loggers it controls.
CATEGORY_LOGGERS: dict[str, tuple[str, ...]] = {
    "log_level_store": ("assignment_tracker.infrastructure.storage",),
    "log_level_http": ("httpx", "httpcore"),
    "log_level_uvicorn": ("uvicorn", "uvicorn.access", "uvicorn.error"),
}


def level_for(name: str) -> int:
    """``"debug"`` -> ``logging.DEBUG``; unknown names fall back to INFO."""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(settings: Settings | None = None) -> dict[str, int]:
    """Apply the configured levels and return them keyed by logger name.

    A stderr handler is attached to the root logger only when nothing
    else (uvicorn, pytest) has installed one.
    """
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(level_for(settings.log_level))
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    applied = {"root": root.level}
    for field_name, logger_names in CATEGORY_LOGGERS.items():
        level = level_for(getattr(settings, field_name))
        for logger_name in logger_names:
            logging.getLogger(logger_name).setLevel(level)
            applied[logger_name] = level

    logging.getLogger(__name__).debug("Log levels: %s", {k: logging.getLevelName(v) for k, v in applied.items()})
    return applied
