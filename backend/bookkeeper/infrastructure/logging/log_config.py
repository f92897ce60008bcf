"""Logging setup for bookkeeper.

``bootstrap()`` calls ``setup_logging()`` once. The root level comes from
``LOG_LEVEL``; SQL echo and the storage layers get their own levels so a
debugging session on the record store does not drown in engine output.
"""

import logging
import sys

from bookkeeper.config import Settings, get_settings

# Settings field -> loggers whose level it controls.
_CATEGORY_MAP: dict[str, list[str]] = {
    "log_level_sql": [
        "sqlalchemy.engine",
        "sqlalchemy.pool",
    ],
    "log_level_store": [
        "bookkeeper.infrastructure.storage",
        "bookkeeper.infrastructure.database",
    ],
}

_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logging(settings: Settings | None = None) -> None:
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level))
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)

    for field_name, logger_names in _CATEGORY_MAP.items():
        level = _parse_level(getattr(settings, field_name))
        for name in logger_names:
            logging.getLogger(name).setLevel(level)

    logging.getLogger(__name__).debug(
        "log levels: root=%s sql=%s store=%s",
        settings.log_level,
        settings.log_level_sql,
        settings.log_level_store,
    )


def _parse_level(raw: str) -> int:
    """Map a level name to its numeric value; unknown names mean INFO."""
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else logging.INFO
