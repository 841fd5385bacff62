"""Logging setup for the admin API: one stdout handler, level from settings."""

import logging
import sys

from shop_admin.core.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# Library loggers that are only useful when explicitly asked for.
_SQL_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool")


def setup_logging(settings: Settings | None = None) -> None:
    """Route shop_admin and library logs to stdout.

    DEBUG when ``debug`` is set (filter keys the search ignored, skipped
    notifications), INFO otherwise. SQL statement logging follows
    ``database_echo`` (the engine's echo) rather than ``debug``.
    """
    settings = settings or get_settings()
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )
    if not settings.database_echo:
        for name in _SQL_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Return the module logger (call with ``__name__``)."""
    return logging.getLogger(name)
