"""Logging configuration driven by the LOG_LEVEL and APP_ENV settings."""

from __future__ import annotations

import logging

from config.settings import settings

DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | {app_env} | %(name)s | %(message)s"

_configured = False


def setup_logging(level: str | None = None, force: bool = False) -> None:
    global _configured
    if _configured and not force:
        return
    resolved = getattr(logging, (level or settings.log_level).upper(), logging.INFO)
    logging.basicConfig(
        level=resolved,
        format=DEFAULT_FORMAT.format(app_env=settings.app_env),
        force=force,
    )
    # basicConfig is a no-op when the root logger already has handlers.
    logging.getLogger().setLevel(resolved)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
