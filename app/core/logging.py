# app/core/logging.py
import logging
import sys
from typing import Optional

import colorlog

from app.core.config import Settings, get_settings

LOG_FORMAT = "%(log_color)s%(asctime)s %(levelname)-8s [%(name)s]%(reset)s %(message)s"
LOG_DATEFMT = "%H:%M:%S"
LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}

# Driver/client loggers this service pulls in: Mongo (motor sits on pymongo),
# the redis asyncio client, and httpx under fastapi.testclient.
NOISY_LOGGERS = ("pymongo", "motor", "redis", "httpx", "httpcore")


def resolve_level(settings: Settings) -> int:
    """LOG_LEVEL wins when it names a level; otherwise DEBUG flag picks DEBUG/INFO."""
    name = settings.LOG_LEVEL.strip().upper()
    if name:
        level = logging.getLevelName(name)
        if isinstance(level, int):
            return level
    return logging.DEBUG if settings.DEBUG else logging.INFO


def build_handler(use_colors: bool = True) -> logging.Handler:
    handler = colorlog.StreamHandler(sys.stdout)
    handler.setFormatter(
        colorlog.ColoredFormatter(
            LOG_FORMAT,
            datefmt=LOG_DATEFMT,
            log_colors=LOG_COLORS,
            no_color=not use_colors,
        )
    )
    return handler


def configure_logging(settings: Optional[Settings] = None) -> int:
    settings = settings or get_settings()
    level = resolve_level(settings)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [build_handler(settings.LOG_COLORS)]

    logging.getLogger("uvicorn.error").setLevel(level)
    # access lines duplicate the routers' own request/response logs
    logging.getLogger("uvicorn.access").setLevel(max(level, logging.WARNING))
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
    return level
