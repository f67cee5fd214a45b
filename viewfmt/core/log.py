"""Логгеры пакета."""

import logging
import os
import sys
from typing import Final

LOG_LEVEL_ENV: Final[str] = "VIEWFMT_LOG_LEVEL"

LOG_FORMAT: Final[str] = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """
    Преднастроенный логгер для модуля.

    Один stream handler (stderr) на логгер; уровень из VIEWFMT_LOG_LEVEL
    (default WARNING, неизвестное имя уровня → WARNING).
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        level = getattr(logging, os.getenv(LOG_LEVEL_ENV, "WARNING").upper(), None)
        logger.setLevel(level if isinstance(level, int) else logging.WARNING)
    return logger
