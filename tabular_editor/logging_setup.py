import logging
import sys
from typing import Optional

from .settings import settings


def setup_logging(level: Optional[str] = None):
    """Route all log records to stdout with the editor's format."""
    log_level = getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.INFO)

    logger = logging.getLogger()
    logger.setLevel(log_level)
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter(settings.LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
    logger.addHandler(console_handler)
