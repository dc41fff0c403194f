"""Configuração de logging"""
import logging
import sys
from pathlib import Path
from clubsite.core.config import settings


def _file_handler() -> logging.Handler:
    log_path = Path(settings.LOG_FILE)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    return logging.FileHandler(log_path, encoding="utf-8")


def setup_logging():
    """
    Handler em stdout sempre; em arquivo (LOG_FILE) fora do modo DEBUG.
    Formato, nível e loggers silenciados vêm de settings.
    """
    handlers = [logging.StreamHandler(sys.stdout)]
    if not settings.DEBUG and settings.LOG_FILE:
        handlers.append(_file_handler())

    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format=settings.LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers
    )

    for name in settings.quiet_loggers_list:
        logging.getLogger(name).setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.info(f"Logging configurado ({settings.LOG_LEVEL}, {settings.ENVIRONMENT})")

    return logger
