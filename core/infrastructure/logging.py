"""
Logging infrastructure.

Provides logging utilities shared by the workflow engine and adapters.
"""
import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Get logger instance.
    
    Args:
        name: Logger name (usually module name)
        level: Optional level name; when given it is applied on every call,
            otherwise the configured default is used for a new logger
    
    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        if level is None:
            logger.setLevel(_default_level())
    if level is not None:
        logger.setLevel(level)
    return logger


def _default_level() -> str:
    from core.settings import get_app_settings

    return get_app_settings().autofix.log_level
