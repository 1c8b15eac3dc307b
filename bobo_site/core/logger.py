# File: bobo_site/core/logger.py

"""
Logging setup for the site backend.

All modules log through loguru's shared ``logger``; this only decides
where the lines go (stdout always, plus rotating files when LOG_DIR is set).
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from bobo_site.core.config import settings

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)


def setup_logging(log_level: Optional[str] = None) -> None:
    level = (log_level or settings.log_level).upper()

    logger.remove()
    logger.add(sys.stdout, format=LOG_FORMAT, level=level, colorize=True)

    if settings.log_dir:
        log_dir = Path(settings.log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_dir / "api.log",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}",
            level="INFO",
            rotation="1 day",
            retention="30 days",
            compression="zip",
        )
        # Errors get their own file with full tracebacks
        logger.add(
            log_dir / "error.log",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            level="ERROR",
            rotation="1 day",
            retention="30 days",
            compression="zip",
            backtrace=True,
        )

    logger.debug(f"Logging initialized | level={level}")
