import sys
from typing import Optional

from loguru import logger

from ghrest.settings import settings


def setup_logger(level: Optional[str] = None) -> None:
    level = (level or settings.log_level).upper()
    logger_format = (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
        "<level>{level: <8}</level> | "
        "<level>{message}</level>"
    )
    if level == "DEBUG":
        logger_format += " | {extra}"

    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format=logger_format,
        diagnose=False,  # hide variable values in log backtrace
    )
