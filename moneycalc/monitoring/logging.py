"""
Logging — настройка loguru для moneycalc

Библиотека пишет логи через loguru, но по умолчанию логгер пакета выключен
(logger.disable("moneycalc") в moneycalc/__init__.py). setup_logging
включает его и настраивает sink'и.
"""

import sys
from typing import Optional

from loguru import logger

PACKAGE_NAME = "moneycalc"

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

FILE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | "
    "{name}:{function}:{line} - {message}"
)


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> None:
    """
    Настройка sink'ов loguru и включение логгера moneycalc.

    Удаляет ранее добавленные handlers (включая default stderr handler).

    Args:
        level: Минимальный уровень ("DEBUG" покажет каждый расчёт)
        log_file: Путь к файлу логов (опционально)
        rotation: Ротация файла логов
        retention: Срок хранения файлов логов
    """
    logger.remove()

    logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT, colorize=True)

    if log_file:
        logger.add(
            log_file,
            level=level,
            format=FILE_FORMAT,
            rotation=rotation,
            retention=retention,
        )

    logger.enable(PACKAGE_NAME)


def disable_logging() -> None:
    """Выключение логгера moneycalc (состояние по умолчанию)."""
    logger.disable(PACKAGE_NAME)
