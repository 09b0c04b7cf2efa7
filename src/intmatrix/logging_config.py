"""
Logging Configuration

Настройка логгера пространства имён 'intmatrix'. Библиотека сама логирование
не настраивает; вызов setup_logging — ответственность приложения или тестов.
"""

import logging
import sys
from typing import Final, Optional

LOGGER_NAMESPACE: Final[str] = "intmatrix"
LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT: Final[str] = "%H:%M:%S"


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Настройка логгера 'intmatrix'.

    Args:
        level: Уровень логирования (например, logging.DEBUG)
        log_file: Необязательный путь к файлу для дублирования логов

    Returns:
        Настроенный логгер пакета
    """
    logger = logging.getLogger(LOGGER_NAMESPACE)
    logger.setLevel(level)

    # Повторный вызов не должен дублировать вывод
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
    return logger
