"""
Тесты настройки логирования пакета intmatrix
"""

import logging
from pathlib import Path

import pytest

from intmatrix import MathMatrix
from intmatrix.logging_config import LOGGER_NAMESPACE, setup_logging


@pytest.fixture
def clean_logger():
    """Снимает обработчики логгера 'intmatrix' после теста"""
    yield
    logger = logging.getLogger(LOGGER_NAMESPACE)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


class TestSetupLogging:
    """Тесты для setup_logging"""

    def test_console_handler_installed(self, clean_logger) -> None:
        """Один консольный обработчик с заданным уровнем"""
        logger = setup_logging(logging.DEBUG)

        assert logger.name == "intmatrix"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)

    def test_repeated_setup_does_not_duplicate(self, clean_logger) -> None:
        """Повторный вызов не дублирует обработчики"""
        setup_logging()
        logger = setup_logging()
        assert len(logger.handlers) == 1

    def test_file_handler(self, clean_logger, tmp_path: Path) -> None:
        """Нарушения предусловий пишутся в файл на уровне DEBUG"""
        log_file = tmp_path / "intmatrix.log"
        logger = setup_logging(logging.DEBUG, log_file=str(log_file))
        assert len(logger.handlers) == 2

        with pytest.raises(ValueError):
            MathMatrix([[1, 2], [3]])

        for handler in logger.handlers:
            handler.flush()

        content = log_file.read_text(encoding="utf-8")
        assert "intmatrix.math.grid_safeguards - DEBUG - Precondition violated" in content
