"""
Logging — настройка логирования polycalc

По умолчанию библиотека молчит (NullHandler на логгере "polycalc").
Логирование включается явно:

    import polycalc
    polycalc.enable_console_logging(level="DEBUG")

Переменные окружения (configure_from_env):
    POLYCALC_LOGGING: уровень (DEBUG, INFO, WARNING, ERROR, CRITICAL)
"""

import logging
import os
from typing import Final, Literal, Union

LOGGER_NAME: Final[str] = "polycalc"

ENV_LOGGING: Final[str] = "POLYCALC_LOGGING"

DEFAULT_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _get_level(level: Union[str, int]) -> int:
    if isinstance(level, int):
        return level
    return getattr(logging, level.upper(), logging.INFO)


def _get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def _clear_handlers() -> None:
    logger = _get_logger()
    for handler in logger.handlers[:]:
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()


def enable_console_logging(
    level: Union[LogLevel, int] = "INFO",
    format: str = DEFAULT_FORMAT,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> logging.StreamHandler:
    """
    Включить вывод логов polycalc в stderr.

    Args:
        level: Уровень логирования (строка или int)
        format: Формат сообщения
        date_format: Формат %(asctime)s

    Returns:
        Созданный StreamHandler
    """
    logger = _get_logger()
    logger.setLevel(_get_level(level))

    handler = logging.StreamHandler()
    handler.setLevel(_get_level(level))
    handler.setFormatter(logging.Formatter(format, date_format))

    logger.addHandler(handler)
    return handler


def disable_logging() -> None:
    """Удалить все обработчики, кроме NullHandler."""
    _clear_handlers()
    _get_logger().setLevel(logging.WARNING)


def set_level(level: Union[LogLevel, int]) -> None:
    """Изменить уровень логгера polycalc."""
    _get_logger().setLevel(_get_level(level))


def configure_from_env() -> None:
    """Включить консольное логирование, если задан POLYCALC_LOGGING."""
    level = os.environ.get(ENV_LOGGING)
    if level:
        _clear_handlers()
        enable_console_logging(level=level.upper())


_get_logger().addHandler(logging.NullHandler())
