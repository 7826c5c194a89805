"""Logging infrastructure for the extended complex library.

Модули библиотеки берут логгер через get_logger(__name__): он не получает
обработчиков и передаёт записи родителю, конфигурацию выбирает приложение.
Явный вызов setup_logger добавляет один обработчик stderr; повторный вызов
с тем же именем возвращает уже настроенный логгер.

Уровень для setup_logger по умолчанию берётся из переменной окружения
EXTCOMPLEX_LOG_LEVEL (WARNING, если переменная не задана или неизвестна).
"""

import logging
import os
import sys
import threading
from typing import Final

LOG_LEVEL_ENV_VAR: Final[str] = "EXTCOMPLEX_LOG_LEVEL"
DEFAULT_LOG_LEVEL: Final[str] = "WARNING"

_FORMATS: Final[dict[str, str]] = {
    "standard": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    "detailed": "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
    "simple": "%(levelname)s - %(message)s",
}

# Реестр настроенных логгеров (защита от дублирования обработчиков)
_loggers: dict[str, logging.Logger] = {}
_lock = threading.Lock()


def _level_number(name: str) -> int | None:
    numeric_level = logging.getLevelName(name.upper())
    return numeric_level if isinstance(numeric_level, int) else None


def _resolve_level(level: str | None) -> int:
    """
    Числовой уровень логирования по имени.

    Неизвестное значение EXTCOMPLEX_LOG_LEVEL заменяется уровнем
    по умолчанию.

    Raises:
        ValueError: Если явно переданное имя уровня неизвестно
    """
    if level is not None:
        numeric_level = _level_number(level)
        if numeric_level is None:
            raise ValueError(f"Invalid log level: {level}")
        return numeric_level

    env_level = os.environ.get(LOG_LEVEL_ENV_VAR)
    if env_level:
        numeric_level = _level_number(env_level)
        if numeric_level is not None:
            return numeric_level

    return logging.getLevelName(DEFAULT_LOG_LEVEL)


def setup_logger(
    name: str,
    level: str | None = None,
    format_type: str = "standard",
) -> logging.Logger:
    """Configure a logger with a single stderr handler.

    Args:
        name: Logger name (typically the module name)
        level: Logging level name; falls back to EXTCOMPLEX_LOG_LEVEL
        format_type: 'standard', 'detailed' or 'simple'

    Returns:
        Configured logger instance

    Raises:
        ValueError: If level is invalid
    """
    with _lock:
        if name in _loggers:
            return _loggers[name]

        numeric_level = _resolve_level(level)

        logger = logging.getLogger(name)
        logger.setLevel(numeric_level)

        if logger.handlers:
            logger.handlers.clear()

        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMATS.get(format_type, _FORMATS["standard"])))
        handler.setLevel(numeric_level)
        logger.addHandler(handler)

        logger.propagate = False

        _loggers[name] = logger
        return logger


def get_logger(name: str) -> logging.Logger:
    """Get a configured logger, or the plain propagating one if setup_logger was not called."""
    if name in _loggers:
        return _loggers[name]
    return logging.getLogger(name)


def shutdown_logging() -> None:
    """Close all handlers, restore propagation and clear the registry."""
    with _lock:
        for logger in _loggers.values():
            for handler in logger.handlers[:]:
                handler.close()
                logger.removeHandler(handler)
            logger.setLevel(logging.NOTSET)
            logger.propagate = True
        _loggers.clear()
