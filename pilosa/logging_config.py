"""
Structured Logging Configuration

Библиотека сама обработчики не настраивает: модули пишут DEBUG-записи в
логгеры пространства имён "pilosa", приложение подключает вывод через
setup_logging().
"""

import json
import logging
from datetime import datetime, timezone
from typing import Optional


class JSONFormatter(logging.Formatter):
    """JSON formatter для структурированных логов"""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "operation": getattr(record, "operation", None),
            "extra": getattr(record, "extra", None),
        }

        # Убираем пустые поля
        log_entry = {k: v for k, v in log_entry.items() if v is not None}

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, default=str)


def setup_logging(level: str = "INFO", logger_name: str = "pilosa") -> logging.Logger:
    """
    Подключение JSON-логирования для пакета.

    Args:
        level: Уровень логирования (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        logger_name: Имя корневого логгера

    Returns:
        Настроенный логгер

    Raises:
        ValueError: Если level не является именем уровня logging
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"level must be a logging level name, got {level!r}")

    logger = logging.getLogger(logger_name)

    # Повторный вызов не дублирует обработчики
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter())
    logger.addHandler(handler)
    logger.setLevel(numeric_level)
    logger.propagate = False

    return logger


def get_logger(name: str = "pilosa") -> logging.Logger:
    """Логгер модуля"""
    return logging.getLogger(name)


def log_operation(
    logger: logging.Logger,
    message: str,
    operation: Optional[str] = None,
    extra: Optional[dict] = None,
    level: int = logging.DEBUG,
) -> None:
    """
    DEBUG-запись об арифметической операции со структурированными полями.

    Args:
        logger: Логгер модуля
        message: Текст сообщения
        operation: Имя операции (divide, pow, from_f64, ...)
        extra: Дополнительные поля
        level: Уровень записи (default: DEBUG)
    """
    if not logger.isEnabledFor(level):
        return

    fields = {}
    if operation:
        fields["operation"] = operation
    if extra:
        fields["extra"] = extra

    logger.log(level, message, extra=fields)
