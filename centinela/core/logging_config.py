"""Configuración de logging con contexto (`extra`) al final de cada línea."""

import logging
from logging.config import dictConfig
from typing import Iterable, List, Optional, Sequence, Union

from centinela.core.settings import get_settings

_DEFAULT_EXTRA_KEYS = (
    "alert_level",
    "previous_level",
    "slope_movement",
    "window_size",
    "job_id",
)

_configured = False


class ContextualFormatter(logging.Formatter):
    """Formatter que agrega `key=value` para las claves `extra` presentes en el registro."""

    def __init__(
        self,
        fmt: Optional[str] = None,
        datefmt: Optional[str] = None,
        style: str = "%",
        extra_keys: Optional[Iterable[str]] = None,
    ) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt, style=style)
        self._extra_keys: Sequence[str] = tuple(extra_keys or _DEFAULT_EXTRA_KEYS)

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        context_parts: List[str] = []
        for key in self._extra_keys:
            value = getattr(record, key, None)
            if value is None:
                continue
            context_parts.append(f"{key}={value}")
        if context_parts:
            return f"{message} | {' '.join(context_parts)}"
        return message


def configure_logging(level: Union[str, int, None] = None) -> None:
    """Configura el logging de la aplicación (solo la primera vez)."""
    global _configured
    if _configured:
        return

    log_level = level if level is not None else get_settings().log_level

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "contextual": {
                    "()": "centinela.core.logging_config.ContextualFormatter",
                    "fmt": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                    "datefmt": "%Y-%m-%dT%H:%M:%S",
                    "style": "%",
                    "extra_keys": list(_DEFAULT_EXTRA_KEYS),
                }
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "level": log_level,
                    "formatter": "contextual",
                }
            },
            "root": {"handlers": ["default"], "level": log_level},
            # APScheduler registra cada ejecución de job en INFO
            "loggers": {"apscheduler": {"level": "WARNING"}},
        }
    )

    _configured = True
