"""Configuración del motor leída desde variables de entorno (y `.env`)."""

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from centinela.core.constants import (
    CONSOLE_FORMATS,
    LOG_LEVELS,
    DEFAULT_FAST_INTERVAL_S,
    DEFAULT_SLOW_INTERVAL_S,
    DEFAULT_WINDOW_CAPACITY,
)

_FAST_INTERVAL_ENV = "CENTINELA_FAST_INTERVAL_S"
_SLOW_INTERVAL_ENV = "CENTINELA_SLOW_INTERVAL_S"
_CAPACITY_ENV = "CENTINELA_WINDOW_CAPACITY"
_SEED_ENV = "CENTINELA_RANDOM_SEED"
_LOG_LEVEL_ENV = "CENTINELA_LOG_LEVEL"
_CONSOLE_FORMAT_ENV = "CENTINELA_CONSOLE_FORMAT"


@dataclass(frozen=True)
class Settings:
    """Parámetros de ejecución del motor y de la consola.

    Attributes:
        fast_interval_s: Cadencia del avance de lecturas (s)
        slow_interval_s: Cadencia de captura de tendencia (s)
        window_capacity: Capacidad de la ventana de tendencia
        random_seed: Semilla del generador aleatorio (None = no determinista)
        log_level: Nivel de logging
        console_format: Formato de consola ("rich", "plain", "json")
    """

    fast_interval_s: float
    slow_interval_s: float
    window_capacity: int
    random_seed: Optional[int]
    log_level: str
    console_format: str


def _read_env(name: str) -> Optional[str]:
    value = os.getenv(name)
    if value is None:
        return None
    candidate = value.strip()
    return candidate or None


def _read_positive_float(name: str, default: float) -> float:
    candidate = _read_env(name)
    if candidate is None:
        return default
    try:
        parsed = float(candidate)
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def _read_positive_int(name: str, default: int) -> int:
    candidate = _read_env(name)
    if candidate is None:
        return default
    try:
        parsed = int(candidate)
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def _read_seed() -> Optional[int]:
    candidate = _read_env(_SEED_ENV)
    if candidate is None:
        return None
    try:
        return int(candidate)
    except ValueError:
        return None


def _read_log_level(default: str) -> str:
    candidate = _read_env(_LOG_LEVEL_ENV)
    if candidate is None:
        return default
    candidate = candidate.upper()
    return candidate if candidate in LOG_LEVELS else default


def _read_console_format(default: str) -> str:
    candidate = _read_env(_CONSOLE_FORMAT_ENV)
    if candidate is None:
        return default
    candidate = candidate.lower()
    return candidate if candidate in CONSOLE_FORMATS else default


@lru_cache
def get_settings() -> Settings:
    """Construye (una vez) la configuración desde el entorno.

    Carga `.env` del directorio actual (o superiores) si existe; las variables ya definidas en el entorno tienen prioridad.
    Valores inválidos caen a los defaults.
    """
    load_dotenv(find_dotenv(usecwd=True))
    return Settings(
        fast_interval_s=_read_positive_float(_FAST_INTERVAL_ENV, DEFAULT_FAST_INTERVAL_S),
        slow_interval_s=_read_positive_float(_SLOW_INTERVAL_ENV, DEFAULT_SLOW_INTERVAL_S),
        window_capacity=_read_positive_int(_CAPACITY_ENV, DEFAULT_WINDOW_CAPACITY),
        random_seed=_read_seed(),
        log_level=_read_log_level("INFO"),
        console_format=_read_console_format("rich"),
    )
