"""Módulo core: Modelos de datos, constantes, errores y configuración."""

from centinela.core.errors import DegenerateInputError, OutOfRangeInputError, TelemetryError
from centinela.core.models import (
    AlertInfo,
    AlertLevel,
    SensorReading,
    TelemetrySnapshot,
    TrendSample,
    WeatherReading,
    check_reading_bounds,
)

__all__ = [
    "AlertInfo",
    "AlertLevel",
    "DegenerateInputError",
    "OutOfRangeInputError",
    "SensorReading",
    "TelemetryError",
    "TelemetrySnapshot",
    "TrendSample",
    "WeatherReading",
    "check_reading_bounds",
]
