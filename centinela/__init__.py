"""
Centinela de Taludes - Motor de telemetría para tableros de riesgo de taludes.

Este paquete avanza lecturas de sensores (radar, LiDAR, clima, acústica y
movimiento de talud), clasifica el nivel de alerta y mantiene una ventana
móvil de tendencia para que una capa de visualización la consuma.
"""

__version__ = "1.0.0"
__author__ = "Centinela de Taludes Team"

from centinela.core.models import AlertLevel, SensorReading, TelemetrySnapshot, TrendSample, WeatherReading
from centinela.simulation.engine import TelemetryEngine

__all__ = [
    "AlertLevel",
    "SensorReading",
    "TelemetryEngine",
    "TelemetrySnapshot",
    "TrendSample",
    "WeatherReading",
    "__version__",
]
