"""Modelos de datos para el motor de telemetría de taludes."""

import math
from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum
from typing import Any, Dict, Mapping, Tuple

from centinela.core.constants import FIELD_BOUNDS
from centinela.core.errors import OutOfRangeInputError


class AlertLevel(IntEnum):
    """Nivel de alerta discreto, totalmente ordenado: SAFE < WARNING < CRITICAL."""

    SAFE = 0
    WARNING = 1
    CRITICAL = 2


@dataclass(frozen=True)
class AlertInfo:
    """Metadatos de presentación de un nivel de alerta.

    Attributes:
        label: Etiqueta visible (ej: "WARNING")
        description: Descripción corta para el operador
        color: Color sugerido para la capa de visualización
    """

    label: str
    description: str
    color: str


@dataclass(frozen=True)
class WeatherReading:
    """Lectura de la estación meteorológica.

    Attributes:
        wind_speed: Velocidad del viento (km/h)
        temperature: Temperatura (°C), en [-10, 35]
        humidity: Humedad relativa (%), en [0, 100]
    """

    wind_speed: float
    temperature: float
    humidity: float


@dataclass(frozen=True)
class SensorReading:
    """Lectura completa de sensores en un instante.

    Attributes:
        radar: Desplazamiento detectado por radar (mm)
        lidar: Deformación superficial por LiDAR (mm)
        weather: Lectura meteorológica
        acoustic: Nivel acústico (dB)
        slope_movement: Movimiento del talud (mm)
    """

    radar: float
    lidar: float
    weather: WeatherReading
    acoustic: float
    slope_movement: float

    def scalars(self) -> Dict[str, float]:
        """Devuelve los campos escalares aplanados (clima incluido)."""
        return {
            "radar": self.radar,
            "lidar": self.lidar,
            "wind_speed": self.weather.wind_speed,
            "temperature": self.weather.temperature,
            "humidity": self.weather.humidity,
            "acoustic": self.acoustic,
            "slope_movement": self.slope_movement,
        }

    @classmethod
    def from_scalars(cls, values: Mapping[str, float]) -> "SensorReading":
        """Construye una lectura a partir de campos escalares aplanados."""
        return cls(
            radar=float(values["radar"]),
            lidar=float(values["lidar"]),
            weather=WeatherReading(
                wind_speed=float(values["wind_speed"]),
                temperature=float(values["temperature"]),
                humidity=float(values["humidity"]),
            ),
            acoustic=float(values["acoustic"]),
            slope_movement=float(values["slope_movement"]),
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SensorReading":
        """Construye una lectura desde un dict anidado (formato de `to_dict`).

        Example:
            >>> r = SensorReading.from_dict({
            ...     "radar": 1.0, "lidar": 1.0, "acoustic": 40.0, "slope_movement": 2.0,
            ...     "weather": {"wind_speed": 5.0, "temperature": 20.0, "humidity": 50.0},
            ... })
            >>> r.weather.humidity
            50.0
        """
        weather = data["weather"]
        return cls.from_scalars(
            {
                "radar": data["radar"],
                "lidar": data["lidar"],
                "wind_speed": weather["wind_speed"],
                "temperature": weather["temperature"],
                "humidity": weather["humidity"],
                "acoustic": data["acoustic"],
                "slope_movement": data["slope_movement"],
            }
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "radar": self.radar,
            "lidar": self.lidar,
            "weather": {
                "wind_speed": self.weather.wind_speed,
                "temperature": self.weather.temperature,
                "humidity": self.weather.humidity,
            },
            "acoustic": self.acoustic,
            "slope_movement": self.slope_movement,
        }


def check_reading_bounds(reading: SensorReading) -> SensorReading:
    """Verifica que cada campo de la lectura esté dentro de sus límites.

    Args:
        reading: Lectura a validar

    Returns:
        La misma lectura, si es válida

    Raises:
        OutOfRangeInputError: Si algún campo no es finito o está fuera de rango
    """
    for field, value in reading.scalars().items():
        if not math.isfinite(value):
            raise OutOfRangeInputError(field, value)
        lo, hi = FIELD_BOUNDS[field]
        if value < lo or value > hi:
            raise OutOfRangeInputError(field, value, (lo, hi))
    return reading


@dataclass(frozen=True)
class TrendSample:
    """Muestra de tendencia: instante de captura y movimiento del talud (mm)."""

    timestamp: datetime
    movement: float

    @property
    def label(self) -> str:
        """Hora de la muestra en formato HH:MM."""
        return self.timestamp.strftime("%H:%M")

    def to_dict(self) -> Dict[str, Any]:
        return {"time": self.timestamp.isoformat(), "label": self.label, "movement": self.movement}


@dataclass(frozen=True)
class TelemetrySnapshot:
    """Copia inmutable del estado del motor en un instante.

    Attributes:
        reading: Lectura actual
        alert_level: Nivel de alerta recalculado desde `reading`
        window: Muestras de tendencia, de la más antigua a la más reciente
        updated_at: Instante del último avance de lectura
    """

    reading: SensorReading
    alert_level: AlertLevel
    window: Tuple[TrendSample, ...]
    updated_at: datetime

    def to_dict(self) -> Dict[str, Any]:
        return {
            "updated_at": self.updated_at.isoformat(),
            "alert_level": self.alert_level.name,
            "reading": self.reading.to_dict(),
            "window": [sample.to_dict() for sample in self.window],
        }
