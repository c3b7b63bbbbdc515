"""Jerarquía de errores del motor de telemetría."""

from typing import Optional, Tuple


class TelemetryError(Exception):
    """Error base del motor de telemetría."""


class OutOfRangeInputError(TelemetryError, ValueError):
    """Una lectura tiene un campo fuera de sus límites declarados.

    Attributes:
        field: Nombre del campo (ej: "humidity")
        value: Valor recibido
        bounds: Límites (inferior, superior) del campo
    """

    def __init__(self, field: str, value: float, bounds: Optional[Tuple[float, float]] = None) -> None:
        self.field = field
        self.value = value
        self.bounds = bounds
        if bounds is None:
            message = f"{field}={value!r} no es un valor finito"
        else:
            message = f"{field}={value!r} fuera de rango [{bounds[0]}, {bounds[1]}]"
        super().__init__(message)


class DegenerateInputError(TelemetryError, ValueError):
    """Consulta sobre una ventana vacía (ej: máximo de tendencia sin muestras)."""
