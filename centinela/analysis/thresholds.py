"""Clasificación del nivel de alerta por umbrales fijos de movimiento de talud."""

from typing import Dict

from centinela.core.constants import ALERT_METADATA, SLOPE_CRITICAL_MM, SLOPE_WARNING_MM
from centinela.core.models import AlertInfo, AlertLevel

_ALERT_INFO: Dict[AlertLevel, AlertInfo] = {
    level: AlertInfo(**ALERT_METADATA[level.name]) for level in AlertLevel
}


def classify(slope_movement: float) -> AlertLevel:
    """Clasifica el movimiento del talud en un nivel de alerta.

    Reglas (en orden, gana la primera): > 10 mm CRITICAL, > 7 mm WARNING, resto SAFE.
    Las comparaciones son estrictas: 10.0 es WARNING y 7.0 es SAFE.

    Args:
        slope_movement: Movimiento del talud en mm

    Returns:
        AlertLevel correspondiente

    Example:
        >>> classify(7.0)
        <AlertLevel.SAFE: 0>
        >>> classify(10.0)
        <AlertLevel.WARNING: 1>
        >>> classify(10.5)
        <AlertLevel.CRITICAL: 2>
    """
    if slope_movement > SLOPE_CRITICAL_MM:
        return AlertLevel.CRITICAL
    if slope_movement > SLOPE_WARNING_MM:
        return AlertLevel.WARNING
    return AlertLevel.SAFE


def alert_info(level: AlertLevel) -> AlertInfo:
    """Devuelve etiqueta, descripción y color de un nivel.

    Example:
        >>> alert_info(AlertLevel.CRITICAL).description
        'Immediate evacuation recommended'
    """
    return _ALERT_INFO[AlertLevel(level)]


def alert_levels() -> Dict[str, Dict[str, str]]:
    """Tabla completa de niveles con sus umbrales, lista para serializar."""
    bounds = {
        AlertLevel.SAFE: f"<= {SLOPE_WARNING_MM:g} mm",
        AlertLevel.WARNING: f"> {SLOPE_WARNING_MM:g} mm y <= {SLOPE_CRITICAL_MM:g} mm",
        AlertLevel.CRITICAL: f"> {SLOPE_CRITICAL_MM:g} mm",
    }
    return {
        level.name: {
            "label": info.label,
            "description": info.description,
            "color": info.color,
            "range": bounds[level],
        }
        for level, info in _ALERT_INFO.items()
    }
