"""Módulo analysis: Clasificación de alertas, ventana de tendencia e indicadores."""

from centinela.analysis.indicators import ema, summarize_trend
from centinela.analysis.thresholds import alert_info, alert_levels, classify
from centinela.analysis.window import RollingWindow, max_movement

__all__ = [
    "RollingWindow",
    "alert_info",
    "alert_levels",
    "classify",
    "ema",
    "max_movement",
    "summarize_trend",
]
