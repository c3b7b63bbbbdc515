"""Indicadores de tendencia sobre la ventana de movimiento del talud."""

from typing import Dict, Optional

import pandas as pd

from centinela.analysis.window import RollingWindow


def ema(series: pd.Series, span: int) -> pd.Series:
    """Calcula la media móvil exponencial (EMA) de una serie.

    Args:
        series: Serie temporal de entrada
        span: Ventana de tiempo (span) para el cálculo del EMA

    Returns:
        Serie con los valores del EMA

    Example:
        >>> s = pd.Series([1, 2, 3, 4, 5])
        >>> ema_s = ema(s, span=3)
        >>> len(ema_s) == len(s)
        True
    """
    return series.ewm(span=span, adjust=False).mean()


def summarize_trend(window: RollingWindow, span: int = 3) -> Dict[str, Optional[float]]:
    """Resume la ventana de tendencia para la capa de visualización.

    Args:
        window: Ventana de tendencia
        span: Span del EMA sobre el movimiento

    Returns:
        Diccionario con número de muestras, extremos, último valor, variación
        (último - primero), EMA final y duración cubierta en minutos. Con una
        ventana vacía los valores numéricos son None.

    Example:
        >>> from datetime import datetime
        >>> from centinela.core.models import TrendSample
        >>> w = RollingWindow(7, (TrendSample(datetime(2025, 1, 1, 0, 0), 5.0),
        ...                       TrendSample(datetime(2025, 1, 1, 0, 30), 6.0)))
        >>> summarize_trend(w)["change_mm"]
        1.0
    """
    df = window.to_frame()
    if df.empty:
        return {
            "n_samples": 0,
            "start": None,
            "end": None,
            "span_minutes": None,
            "min_mm": None,
            "max_mm": None,
            "last_mm": None,
            "change_mm": None,
            "ema_mm": None,
        }

    movement = df["movement"]
    span_minutes = float((df["time"].iloc[-1] - df["time"].iloc[0]).total_seconds() / 60.0)
    return {
        "n_samples": int(len(df)),
        "start": df["label"].iloc[0],
        "end": df["label"].iloc[-1],
        "span_minutes": span_minutes,
        "min_mm": float(movement.min()),
        "max_mm": window.max_movement(),
        "last_mm": float(movement.iloc[-1]),
        "change_mm": float(movement.iloc[-1] - movement.iloc[0]),
        "ema_mm": float(ema(movement, span=max(1, span)).iloc[-1]),
    }
