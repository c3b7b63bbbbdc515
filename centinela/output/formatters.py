"""Funciones auxiliares de formateo para salida."""

from datetime import datetime
from typing import Any, List, Sequence, Tuple

from centinela.analysis.window import max_movement
from centinela.core.models import TrendSample


def format_number(value: Any, decimals: int = 3) -> str:
    """Formatea un número con N decimales, retorna '—' si no es válido.

    Args:
        value: Valor a formatear
        decimals: Número de decimales

    Returns:
        String formateado o '—'

    Example:
        >>> format_number(1.2345, 2)
        '1.23'
        >>> format_number(None, 2)
        '—'
    """
    try:
        return f"{float(value):.{decimals}f}"
    except (ValueError, TypeError):
        return "—"


def format_clock(ts: Any) -> str:
    """Formatea un instante como HH:MM.

    Example:
        >>> format_clock(datetime(2025, 1, 1, 7, 5))
        '07:05'
        >>> format_clock(None)
        '—'
    """
    if ts is None:
        return "—"
    if isinstance(ts, datetime):
        return ts.strftime("%H:%M")
    return str(ts)


def chart_points(
    samples: Sequence[TrendSample],
    x0: float = 50.0,
    width: float = 500.0,
    baseline: float = 140.0,
    height: float = 120.0,
) -> List[Tuple[float, float]]:
    """Proyecta la tendencia a coordenadas de gráfico (eje Y hacia abajo).

    Cada muestra i queda en ``(x0 + i/(n-1)*width, baseline - movement/max*height)``;
    la escala vertical es el máximo de la ventana.

    Example:
        >>> t = datetime(2025, 1, 1)
        >>> chart_points([TrendSample(t, 5.0), TrendSample(t, 10.0)])
        [(50.0, 80.0), (550.0, 20.0)]
    """
    if not samples:
        return []
    top = max_movement(samples)
    n = len(samples)
    points = []
    for i, sample in enumerate(samples):
        x = x0 + (i / (n - 1)) * width if n > 1 else x0
        y = baseline - (sample.movement / top) * height if top > 0 else baseline
        points.append((float(x), float(y)))
    return points
