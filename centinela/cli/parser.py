"""Parser de argumentos de línea de comandos."""

import argparse
from typing import Optional, Sequence

from centinela.core.constants import CONSOLE_FORMATS, LOG_LEVELS
from centinela.core.settings import Settings, get_settings


def positive_float(value: str) -> float:
    """Tipo argparse: número real > 0."""
    try:
        parsed = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"'{value}' no es un número")
    if not parsed > 0:
        raise argparse.ArgumentTypeError(f"debe ser > 0 (recibido {value})")
    return parsed


def non_negative_float(value: str) -> float:
    """Tipo argparse: número real >= 0."""
    try:
        parsed = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"'{value}' no es un número")
    if not parsed >= 0:
        raise argparse.ArgumentTypeError(f"debe ser >= 0 (recibido {value})")
    return parsed


def positive_int(value: str) -> int:
    """Tipo argparse: entero >= 1."""
    try:
        parsed = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"'{value}' no es un entero")
    if parsed < 1:
        raise argparse.ArgumentTypeError(f"debe ser >= 1 (recibido {value})")
    return parsed


def parse_args(argv: Optional[Sequence[str]] = None, settings: Optional[Settings] = None) -> argparse.Namespace:
    """Parsea argumentos de línea de comandos del monitor de taludes.

    Los valores por defecto salen de `settings` (variables de entorno / `.env`).
    Valores numéricos inválidos terminan con el error de uso de argparse.

    Args:
        argv: Argumentos a parsear (por defecto `sys.argv[1:]`)
        settings: Configuración base (por defecto `get_settings()`)

    Returns:
        Namespace con todos los argumentos parseados

    Example:
        >>> args = parse_args(["--format", "json", "--duration", "10"])
        >>> args.format
        'json'
        >>> args.duration
        10.0
    """
    cfg = settings or get_settings()
    p = argparse.ArgumentParser(description="Monitor de taludes: motor de telemetría con tablero en consola o web.")

    # Cadencias del motor
    p.add_argument("--fast-interval", type=positive_float, default=cfg.fast_interval_s, help="Segundos entre lecturas")
    p.add_argument(
        "--slow-interval", type=positive_float, default=cfg.slow_interval_s, help="Segundos entre muestras de tendencia"
    )
    p.add_argument(
        "--capacity", type=positive_int, default=cfg.window_capacity, help="Muestras en la ventana de tendencia"
    )
    p.add_argument("--seed", type=int, default=cfg.random_seed, help="Semilla aleatoria (reproducible)")

    # Consola
    p.add_argument("--format", choices=CONSOLE_FORMATS, default=cfg.console_format, help="Formato de consola")
    p.add_argument(
        "--refresh", type=positive_float, default=None, help="Segundos entre renderizados (por defecto = lectura)"
    )
    p.add_argument(
        "--duration", type=non_negative_float, default=None, help="Detener tras N segundos (por defecto: Ctrl-C)"
    )

    # Servidor web
    p.add_argument("--serve", action="store_true", help="Servir el tablero vía API web en vez de consola")
    p.add_argument("--host", default="127.0.0.1", help="Host del servidor web")
    p.add_argument("--port", type=int, default=8000, help="Puerto del servidor web")

    # Logging
    p.add_argument(
        "--log-level", type=str.upper, choices=LOG_LEVELS, default=cfg.log_level, help="Nivel de logging"
    )

    return p.parse_args(argv)
