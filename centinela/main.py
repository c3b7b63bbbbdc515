"""Punto de entrada principal para el paquete centinela."""

import argparse
import logging
import time
from typing import Callable, Optional, Sequence

import uvicorn

from centinela.cli import parse_args
from centinela.core.logging_config import configure_logging
from centinela.output import print_snapshot_console
from centinela.simulation import TelemetryEngine

logger = logging.getLogger(__name__)


def run_console(
    engine: TelemetryEngine,
    console_format: str,
    refresh_s: float,
    duration_s: Optional[float] = None,
    sleep: Callable[[float], None] = time.sleep,
    monotonic: Callable[[], float] = time.monotonic,
) -> int:
    """Inicia el motor y renderiza su snapshot periódicamente.

    El motor se detiene siempre al salir (fin de `duration_s`, Ctrl-C o error).

    Args:
        engine: Motor de telemetría
        console_format: Formato de consola ("rich", "plain", "json")
        refresh_s: Segundos entre renderizados
        duration_s: Duración total en segundos (None = hasta Ctrl-C)
        sleep: Función de espera
        monotonic: Reloj monotónico

    Returns:
        Número de renderizados realizados
    """
    renders = 0
    deadline = None if duration_s is None else monotonic() + max(0.0, duration_s)
    with engine:
        try:
            while True:
                print_snapshot_console(engine.current_snapshot(), console_format)
                renders += 1
                if deadline is not None and monotonic() >= deadline:
                    break
                sleep(refresh_s)
        except KeyboardInterrupt:
            logger.info("Monitor detenido por el usuario")
    return renders


def build_engine(args: argparse.Namespace) -> TelemetryEngine:
    """Construye el motor con las cadencias, capacidad y semilla de la línea de comandos."""
    return TelemetryEngine(
        fast_interval_s=args.fast_interval,
        slow_interval_s=args.slow_interval,
        capacity=args.capacity,
        random_seed=args.seed,
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Función principal: parsea argumentos y ejecuta el tablero en consola o web."""
    args = parse_args(argv)
    configure_logging(args.log_level)
    engine = build_engine(args)

    if args.serve:
        from backend_app import create_app

        logger.info("Iniciando API en http://%s:%d", args.host, args.port)
        uvicorn.run(create_app(engine), host=args.host, port=args.port, log_level=args.log_level.lower())
        return

    run_console(
        engine,
        console_format=args.format,
        refresh_s=args.refresh if args.refresh is not None else args.fast_interval,
        duration_s=args.duration,
    )


if __name__ == "__main__":
    main()
