"""
Motor de telemetría.

Orquesta dos tareas periódicas sobre un `BackgroundScheduler` de APScheduler:
- tick rápido: avanza la lectura de sensores
- tick lento: captura una muestra de tendencia en la ventana móvil

Las tareas se ejecutan en un único worker, nunca en paralelo. El estado vive en
un valor inmutable que se reemplaza completo en cada tick; los lectores reciben
snapshots y nunca una referencia al estado interno.
"""

import logging
import threading
from dataclasses import dataclass, replace
from datetime import datetime, time, timedelta
from typing import Callable, Iterable, List, Optional

from apscheduler.executors.pool import ThreadPoolExecutor
from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.schedulers.base import BaseScheduler
from apscheduler.triggers.interval import IntervalTrigger

from centinela.analysis.thresholds import classify
from centinela.analysis.window import RollingWindow
from centinela.core.constants import (
    DEFAULT_FAST_INTERVAL_S,
    DEFAULT_SLOW_INTERVAL_S,
    DEFAULT_WINDOW_CAPACITY,
    SEED_READING_VALUES,
    SEED_TREND_MM,
    SEED_TREND_STEP_MIN,
)
from centinela.core.errors import DegenerateInputError, TelemetryError
from centinela.core.models import AlertLevel, SensorReading, TelemetrySnapshot, TrendSample, check_reading_bounds
from centinela.core.settings import Settings
from centinela.simulation.generator import ReadingGenerator

logger = logging.getLogger(__name__)

FAST_JOB_ID = "fast_tick"
SLOW_JOB_ID = "slow_tick"


def default_seed_reading() -> SensorReading:
    """Lectura semilla de referencia (movimiento del talud 8.2 mm)."""
    return SensorReading.from_dict(SEED_READING_VALUES)


def default_seed_trend(now: datetime) -> List[TrendSample]:
    """Tendencia semilla: muestras cada 30 min desde las 00:00 del día de `now`."""
    start = datetime.combine(now.date(), time(0, 0), tzinfo=now.tzinfo)
    step = timedelta(minutes=SEED_TREND_STEP_MIN)
    return [TrendSample(timestamp=start + i * step, movement=mm) for i, mm in enumerate(SEED_TREND_MM)]


def default_scheduler_factory() -> BaseScheduler:
    """Scheduler en segundo plano con un solo worker (los ticks nunca se solapan)."""
    return BackgroundScheduler(
        executors={"default": ThreadPoolExecutor(max_workers=1)},
        job_defaults={"coalesce": True, "max_instances": 1},
        daemon=True,
    )


@dataclass(frozen=True)
class _EngineState:
    reading: SensorReading
    window: RollingWindow
    updated_at: datetime


class TelemetryEngine:
    """Motor de estado de telemetría con ticks rápido y lento.

    Args:
        fast_interval_s: Cadencia del avance de lecturas (s)
        slow_interval_s: Cadencia de captura de tendencia (s)
        capacity: Capacidad de la ventana de tendencia
        seed_reading: Lectura inicial (por defecto la de referencia)
        seed_window: Muestras iniciales de tendencia (por defecto la tendencia semilla)
        generator: Generador de lecturas (por defecto uno con `random_seed`)
        random_seed: Semilla del generador por defecto
        clock: Fuente de hora de pared
        scheduler_factory: Fábrica del scheduler usado por `start()`

    Raises:
        OutOfRangeInputError: Si la lectura semilla viola los límites de algún campo
        DegenerateInputError: Si la ventana semilla está vacía
        ValueError: Si alguna cadencia no es positiva o la capacidad es < 1

    Example:
        >>> engine = TelemetryEngine(random_seed=7)
        >>> engine.current_snapshot().alert_level
        <AlertLevel.WARNING: 1>
        >>> engine.stop()  # no-op: nunca se inició
    """

    def __init__(
        self,
        fast_interval_s: float = DEFAULT_FAST_INTERVAL_S,
        slow_interval_s: float = DEFAULT_SLOW_INTERVAL_S,
        capacity: int = DEFAULT_WINDOW_CAPACITY,
        seed_reading: Optional[SensorReading] = None,
        seed_window: Optional[Iterable[TrendSample]] = None,
        generator: Optional[ReadingGenerator] = None,
        random_seed: Optional[int] = None,
        clock: Callable[[], datetime] = datetime.now,
        scheduler_factory: Callable[[], BaseScheduler] = default_scheduler_factory,
    ) -> None:
        if fast_interval_s <= 0 or slow_interval_s <= 0:
            raise ValueError(
                f"Las cadencias deben ser positivas (rápida={fast_interval_s}, lenta={slow_interval_s})"
            )
        self.fast_interval_s = float(fast_interval_s)
        self.slow_interval_s = float(slow_interval_s)
        self._clock = clock
        self._generator = generator if generator is not None else ReadingGenerator(seed=random_seed)
        self._scheduler_factory = scheduler_factory

        now = clock()
        reading = check_reading_bounds(seed_reading if seed_reading is not None else default_seed_reading())
        samples = tuple(seed_window) if seed_window is not None else tuple(default_seed_trend(now))
        window = RollingWindow(capacity, samples)
        if len(window) == 0:
            raise DegenerateInputError("La ventana semilla debe tener al menos una muestra")

        # La tendencia semilla es fija y no se reconcilia con la lectura semilla
        if window.samples[-1].movement != reading.slope_movement:
            logger.debug(
                "Última muestra semilla (%.3f mm) distinta de la lectura semilla (%.3f mm)",
                window.samples[-1].movement,
                reading.slope_movement,
            )

        self._state = _EngineState(reading=reading, window=window, updated_at=now)
        self._state_lock = threading.Lock()
        self._lifecycle_lock = threading.Lock()
        self._scheduler: Optional[BaseScheduler] = None

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> "TelemetryEngine":
        """Crea un motor con las cadencias, capacidad y semilla de `settings`."""
        return cls(
            fast_interval_s=settings.fast_interval_s,
            slow_interval_s=settings.slow_interval_s,
            capacity=settings.window_capacity,
            random_seed=settings.random_seed,
            **kwargs,
        )

    # ------------------------------------------------------------------
    # Ciclo de vida
    # ------------------------------------------------------------------

    @property
    def running(self) -> bool:
        return self._scheduler is not None

    def start(self) -> None:
        """Programa los ticks rápido y lento. Si ya está corriendo no hace nada."""
        with self._lifecycle_lock:
            if self._scheduler is not None:
                return
            scheduler = self._scheduler_factory()
            scheduler.add_job(
                self._run_fast_tick,
                trigger=IntervalTrigger(seconds=self.fast_interval_s),
                id=FAST_JOB_ID,
                name="Avance de lecturas",
                replace_existing=True,
            )
            scheduler.add_job(
                self._run_slow_tick,
                trigger=IntervalTrigger(seconds=self.slow_interval_s),
                id=SLOW_JOB_ID,
                name="Captura de tendencia",
                replace_existing=True,
            )
            scheduler.start()
            self._scheduler = scheduler
        logger.info(
            "Motor de telemetría iniciado (rápido=%.1fs, lento=%.1fs)", self.fast_interval_s, self.slow_interval_s
        )

    def stop(self) -> None:
        """Cancela ambos ticks y libera el scheduler. Idempotente."""
        with self._lifecycle_lock:
            scheduler, self._scheduler = self._scheduler, None
            if scheduler is None:
                return
            if scheduler.running:
                scheduler.shutdown(wait=False)
        logger.info("Motor de telemetría detenido")

    def __enter__(self) -> "TelemetryEngine":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()

    # ------------------------------------------------------------------
    # Ticks
    # ------------------------------------------------------------------

    def tick_fast(self) -> TelemetrySnapshot:
        """Avanza la lectura y devuelve el snapshot resultante."""
        with self._state_lock:
            state = self._state
            reading = self._generator.advance(state.reading)
            self._state = replace(state, reading=reading, updated_at=self._clock())

        previous_level = classify(state.reading.slope_movement)
        level = classify(reading.slope_movement)
        if level != previous_level:
            log = logger.warning if level == AlertLevel.CRITICAL else logger.info
            log(
                "Cambio de nivel de alerta",
                extra={
                    "alert_level": level.name,
                    "previous_level": previous_level.name,
                    "slope_movement": round(reading.slope_movement, 3),
                },
            )
        return self.current_snapshot()

    def tick_slow(self) -> TelemetrySnapshot:
        """Captura la lectura actual como muestra de tendencia."""
        with self._state_lock:
            state = self._state
            sample = TrendSample(timestamp=self._clock(), movement=state.reading.slope_movement)
            window = state.window.append(sample)
            self._state = replace(state, window=window)
        logger.debug(
            "Muestra de tendencia capturada",
            extra={"slope_movement": round(sample.movement, 3), "window_size": len(window)},
        )
        return self.current_snapshot()

    def _run_fast_tick(self) -> None:
        self._run_job(self.tick_fast, FAST_JOB_ID)

    def _run_slow_tick(self) -> None:
        self._run_job(self.tick_slow, SLOW_JOB_ID)

    def _run_job(self, tick: Callable[[], TelemetrySnapshot], job_id: str) -> None:
        # el estado solo se reemplaza al final del tick: ante un error queda el último válido
        try:
            tick()
        except TelemetryError:
            logger.exception("Tick fallido; se conserva el último estado válido", extra={"job_id": job_id})

    # ------------------------------------------------------------------
    # Lectura
    # ------------------------------------------------------------------

    def current_snapshot(self) -> TelemetrySnapshot:
        """Snapshot inmutable del estado actual; el nivel de alerta se recalcula en cada lectura."""
        state = self._state
        return TelemetrySnapshot(
            reading=state.reading,
            alert_level=classify(state.reading.slope_movement),
            window=state.window.samples,
            updated_at=state.updated_at,
        )

    def current_window(self) -> RollingWindow:
        """Ventana de tendencia actual (valor inmutable)."""
        return self._state.window
