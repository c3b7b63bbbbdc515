"""Dobles de prueba compartidos por los tests."""

from datetime import datetime, timedelta


class FixedRng:
    """Fuente aleatoria que siempre devuelve el extremo superior (o inferior) del rango."""

    def __init__(self, pick: str = "high") -> None:
        self.pick = pick

    def uniform(self, low: float, high: float) -> float:
        return high if self.pick == "high" else low


class FakeClock:
    def __init__(self, start: datetime = datetime(2025, 1, 1, 3, 0)) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


class FakeScheduler:
    """Scheduler en memoria: registra jobs y llamadas de ciclo de vida sin hilos."""

    def __init__(self) -> None:
        self.jobs = {}
        self.running = False
        self.start_calls = 0
        self.shutdown_calls = 0

    def add_job(self, func, trigger=None, id=None, name=None, replace_existing=False):
        self.jobs[id] = (func, trigger)

    def start(self) -> None:
        self.start_calls += 1
        self.running = True

    def shutdown(self, wait: bool = True) -> None:
        self.shutdown_calls += 1
        self.running = False
