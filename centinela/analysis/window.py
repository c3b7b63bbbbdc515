"""Ventana móvil acotada de muestras de tendencia (FIFO)."""

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Tuple

import pandas as pd

from centinela.core.errors import DegenerateInputError
from centinela.core.models import TrendSample


def max_movement(samples: Iterable[TrendSample]) -> float:
    """Máximo movimiento presente en la ventana (escala del gráfico).

    Args:
        samples: Muestras de tendencia

    Returns:
        Máximo valor de `movement`

    Raises:
        DegenerateInputError: Si no hay muestras

    Example:
        >>> from datetime import datetime
        >>> t = datetime(2025, 1, 1)
        >>> max_movement([TrendSample(t, 5.0), TrendSample(t, 8.0), TrendSample(t, 3.0)])
        8.0
    """
    values = [sample.movement for sample in samples]
    if not values:
        raise DegenerateInputError("max_movement requiere al menos una muestra")
    return max(values)


@dataclass(frozen=True)
class RollingWindow:
    """Ventana de tendencia inmutable, de la muestra más antigua a la más reciente.

    Cada `append` devuelve una ventana nueva. Al llegar a `capacity` se descarta
    la muestra más antigua: ``window[1:] + [sample]``. No reordena ni deduplica;
    el orden cronológico es responsabilidad de quien agrega.

    Attributes:
        capacity: Número máximo de muestras (>= 1)
        samples: Muestras actuales; si se entregan más que `capacity` se conservan las últimas
    """

    capacity: int
    samples: Tuple[TrendSample, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.capacity < 1:
            raise ValueError(f"capacity debe ser >= 1 (recibido {self.capacity})")
        samples = tuple(self.samples)
        if len(samples) > self.capacity:
            samples = samples[-self.capacity :]
        object.__setattr__(self, "samples", samples)

    def __len__(self) -> int:
        return len(self.samples)

    def __iter__(self) -> Iterator[TrendSample]:
        return iter(self.samples)

    @property
    def is_full(self) -> bool:
        return len(self.samples) >= self.capacity

    def append(self, sample: TrendSample) -> "RollingWindow":
        """Agrega una muestra al final, desalojando la más antigua si está llena."""
        if self.is_full:
            return RollingWindow(self.capacity, self.samples[1:] + (sample,))
        return RollingWindow(self.capacity, self.samples + (sample,))

    def max_movement(self) -> float:
        return max_movement(self.samples)

    def to_frame(self) -> pd.DataFrame:
        """Convierte la ventana a DataFrame con columnas `time`, `label` y `movement`."""
        return pd.DataFrame(
            {
                "time": pd.to_datetime([s.timestamp for s in self.samples]),
                "label": [s.label for s in self.samples],
                "movement": [float(s.movement) for s in self.samples],
            },
            columns=["time", "label", "movement"],
        )
