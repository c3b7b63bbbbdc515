"""Generador de lecturas simuladas por caminata aleatoria acotada."""

from typing import Mapping, Optional, Tuple

import numpy as np

from centinela.core.constants import FIELD_BOUNDS, FIELD_DELTAS
from centinela.core.models import SensorReading


class ReadingGenerator:
    """Produce la siguiente lectura a partir de la anterior.

    Cada campo escalar se actualiza como
    ``clip(prev + uniform(-δ/2, δ/2), inferior, superior)``. Es una caminata
    aleatoria para alimentar la visualización, no un modelo geotécnico.

    Args:
        rng: Generador aleatorio de numpy (o un objeto con `uniform(low, high)`)
        seed: Semilla para crear el generador si no se entrega `rng`
        deltas: Amplitud de perturbación por campo
        bounds: Límites (inferior, superior) por campo
    """

    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
        deltas: Mapping[str, float] = FIELD_DELTAS,
        bounds: Mapping[str, Tuple[float, float]] = FIELD_BOUNDS,
    ) -> None:
        self._rng = rng if rng is not None else np.random.default_rng(seed)
        self._deltas = dict(deltas)
        self._bounds = dict(bounds)

    def advance(self, prev: SensorReading) -> SensorReading:
        """Devuelve una lectura nueva; `prev` no se modifica."""
        values = prev.scalars()
        nxt = {}
        for field, value in values.items():
            half = self._deltas[field] / 2.0
            lo, hi = self._bounds[field]
            candidate = value + float(self._rng.uniform(-half, half))
            nxt[field] = float(np.clip(candidate, lo, hi))
        return SensorReading.from_scalars(nxt)
