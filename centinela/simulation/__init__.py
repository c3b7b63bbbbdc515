"""Módulo simulation: Generador de lecturas y motor de telemetría."""

from centinela.simulation.engine import TelemetryEngine
from centinela.simulation.generator import ReadingGenerator

__all__ = ["ReadingGenerator", "TelemetryEngine"]
