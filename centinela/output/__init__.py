"""Módulo output: Renderizado de snapshots y formateo."""

from centinela.output.console import build_summary, print_snapshot_console
from centinela.output.formatters import chart_points, format_clock, format_number

__all__ = ["build_summary", "chart_points", "format_clock", "format_number", "print_snapshot_console"]
