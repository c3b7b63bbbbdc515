"""Módulo cli: Argumentos de línea de comandos."""

from centinela.cli.parser import parse_args

__all__ = ["parse_args"]
