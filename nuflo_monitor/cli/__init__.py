"""Módulo cli: Argumentos de línea de comandos."""

from nuflo_monitor.cli.parser import parse_args

__all__ = ["parse_args"]
