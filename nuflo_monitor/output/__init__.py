"""Módulo output: Mapa HTML y reporte por consola."""

from nuflo_monitor.output.console import print_report
from nuflo_monitor.output.map_render import render_map, save_map

__all__ = ["print_report", "render_map", "save_map"]
