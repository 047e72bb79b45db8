"""Módulo simulation: Orquestación de la demo."""

from nuflo_monitor.simulation.runner import build_map_data, run_demo

__all__ = ["build_map_data", "run_demo"]
