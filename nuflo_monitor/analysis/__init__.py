"""Módulo analysis: Distancias, conectividad y resumen de la red."""

from nuflo_monitor.analysis.distance import calculate_distance, connect_wells, nearest_gateway
from nuflo_monitor.analysis.summary import connections_frame, summarize, wells_frame

__all__ = [
    "calculate_distance",
    "connect_wells",
    "connections_frame",
    "nearest_gateway",
    "summarize",
    "wells_frame",
]
