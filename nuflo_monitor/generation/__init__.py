"""Módulo generation: Datos sintéticos de pozos, gateways y alertas."""

from nuflo_monitor.generation.alerts import assign_alerts, classify_issue
from nuflo_monitor.generation.sampling import (
    SamplingError,
    generate_gateways,
    generate_wells,
    is_land,
    make_rng,
    sample_point,
)

__all__ = [
    "SamplingError",
    "assign_alerts",
    "classify_issue",
    "generate_gateways",
    "generate_wells",
    "is_land",
    "make_rng",
    "sample_point",
]
