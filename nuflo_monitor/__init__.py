"""
NuFlo Monitor - Mapa demo de sensores de pozos de agua y gateways LoRa.

Este paquete genera una red sintética de pozos y gateways sobre zonas rurales
de Perú, asigna alertas y enlaza cada pozo con su gateway más cercano.
"""

__version__ = "1.0.0"
__author__ = "NuFlo Team"

from nuflo_monitor.core.models import Connection, Gateway, MapData, RuralArea, Well

__all__ = ["Connection", "Gateway", "MapData", "RuralArea", "Well", "__version__"]
