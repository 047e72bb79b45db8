"""Módulo core: Modelos de datos y constantes globales."""

from nuflo_monitor.core.constants import RURAL_AREAS
from nuflo_monitor.core.models import Connection, Gateway, MapData, RuralArea, Well

__all__ = ["Connection", "Gateway", "MapData", "RuralArea", "Well", "RURAL_AREAS"]
