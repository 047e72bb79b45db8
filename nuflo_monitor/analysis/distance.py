"""Distancias de gran círculo y asignación de gateway más cercano."""

import math
from typing import List, Optional, Sequence

from nuflo_monitor.core.constants import EARTH_RADIUS_KM
from nuflo_monitor.core.models import Connection, Gateway, Well


def calculate_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Distancia haversine en km entre dos coordenadas en grados.

    Example:
        >>> calculate_distance(0, 0, 0, 0)
        0.0
        >>> round(calculate_distance(0, 0, 0, 1), 2)
        111.19
    """
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def _nearest_index(well: Well, gateways: Sequence[Gateway]) -> Optional[int]:
    best: Optional[int] = None
    min_distance = math.inf
    for i, gateway in enumerate(gateways):
        distance = calculate_distance(well.lat, well.lon, gateway.lat, gateway.lon)
        # '<' estricto: en empate gana el primero
        if distance < min_distance:
            min_distance = distance
            best = i
    return best


def nearest_gateway(well: Well, gateways: Sequence[Gateway]) -> Optional[Gateway]:
    """Gateway con la menor distancia al pozo (búsqueda exhaustiva).

    Args:
        well: Pozo de referencia
        gateways: Gateways candidatos

    Returns:
        El gateway más cercano, o None si la lista está vacía
    """
    idx = _nearest_index(well, gateways)
    return gateways[idx] if idx is not None else None


def connect_wells(wells: Sequence[Well], gateways: Sequence[Gateway]) -> List[Connection]:
    """Enlaza cada pozo con su gateway más cercano.

    Coste O(pozos x gateways); a esta escala no hace falta índice espacial.

    Returns:
        Una Connection por pozo, en el orden de ``wells``. Vacía si no hay gateways.
    """
    connections: List[Connection] = []
    for wi, well in enumerate(wells):
        gi = _nearest_index(well, gateways)
        if gi is None:
            continue
        gw = gateways[gi]
        connections.append(
            Connection(
                well_index=wi,
                gateway_index=gi,
                distance_km=calculate_distance(well.lat, well.lon, gw.lat, gw.lon),
            )
        )
    return connections
