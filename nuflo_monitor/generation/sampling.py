"""Generación sintética de pozos y gateways dentro de las zonas rurales."""

import logging
from typing import Callable, List, Optional, Sequence, Tuple, Union

import numpy as np

from nuflo_monitor.core.constants import (
    COLIFORM_RANGE,
    DEFAULT_MAX_ATTEMPTS,
    LEAD_DECIMALS,
    LEAD_RANGE,
    OCEAN_LAT_MIN,
    OCEAN_LON_MAX,
    PH_DECIMALS,
    PH_RANGE,
    RURAL_AREAS,
    TDS_DECIMALS,
    TDS_RANGE,
    TEMPERATURE_DECIMALS,
    TEMPERATURE_RANGE,
)
from nuflo_monitor.core.models import Gateway, RuralArea, Well

logger = logging.getLogger(__name__)

RandomSource = Union[None, int, np.random.Generator]
LandFilter = Callable[[float, float], bool]


class SamplingError(RuntimeError):
    """No se encontró un punto sobre tierra dentro del límite de intentos."""


def make_rng(rng: RandomSource = None) -> np.random.Generator:
    """Normaliza una semilla o generador a un ``np.random.Generator``.

    Example:
        >>> make_rng(42).integers(0, 10) == make_rng(42).integers(0, 10)
        True
    """
    return np.random.default_rng(rng)


def is_land(lat: float, lon: float) -> bool:
    """Filtro de tierra grueso: excluye el rectángulo oceánico al oeste de -80 y norte de -18.

    Example:
        >>> is_land(-12.0, -75.0)
        True
        >>> is_land(-10.0, -81.0)
        False
    """
    return not (lon < OCEAN_LON_MAX and lat > OCEAN_LAT_MIN)


def sample_point(
    rng: np.random.Generator,
    areas: Sequence[RuralArea] = RURAL_AREAS,
    land_filter: LandFilter = is_land,
    max_attempts: Optional[int] = DEFAULT_MAX_ATTEMPTS,
) -> Tuple[float, float]:
    """Muestrea un punto uniforme en una zona rural elegida al azar.

    Repite el muestreo mientras el filtro de tierra rechace el punto. Con
    ``max_attempts=None`` no hay límite: si el filtro rechaza todas las zonas
    el bucle no termina.

    Args:
        rng: Generador aleatorio
        areas: Zonas candidatas (se elige una de forma uniforme en cada intento)
        land_filter: Predicado (lat, lon) que acepta el punto
        max_attempts: Máximo de intentos antes de fallar (None = sin límite)

    Returns:
        Tupla (lat, lon)

    Raises:
        ValueError: Si no hay zonas o max_attempts < 1
        SamplingError: Si se agotan los intentos
    """
    if not areas:
        raise ValueError("Se requiere al menos una zona rural")
    if max_attempts is not None and max_attempts < 1:
        raise ValueError(f"max_attempts debe ser >= 1 (recibido {max_attempts})")

    attempts = 0
    while max_attempts is None or attempts < max_attempts:
        attempts += 1
        area = areas[int(rng.integers(0, len(areas)))]
        lat = float(rng.uniform(area.lat_min, area.lat_max))
        lon = float(rng.uniform(area.lon_min, area.lon_max))
        if land_filter(lat, lon):
            if attempts > 1:
                logger.debug("Punto aceptado tras %d intentos", attempts)
            return lat, lon

    raise SamplingError(f"Sin punto sobre tierra tras {max_attempts} intentos")


def _check_count(count: int) -> None:
    if count < 0:
        raise ValueError(f"count debe ser >= 0 (recibido {count})")


def _sample_well(rng: np.random.Generator, lat: float, lon: float) -> Well:
    return Well(
        lat=lat,
        lon=lon,
        ph=round(float(rng.uniform(*PH_RANGE)), PH_DECIMALS),
        lead=round(float(rng.uniform(*LEAD_RANGE)), LEAD_DECIMALS),
        coliform=int(rng.integers(COLIFORM_RANGE[0], COLIFORM_RANGE[1] + 1)),
        temperature=round(float(rng.uniform(*TEMPERATURE_RANGE)), TEMPERATURE_DECIMALS),
        tds=round(float(rng.uniform(*TDS_RANGE)), TDS_DECIMALS),
    )


def generate_wells(
    count: int,
    rng: RandomSource = None,
    areas: Sequence[RuralArea] = RURAL_AREAS,
    land_filter: LandFilter = is_land,
    max_attempts: Optional[int] = DEFAULT_MAX_ATTEMPTS,
) -> List[Well]:
    """Genera ``count`` pozos con lecturas aleatorias sobre zonas rurales.

    Args:
        count: Número de pozos
        rng: Semilla o generador (None = entropía del sistema)
        areas: Zonas rurales candidatas
        land_filter: Filtro de tierra
        max_attempts: Intentos máximos por punto

    Returns:
        Lista de pozos, todos con alert=False e issue=""

    Example:
        >>> wells = generate_wells(3, rng=7)
        >>> len(wells)
        3
    """
    _check_count(count)
    gen = make_rng(rng)
    wells: List[Well] = []
    while len(wells) < count:
        lat, lon = sample_point(gen, areas, land_filter, max_attempts)
        wells.append(_sample_well(gen, lat, lon))
    logger.debug("Generados %d pozos", len(wells))
    return wells


def generate_gateways(
    count: int,
    rng: RandomSource = None,
    areas: Sequence[RuralArea] = RURAL_AREAS,
    land_filter: LandFilter = is_land,
    max_attempts: Optional[int] = DEFAULT_MAX_ATTEMPTS,
) -> List[Gateway]:
    """Genera ``count`` gateways sobre zonas rurales.

    Mismo muestreo que ``generate_wells`` pero sin lecturas.
    """
    _check_count(count)
    gen = make_rng(rng)
    gateways: List[Gateway] = []
    while len(gateways) < count:
        lat, lon = sample_point(gen, areas, land_filter, max_attempts)
        gateways.append(Gateway(lat=lat, lon=lon))
    logger.debug("Generados %d gateways", len(gateways))
    return gateways
