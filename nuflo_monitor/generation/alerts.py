"""Asignación de alertas a un subconjunto aleatorio de pozos."""

import logging
from typing import List, Set

from nuflo_monitor.core.constants import (
    COLIFORM_MAX,
    ISSUE_COLIFORM,
    ISSUE_LEAD,
    ISSUE_PH,
    ISSUE_TDS,
    ISSUE_TEMPERATURE,
    ISSUE_UNKNOWN,
    LEAD_MAX,
    PH_MAX,
    PH_MIN,
    TDS_MAX,
    TEMPERATURE_MAX,
)
from nuflo_monitor.core.models import Well
from nuflo_monitor.generation.sampling import RandomSource, make_rng

logger = logging.getLogger(__name__)


def classify_issue(well: Well) -> str:
    """Devuelve el problema del pozo según la primera regla que se cumpla.

    Orden de prioridad: pH, plomo, coliformes, temperatura, TDS. Con los rangos
    de muestreo actuales pH y temperatura nunca superan sus umbrales, por lo que
    "Unknown issue" aparece con frecuencia y es el comportamiento esperado.

    Args:
        well: Pozo a evaluar

    Returns:
        Texto del problema

    Example:
        >>> w = Well(lat=0, lon=0, ph=9.0, lead=0.08, coliform=0, temperature=22, tds=100)
        >>> classify_issue(w)
        'pH out of range'
    """
    if well.ph < PH_MIN or well.ph > PH_MAX:
        return ISSUE_PH
    if well.lead > LEAD_MAX:
        return ISSUE_LEAD
    if well.coliform > COLIFORM_MAX:
        return ISSUE_COLIFORM
    if well.temperature > TEMPERATURE_MAX:
        return ISSUE_TEMPERATURE
    if well.tds > TDS_MAX:
        return ISSUE_TDS
    return ISSUE_UNKNOWN


def assign_alerts(wells: List[Well], alert_count: int, rng: RandomSource = None) -> None:
    """Marca ``alert_count`` pozos distintos como alerta (modifica la lista in situ).

    Los índices se eligen por muestreo uniforme repetido descartando
    duplicados, así que no hay reemplazo.

    Args:
        wells: Pozos generados
        alert_count: Cantidad de pozos a marcar
        rng: Semilla o generador

    Raises:
        ValueError: Si alert_count es negativo o mayor que len(wells)
    """
    if alert_count < 0 or alert_count > len(wells):
        raise ValueError(f"alert_count={alert_count} fuera de rango para {len(wells)} pozos")

    gen = make_rng(rng)
    indices: Set[int] = set()
    while len(indices) < alert_count:
        indices.add(int(gen.integers(0, len(wells))))

    for index in sorted(indices):
        well = wells[index]
        well.alert = True
        well.issue = classify_issue(well)
        logger.debug("Pozo #%d en alerta: %s", index + 1, well.issue)
