"""Tablas y resumen estadístico de una corrida."""

from dataclasses import asdict
from typing import Dict

import pandas as pd

from nuflo_monitor.core.models import MapData

WELL_COLUMNS = ["lat", "lon", "ph", "lead", "coliform", "temperature", "tds", "alert", "issue"]


def wells_frame(data: MapData) -> pd.DataFrame:
    """DataFrame de pozos indexado por número de pozo (1..n).

    Incluye el gateway asignado y la distancia cuando existe la conexión.

    Example:
        >>> from nuflo_monitor.core.models import Well
        >>> df = wells_frame(MapData(wells=[Well(0, 0, 7.0, 0.01, 3, 21.0, 100.0)]))
        >>> list(df.index)
        [1]
    """
    df = pd.DataFrame([asdict(w) for w in data.wells], columns=WELL_COLUMNS)
    df.index = pd.RangeIndex(start=1, stop=len(df) + 1, name="well")
    links = connections_frame(data)
    if not links.empty:
        df = df.join(links.set_index("well")[["gateway", "distance_km"]])
    return df


def connections_frame(data: MapData) -> pd.DataFrame:
    """DataFrame de conexiones con numeración 1..n para pozos y gateways."""
    rows = [
        {
            "well": c.well_index + 1,
            "gateway": c.gateway_index + 1,
            "distance_km": c.distance_km,
        }
        for c in data.connections
    ]
    return pd.DataFrame(rows, columns=["well", "gateway", "distance_km"])


def summarize(data: MapData) -> Dict:
    """Resume la corrida en un diccionario serializable a JSON.

    Args:
        data: Contexto generado

    Returns:
        Diccionario con conteos, problemas, carga por gateway, estadística de
        distancias y lista de alertas
    """
    wells = wells_frame(data)
    links = connections_frame(data)

    alerts = wells[wells["alert"]] if not wells.empty else wells
    issue_counts = {str(k): int(v) for k, v in alerts["issue"].value_counts().items()}

    per_gateway = {str(i + 1): 0 for i in range(len(data.gateways))}
    if not links.empty:
        for gw, n in links.groupby("gateway").size().items():
            per_gateway[str(gw)] = int(n)

    if links.empty:
        distance = {"min_km": None, "mean_km": None, "max_km": None}
    else:
        d = links["distance_km"]
        distance = {
            "min_km": round(float(d.min()), 3),
            "mean_km": round(float(d.mean()), 3),
            "max_km": round(float(d.max()), 3),
        }

    return {
        "meta": {"seed": data.seed},
        "counts": {
            "wells": len(data.wells),
            "gateways": len(data.gateways),
            "alerts": int(len(alerts)),
        },
        "issues": issue_counts,
        "wells_per_gateway": per_gateway,
        "distance": distance,
        "alerts": [
            {
                "well": int(idx),
                "issue": row["issue"],
                "lat": round(float(row["lat"]), 5),
                "lon": round(float(row["lon"]), 5),
            }
            for idx, row in alerts.iterrows()
        ],
    }
