"""
Runner de la demo: genera la red simulada y produce mapa y reporte.

La generación (``build_map_data``) es pura dado el generador aleatorio; el
renderizado y la consola consumen el ``MapData`` resultante sin estado global.
"""

import json
import logging
import webbrowser
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from nuflo_monitor.analysis import connect_wells, summarize
from nuflo_monitor.core.constants import DEFAULT_ALERTS, DEFAULT_GATEWAYS, DEFAULT_MAX_ATTEMPTS, DEFAULT_WELLS
from nuflo_monitor.core.models import MapData
from nuflo_monitor.generation import assign_alerts, generate_gateways, generate_wells, make_rng
from nuflo_monitor.output import print_report, save_map

load_dotenv()

logger = logging.getLogger(__name__)


def build_map_data(
    n_wells: int = DEFAULT_WELLS,
    n_gateways: int = DEFAULT_GATEWAYS,
    n_alerts: int = DEFAULT_ALERTS,
    seed: Optional[int] = None,
    max_attempts: Optional[int] = DEFAULT_MAX_ATTEMPTS,
) -> MapData:
    """Genera pozos, alertas, gateways y conexiones en ese orden.

    Args:
        n_wells: Número de pozos
        n_gateways: Número de gateways
        n_alerts: Pozos en alerta (<= n_wells)
        seed: Semilla (None = no reproducible)
        max_attempts: Intentos máximos por punto (None = sin límite)

    Returns:
        MapData con todo lo generado

    Raises:
        ValueError: Si los conteos son inválidos
        SamplingError: Si el muestreo por rechazo agota sus intentos

    Example:
        >>> data = build_map_data(n_wells=10, n_gateways=2, n_alerts=3, seed=1)
        >>> len(data.connections)
        10
    """
    rng = make_rng(seed)
    wells = generate_wells(n_wells, rng=rng, max_attempts=max_attempts)
    assign_alerts(wells, n_alerts, rng=rng)
    gateways = generate_gateways(n_gateways, rng=rng, max_attempts=max_attempts)
    connections = connect_wells(wells, gateways)
    logger.info(
        "Red generada: %d pozos (%d en alerta), %d gateways", len(wells), sum(w.alert for w in wells), len(gateways)
    )
    return MapData(wells=wells, gateways=gateways, connections=connections, seed=seed)


def run_demo(
    n_wells: int = DEFAULT_WELLS,
    n_gateways: int = DEFAULT_GATEWAYS,
    n_alerts: int = DEFAULT_ALERTS,
    seed: Optional[int] = None,
    max_attempts: Optional[int] = DEFAULT_MAX_ATTEMPTS,
    output_html: Optional[str] = None,
    summary_json: Optional[str] = None,
    console_format: str = "rich",
    open_browser: bool = False,
) -> MapData:
    """Ejecuta la demo completa.

    Args:
        n_wells: Número de pozos
        n_gateways: Número de gateways
        n_alerts: Pozos en alerta
        seed: Semilla
        max_attempts: Intentos máximos por punto (None = sin límite)
        output_html: Ruta del mapa HTML (None = no se genera)
        summary_json: Ruta del resumen JSON (None = no se guarda)
        console_format: "rich", "plain" o "json"
        open_browser: Abrir el mapa en el navegador

    Returns:
        El MapData generado
    """
    data = build_map_data(
        n_wells=n_wells,
        n_gateways=n_gateways,
        n_alerts=n_alerts,
        seed=seed,
        max_attempts=max_attempts,
    )

    map_path: Optional[Path] = None
    if output_html:
        map_path = save_map(data, output_html)

    print_report(data, console_format=console_format, map_path=str(map_path) if map_path else None)

    if summary_json:
        summary = summarize(data)
        if map_path:
            summary["meta"]["map_html"] = str(map_path)
        with open(summary_json, "w", encoding="utf-8") as f:
            json.dump(summary, f, ensure_ascii=False, indent=2)
        logger.info("Resumen guardado en %s", summary_json)

    if open_browser and map_path:
        webbrowser.open(map_path.resolve().as_uri())

    return data
