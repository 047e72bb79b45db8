"""Parser de argumentos de línea de comandos."""

import argparse
import os
from typing import List, Optional

from nuflo_monitor.core.constants import (
    CONSOLE_FORMATS,
    DEFAULT_ALERTS,
    DEFAULT_GATEWAYS,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_OUTPUT_HTML,
    DEFAULT_WELLS,
    LOG_LEVELS,
)


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    value = os.getenv(name, "").strip()
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} debe ser un entero (recibido {value!r})") from None


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parsea argumentos de línea de comandos para la demo de pozos.

    Los valores por defecto se toman de variables de entorno (NUFLO_*,
    CONSOLE_FORMAT, LOG_LEVEL) cuando existen.

    Returns:
        Namespace con todos los argumentos parseados

    Example:
        >>> args = parse_args(['--wells', '10', '--seed', '3'])
        >>> args.wells, args.seed
        (10, 3)
    """
    p = argparse.ArgumentParser(description="Mapa demo de sensores de pozos NuFlo y gateways LoRa.")

    # Tamaño de la red
    p.add_argument("--wells", type=int, default=_env_int("NUFLO_WELLS", DEFAULT_WELLS), help="Número de pozos")
    p.add_argument(
        "--gateways", type=int, default=_env_int("NUFLO_GATEWAYS", DEFAULT_GATEWAYS), help="Número de gateways"
    )
    p.add_argument(
        "--alerts", type=int, default=_env_int("NUFLO_ALERTS", DEFAULT_ALERTS), help="Pozos marcados en alerta"
    )

    # Muestreo
    p.add_argument("--seed", type=int, default=_env_int("NUFLO_SEED", None), help="Semilla para reproducibilidad")
    p.add_argument(
        "--max-attempts",
        type=int,
        default=DEFAULT_MAX_ATTEMPTS,
        help="Intentos máximos por punto en el muestreo por rechazo (0 = sin límite)",
    )

    # Salida
    p.add_argument(
        "--output",
        default=os.getenv("NUFLO_OUTPUT", DEFAULT_OUTPUT_HTML),
        help="Ruta del mapa HTML (vacío para no generarlo)",
    )
    p.add_argument("--summary-json", default=None, help="Ruta para guardar resumen JSON (opcional)")
    p.add_argument(
        "--console-format",
        choices=CONSOLE_FORMATS,
        default=os.getenv("CONSOLE_FORMAT", "rich"),
        help="Formato del reporte en consola",
    )
    p.add_argument("--open", action="store_true", help="Abrir el mapa en el navegador al terminar")
    p.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=os.getenv("LOG_LEVEL", "WARNING"),
        help="Nivel de logging (ej: INFO)",
    )

    return p.parse_args(argv)
