"""Funciones para renderizar el reporte en consola (rich/plain/json)."""

import json
from typing import Dict, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from nuflo_monitor.analysis.summary import summarize, wells_frame
from nuflo_monitor.core.models import MapData
from nuflo_monitor.output.formatters import format_number


def print_report(
    data: MapData,
    console_format: str = "rich",
    map_path: Optional[str] = None,
    console: Optional[Console] = None,
) -> Dict:
    """Imprime el reporte de la red generada en formato rich/plain/json.

    Args:
        data: Contexto generado
        console_format: Formato de salida ("rich", "plain", "json")
        map_path: Ruta del mapa HTML escrito (opcional)
        console: Consola rich a usar (por defecto una nueva)

    Returns:
        El resumen impreso

    Raises:
        ValueError: Si el formato no es soportado

    Example:
        >>> print_report(MapData(), "json")  # doctest: +SKIP
    """
    summary = summarize(data)
    if map_path:
        summary["meta"]["map_html"] = str(map_path)

    if console_format == "json":
        print(json.dumps(summary, ensure_ascii=False, indent=2))
    elif console_format == "rich":
        _print_rich_console(data, summary, console or Console())
    elif console_format == "plain":
        _print_plain_console(data, summary)
    else:
        raise ValueError(f"Formato de consola no soportado: {console_format}")
    return summary


def _print_rich_console(data: MapData, summary: Dict, console: Console) -> None:
    """Imprime en formato rich con colores y tablas."""
    counts = summary["counts"]
    console.rule("NuFlo - red simulada de pozos")
    style = "bold yellow" if counts["alerts"] else "bold green"
    console.print(
        Panel(
            f"Pozos: {counts['wells']} | Gateways: {counts['gateways']} | Alertas: {counts['alerts']}",
            title="Situación",
            style=style,
        )
    )

    df = wells_frame(data)
    t = Table(show_header=True, header_style="bold")
    for col in ["#", "Lat", "Lon", "pH", "Plomo (ppb)", "Coliformes", "Temp (C)", "TDS (ppm)", "Gateway", "km"]:
        t.add_column(col)
    for number, row in df.iterrows():
        gw = row.get("gateway")
        cells = [
            str(number),
            format_number(row["lat"], 4),
            format_number(row["lon"], 4),
            format_number(row["ph"], 2),
            format_number(row["lead"], 4),
            str(row["coliform"]),
            format_number(row["temperature"], 2),
            format_number(row["tds"], 2),
            str(int(gw)) if gw is not None and gw == gw else "—",
            format_number(row.get("distance_km"), 1),
        ]
        t.add_row(*cells, style="bold yellow" if row["alert"] else None)
    console.print(Panel(t, title="Pozos"))

    if summary["alerts"]:
        at = Table(show_header=True, header_style="bold")
        at.add_column("Pozo")
        at.add_column("Problema")
        for a in summary["alerts"]:
            at.add_row(f"#{a['well']}", a["issue"])
        console.print(Panel(at, title="Alertas", style="bold red"))

    gt = Table(show_header=True, header_style="bold")
    gt.add_column("Gateway")
    gt.add_column("Pozos enlazados")
    for gw, n in summary["wells_per_gateway"].items():
        gt.add_row(f"#{gw}", str(n))
    console.print(Panel(gt, title="Gateways"))

    d = summary["distance"]
    console.print(
        Panel(
            f"min={format_number(d['min_km'], 1)} km | media={format_number(d['mean_km'], 1)} km | "
            f"max={format_number(d['max_km'], 1)} km",
            title="Distancia pozo-gateway",
        )
    )
    if summary["meta"].get("map_html"):
        console.print(f"Mapa: {summary['meta']['map_html']}")


def _print_plain_console(data: MapData, summary: Dict) -> None:
    """Imprime en formato plain text sin colores."""
    counts = summary["counts"]
    print("\n=== NuFlo - red simulada ===")
    print(f"Pozos: {counts['wells']} | Gateways: {counts['gateways']} | Alertas: {counts['alerts']}")
    print("Pozos:")
    for number, well in enumerate(data.wells, start=1):
        flag = f" ALERTA: {well.issue}" if well.alert else ""
        print(
            f"  - #{number} ({well.lat:.4f}, {well.lon:.4f}) pH={well.ph:.2f} plomo={well.lead:.4f} "
            f"coliformes={well.coliform} temp={well.temperature:.2f} tds={well.tds:.2f}{flag}"
        )
    print("Gateways:")
    for gw, n in summary["wells_per_gateway"].items():
        print(f"  - #{gw}: {n} pozos")
    d = summary["distance"]
    print(
        f"Distancia (km): min={format_number(d['min_km'], 1)} "
        f"media={format_number(d['mean_km'], 1)} max={format_number(d['max_km'], 1)}"
    )
    if summary["meta"].get("map_html"):
        print(f"Mapa: {summary['meta']['map_html']}")
