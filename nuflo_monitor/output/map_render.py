"""Renderizado del mapa HTML con folium (marcadores, popups, enlaces y leyenda)."""

import logging
from pathlib import Path
from typing import Any, Tuple, Union

import folium
from folium.map import CustomPane

from nuflo_monitor.core.constants import (
    ALERT_COLOR,
    ALERT_FILL,
    GATEWAY_COLOR,
    GATEWAY_FILL,
    LEGEND_ALERT,
    LEGEND_GATEWAY,
    LEGEND_WELL,
    LINES_PANE,
    LINES_PANE_Z,
    LINK_COLOR,
    MAP_CENTER,
    MAP_MAX_ZOOM,
    MAP_ZOOM,
    MARKER_RADIUS_M,
    MARKERS_PANE,
    MARKERS_PANE_Z,
    WELL_COLOR,
    WELL_FILL,
)
from nuflo_monitor.core.models import MapData
from nuflo_monitor.output.formatters import gateway_popup_html, well_popup_html

logger = logging.getLogger(__name__)

ALERT_CLASS = "alert-glow"

GLOW_CSS = """
<style>
.alert-glow {
    animation: fade-color 1s infinite;
}

@keyframes fade-color {
    0% { fill: #ff4500; stroke: #ff4500; }
    50% { fill: #ffa500; stroke: #ffa500; }
    100% { fill: #ff4500; stroke: #ff4500; }
}
</style>
"""


def _legend_html() -> str:
    items = [
        (LEGEND_WELL, WELL_COLOR, WELL_FILL),
        (LEGEND_ALERT, ALERT_FILL, ALERT_FILL),
        (LEGEND_GATEWAY, GATEWAY_COLOR, GATEWAY_FILL),
    ]
    rows = "".join(
        f'<div><span style="display:inline-block;width:12px;height:12px;border-radius:50%;'
        f'border:2px solid {stroke};background:{fill};margin-right:6px;"></span>{label}</div>'
        for label, stroke, fill in items
    )
    return (
        '<div style="position: fixed; bottom: 30px; left: 10px; z-index: 1000; '
        "background: white; padding: 8px 10px; border-radius: 4px; "
        'box-shadow: 0 1px 5px rgba(0,0,0,0.4); font-size: 13px;">'
        f"{rows}</div>"
    )


def _set_leaflet_options(layer: Any, **options: Any) -> None:
    # path_options de folium no reenvía 'pane' ni 'className' de Leaflet
    layer.options.update(options)


def render_map(
    data: MapData,
    center: Tuple[float, float] = MAP_CENTER,
    zoom_start: int = MAP_ZOOM,
) -> folium.Map:
    """Construye el mapa folium a partir del contexto generado.

    Los enlaces van en un pane inferior y los marcadores en uno superior, de
    modo que las líneas nunca tapan a los pozos ni a los gateways.

    Args:
        data: Pozos, gateways y conexiones
        center: Centro inicial (lat, lon)
        zoom_start: Zoom inicial

    Returns:
        folium.Map listo para guardar
    """
    m = folium.Map(location=list(center), zoom_start=zoom_start, max_zoom=MAP_MAX_ZOOM, tiles="OpenStreetMap")
    CustomPane(LINES_PANE, z_index=LINES_PANE_Z).add_to(m)
    CustomPane(MARKERS_PANE, z_index=MARKERS_PANE_Z, pointer_events=True).add_to(m)

    for number, gateway in enumerate(data.gateways, start=1):
        circle = folium.Circle(
            location=[gateway.lat, gateway.lon],
            radius=MARKER_RADIUS_M,
            color=GATEWAY_COLOR,
            fill_color=GATEWAY_FILL,
            fill_opacity=1.0,
            popup=folium.Popup(gateway_popup_html(number), max_width=250),
            tooltip=f"LoRa Gateway #{number}",
        )
        _set_leaflet_options(circle, pane=MARKERS_PANE)
        circle.add_to(m)

    for conn in data.connections:
        well = data.wells[conn.well_index]
        gateway = data.gateways[conn.gateway_index]
        line = folium.PolyLine(
            locations=[[well.lat, well.lon], [gateway.lat, gateway.lon]],
            color=LINK_COLOR,
            weight=2,
            dash_array="5, 5",
            tooltip=f"{conn.distance_km:.1f} km",
        )
        _set_leaflet_options(line, pane=LINES_PANE)
        line.add_to(m)

    for number, well in enumerate(data.wells, start=1):
        circle = folium.Circle(
            location=[well.lat, well.lon],
            radius=MARKER_RADIUS_M,
            color=ALERT_COLOR if well.alert else WELL_COLOR,
            fill_color=ALERT_FILL if well.alert else WELL_FILL,
            fill_opacity=1.0,
            popup=folium.Popup(well_popup_html(well, number), max_width=300),
            tooltip=f"Water Well #{number}",
        )
        if well.alert:
            _set_leaflet_options(circle, pane=MARKERS_PANE, className=ALERT_CLASS)
        else:
            _set_leaflet_options(circle, pane=MARKERS_PANE)
        circle.add_to(m)

    m.get_root().header.add_child(folium.Element(GLOW_CSS))
    m.get_root().html.add_child(folium.Element(_legend_html()))
    return m


def save_map(data: MapData, path: Union[str, Path], **kwargs) -> Path:
    """Renderiza y guarda el mapa como HTML autocontenido.

    Args:
        data: Contexto generado
        path: Ruta del archivo HTML
        **kwargs: Se pasan a ``render_map``

    Returns:
        Ruta del archivo escrito
    """
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    render_map(data, **kwargs).save(str(out))
    logger.info("Mapa guardado en %s", out)
    return out
