"""Funciones auxiliares de formateo para popups y consola."""

from typing import Any

from nuflo_monitor.core.constants import LEAD_DECIMALS, PH_DECIMALS, TDS_DECIMALS, TEMPERATURE_DECIMALS
from nuflo_monitor.core.models import Well


def format_number(value: Any, decimals: int = 3) -> str:
    """Formatea un número con N decimales, retorna '—' si no es válido.

    Example:
        >>> format_number(1.2345, 2)
        '1.23'
        >>> format_number(None, 2)
        '—'
    """
    try:
        return f"{float(value):.{decimals}f}"
    except (ValueError, TypeError):
        return "—"


def well_readings(well: Well) -> dict:
    """Lecturas del pozo formateadas con sus unidades."""
    return {
        "pH": format_number(well.ph, PH_DECIMALS),
        "Lead": f"{format_number(well.lead, LEAD_DECIMALS)} ppb",
        "Coliform": f"{well.coliform} CFU/100ml",
        "Temperature": f"{format_number(well.temperature, TEMPERATURE_DECIMALS)} C",
        "TDS": f"{format_number(well.tds, TDS_DECIMALS)} ppm",
    }


def well_popup_html(well: Well, number: int) -> str:
    """HTML del popup de un pozo (número 1-based).

    Example:
        >>> w = Well(lat=0, lon=0, ph=7.0, lead=0.01, coliform=3, temperature=21.5, tds=100.0)
        >>> "Water Well #4" in well_popup_html(w, 4)
        True
    """
    lines = [f"<h3>Water Well #{number}</h3>"]
    if well.alert:
        lines.append(f"<p><strong>ALERT:</strong> {well.issue}</p>")
    for label, value in well_readings(well).items():
        lines.append(f"<p><strong>{label}:</strong> {value}</p>")
    return "<div>" + "".join(lines) + "</div>"


def gateway_popup_html(number: int) -> str:
    """HTML del popup de un gateway (número 1-based)."""
    return (
        f"<div><h3>LoRa Gateway #{number}</h3></div>"
        "<div><p>RECEIVING...OK</p></div>"
        "<div><p>SENDING...OK</p></div>"
    )
