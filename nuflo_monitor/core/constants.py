"""Constantes globales: regiones rurales, rangos de lectura, umbrales y mapa."""

from nuflo_monitor.core.models import RuralArea

# Zonas rurales sobre tierra firme en Perú
RURAL_AREAS = (
    RuralArea(lat_min=-16, lat_max=-13, lon_min=-74, lon_max=-71),
    RuralArea(lat_min=-14, lat_max=-11, lon_min=-77, lon_max=-75),
    RuralArea(lat_min=-10, lat_max=-8, lon_min=-76, lon_max=-73),
    RuralArea(lat_min=-15, lat_max=-12, lon_min=-70, lon_max=-68),
)

# Filtro de tierra: se excluye el océano al oeste de -80 y al norte de -18
OCEAN_LON_MAX = -80.0
OCEAN_LAT_MIN = -18.0

DEFAULT_MAX_ATTEMPTS = 1000

# Rangos de muestreo (min, max) y decimales de cada lectura
PH_RANGE = (6.5, 8.5)
LEAD_RANGE = (0.0, 0.1)
COLIFORM_RANGE = (0, 100)
TEMPERATURE_RANGE = (20.0, 25.0)
TDS_RANGE = (50.0, 550.0)

PH_DECIMALS = 2
LEAD_DECIMALS = 4
TEMPERATURE_DECIMALS = 2
TDS_DECIMALS = 2

# Umbrales de alerta (no calibrados con los rangos de muestreo)
PH_MIN = 6.5
PH_MAX = 8.5
LEAD_MAX = 0.05
COLIFORM_MAX = 50
TEMPERATURE_MAX = 40.0
TDS_MAX = 500.0

ISSUE_PH = "pH out of range"
ISSUE_LEAD = "Lead levels too high"
ISSUE_COLIFORM = "High coliform levels"
ISSUE_TEMPERATURE = "High temperature levels"
ISSUE_TDS = "High TDS levels"
ISSUE_UNKNOWN = "Unknown issue"

EARTH_RADIUS_KM = 6371.0

# Configuración por defecto de la demo
DEFAULT_WELLS = 40
DEFAULT_GATEWAYS = 8
DEFAULT_ALERTS = 5
DEFAULT_OUTPUT_HTML = "nuflo_map.html"

# Mapa
MAP_CENTER = (-9.19, -75.015)
MAP_ZOOM = 6
MAP_MAX_ZOOM = 19
MARKER_RADIUS_M = 5000
LINES_PANE = "linesPane"
LINES_PANE_Z = 400
MARKERS_PANE = "markersPane"
MARKERS_PANE_Z = 650

WELL_COLOR = "blue"
WELL_FILL = "#007bff"
ALERT_COLOR = "orange"
ALERT_FILL = "#ffa500"
GATEWAY_COLOR = "red"
GATEWAY_FILL = "#ff4d4d"
LINK_COLOR = "green"

LEGEND_WELL = "NuFlo Well Sensor"
LEGEND_ALERT = "NuFlo Alert"
LEGEND_GATEWAY = "NuFlo Data Gateway"

# Formatos de consola
CONSOLE_FORMATS = ("rich", "plain", "json")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
