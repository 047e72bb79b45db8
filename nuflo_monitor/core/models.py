"""Modelos de datos para la red simulada de pozos y gateways."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class RuralArea:
    """Rectángulo lat/lon usado para sesgar el muestreo hacia zonas rurales.

    Attributes:
        lat_min: Latitud mínima (grados)
        lat_max: Latitud máxima (grados)
        lon_min: Longitud mínima (grados)
        lon_max: Longitud máxima (grados)
    """

    lat_min: float
    lat_max: float
    lon_min: float
    lon_max: float

    def __post_init__(self) -> None:
        if self.lat_min > self.lat_max or self.lon_min > self.lon_max:
            raise ValueError(f"Límites inválidos para RuralArea: {self}")

    def contains(self, lat: float, lon: float) -> bool:
        """True si (lat, lon) cae dentro del rectángulo (bordes incluidos)."""
        return self.lat_min <= lat <= self.lat_max and self.lon_min <= lon <= self.lon_max


@dataclass
class Well:
    """Pozo de agua con sensor NuFlo y su última lectura simulada.

    Attributes:
        lat: Latitud (grados)
        lon: Longitud (grados)
        ph: pH del agua
        lead: Plomo (ppb)
        coliform: Coliformes (CFU/100ml)
        temperature: Temperatura (°C)
        tds: Sólidos disueltos totales (ppm)
        alert: Si el pozo está en alerta
        issue: Descripción del problema que causa la alerta
    """

    lat: float
    lon: float
    ph: float
    lead: float
    coliform: int
    temperature: float
    tds: float
    alert: bool = False
    issue: str = ""


@dataclass(frozen=True)
class Gateway:
    """Gateway LoRa fijo."""

    lat: float
    lon: float


@dataclass(frozen=True)
class Connection:
    """Enlace de un pozo con su gateway más cercano.

    Attributes:
        well_index: Índice del pozo en MapData.wells
        gateway_index: Índice del gateway en MapData.gateways
        distance_km: Distancia de gran círculo en km
    """

    well_index: int
    gateway_index: int
    distance_km: float


@dataclass
class MapData:
    """Contexto con todo lo generado en una corrida, listo para renderizar."""

    wells: List[Well] = field(default_factory=list)
    gateways: List[Gateway] = field(default_factory=list)
    connections: List[Connection] = field(default_factory=list)
    seed: Optional[int] = None

    @property
    def alert_wells(self) -> List[Well]:
        return [w for w in self.wells if w.alert]
