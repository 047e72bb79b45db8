import numpy as np
import pytest

from nuflo_monitor.core.constants import RURAL_AREAS
from nuflo_monitor.core.models import RuralArea
from nuflo_monitor.generation import (
    SamplingError,
    generate_gateways,
    generate_wells,
    is_land,
    sample_point,
)


def _in_some_area(lat, lon):
    return any(area.contains(lat, lon) for area in RURAL_AREAS)


def test_is_land_excludes_only_north_west_ocean():
    assert is_land(-12.0, -75.0)
    assert not is_land(-10.0, -81.0)
    # al sur de -18 el oeste de -80 sigue contando como tierra
    assert is_land(-20.0, -81.0)
    assert is_land(-10.0, -80.0)


def test_generate_wells_count_and_locations():
    wells = generate_wells(40, rng=123)
    assert len(wells) == 40
    for w in wells:
        assert is_land(w.lat, w.lon)
        assert _in_some_area(w.lat, w.lon)


def test_generate_wells_reading_ranges_and_defaults():
    wells = generate_wells(200, rng=5)
    for w in wells:
        assert 6.5 <= w.ph <= 8.5
        assert 0.0 <= w.lead <= 0.1
        assert isinstance(w.coliform, int)
        assert 0 <= w.coliform <= 100
        assert 20.0 <= w.temperature <= 25.0
        assert 50.0 <= w.tds <= 550.0
        assert w.alert is False
        assert w.issue == ""


def test_generate_gateways_count_and_locations():
    gateways = generate_gateways(8, rng=np.random.default_rng(9))
    assert len(gateways) == 8
    for g in gateways:
        assert is_land(g.lat, g.lon)
        assert _in_some_area(g.lat, g.lon)


def test_generation_is_reproducible_with_seed():
    assert generate_wells(5, rng=42) == generate_wells(5, rng=42)
    assert generate_gateways(5, rng=42) == generate_gateways(5, rng=42)


def test_zero_count_returns_empty_and_negative_raises():
    assert generate_wells(0, rng=1) == []
    with pytest.raises(ValueError):
        generate_gateways(-1, rng=1)


def test_sample_point_retries_until_land():
    calls = []

    def reject_first_three(lat, lon):
        calls.append((lat, lon))
        return len(calls) > 3

    lat, lon = sample_point(np.random.default_rng(0), land_filter=reject_first_three)
    assert len(calls) == 4
    assert (lat, lon) == calls[-1]


def test_sample_point_raises_when_attempts_exhausted():
    ocean = (RuralArea(lat_min=-10, lat_max=-5, lon_min=-90, lon_max=-85),)
    with pytest.raises(SamplingError):
        sample_point(np.random.default_rng(0), areas=ocean, max_attempts=25)
    with pytest.raises(SamplingError):
        generate_wells(3, rng=0, areas=ocean, max_attempts=10)


def test_sample_point_rejects_bad_arguments():
    rng = np.random.default_rng(0)
    with pytest.raises(ValueError):
        sample_point(rng, areas=())
    with pytest.raises(ValueError):
        sample_point(rng, max_attempts=0)


def test_rural_area_bounds_validation():
    with pytest.raises(ValueError):
        RuralArea(lat_min=1, lat_max=0, lon_min=0, lon_max=1)
