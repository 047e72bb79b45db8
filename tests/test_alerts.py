import pytest

from nuflo_monitor.core.models import Well
from nuflo_monitor.generation import assign_alerts, classify_issue, generate_wells


def _well(**overrides):
    base = dict(lat=-12.0, lon=-75.0, ph=7.0, lead=0.01, coliform=10, temperature=22.0, tds=200.0)
    base.update(overrides)
    return Well(**base)


def test_assign_alerts_flags_exact_number_of_distinct_wells():
    wells = generate_wells(40, rng=11)
    assign_alerts(wells, 5, rng=11)
    flagged = [w for w in wells if w.alert]
    assert len(flagged) == 5
    assert all(w.issue for w in flagged)
    for w in wells:
        if not w.alert:
            assert w.issue == ""


def test_assign_alerts_all_and_none():
    wells = generate_wells(6, rng=3)
    assign_alerts(wells, 0, rng=3)
    assert not any(w.alert for w in wells)
    assign_alerts(wells, 6, rng=3)
    assert all(w.alert for w in wells)


def test_assign_alerts_rejects_invalid_count():
    wells = generate_wells(3, rng=2)
    with pytest.raises(ValueError):
        assign_alerts(wells, 4)
    with pytest.raises(ValueError):
        assign_alerts(wells, -1)


def test_issue_priority_ph_first():
    assert classify_issue(_well(ph=9.0)) == "pH out of range"
    assert classify_issue(_well(ph=6.0, lead=0.08, coliform=90)) == "pH out of range"


def test_issue_lead_when_ph_normal():
    assert classify_issue(_well(ph=7.0, lead=0.08)) == "Lead levels too high"


def test_issue_remaining_branches_in_order():
    assert classify_issue(_well(coliform=51, temperature=45.0)) == "High coliform levels"
    assert classify_issue(_well(temperature=41.0, tds=600.0)) == "High temperature levels"
    assert classify_issue(_well(tds=501.0)) == "High TDS levels"
    assert classify_issue(_well()) == "Unknown issue"


def test_issue_boundaries_are_not_alerts():
    assert classify_issue(_well(ph=6.5, lead=0.05, coliform=50, temperature=40.0, tds=500.0)) == "Unknown issue"
    assert classify_issue(_well(ph=8.5)) == "Unknown issue"
