import json

import pytest
from rich.console import Console

from nuflo_monitor.cli import parse_args
from nuflo_monitor.generation import SamplingError
from nuflo_monitor.output import print_report
from nuflo_monitor.simulation import build_map_data, run_demo


def test_build_map_data_default_sizes():
    data = build_map_data(seed=0)
    assert len(data.wells) == 40
    assert len(data.gateways) == 8
    assert len(data.alert_wells) == 5
    assert len(data.connections) == 40


def test_build_map_data_is_reproducible():
    a = build_map_data(n_wells=10, n_gateways=3, n_alerts=2, seed=99)
    b = build_map_data(n_wells=10, n_gateways=3, n_alerts=2, seed=99)
    assert a.wells == b.wells
    assert a.gateways == b.gateways
    assert a.connections == b.connections


def test_build_map_data_rejects_too_many_alerts():
    with pytest.raises(ValueError):
        build_map_data(n_wells=2, n_gateways=1, n_alerts=3, seed=0)


def test_run_demo_writes_outputs(tmp_path, capsys):
    html = tmp_path / "mapa.html"
    summary = tmp_path / "resumen.json"
    data = run_demo(
        n_wells=8,
        n_gateways=2,
        n_alerts=3,
        seed=1,
        output_html=str(html),
        summary_json=str(summary),
        console_format="plain",
    )
    assert html.exists()
    saved = json.loads(summary.read_text(encoding="utf-8"))
    assert saved["counts"]["alerts"] == 3
    assert saved["meta"]["map_html"] == str(html)
    out = capsys.readouterr().out
    assert "Pozos: 8 | Gateways: 2 | Alertas: 3" in out
    assert len(data.wells) == 8


def test_print_report_json(capsys):
    data = build_map_data(n_wells=4, n_gateways=1, n_alerts=1, seed=3)
    print_report(data, "json")
    parsed = json.loads(capsys.readouterr().out)
    assert parsed["counts"]["wells"] == 4
    assert parsed["wells_per_gateway"] == {"1": 4}


def test_print_report_rich_renders_tables():
    data = build_map_data(n_wells=4, n_gateways=2, n_alerts=1, seed=3)
    console = Console(record=True, width=160)
    print_report(data, "rich", console=console)
    text = console.export_text()
    assert "Situación" in text
    assert "Alertas" in text
    assert "Gateways" in text


def test_print_report_unknown_format():
    with pytest.raises(ValueError):
        print_report(build_map_data(n_wells=1, n_gateways=1, n_alerts=0, seed=0), "xml")


def test_parse_args_defaults_and_env(monkeypatch):
    monkeypatch.setenv("NUFLO_WELLS", "12")
    monkeypatch.setenv("CONSOLE_FORMAT", "json")
    monkeypatch.delenv("NUFLO_SEED", raising=False)
    args = parse_args([])
    assert args.wells == 12
    assert args.gateways == 8
    assert args.alerts == 5
    assert args.seed is None
    assert args.console_format == "json"


def test_parse_args_overrides():
    args = parse_args(["--wells", "10", "--alerts", "2", "--seed", "3", "--output", "", "--open"])
    assert (args.wells, args.alerts, args.seed) == (10, 2, 3)
    assert args.output == ""
    assert args.open is True


def test_main_exits_on_invalid_config(monkeypatch):
    from nuflo_monitor import main as main_mod

    monkeypatch.setattr("sys.argv", ["nuflo-monitor", "--wells", "2", "--alerts", "5", "--output", ""])
    with pytest.raises(SystemExit) as exc:
        main_mod.main()
    assert exc.value.code == 2


def test_sampling_error_is_runtime_error():
    assert issubclass(SamplingError, RuntimeError)


def test_main_exits_on_bad_env(monkeypatch):
    from nuflo_monitor import main as main_mod

    monkeypatch.setenv("NUFLO_WELLS", "abc")
    monkeypatch.setattr("sys.argv", ["nuflo-monitor", "--output", ""])
    with pytest.raises(SystemExit) as exc:
        main_mod.main()
    assert exc.value.code == 2


def test_parse_args_reports_bad_env_variable(monkeypatch):
    monkeypatch.setenv("NUFLO_SEED", "x1")
    with pytest.raises(ValueError, match="NUFLO_SEED"):
        parse_args([])


def test_main_exits_on_bad_log_level(monkeypatch):
    from nuflo_monitor import main as main_mod

    monkeypatch.setattr("sys.argv", ["nuflo-monitor", "--output", "", "--log-level", "verbose"])
    with pytest.raises(SystemExit) as exc:
        main_mod.main()
    assert exc.value.code == 2


def test_build_map_data_logs_flagged_wells(caplog):
    with caplog.at_level("INFO", logger="nuflo_monitor.simulation.runner"):
        build_map_data(n_wells=5, n_gateways=1, n_alerts=2, seed=8)
    assert "(2 en alerta)" in caplog.text
