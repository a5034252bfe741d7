from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path

import pytest
from click.testing import CliRunner

import tidal_harmonics
from tidal_harmonics.cli.common_cli import (
    EXIT_DATA_UNAVAILABLE,
    EXIT_INPUT_ERROR,
    parse_instant,
    resolve_optional_output_path,
)
from tidal_harmonics.cli.main import cli, main
from tidal_harmonics.compute.harmonics import predict_tide
from tidal_harmonics.data.stations import get_station


@pytest.fixture(autouse=True)
def _reset_package_logger(monkeypatch):
    for name in ("TIDAL_HARMONICS_LOG_LEVEL", "TIDAL_HARMONICS_STEP_MINUTES", "TIDAL_HARMONICS_STATION"):
        monkeypatch.delenv(name, raising=False)
    yield
    logger = logging.getLogger("tidal_harmonics")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


def _invoke(args: list[str], **kwargs):
    result = CliRunner().invoke(cli, args, **kwargs)
    return result


def test_stations_lists_all() -> None:
    result = _invoke(["stations"])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    ids = [row["id"] for row in payload["stations"]]
    assert len(ids) == 11
    sf = next(row for row in payload["stations"] if row["id"] == "9414290")
    assert sf["label"] == "San Francisco, CA"
    assert sf["tidal_type"] == "mixed-semidiurnal"


def test_predict_matches_library() -> None:
    result = _invoke(["predict", "--station", "9414290", "--at", "2024-02-03T04:05:00Z"])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    when = datetime(2024, 2, 3, 4, 5, tzinfo=timezone.utc)
    assert payload["height_m"] == pytest.approx(predict_tide(get_station("9414290"), when))
    assert payload["station"]["id"] == "9414290"
    assert payload["time"] == "2024-02-03T04:05:00+00:00"
    assert "contributions" not in payload


def test_predict_breakdown() -> None:
    result = _invoke(["predict", "--at", "2024-02-03T04:05:00", "--breakdown"])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    total = sum(row["contribution"] for row in payload["contributions"])
    assert total == pytest.approx(payload["height_m"], abs=1e-9)


def test_predict_unknown_station_exit_code() -> None:
    result = _invoke(["predict", "--station", "nope", "--at", "2024-01-01"])
    assert result.exit_code == EXIT_DATA_UNAVAILABLE
    assert "Unknown tide station" in result.output


def test_predict_bad_instant_exit_code() -> None:
    result = _invoke(["predict", "--at", "yesterday-ish"])
    assert result.exit_code == EXIT_INPUT_ERROR


def test_station_default_from_environment() -> None:
    result = _invoke(["predict", "--at", "2024-01-01"], env={"TIDAL_HARMONICS_STATION": "8518750"})
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout)["station"]["id"] == "8518750"


def test_series_hourly_day() -> None:
    result = _invoke(
        [
            "series",
            "--start",
            "2024-03-01T00:00:00Z",
            "--end",
            "2024-03-02T00:00:00Z",
            "--step-minutes",
            "60",
        ]
    )
    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert len(payload["points"]) == 25
    assert payload["points"][0]["time"] == "2024-03-01T00:00:00+00:00"
    assert payload["points"][-1]["time"] == "2024-03-02T00:00:00+00:00"


def test_series_subset_and_nodal() -> None:
    result = _invoke(
        [
            "series",
            "--start",
            "2024-03-01",
            "--end",
            "2024-03-01T02:00",
            "--only",
            "M2",
            "--only",
            "S2",
            "--nodal",
        ]
    )
    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["enabled_symbols"] == ["M2", "S2"]
    assert payload["nodal"] is True
    assert len(payload["points"]) == 21


@pytest.mark.parametrize(
    "args",
    [
        ["series", "--start", "2024-03-02", "--end", "2024-03-01"],
        ["series", "--start", "2024-03-01", "--end", "2024-03-02", "--step-minutes", "0"],
        ["series", "--start", "2020-01-01", "--end", "2024-01-01"],
        ["extremes", "--start", "2024-03-01", "--end", "2024-03-02", "--step-minutes", "-5"],
    ],
)
def test_invalid_ranges_exit_code(args: list[str]) -> None:
    result = _invoke(args)
    assert result.exit_code == EXIT_INPUT_ERROR


def test_step_default_from_environment() -> None:
    result = _invoke(
        ["series", "--start", "2024-03-01", "--end", "2024-03-01T01:00"],
        env={"TIDAL_HARMONICS_STEP_MINUTES": "30"},
    )
    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["step_minutes"] == 30.0
    assert len(payload["points"]) == 3


def test_extremes_alternate() -> None:
    result = _invoke(
        ["extremes", "--start", "2024-03-01", "--end", "2024-03-04", "--refine"]
    )
    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    types = [row["type"] for row in payload["extremes"]]
    assert len(types) >= 8
    assert all(a != b for a, b in zip(types, types[1:]))
    assert payload["refined"] is True
    assert payload["durations"]["flood_hours"] > 0


def test_range() -> None:
    result = _invoke(["range", "--at", "2024-03-01T12:00:00Z"])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["max_height_m"] >= payload["min_height_m"]
    assert payload["range_m"] == pytest.approx(payload["max_height_m"] - payload["min_height_m"])
    assert payload["degraded"] is False


def test_moon() -> None:
    result = _invoke(
        ["moon", "--at", "2000-01-01T00:00:00Z", "--phases", "2", "--apsides", "1", "--seasons", "1"]
    )
    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert 0.0 <= payload["lunar_phase"] < 1.0
    assert [row["type"] for row in payload["phases"]] == ["new_moon", "first_quarter"]
    assert payload["phases"][0]["label"] == "New Moon"
    assert len(payload["apsides"]) == 1
    assert payload["seasons"][0]["type"] == "march_equinox"
    assert 355_000 < payload["moon"]["distance_km"] < 410_000


def test_moon_rejects_negative_count() -> None:
    result = _invoke(["moon", "--phases", "-1"])
    assert result.exit_code != 0


def test_out_writes_file(tmp_path: Path) -> None:
    out_path = tmp_path / "nested" / "stations.json"
    result = _invoke(["stations", "--out", str(out_path)])
    assert result.exit_code == 0, result.output
    assert result.stdout == ""
    payload = json.loads(out_path.read_text(encoding="utf-8"))
    assert len(payload["stations"]) == 11


def test_version_option() -> None:
    result = _invoke(["--version"])
    assert result.exit_code == 0
    assert tidal_harmonics.__version__ in result.output


def test_log_level_option_configures_package_logger() -> None:
    result = _invoke(["--log-level", "debug", "stations"])
    assert result.exit_code == 0, result.output
    assert logging.getLogger("tidal_harmonics").level == logging.DEBUG


class TestMain:
    def test_success_returns_zero(self, capsys) -> None:
        assert main(["stations"]) == 0
        assert "9414290" in capsys.readouterr().out

    def test_cli_error_returns_exit_code(self, capsys) -> None:
        assert main(["predict", "--station", "nope"]) == EXIT_DATA_UNAVAILABLE
        assert "Unknown tide station" in capsys.readouterr().err

    def test_usage_error(self, capsys) -> None:
        assert main(["no-such-command"]) != 0


class TestHelpers:
    def test_parse_instant_variants(self) -> None:
        expected = datetime(2024, 1, 2, 3, 4, tzinfo=timezone.utc)
        assert parse_instant("2024-01-02T03:04:00Z", label="--at") == expected
        assert parse_instant("2024-01-02T03:04:00", label="--at") == expected
        assert parse_instant("2024-01-02T05:04:00+02:00", label="--at") == expected

    def test_parse_instant_now(self) -> None:
        assert parse_instant(None, label="--at").tzinfo is not None
        assert parse_instant("now", label="--at").tzinfo is not None

    def test_output_path(self) -> None:
        assert resolve_optional_output_path(None) is None
        assert resolve_optional_output_path("-") is None
        assert resolve_optional_output_path(" ") is None
        assert resolve_optional_output_path("out.json") == Path("out.json")
