"""`tides` command group: predictions, extremes, ranges and lunar events."""

from __future__ import annotations

import sys
from datetime import datetime, timedelta
from typing import Any

import click

from tidal_harmonics.cli.common_cli import (
    EXIT_INPUT_ERROR,
    EXIT_OK,
    EXIT_RUNTIME_ERROR,
    TidesCliError,
    dump_json_output,
    parse_instant,
    resolve_optional_output_path,
    resolve_station,
    to_jsonable,
)
from tidal_harmonics.compute.analysis import ebb_flood_durations, form_factor, tidal_type
from tidal_harmonics.compute.astronomical import nodal_amplitude_factors, spring_neap_indicator
from tidal_harmonics.compute.ephemeris import (
    find_next_lunar_apsis,
    find_next_moon_phases,
    find_next_seasons,
    get_lunar_phase,
    get_moon_position,
    get_sun_position,
)
from tidal_harmonics.compute.extremes import find_extremes
from tidal_harmonics.compute.harmonics import (
    constituent_contributions,
    predict_tide,
    predict_tide_series,
)
from tidal_harmonics.compute.ranges import get_tidal_range
from tidal_harmonics.config import (
    LOG_LEVEL_CHOICES,
    configure_logging,
    default_station_id,
    default_step_minutes,
)
from tidal_harmonics.data.stations import list_stations
from tidal_harmonics.domain.harmonics import TideStation
from tidal_harmonics.errors import InvalidInputError

# Longest series the CLI will sample in one call
MAX_SERIES_DAYS = 366


def _station_header(station: TideStation) -> dict[str, Any]:
    return {
        "id": station.id,
        "label": station.label,
        "datum": station.datum,
        "timezone": station.timezone,
    }


def _check_span(start: datetime, end: datetime) -> None:
    if end < start:
        raise TidesCliError("--end must not be before --start", exit_code=EXIT_INPUT_ERROR)
    if end - start > timedelta(days=MAX_SERIES_DAYS):
        raise TidesCliError(
            f"Requested span exceeds {MAX_SERIES_DAYS} days",
            exit_code=EXIT_INPUT_ERROR,
        )


def _output_option(func: Any) -> Any:
    return click.option(
        "--out",
        "output_path_arg",
        type=str,
        default="-",
        show_default=True,
        help="JSON output path or '-' for stdout.",
    )(func)


def _station_option(func: Any) -> Any:
    return click.option(
        "--station",
        "station_id",
        type=str,
        default=default_station_id,
        help="Station id (default: $TIDAL_HARMONICS_STATION or 9414290).",
    )(func)


def _step_option(func: Any) -> Any:
    return click.option(
        "--step-minutes",
        type=float,
        default=default_step_minutes,
        help="Sampling step in minutes (default: $TIDAL_HARMONICS_STEP_MINUTES or 6).",
    )(func)


@click.group()
@click.version_option(package_name="tidal-harmonics")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVEL_CHOICES, case_sensitive=False),
    default=None,
    help="Logging level (default: $TIDAL_HARMONICS_LOG_LEVEL or WARNING).",
)
def cli(log_level: str | None) -> None:
    """tidal-harmonics CLI for harmonic tide prediction."""
    configure_logging(log_level)


@cli.command("stations")
@_output_option
def stations_command(output_path_arg: str) -> None:
    """List the bundled tide stations."""
    rows = [
        {
            "id": s.id,
            "label": s.label,
            "country": s.country,
            "lat": s.lat,
            "lon": s.lon,
            "datum": s.datum,
            "constituents": len(s.constituents),
            "form_factor": round(form_factor(s), 4),
            "tidal_type": tidal_type(s).value,
        }
        for s in list_stations()
    ]
    dump_json_output({"stations": rows}, resolve_optional_output_path(output_path_arg))


@cli.command("predict")
@_station_option
@click.option("--at", "at_arg", type=str, default=None, help="ISO-8601 instant (default: now).")
@click.option("--breakdown", is_flag=True, default=False, help="Include per-constituent contributions.")
@_output_option
def predict_command(station_id: str, at_arg: str | None, breakdown: bool, output_path_arg: str) -> None:
    """Predict the water height at one instant."""
    station = resolve_station(station_id)
    when = parse_instant(at_arg, label="--at")
    payload: dict[str, Any] = {
        "station": _station_header(station),
        "time": when.isoformat(),
        "height_m": predict_tide(station, when),
    }
    if breakdown:
        payload["contributions"] = to_jsonable(constituent_contributions(station, when))
    dump_json_output(payload, resolve_optional_output_path(output_path_arg))


@cli.command("series")
@_station_option
@click.option("--start", "start_arg", type=str, required=True, help="ISO-8601 start instant.")
@click.option("--end", "end_arg", type=str, required=True, help="ISO-8601 end instant (inclusive).")
@_step_option
@click.option(
    "--only",
    "only_symbols",
    multiple=True,
    help="Restrict to a constituent symbol (repeatable).",
)
@click.option("--nodal", is_flag=True, default=False, help="Apply nodal amplitude factors.")
@_output_option
def series_command(
    station_id: str,
    start_arg: str,
    end_arg: str,
    step_minutes: float,
    only_symbols: tuple[str, ...],
    nodal: bool,
    output_path_arg: str,
) -> None:
    """Sample predicted heights over a time range."""
    station = resolve_station(station_id)
    start = parse_instant(start_arg, label="--start")
    end = parse_instant(end_arg, label="--end")
    _check_span(start, end)

    factors = nodal_amplitude_factors(station, start) if nodal else None
    try:
        points = predict_tide_series(
            station,
            start,
            end,
            step_minutes,
            enabled_symbols=list(only_symbols) if only_symbols else None,
            amplitude_factors=factors,
        )
    except InvalidInputError as exc:
        raise TidesCliError(str(exc), exit_code=EXIT_INPUT_ERROR) from exc

    payload = {
        "station": _station_header(station),
        "step_minutes": step_minutes,
        "enabled_symbols": sorted(only_symbols) if only_symbols else None,
        "nodal": nodal,
        "points": to_jsonable(points),
    }
    dump_json_output(payload, resolve_optional_output_path(output_path_arg))


@cli.command("extremes")
@_station_option
@click.option("--start", "start_arg", type=str, required=True, help="ISO-8601 start instant.")
@click.option("--end", "end_arg", type=str, required=True, help="ISO-8601 end instant (inclusive).")
@_step_option
@click.option("--refine", is_flag=True, default=False, help="Refine extremes between samples.")
@_output_option
def extremes_command(
    station_id: str,
    start_arg: str,
    end_arg: str,
    step_minutes: float,
    refine: bool,
    output_path_arg: str,
) -> None:
    """Find high and low water over a time range."""
    station = resolve_station(station_id)
    start = parse_instant(start_arg, label="--start")
    end = parse_instant(end_arg, label="--end")
    _check_span(start, end)

    try:
        points = predict_tide_series(station, start, end, step_minutes)
    except InvalidInputError as exc:
        raise TidesCliError(str(exc), exit_code=EXIT_INPUT_ERROR) from exc
    extremes = find_extremes(points, refine=refine)
    durations = ebb_flood_durations(extremes)

    payload = {
        "station": _station_header(station),
        "step_minutes": step_minutes,
        "refined": refine,
        "extremes": to_jsonable(extremes),
        "durations": None
        if durations is None
        else {
            "flood_hours": durations.flood_hours,
            "ebb_hours": durations.ebb_hours,
            "ratio": durations.ratio,
        },
    }
    dump_json_output(payload, resolve_optional_output_path(output_path_arg))


@cli.command("range")
@_station_option
@click.option("--at", "at_arg", type=str, default=None, help="ISO-8601 instant (default: now).")
@_output_option
def range_command(station_id: str, at_arg: str | None, output_path_arg: str) -> None:
    """Tidal range bracketing an instant."""
    station = resolve_station(station_id)
    when = parse_instant(at_arg, label="--at")
    tidal_range = get_tidal_range(station, when)
    payload = {
        "station": _station_header(station),
        "time": when.isoformat(),
        "min_height_m": tidal_range.min_height,
        "max_height_m": tidal_range.max_height,
        "range_m": tidal_range.range,
        "degraded": tidal_range.degraded,
    }
    dump_json_output(payload, resolve_optional_output_path(output_path_arg))


@cli.command("moon")
@click.option("--at", "at_arg", type=str, default=None, help="ISO-8601 instant (default: now).")
@click.option("--phases", type=click.IntRange(min=0), default=4, show_default=True, help="Upcoming quarter phases.")
@click.option("--apsides", type=click.IntRange(min=0), default=2, show_default=True, help="Upcoming perigees/apogees.")
@click.option("--seasons", type=click.IntRange(min=0), default=1, show_default=True, help="Upcoming equinoxes/solstices.")
@_output_option
def moon_command(at_arg: str | None, phases: int, apsides: int, seasons: int, output_path_arg: str) -> None:
    """Lunar phase, Sun/Moon positions and upcoming tidal events."""
    when = parse_instant(at_arg, label="--at")
    moon = get_moon_position(when)
    sun = get_sun_position(when)
    payload = {
        "time": when.isoformat(),
        "lunar_phase": get_lunar_phase(when),
        "spring_neap_indicator": spring_neap_indicator(when),
        "moon": {**to_jsonable(moon), "distance_km": moon.distance_km},
        "sun": {**to_jsonable(sun), "distance_km": sun.distance_km},
        "phases": to_jsonable(find_next_moon_phases(when, phases)),
        "apsides": to_jsonable(find_next_lunar_apsis(when, apsides)),
        "seasons": to_jsonable(find_next_seasons(when, seasons)),
    }
    dump_json_output(payload, resolve_optional_output_path(output_path_arg))


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    try:
        cli.main(args=argv, prog_name="tides", standalone_mode=False)
        return EXIT_OK
    except click.ClickException as e:
        e.show()
        return e.exit_code
    except click.exceptions.Abort:
        click.echo("Aborted!", err=True)
        return EXIT_INPUT_ERROR
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
