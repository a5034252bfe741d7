"""Shared helpers for click-based `tides` commands."""

from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any

import click

from tidal_harmonics.data.stations import get_station
from tidal_harmonics.domain.harmonics import TideStation
from tidal_harmonics.errors import StationNotFoundError

EXIT_OK = 0
EXIT_INPUT_ERROR = 1
EXIT_RUNTIME_ERROR = 2
EXIT_DATA_UNAVAILABLE = 4


class TidesCliError(click.ClickException):
    """Click exception with explicit exit-code control."""

    def __init__(self, message: str, *, exit_code: int = EXIT_INPUT_ERROR) -> None:
        super().__init__(message)
        self.exit_code = int(exit_code)


def parse_instant(value: str | None, *, label: str) -> datetime:
    """Parse an ISO-8601 instant; None or 'now' means the current time.

    Naive values are taken as UTC. A trailing 'Z' is accepted.
    """
    if value is None or value.strip().lower() == "now":
        return datetime.now(timezone.utc)
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as exc:
        raise TidesCliError(
            f"Invalid {label} '{value}'. Expected an ISO-8601 date or datetime.",
            exit_code=EXIT_INPUT_ERROR,
        ) from exc
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def resolve_station(station_id: str) -> TideStation:
    try:
        return get_station(station_id)
    except StationNotFoundError as exc:
        raise TidesCliError(str(exc), exit_code=EXIT_DATA_UNAVAILABLE) from exc


def to_jsonable(value: Any) -> Any:
    """Convert dataclasses, enums and datetimes into JSON-friendly values."""
    if is_dataclass(value) and not isinstance(value, type):
        return {key: to_jsonable(item) for key, item in asdict(value).items()}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, dict):
        return {str(key): to_jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(item) for item in value]
    return value


def dump_json_output(payload: dict[str, Any], out_path: Path | None) -> None:
    """Write JSON payload to file or stdout."""
    text = json.dumps(payload, sort_keys=True, indent=2)
    if out_path is None:
        click.echo(text)
        return
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(text + "\n", encoding="utf-8")


def resolve_optional_output_path(output_arg: str | None) -> Path | None:
    """Map '-', empty, or None to stdout; otherwise return filesystem path."""
    if output_arg is None:
        return None
    value = str(output_arg).strip()
    if value in {"", "-"}:
        return None
    return Path(value)
