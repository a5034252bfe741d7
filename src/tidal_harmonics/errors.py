"""Local error taxonomy for tidal-harmonics.

The prediction core is pure compute and never formats user-facing messages.
We keep a small, stable error enum/envelope that presentation layers can
translate into their own states ("select a station", "invalid range", ...).

Only malformed caller input raises. Missing data yields neutral values and
out-of-window dates degrade numerically.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ErrorType(str, Enum):
    INVALID_INPUT = "INVALID_INPUT"
    NOT_FOUND = "NOT_FOUND"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ErrorEnvelope(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    type: ErrorType
    message: str
    context: dict[str, Any] = Field(default_factory=dict)


def make_error(error_type: ErrorType, message: str, **context: Any) -> ErrorEnvelope:
    return ErrorEnvelope(type=error_type, message=message, context=dict(context))


class TidalHarmonicsError(Exception):
    """Base class for errors raised by tidal-harmonics."""

    error_type: ErrorType = ErrorType.INTERNAL_ERROR

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = dict(context)

    def to_envelope(self) -> ErrorEnvelope:
        return make_error(self.error_type, self.message, **self.context)


class InvalidInputError(TidalHarmonicsError, ValueError):
    """Raised for programming errors in caller input (e.g. a non-positive step)."""

    error_type = ErrorType.INVALID_INPUT


class StationNotFoundError(TidalHarmonicsError, KeyError):
    """Raised when a station id is not present in the repository.

    Attributes:
        station_id: The identifier that was looked up.
    """

    error_type = ErrorType.NOT_FOUND

    def __init__(self, station_id: str) -> None:
        self.station_id = station_id
        super().__init__(f"Unknown tide station: {station_id!r}", station_id=station_id)

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.message
