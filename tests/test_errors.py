"""Tests for the error taxonomy."""

from __future__ import annotations

import pytest

from tidal_harmonics.errors import (
    ErrorEnvelope,
    ErrorType,
    InvalidInputError,
    StationNotFoundError,
    TidalHarmonicsError,
    make_error,
)


class TestMakeError:
    def test_envelope_fields(self) -> None:
        env = make_error(ErrorType.INVALID_INPUT, "bad step", step_minutes=0.0)
        assert isinstance(env, ErrorEnvelope)
        assert env.type is ErrorType.INVALID_INPUT
        assert env.message == "bad step"
        assert env.context == {"step_minutes": 0.0}

    def test_envelope_is_frozen(self) -> None:
        env = make_error(ErrorType.NOT_FOUND, "missing")
        with pytest.raises(Exception):
            env.message = "changed"  # type: ignore[misc]


class TestInvalidInputError:
    def test_is_value_error(self) -> None:
        exc = InvalidInputError("step must be positive", step_minutes=-1.0)
        assert isinstance(exc, ValueError)
        assert isinstance(exc, TidalHarmonicsError)

    def test_to_envelope(self) -> None:
        env = InvalidInputError("count must be non-negative", count=-1).to_envelope()
        assert env.type is ErrorType.INVALID_INPUT
        assert env.context == {"count": -1}


class TestStationNotFoundError:
    def test_basic(self) -> None:
        exc = StationNotFoundError("nope")
        assert exc.station_id == "nope"
        assert str(exc) == "Unknown tide station: 'nope'"

    def test_is_key_error(self) -> None:
        with pytest.raises(KeyError):
            raise StationNotFoundError("nope")

    def test_to_envelope(self) -> None:
        env = StationNotFoundError("nope").to_envelope()
        assert env.type is ErrorType.NOT_FOUND
        assert env.context == {"station_id": "nope"}
