from __future__ import annotations

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from tidal_harmonics.domain.astro import (
    CelestialPosition,
    MoonPhase,
    SeasonType,
    phase_for_quarter,
)
from tidal_harmonics.domain.harmonics import (
    Constituent,
    ConstituentFamily,
    StationConstituent,
    TideStation,
)
from tidal_harmonics.domain.tide import ExtremeType, TidalRange, TideDurations, TideExtreme


class TestConstituent:
    def test_period(self) -> None:
        c = Constituent(
            symbol="S2",
            name="Principal solar semidiurnal",
            speed=30.0,
            family=ConstituentFamily.SEMIDIURNAL,
            doodson=(2, 0, 0, 0, 0, 0),
        )
        assert c.period_hours == pytest.approx(12.0)

    def test_rejects_non_positive_speed(self) -> None:
        with pytest.raises(ValidationError):
            Constituent(
                symbol="X",
                name="bad",
                speed=0.0,
                family=ConstituentFamily.DIURNAL,
                doodson=(1, 0, 0, 0, 0, 0),
            )

    def test_family_values(self) -> None:
        assert ConstituentFamily("shallow-water") is ConstituentFamily.SHALLOW_WATER
        assert ConstituentFamily("long-period") is ConstituentFamily.LONG_PERIOD


class TestStationConstituent:
    def test_rejects_negative_amplitude(self) -> None:
        with pytest.raises(ValidationError):
            StationConstituent(symbol="M2", amplitude=-0.1, phase=0.0)

    def test_rejects_phase_of_360(self) -> None:
        with pytest.raises(ValidationError):
            StationConstituent(symbol="M2", amplitude=1.0, phase=360.0)

    def test_is_frozen(self) -> None:
        c = StationConstituent(symbol="M2", amplitude=1.0, phase=10.0)
        with pytest.raises(ValidationError):
            c.amplitude = 2.0  # type: ignore[misc]


class TestTideStation:
    def _station(self, rows: list[tuple[str, float, float]]) -> TideStation:
        return TideStation(
            id="X1",
            name="Somewhere",
            lat=10.0,
            lon=20.0,
            datum="MLLW",
            country="XX",
            constituents=tuple(StationConstituent(symbol=s, amplitude=a, phase=p) for s, a, p in rows),
        )

    def test_duplicate_symbols_rejected(self) -> None:
        with pytest.raises(ValidationError):
            self._station([("M2", 1.0, 0.0), ("M2", 0.5, 10.0)])

    def test_symbols_keep_order(self) -> None:
        station = self._station([("S2", 0.2, 0.0), ("M2", 1.0, 0.0)])
        assert station.symbols == ("S2", "M2")
        assert station.amplitude_of("M2") == 1.0
        assert station.amplitude_of("K1") == 0.0

    def test_latitude_bounds(self) -> None:
        with pytest.raises(ValidationError):
            TideStation(id="X", name="n", lat=91.0, lon=0.0, datum="MSL", country="XX")

    def test_extra_fields_forbidden(self) -> None:
        with pytest.raises(ValidationError):
            TideStation(id="X", name="n", lat=0.0, lon=0.0, datum="MSL", country="XX", owner="me")


class TestTideValues:
    def test_range(self) -> None:
        r = TidalRange(min_height=-0.5, max_height=1.5)
        assert r.range == pytest.approx(2.0)
        assert r.degraded is False

    def test_extreme_is_high(self) -> None:
        when = datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert TideExtreme(time=when, height=1.0, type=ExtremeType.HIGH).is_high
        assert not TideExtreme(time=when, height=0.0, type=ExtremeType.LOW).is_high

    def test_durations_ratio(self) -> None:
        assert TideDurations(flood_hours=5.0, ebb_hours=7.5).ratio == pytest.approx(2.0 / 3.0)


class TestAstroValues:
    def test_distance(self) -> None:
        assert CelestialPosition(x=3.0, y=4.0, z=12.0).distance_km == pytest.approx(13.0)

    def test_phase_cycle(self) -> None:
        assert [phase_for_quarter(i) for i in range(5)] == [
            MoonPhase.NEW_MOON,
            MoonPhase.FIRST_QUARTER,
            MoonPhase.FULL_MOON,
            MoonPhase.LAST_QUARTER,
            MoonPhase.NEW_MOON,
        ]
        assert MoonPhase.FULL_MOON.elongation == 180.0
        assert MoonPhase.FULL_MOON.label == "Full Moon"
        assert MoonPhase.NEW_MOON.is_syzygy
        assert not MoonPhase.LAST_QUARTER.is_syzygy

    def test_season_labels(self) -> None:
        assert SeasonType.MARCH_EQUINOX.label == "March Equinox"
        assert SeasonType.DECEMBER_SOLSTICE.solar_longitude == 270.0
