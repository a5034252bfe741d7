from __future__ import annotations

import tidal_harmonics


def test_all_names_resolve() -> None:
    for name in tidal_harmonics.__all__:
        assert hasattr(tidal_harmonics, name), name


def test_boundary_operations_exported() -> None:
    for name in (
        "predict_tide",
        "predict_tide_from_constituents",
        "predict_tide_series",
        "find_extremes",
        "get_tidal_range",
        "get_lunar_phase",
        "get_moon_position",
        "get_sun_position",
        "find_next_moon_phases",
        "find_next_lunar_apsis",
        "nodal_factors",
    ):
        assert callable(getattr(tidal_harmonics, name))
