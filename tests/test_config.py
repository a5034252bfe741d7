from __future__ import annotations

import logging

import pytest

from tidal_harmonics import config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    for name in (config.LOG_LEVEL_ENV, config.STEP_MINUTES_ENV, config.STATION_ENV):
        monkeypatch.delenv(name, raising=False)


class TestDefaults:
    def test_unset(self) -> None:
        assert config.default_log_level() == "WARNING"
        assert config.default_step_minutes() == 6.0
        assert config.default_station_id() == "9414290"

    def test_overrides(self, monkeypatch) -> None:
        monkeypatch.setenv(config.LOG_LEVEL_ENV, "debug")
        monkeypatch.setenv(config.STEP_MINUTES_ENV, "2.5")
        monkeypatch.setenv(config.STATION_ENV, " 8518750 ")
        assert config.default_log_level() == "DEBUG"
        assert config.default_step_minutes() == 2.5
        assert config.default_station_id() == "8518750"

    @pytest.mark.parametrize("raw", ["abc", "0", "-3", "nan", "inf", ""])
    def test_invalid_step_falls_back(self, monkeypatch, raw: str) -> None:
        monkeypatch.setenv(config.STEP_MINUTES_ENV, raw)
        assert config.default_step_minutes() == config.DEFAULT_STEP_MINUTES

    def test_invalid_log_level_falls_back(self, monkeypatch) -> None:
        monkeypatch.setenv(config.LOG_LEVEL_ENV, "LOUD")
        assert config.default_log_level() == "WARNING"


def test_configure_logging_replaces_handler() -> None:
    logger = logging.getLogger("tidal_harmonics")
    try:
        config.configure_logging("INFO")
        config.configure_logging("ERROR")
        assert logger.level == logging.ERROR
        assert sum(isinstance(h, logging.StreamHandler) for h in logger.handlers) == 1
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
