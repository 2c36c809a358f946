"""
test_config.py – Tests for EngineConfig validation and request precedence.
"""

from __future__ import annotations

import datetime

import pytest

from xbrl_snapshot.config import EngineConfig, default_min_fiscal_year
from xbrl_snapshot.config_resolver import resolve_config
from xbrl_snapshot.types import SnapshotRequest

_UA = "SnapshotTests/1.0 tests@example.com"


class TestEngineConfig:
    def test_defaults(self, monkeypatch) -> None:
        for var in ("TREND_WINDOW", "RATIO_BOUND", "MIN_QUALITY_SCORE", "MIN_FISCAL_YEAR"):
            monkeypatch.delenv(var, raising=False)
        config = EngineConfig(user_agent=_UA)
        assert config.trend_window == 4
        assert config.ratio_bound == 1000.0
        assert config.min_quality_score == 50
        assert config.min_fiscal_year == default_min_fiscal_year()

    def test_environment_values(self, monkeypatch) -> None:
        monkeypatch.setenv("MIN_FISCAL_YEAR", "2019")
        monkeypatch.setenv("TREND_WINDOW", "8")
        monkeypatch.setenv("RATIO_BOUND", "500")
        config = EngineConfig(user_agent=_UA)
        assert config.min_fiscal_year == 2019
        assert config.trend_window == 8
        assert config.ratio_bound == 500.0

    def test_explicit_values_beat_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("TREND_WINDOW", "8")
        assert EngineConfig(user_agent=_UA, trend_window=2).trend_window == 2

    @pytest.mark.parametrize(
        "overrides",
        [
            {"user_agent": "nospaces"},
            {"user_agent": ""},
            {"sec_rate_limit_rps": 11.0},
            {"trend_window": 0},
            {"ratio_bound": 0.0},
            {"min_quality_score": 111},
            {"min_quality_score": -1},
        ],
    )
    def test_invalid_values_rejected(self, overrides) -> None:
        kwargs = {"user_agent": _UA, **overrides}
        with pytest.raises(ValueError):
            EngineConfig(**kwargs)

    def test_max_quality_score_accepted(self) -> None:
        assert EngineConfig(user_agent=_UA, min_quality_score=110).min_quality_score == 110

    def test_frozen(self) -> None:
        config = EngineConfig(user_agent=_UA)
        with pytest.raises(AttributeError):
            config.trend_window = 9  # type: ignore[misc]


class TestDefaultMinFiscalYear:
    def test_three_year_lookback(self) -> None:
        assert default_min_fiscal_year(datetime.date(2026, 10, 19)) == 2023


class TestResolveConfig:
    def test_request_overrides_config(self, engine_config) -> None:
        resolved = resolve_config(
            SnapshotRequest(ticker="ACME", min_fiscal_year=2018, trend_window=6), engine_config
        )
        assert resolved.min_fiscal_year == 2018
        assert resolved.trend_window == 6

    def test_config_used_when_request_silent(self, engine_config) -> None:
        resolved = resolve_config(SnapshotRequest(ticker="ACME"), engine_config)
        assert resolved.min_fiscal_year == engine_config.min_fiscal_year
        assert resolved.trend_window == engine_config.trend_window
        assert resolved.ratio_bound == engine_config.ratio_bound
        assert resolved.user_agent == engine_config.user_agent

    def test_invalid_request_window(self, engine_config) -> None:
        with pytest.raises(ValueError):
            resolve_config(SnapshotRequest(ticker="ACME", trend_window=0), engine_config)
