"""
config.py – Central configuration using environment variables and/or explicit overrides.
All settings are immutable after construction (frozen dataclass).
"""

from __future__ import annotations

import datetime
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from xbrl_snapshot.constants import (
    DEFAULT_FISCAL_YEAR_LOOKBACK,
    DEFAULT_MIN_QUALITY_SCORE,
    DEFAULT_RATIO_BOUND,
    DEFAULT_TREND_WINDOW,
    MAX_QUALITY_SCORE,
)

load_dotenv()


def default_min_fiscal_year(today: datetime.date | None = None) -> int:
    """Return the annual-resolution floor: current year minus the lookback."""
    today = today or datetime.date.today()
    return today.year - DEFAULT_FISCAL_YEAR_LOOKBACK


def _env_min_fiscal_year() -> int:
    raw = os.getenv("MIN_FISCAL_YEAR")
    return int(raw) if raw else default_min_fiscal_year()


@dataclass(frozen=True)
class EngineConfig:
    """
    Immutable engine configuration.

    Parameters
    ----------
    user_agent:
        HTTP header value required by SEC EDGAR. Format: "Name/Version email".
    cache_dir:
        Directory for caching downloaded SEC documents.
    output_dir:
        Default output directory for snapshots.
    sec_rate_limit_rps:
        Maximum requests per second to SEC EDGAR (default 8, max 10).
    min_fiscal_year:
        Observations whose period ends before this year are never used for
        annual figures.
    trend_window:
        Number of quarterly points kept per trend.
    ratio_bound:
        Percentage ratios whose magnitude exceeds this are discarded.
    min_quality_score:
        Snapshots scoring below this are rejected by the CLI.
    log_level:
        Python logging level string.
    """

    user_agent: str = field(
        default_factory=lambda: os.getenv("SEC_USER_AGENT", "XbrlSnapshot/1.0 researcher@example.com")
    )
    cache_dir: Path = field(
        default_factory=lambda: Path(os.getenv("CACHE_DIR", ".cache"))
    )
    output_dir: Path = field(
        default_factory=lambda: Path(os.getenv("OUTPUT_DIR", "out"))
    )
    sec_rate_limit_rps: float = field(
        default_factory=lambda: float(os.getenv("SEC_RATE_LIMIT_RPS", "8"))
    )
    min_fiscal_year: int = field(default_factory=_env_min_fiscal_year)
    trend_window: int = field(
        default_factory=lambda: int(os.getenv("TREND_WINDOW", str(DEFAULT_TREND_WINDOW)))
    )
    ratio_bound: float = field(
        default_factory=lambda: float(os.getenv("RATIO_BOUND", str(DEFAULT_RATIO_BOUND)))
    )
    min_quality_score: int = field(
        default_factory=lambda: int(os.getenv("MIN_QUALITY_SCORE", str(DEFAULT_MIN_QUALITY_SCORE)))
    )
    log_level: str = field(
        default_factory=lambda: os.getenv("LOG_LEVEL", "INFO")
    )

    def __post_init__(self) -> None:
        if not self.user_agent or " " not in self.user_agent:
            raise ValueError(
                "SEC_USER_AGENT must be set and follow format: 'Name/Version email'"
            )
        if self.sec_rate_limit_rps > 10:
            raise ValueError("SEC rate limit cannot exceed 10 RPS (SEC policy).")
        if self.trend_window < 1:
            raise ValueError(f"trend_window must be at least 1, got {self.trend_window}")
        if self.ratio_bound <= 0:
            raise ValueError(f"ratio_bound must be positive, got {self.ratio_bound}")
        if not 0 <= self.min_quality_score <= MAX_QUALITY_SCORE:
            raise ValueError(
                f"min_quality_score must be within [0, {MAX_QUALITY_SCORE}], "
                f"got {self.min_quality_score}"
            )

    @classmethod
    def from_env(cls) -> "EngineConfig":
        """Construct config entirely from environment variables."""
        return cls()
