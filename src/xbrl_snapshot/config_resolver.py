"""
config_resolver.py – Unified precedence for SnapshotRequest vs EngineConfig.

Rule: SnapshotRequest fields always override EngineConfig defaults.
      This applies to: min_fiscal_year, trend_window.

Use ``resolve_config(request, config)`` to get a single ``ResolvedConfig``
object that the builder consumes. Never read from request and config
separately in business logic.
"""

from __future__ import annotations

from dataclasses import dataclass

from xbrl_snapshot.config import EngineConfig
from xbrl_snapshot.types import SnapshotRequest


@dataclass(frozen=True)
class ResolvedConfig:
    """
    Merged view of EngineConfig + SnapshotRequest with clear precedence.

    Attributes
    ----------
    min_fiscal_year:
        Floor for annual resolution.
    trend_window:
        Quarterly trend length.
    ratio_bound:
        Percentage ratio sanity bound (always from EngineConfig).
    user_agent:
        SEC User-Agent string (always from EngineConfig; not overridable per-request).
    """

    min_fiscal_year: int
    trend_window: int
    ratio_bound: float
    user_agent: str

    def __post_init__(self) -> None:
        if self.trend_window < 1:
            raise ValueError(f"trend_window must be at least 1, got {self.trend_window}")


def resolve_config(
    request: SnapshotRequest,
    config: EngineConfig,
) -> ResolvedConfig:
    """
    Merge SnapshotRequest overrides on top of EngineConfig defaults.

    Precedence: SnapshotRequest > EngineConfig.
    """
    return ResolvedConfig(
        min_fiscal_year=(
            request.min_fiscal_year
            if request.min_fiscal_year is not None
            else config.min_fiscal_year
        ),
        trend_window=(
            request.trend_window
            if request.trend_window is not None
            else config.trend_window
        ),
        ratio_bound=config.ratio_bound,
        # user_agent cannot be overridden per-request (it's a credentials concern)
        user_agent=config.user_agent,
    )
