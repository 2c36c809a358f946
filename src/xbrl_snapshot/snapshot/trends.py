"""
trends.py – Samples recent periodic revenue and net income.

The two series are resolved independently of each other and of the annual
statement: quarterly and annual tag choices are allowed to diverge.
"""

from __future__ import annotations

from xbrl_snapshot.constants import DEFAULT_TREND_WINDOW
from xbrl_snapshot.edgar.xbrl.mapper import FIELD_TO_MAPPING
from xbrl_snapshot.snapshot.selector import FactSelector
from xbrl_snapshot.types import TrendData


def sample_trends(
    selector: FactSelector,
    window_size: int = DEFAULT_TREND_WINDOW,
) -> TrendData:
    """Return the last ``window_size`` revenue and net income points, newest first."""
    return TrendData(
        quarterly_revenue=selector.select_quarterly(FIELD_TO_MAPPING["revenue"], window_size),
        quarterly_net_income=selector.select_quarterly(FIELD_TO_MAPPING["net_income"], window_size),
    )
