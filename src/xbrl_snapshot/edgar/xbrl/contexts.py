"""
contexts.py – Observation qualification and ordering.

An observation qualifies for an annual figure when it comes from an annual
report (10-K or 10-K/A), covers the full fiscal year (fp = FY), and its
period ends in or after the fiscal-year floor. It qualifies for a trend
point when it comes from a 10-Q or 10-K and names a fiscal period.

Key design decisions
--------------------
- Qualification looks only at the observation's own form, fp and period
  end. Duration arithmetic on start/end is not used: the raw fp attribute
  is what distinguishes annual from quarterly figures here.
- Ordering is by period end descending. Ties are broken by the latest
  filing date, so a figure restated in a later filing wins over the one it
  replaced; remaining ties keep document order.
"""

from __future__ import annotations

import datetime
from typing import Iterable, Sequence

from xbrl_snapshot.constants import (
    ANNUAL_FISCAL_PERIODS,
    ANNUAL_FORM_TYPES,
    TREND_FISCAL_PERIODS,
    TREND_FORM_TYPES,
)
from xbrl_snapshot.types import Observation


def is_annual_observation(obs: Observation, min_fiscal_year: int) -> bool:
    """Return True if ``obs`` may be used as a full-year annual figure."""
    return (
        obs.form_type.value in ANNUAL_FORM_TYPES
        and obs.fiscal_period is not None
        and obs.fiscal_period.value in ANNUAL_FISCAL_PERIODS
        and obs.period_end.year >= min_fiscal_year
    )


def is_trend_observation(obs: Observation) -> bool:
    """Return True if ``obs`` may be used as a quarterly trend point."""
    return (
        obs.form_type.value in TREND_FORM_TYPES
        and obs.fiscal_period is not None
        and obs.fiscal_period.value in TREND_FISCAL_PERIODS
    )


def filter_annual(
    observations: Iterable[Observation],
    min_fiscal_year: int,
) -> list[Observation]:
    return [o for o in observations if is_annual_observation(o, min_fiscal_year)]


def filter_trend(observations: Iterable[Observation]) -> list[Observation]:
    return [o for o in observations if is_trend_observation(o)]


def sort_most_recent_first(observations: Sequence[Observation]) -> list[Observation]:
    """
    Order observations by period end, newest first.

    Equal period ends are ordered by filing date, newest first; an unknown
    filing date sorts after any known one. The sort is stable.
    """
    return sorted(observations, key=_recency_key, reverse=True)


def _recency_key(obs: Observation) -> tuple[datetime.date, datetime.date]:
    return (obs.period_end, obs.filed or datetime.date.min)
