"""
test_ratios.py – Tests for the ratio engine.
"""

from __future__ import annotations

import pytest

from xbrl_snapshot.snapshot.ratios import compute_key_metrics, percent_ratio, simple_ratio
from xbrl_snapshot.types import BalanceSheet, IncomeStatement


class TestPercentRatio:
    def test_basic(self) -> None:
        assert percent_ratio(50.0, 100.0) == 50.0

    def test_rounded_to_two_decimals(self) -> None:
        assert percent_ratio(1.0, 3.0) == 33.33

    @pytest.mark.parametrize("numerator, denominator", [(None, 1.0), (1.0, None), (1.0, 0.0)])
    def test_missing_or_zero_denominator(self, numerator, denominator) -> None:
        assert percent_ratio(numerator, denominator) is None

    def test_outside_bound_discarded(self) -> None:
        assert percent_ratio(100.0, 1.0) is None
        assert percent_ratio(-100.0, 1.0) is None

    def test_bound_is_inclusive(self) -> None:
        assert percent_ratio(10.0, 1.0) == 1000.0
        assert percent_ratio(-10.0, 1.0) == -1000.0

    def test_custom_bound(self) -> None:
        assert percent_ratio(60.0, 100.0, bound=50.0) is None
        assert percent_ratio(40.0, 100.0, bound=50.0) == 40.0

    def test_zero_numerator(self) -> None:
        assert percent_ratio(0.0, 10.0) == 0.0


class TestSimpleRatio:
    def test_unbounded(self) -> None:
        assert simple_ratio(10000.0, 1.0) == 10000.0

    def test_rounded(self) -> None:
        assert simple_ratio(2.0, 3.0) == 0.67

    def test_zero_denominator(self) -> None:
        assert simple_ratio(5.0, 0.0) is None

    def test_negative_values(self) -> None:
        assert simple_ratio(-3.0, 2.0) == -1.5


class TestComputeKeyMetrics:
    def test_all_absent(self) -> None:
        metrics = compute_key_metrics(IncomeStatement(), BalanceSheet())
        assert all(value is None for value in vars(metrics).values())

    def test_quick_ratio_uses_fixed_factor(self) -> None:
        metrics = compute_key_metrics(
            IncomeStatement(),
            BalanceSheet(current_assets=1000.0, current_liabilities=500.0),
        )
        assert metrics.current_ratio == 2.0
        assert metrics.quick_ratio == 1.4

    def test_leverage_uses_non_current_liabilities(self) -> None:
        balance = BalanceSheet(
            total_assets=1000.0,
            total_liabilities=600.0,
            current_liabilities=200.0,
            stockholders_equity=400.0,
        )
        metrics = compute_key_metrics(IncomeStatement(), balance)
        assert metrics.debt_to_equity == 1.0
        assert metrics.debt_to_assets == 40.0

    def test_leverage_needs_current_liabilities(self) -> None:
        balance = BalanceSheet(
            total_assets=1000.0, total_liabilities=600.0, stockholders_equity=400.0
        )
        metrics = compute_key_metrics(IncomeStatement(), balance)
        assert metrics.debt_to_equity is None
        assert metrics.debt_to_assets is None

    def test_unit_mismatch_margin_discarded(self) -> None:
        # Net income in units, revenue in thousands
        income = IncomeStatement(revenue=1_000.0, net_income=500_000.0)
        metrics = compute_key_metrics(income, BalanceSheet(total_assets=10_000_000.0))
        assert metrics.net_margin is None
        assert metrics.return_on_assets == 5.0

    def test_ratio_bound_parameter(self) -> None:
        income = IncomeStatement(revenue=100.0, gross_profit=60.0)
        assert compute_key_metrics(income, BalanceSheet()).gross_margin == 60.0
        assert compute_key_metrics(income, BalanceSheet(), ratio_bound=50.0).gross_margin is None

    def test_per_share_values_carried_through(self) -> None:
        metrics = compute_key_metrics(
            IncomeStatement(), BalanceSheet(), book_value_per_share=8.0, revenue_per_share=10.0
        )
        assert metrics.book_value_per_share == 8.0
        assert metrics.revenue_per_share == 10.0
