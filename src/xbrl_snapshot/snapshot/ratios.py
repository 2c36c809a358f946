"""
ratios.py – Derives key metrics from statement fields.

Every ratio is None when an operand is None or the denominator is zero.
Percentage ratios are additionally discarded when their magnitude exceeds
the sanity bound: such values come from unit mismatches (thousands vs.
units) and would otherwise be reported as valid data.
"""

from __future__ import annotations

import math

from xbrl_snapshot.constants import DEFAULT_RATIO_BOUND, QUICK_ASSET_FACTOR, RATIO_DECIMALS
from xbrl_snapshot.types import BalanceSheet, IncomeStatement, KeyMetrics


def _safe_div(numerator: float | None, denominator: float | None) -> float | None:
    """Return numerator / denominator, or None on missing, zero or non-finite operands."""
    if numerator is None or denominator is None:
        return None
    if not (math.isfinite(numerator) and math.isfinite(denominator)):
        return None
    if denominator == 0:
        return None
    return numerator / denominator


def percent_ratio(
    numerator: float | None,
    denominator: float | None,
    bound: float = DEFAULT_RATIO_BOUND,
) -> float | None:
    """
    Return ``numerator / denominator * 100`` rounded to 2 decimals.

    Returns None if either operand is missing, the denominator is zero, or
    the percentage falls outside ``[-bound, bound]``.
    """
    quotient = _safe_div(numerator, denominator)
    if quotient is None:
        return None
    pct = round(quotient * 100, RATIO_DECIMALS)
    if abs(pct) > bound:
        return None
    return pct


def simple_ratio(numerator: float | None, denominator: float | None) -> float | None:
    """Return ``numerator / denominator`` rounded to 2 decimals, unbounded."""
    quotient = _safe_div(numerator, denominator)
    if quotient is None:
        return None
    return round(quotient, RATIO_DECIMALS)


def compute_key_metrics(
    income: IncomeStatement,
    balance: BalanceSheet,
    ratio_bound: float = DEFAULT_RATIO_BOUND,
    book_value_per_share: float | None = None,
    revenue_per_share: float | None = None,
) -> KeyMetrics:
    """
    Compute the full metric set from an income statement and balance sheet.

    Parameters
    ----------
    income:
        Assembled income statement (gross profit already derived).
    balance:
        Assembled balance sheet.
    ratio_bound:
        Magnitude bound applied to percentage ratios.
    book_value_per_share, revenue_per_share:
        Per-share figures computed by the statement builder, carried through.
    """
    revenue = income.revenue
    net_income = income.net_income
    assets = balance.total_assets
    equity = balance.stockholders_equity

    quick_assets = (
        balance.current_assets * QUICK_ASSET_FACTOR
        if balance.current_assets is not None
        else None
    )
    non_current_liabilities = (
        balance.total_liabilities - balance.current_liabilities
        if balance.total_liabilities is not None and balance.current_liabilities is not None
        else None
    )

    return KeyMetrics(
        gross_margin=percent_ratio(income.gross_profit, revenue, ratio_bound),
        operating_margin=percent_ratio(income.operating_income, revenue, ratio_bound),
        net_margin=percent_ratio(net_income, revenue, ratio_bound),
        return_on_assets=percent_ratio(net_income, assets, ratio_bound),
        return_on_equity=percent_ratio(net_income, equity, ratio_bound),
        current_ratio=simple_ratio(balance.current_assets, balance.current_liabilities),
        quick_ratio=simple_ratio(quick_assets, balance.current_liabilities),
        debt_to_equity=simple_ratio(non_current_liabilities, equity),
        debt_to_assets=percent_ratio(non_current_liabilities, assets, ratio_bound),
        asset_turnover=simple_ratio(revenue, assets),
        book_value_per_share=book_value_per_share,
        revenue_per_share=revenue_per_share,
    )
