"""
statements.py – Assembles the canonical statement from resolved line items.

One ``select_annual`` call per alias-table entry, then derived fields:

- gross_profit     = revenue - cost_of_revenue         (both present)
- working_capital  = current_assets - current_liabilities (both present)
- free_cash_flow   = operating_cash_flow + investing_cash_flow (both present;
                     investing flow is reported negative, so this is a sum)
- operating_expenses.total = sga + rd (either may stand alone; None if both absent)

A derived field is never inferred from one side of its inputs. Absence stays
explicit through every step; only the output layer substitutes placeholders.
"""

from __future__ import annotations

import logging

from xbrl_snapshot.constants import DEFAULT_RATIO_BOUND, RATIO_DECIMALS
from xbrl_snapshot.edgar.xbrl.mapper import ALIAS_TABLE
from xbrl_snapshot.snapshot.ratios import compute_key_metrics
from xbrl_snapshot.snapshot.selector import FactSelector
from xbrl_snapshot.types import (
    BalanceSheet,
    CanonicalStatement,
    CashFlowStatement,
    IncomeStatement,
    OperatingExpenses,
    ResolvedValue,
    StatementMetadata,
)

logger = logging.getLogger(__name__)

# Line item whose resolution supplies the statement's representative period.
_ANCHOR_FIELD = "revenue"


def resolve_line_items(
    selector: FactSelector,
    min_fiscal_year: int,
) -> dict[str, ResolvedValue | None]:
    """Resolve every alias-table entry, keyed by canonical field, in table order."""
    return {
        mapping.standard_field: selector.select_annual(mapping, min_fiscal_year)
        for mapping in ALIAS_TABLE
    }


def build_statement(
    selector: FactSelector,
    min_fiscal_year: int,
    ratio_bound: float = DEFAULT_RATIO_BOUND,
) -> CanonicalStatement:
    """
    Build the canonical income statement, balance sheet, cash flow statement
    and key metrics for one company.

    Parameters
    ----------
    selector:
        Fact selector over the company's facts document.
    min_fiscal_year:
        Annual-resolution floor passed to every ``select_annual`` call.
    ratio_bound:
        Sanity bound for percentage ratios.
    """
    resolved = resolve_line_items(selector, min_fiscal_year)
    values = {name: (r.value if r is not None else None) for name, r in resolved.items()}

    sga = values["sga"]
    rd = values["rd"]
    income = IncomeStatement(
        revenue=values["revenue"],
        cost_of_revenue=values["cost_of_revenue"],
        gross_profit=_difference(values["revenue"], values["cost_of_revenue"]),
        operating_expenses=OperatingExpenses(sga=sga, rd=rd, total=_lenient_sum(sga, rd)),
        operating_income=values["operating_income"],
        net_income=values["net_income"],
        eps_basic=values["eps_basic"],
        shares_outstanding=values["shares_outstanding"],
    )

    balance = BalanceSheet(
        total_assets=values["total_assets"],
        current_assets=values["current_assets"],
        cash_and_equivalents=values["cash_and_equivalents"],
        total_liabilities=values["total_liabilities"],
        current_liabilities=values["current_liabilities"],
        stockholders_equity=values["stockholders_equity"],
        working_capital=_difference(values["current_assets"], values["current_liabilities"]),
    )

    cashflow = CashFlowStatement(
        operating_cash_flow=values["operating_cash_flow"],
        investing_cash_flow=values["investing_cash_flow"],
        financing_cash_flow=values["financing_cash_flow"],
        free_cash_flow=_strict_sum(
            values["operating_cash_flow"], values["investing_cash_flow"]
        ),
    )

    metrics = compute_key_metrics(
        income,
        balance,
        ratio_bound=ratio_bound,
        book_value_per_share=_per_share(balance.stockholders_equity, income.shares_outstanding),
        revenue_per_share=_per_share(income.revenue, income.shares_outstanding),
    )

    metadata = _representative_period(resolved)
    resolved_count = sum(1 for r in resolved.values() if r is not None)
    logger.debug(
        "Resolved %d/%d line items (fiscal_year=%s)",
        resolved_count, len(resolved), metadata.fiscal_year,
    )

    return CanonicalStatement(
        income=income,
        balance=balance,
        cashflow=cashflow,
        metrics=metrics,
        metadata=metadata,
    )


def _difference(minuend: float | None, subtrahend: float | None) -> float | None:
    if minuend is None or subtrahend is None:
        return None
    return minuend - subtrahend


def _strict_sum(a: float | None, b: float | None) -> float | None:
    if a is None or b is None:
        return None
    return a + b


def _lenient_sum(a: float | None, b: float | None) -> float | None:
    """Sum where a missing term counts as zero, provided one term is present."""
    if a is None and b is None:
        return None
    return (a or 0.0) + (b or 0.0)


def _per_share(amount: float | None, shares: float | None) -> float | None:
    if amount is None or shares is None or shares <= 0:
        return None
    return round(amount / shares, RATIO_DECIMALS)


def _representative_period(
    resolved: dict[str, ResolvedValue | None],
) -> StatementMetadata:
    """Period of the revenue resolution, else of the first line item that resolved."""
    anchor = resolved.get(_ANCHOR_FIELD)
    if anchor is None:
        anchor = next((r for r in resolved.values() if r is not None), None)
    if anchor is None:
        return StatementMetadata()
    return StatementMetadata(
        fiscal_year=anchor.fiscal_year,
        period_end=anchor.period_end,
        filed=anchor.filed,
    )
