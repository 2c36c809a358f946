"""
quality.py – Scores the completeness and internal consistency of a statement.

A fixed, additive checklist (max 110). A check whose inputs are missing
counts as failed: absent data is itself a quality defect. The scorer reads
only the assembled statement, never the raw facts.

| Check                     | Passes when                          | Points |
|---------------------------|--------------------------------------|--------|
| Revenue present           | revenue > 0                          | 25     |
| Gross profit valid        | gross_profit > 0                     | 25     |
| Balance sheet present     | total_assets > 0                     | 25     |
| Cash flow present         | operating_cash_flow != 0             | 25     |
| Profitability consistency | operating_income <= gross_profit     | 5      |
| Margin consistency        | net_margin <= gross_margin           | 5      |
"""

from __future__ import annotations

import logging
from typing import Callable, NamedTuple

from xbrl_snapshot.constants import (
    BALANCE_SHEET_TOLERANCE,
    CONSISTENCY_CHECK_POINTS,
    ISSUE_INCONSISTENT_MARGINS,
    ISSUE_INCONSISTENT_PROFITABILITY,
    ISSUE_INVALID_GROSS_PROFIT,
    ISSUE_MISSING_BALANCE_SHEET,
    ISSUE_MISSING_CASH_FLOW,
    ISSUE_MISSING_REVENUE,
    PRESENCE_CHECK_POINTS,
)
from xbrl_snapshot.exceptions import QualityThresholdError
from xbrl_snapshot.types import BalanceSheet, CanonicalStatement, DataQualityReport, SnapshotResult

logger = logging.getLogger(__name__)


class QualityCheck(NamedTuple):
    name: str
    points: int
    issue: str
    passes: Callable[[CanonicalStatement], bool]


def _positive(value: float | None) -> bool:
    return value is not None and value > 0


def _not_greater(lhs: float | None, rhs: float | None) -> bool:
    return lhs is not None and rhs is not None and lhs <= rhs


CHECKLIST: tuple[QualityCheck, ...] = (
    QualityCheck(
        "revenue_present", PRESENCE_CHECK_POINTS, ISSUE_MISSING_REVENUE,
        lambda s: _positive(s.income.revenue),
    ),
    QualityCheck(
        "gross_profit_valid", PRESENCE_CHECK_POINTS, ISSUE_INVALID_GROSS_PROFIT,
        lambda s: _positive(s.income.gross_profit),
    ),
    QualityCheck(
        "balance_sheet_present", PRESENCE_CHECK_POINTS, ISSUE_MISSING_BALANCE_SHEET,
        lambda s: _positive(s.balance.total_assets),
    ),
    QualityCheck(
        "cash_flow_present", PRESENCE_CHECK_POINTS, ISSUE_MISSING_CASH_FLOW,
        lambda s: s.cashflow.operating_cash_flow not in (None, 0),
    ),
    QualityCheck(
        "profitability_consistency", CONSISTENCY_CHECK_POINTS, ISSUE_INCONSISTENT_PROFITABILITY,
        lambda s: _not_greater(s.income.operating_income, s.income.gross_profit),
    ),
    QualityCheck(
        "margin_consistency", CONSISTENCY_CHECK_POINTS, ISSUE_INCONSISTENT_MARGINS,
        lambda s: _not_greater(s.metrics.net_margin, s.metrics.gross_margin),
    ),
)


def score_statement(statement: CanonicalStatement) -> DataQualityReport:
    """
    Run the checklist over ``statement``.

    Returns
    -------
    DataQualityReport with the summed points and one issue per failed
    check, in checklist order.
    """
    score = 0
    issues: list[str] = []
    for check in CHECKLIST:
        if check.passes(statement):
            score += check.points
        else:
            issues.append(check.issue)
            logger.debug("Quality check failed: %s", check.name)

    identity = balance_sheet_identity_holds(statement.balance)
    if identity is False:
        logger.warning(
            "Balance sheet identity violation: assets=%.0f liabilities=%.0f equity=%.0f",
            statement.balance.total_assets,
            statement.balance.total_liabilities,
            statement.balance.stockholders_equity,
        )

    return DataQualityReport(score=score, issues=tuple(issues))


def balance_sheet_identity_holds(balance: BalanceSheet) -> bool | None:
    """
    Check the accounting identity: Assets ≈ Liabilities + Equity.

    Informational only; it does not contribute to the score.

    Returns
    -------
    True/False when all three figures are present and assets are non-zero,
    otherwise None.
    """
    assets = balance.total_assets
    liabilities = balance.total_liabilities
    equity = balance.stockholders_equity
    if assets is None or liabilities is None or equity is None or assets == 0:
        return None
    relative_error = abs(assets - (liabilities + equity)) / abs(assets)
    return relative_error <= BALANCE_SHEET_TOLERANCE


def require_min_quality(result: SnapshotResult, minimum: int) -> None:
    """
    Reject a snapshot whose quality score is below ``minimum``.

    Raises
    ------
    QualityThresholdError: if ``result.quality.score < minimum``.
    """
    score = result.quality.score
    if score < minimum:
        logger.warning(
            "Rejecting snapshot for %s: score %d below minimum %d",
            result.ticker, score, minimum,
            extra={"ticker": result.ticker, "score": score},
        )
        raise QualityThresholdError(result.ticker, score, minimum)
