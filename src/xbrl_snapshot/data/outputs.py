"""
outputs.py – Renders a SnapshotResult for downstream consumers and writes it to disk.

Two renderings:
- ``snapshot_to_dict``: the JSON document (camelCase keys, explicit nulls,
  ISO dates). Every numeric field is present; absent values are None.
- ``snapshot_to_frame``: a flat (section, line_item, value) table for the
  spreadsheet export. The "N/A" placeholder is substituted only here, and
  only for text formats.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import pandas as pd

from xbrl_snapshot.constants import OUTPUT_FORMATS, SOURCE_LABEL
from xbrl_snapshot.types import CompanyProfile, QuarterlyPoint, SnapshotResult
from xbrl_snapshot.utils.dates import format_date
from xbrl_snapshot.utils.io import write_dataframe, write_json

logger = logging.getLogger(__name__)

NA_PLACEHOLDER = "N/A"
FRAME_COLUMNS = ["section", "line_item", "value"]


# ── JSON document ─────────────────────────────────────────────────────────────

def snapshot_to_dict(
    result: SnapshotResult,
    profile: CompanyProfile | None = None,
) -> dict[str, Any]:
    """
    Render the snapshot as a JSON-serializable document.

    Parameters
    ----------
    result:
        Snapshot to render.
    profile:
        Optional registrant profile, added under the ``company`` key.
    """
    stmt = result.statement
    income, balance, cashflow, metrics = stmt.income, stmt.balance, stmt.cashflow, stmt.metrics
    meta = stmt.metadata

    doc: dict[str, Any] = {
        "metadata": {
            "ticker": result.ticker,
            "companyName": result.company_name,
            "cik": result.cik,
            "dataYear": meta.fiscal_year,
            "fiscalYear": meta.fiscal_year,
            "filingDate": format_date(meta.filed),
            "periodEnd": format_date(meta.period_end),
            "source": SOURCE_LABEL,
        },
        "incomeStatement": {
            "revenues": income.revenue,
            "costOfRevenues": income.cost_of_revenue,
            "grossProfit": income.gross_profit,
            "operatingExpenses": {
                "sga": income.operating_expenses.sga,
                "rd": income.operating_expenses.rd,
                "total": income.operating_expenses.total,
            },
            "operatingIncome": income.operating_income,
            "netIncome": income.net_income,
            "earningsPerShare": income.eps_basic,
            "sharesOutstanding": income.shares_outstanding,
        },
        "balanceSheet": {
            "totalAssets": balance.total_assets,
            "currentAssets": balance.current_assets,
            "cashAndCashEquivalents": balance.cash_and_equivalents,
            "totalLiabilities": balance.total_liabilities,
            "currentLiabilities": balance.current_liabilities,
            "stockholdersEquity": balance.stockholders_equity,
            "workingCapital": balance.working_capital,
        },
        "cashFlowStatement": {
            "operatingCashFlow": cashflow.operating_cash_flow,
            "investingCashFlow": cashflow.investing_cash_flow,
            "financingCashFlow": cashflow.financing_cash_flow,
            "freeCashFlow": cashflow.free_cash_flow,
        },
        "keyMetrics": {
            "grossMargin": metrics.gross_margin,
            "operatingMargin": metrics.operating_margin,
            "netMargin": metrics.net_margin,
            "returnOnAssets": metrics.return_on_assets,
            "returnOnEquity": metrics.return_on_equity,
            "currentRatio": metrics.current_ratio,
            "quickRatio": metrics.quick_ratio,
            "debtToEquity": metrics.debt_to_equity,
            "debtToAssets": metrics.debt_to_assets,
            "assetTurnover": metrics.asset_turnover,
            "bookValuePerShare": metrics.book_value_per_share,
            "revenuePerShare": metrics.revenue_per_share,
        },
        "trends": {
            "quarterlyRevenue": [_point_to_dict(p) for p in result.trends.quarterly_revenue],
            "quarterlyNetIncome": [_point_to_dict(p) for p in result.trends.quarterly_net_income],
        },
        "dataQuality": {
            "score": result.quality.score,
            "issues": list(result.quality.issues),
        },
    }

    if profile is not None:
        doc["company"] = _profile_to_dict(profile)

    return doc


def _point_to_dict(point: QuarterlyPoint) -> dict[str, Any]:
    return {
        "period": point.fiscal_period,
        "year": point.fiscal_year,
        "value": point.value,
        "periodEnd": format_date(point.period_end),
    }


def _profile_to_dict(profile: CompanyProfile) -> dict[str, Any]:
    return {
        "name": profile.name,
        "cik": profile.cik,
        "sic": profile.sic,
        "sicDescription": profile.sic_description,
        "category": profile.category,
        "fiscalYearEnd": profile.fiscal_year_end,
        "stateOfIncorporation": profile.state_of_incorporation,
        "phone": profile.phone,
        "businessAddress": {
            "street1": profile.address.street1,
            "street2": profile.address.street2,
            "city": profile.address.city,
            "stateOrCountry": profile.address.state_or_country,
            "zipCode": profile.address.zip_code,
        },
        "recentFilings": list(profile.recent_accessions),
    }


# ── Flat table ────────────────────────────────────────────────────────────────

def snapshot_to_frame(result: SnapshotResult) -> pd.DataFrame:
    """
    Flatten the snapshot into one row per reported figure.

    Missing figures are NaN; ``write_snapshot`` decides how to render them.
    """
    stmt = result.statement
    income, balance, cashflow, metrics = stmt.income, stmt.balance, stmt.cashflow, stmt.metrics

    rows: list[tuple[str, str, float | None]] = [
        ("Income Statement", "Revenue", income.revenue),
        ("Income Statement", "Cost of Revenue", income.cost_of_revenue),
        ("Income Statement", "Gross Profit", income.gross_profit),
        ("Income Statement", "Selling General & Admin", income.operating_expenses.sga),
        ("Income Statement", "Research & Development", income.operating_expenses.rd),
        ("Income Statement", "Total Operating Expenses", income.operating_expenses.total),
        ("Income Statement", "Operating Income", income.operating_income),
        ("Income Statement", "Net Income", income.net_income),
        ("Income Statement", "Earnings Per Share", income.eps_basic),
        ("Income Statement", "Shares Outstanding", income.shares_outstanding),
        ("Balance Sheet", "Current Assets", balance.current_assets),
        ("Balance Sheet", "Cash and Cash Equivalents", balance.cash_and_equivalents),
        ("Balance Sheet", "Total Assets", balance.total_assets),
        ("Balance Sheet", "Current Liabilities", balance.current_liabilities),
        ("Balance Sheet", "Total Liabilities", balance.total_liabilities),
        ("Balance Sheet", "Stockholders Equity", balance.stockholders_equity),
        ("Balance Sheet", "Working Capital", balance.working_capital),
        ("Cash Flow Statement", "Operating Cash Flow", cashflow.operating_cash_flow),
        ("Cash Flow Statement", "Investing Cash Flow", cashflow.investing_cash_flow),
        ("Cash Flow Statement", "Financing Cash Flow", cashflow.financing_cash_flow),
        ("Cash Flow Statement", "Free Cash Flow", cashflow.free_cash_flow),
        ("Key Metrics", "Gross Margin %", metrics.gross_margin),
        ("Key Metrics", "Operating Margin %", metrics.operating_margin),
        ("Key Metrics", "Net Profit Margin %", metrics.net_margin),
        ("Key Metrics", "Return on Assets %", metrics.return_on_assets),
        ("Key Metrics", "Return on Equity %", metrics.return_on_equity),
        ("Key Metrics", "Current Ratio", metrics.current_ratio),
        ("Key Metrics", "Quick Ratio", metrics.quick_ratio),
        ("Key Metrics", "Debt to Equity", metrics.debt_to_equity),
        ("Key Metrics", "Debt to Assets %", metrics.debt_to_assets),
        ("Key Metrics", "Asset Turnover", metrics.asset_turnover),
        ("Key Metrics", "Book Value per Share", metrics.book_value_per_share),
        ("Key Metrics", "Revenue per Share", metrics.revenue_per_share),
    ]
    rows += [
        ("Quarterly Revenue", f"{p.fiscal_period} {p.fiscal_year}", p.value)
        for p in result.trends.quarterly_revenue
    ]
    rows += [
        ("Quarterly Net Income", f"{p.fiscal_period} {p.fiscal_year}", p.value)
        for p in result.trends.quarterly_net_income
    ]
    rows.append(("Data Quality", "Score", float(result.quality.score)))

    df = pd.DataFrame(rows, columns=FRAME_COLUMNS)
    df["value"] = pd.to_numeric(df["value"], errors="coerce")
    return df


# ── Writers ───────────────────────────────────────────────────────────────────

def write_snapshot(
    result: SnapshotResult,
    output_dir: Path,
    fmt: str = "csv",
    profile: CompanyProfile | None = None,
) -> dict[str, Path]:
    """
    Write the JSON document and the flat table for one snapshot.

    Parameters
    ----------
    result:
        The snapshot to persist.
    output_dir:
        Directory to write into (created if necessary).
    fmt:
        Table format: 'csv', 'xlsx' or 'parquet'.
    profile:
        Optional registrant profile to embed in the JSON document.

    Returns
    -------
    dict mapping 'json' / 'table' → written file path.
    """
    if fmt not in OUTPUT_FORMATS:
        raise ValueError(f"Unsupported output format: {fmt!r}")

    stem = f"{result.ticker}_snapshot"
    json_path = output_dir / f"{stem}.json"
    write_json(snapshot_to_dict(result, profile=profile), json_path)

    df = snapshot_to_frame(result)
    if fmt in ("csv", "xlsx"):
        df["value"] = df["value"].astype(object).where(df["value"].notna(), NA_PLACEHOLDER)
    table_path = write_dataframe(df, output_dir, stem, fmt=fmt, sheet_name=result.ticker)

    logger.info("Wrote snapshot for %s → %s, %s", result.ticker, json_path, table_path)
    return {"json": json_path, "table": table_path}
