"""
constants.py – Immutable project-wide constants.
Do NOT modify these at runtime. Adjustable parameters live on EngineConfig;
the values here are only their defaults.
"""

from __future__ import annotations

# ── SEC EDGAR endpoints ──────────────────────────────────────────────────────
EDGAR_BASE_URL = "https://data.sec.gov"
EDGAR_SUBMISSIONS_URL = f"{EDGAR_BASE_URL}/submissions/CIK{{cik:010d}}.json"
EDGAR_COMPANY_FACTS_URL = f"{EDGAR_BASE_URL}/api/xbrl/companyfacts/CIK{{cik:010d}}.json"
EDGAR_TICKER_CIK_URL = "https://www.sec.gov/files/company_tickers.json"

# ── Taxonomy ─────────────────────────────────────────────────────────────────
GAAP_NAMESPACE = "us-gaap"

# ── Units ────────────────────────────────────────────────────────────────────
UNIT_USD = "USD"
UNIT_SHARES = "shares"
UNIT_USD_PER_SHARE = "USD/shares"

# ── Observation qualification ────────────────────────────────────────────────
# Annual resolution: full-year figures from annual reports and their amendments.
ANNUAL_FORM_TYPES: frozenset[str] = frozenset({"10-K", "10-K/A"})
ANNUAL_FISCAL_PERIODS: frozenset[str] = frozenset({"FY"})

# Trend sampling: quarterly reports plus the annual report carrying Q4/FY.
TREND_FORM_TYPES: frozenset[str] = frozenset({"10-Q", "10-K"})
TREND_FISCAL_PERIODS: frozenset[str] = frozenset({"Q1", "Q2", "Q3", "Q4", "FY"})

# ── Defaults for adjustable parameters ───────────────────────────────────────
DEFAULT_FISCAL_YEAR_LOOKBACK: int = 3
DEFAULT_TREND_WINDOW: int = 4
DEFAULT_RATIO_BOUND: float = 1000.0
DEFAULT_MIN_QUALITY_SCORE: int = 50

# Quick assets are approximated as this share of current assets.
QUICK_ASSET_FACTOR: float = 0.7

RATIO_DECIMALS: int = 2

# ── Accounting identity tolerance ────────────────────────────────────────────
# |Assets - (Liabilities + Equity)| / Assets < this threshold
BALANCE_SHEET_TOLERANCE: float = 0.01  # 1%

# ── Data quality checklist ───────────────────────────────────────────────────
PRESENCE_CHECK_POINTS: int = 25
CONSISTENCY_CHECK_POINTS: int = 5
MAX_QUALITY_SCORE: int = 4 * PRESENCE_CHECK_POINTS + 2 * CONSISTENCY_CHECK_POINTS

ISSUE_MISSING_REVENUE = "Missing revenue data"
ISSUE_INVALID_GROSS_PROFIT = "Gross profit missing or not positive"
ISSUE_MISSING_BALANCE_SHEET = "Missing balance sheet data"
ISSUE_MISSING_CASH_FLOW = "Missing cash flow data"
ISSUE_INCONSISTENT_PROFITABILITY = "Operating income exceeds gross profit"
ISSUE_INCONSISTENT_MARGINS = "Inconsistent margin calculations"

# ── Company directory search ─────────────────────────────────────────────────
MIN_SEARCH_QUERY_LENGTH: int = 2
DEFAULT_SEARCH_LIMIT: int = 10
RECENT_FILINGS_LIMIT: int = 5

# ── Output document ──────────────────────────────────────────────────────────
SOURCE_LABEL = "SEC EDGAR (XBRL companyfacts)"
OUTPUT_FORMATS: tuple[str, ...] = ("csv", "xlsx", "parquet")
