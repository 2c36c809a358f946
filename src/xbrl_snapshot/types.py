"""
types.py – Shared domain types, enums and dataclasses.
All data flowing through the engine uses these types.

Every record built from a facts document is frozen: nothing downstream of
the Fact Selector mutates what an earlier stage produced.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass, field
from enum import Enum


# ── Enumerations ──────────────────────────────────────────────────────────────

class FormType(str, Enum):
    """Filing category an observation originates from."""
    ANNUAL = "10-K"
    ANNUAL_AMENDED = "10-K/A"
    QUARTERLY = "10-Q"
    OTHER = "other"

    @classmethod
    def parse(cls, value: object) -> "FormType":
        for member in cls:
            if member.value == value:
                return member
        return cls.OTHER


class FiscalPeriod(str, Enum):
    """Reporting window an observation covers. FY is a full-year figure."""
    FY = "FY"
    Q1 = "Q1"
    Q2 = "Q2"
    Q3 = "Q3"
    Q4 = "Q4"

    @classmethod
    def parse(cls, value: object) -> "FiscalPeriod | None":
        for member in cls:
            if member.value == value:
                return member
        return None


# ── Raw observations ──────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Observation:
    """
    One reported value for one concept, unit and period.

    Attributes
    ----------
    value:
        Reported numeric value (always finite).
    unit:
        Unit identifier, e.g. 'USD' or 'shares'.
    form_type:
        Filing category of the report that carried the value.
    fiscal_period:
        FY or Q1–Q4; None when the raw record names anything else.
    period_end:
        End date (or instant date) of the reported period.
    filed:
        Date the carrying filing was submitted, if known.
    """

    value: float
    unit: str
    form_type: FormType
    fiscal_period: FiscalPeriod | None
    period_end: datetime.date
    filed: datetime.date | None = None


@dataclass(frozen=True)
class ResolvedValue:
    """The single observation chosen for one canonical line item."""

    value: float
    fiscal_year: int
    period_end: datetime.date
    filed: datetime.date | None
    tag: str


@dataclass(frozen=True)
class QuarterlyPoint:
    """One element of a quarterly trend, most recent first in its sequence."""

    value: float
    fiscal_period: str
    period_end: datetime.date
    fiscal_year: int


# ── Canonical statement ───────────────────────────────────────────────────────

@dataclass(frozen=True)
class OperatingExpenses:
    sga: float | None = None
    rd: float | None = None
    total: float | None = None


@dataclass(frozen=True)
class IncomeStatement:
    revenue: float | None = None
    cost_of_revenue: float | None = None
    gross_profit: float | None = None
    operating_expenses: OperatingExpenses = field(default_factory=OperatingExpenses)
    operating_income: float | None = None
    net_income: float | None = None
    eps_basic: float | None = None
    shares_outstanding: float | None = None


@dataclass(frozen=True)
class BalanceSheet:
    total_assets: float | None = None
    current_assets: float | None = None
    cash_and_equivalents: float | None = None
    total_liabilities: float | None = None
    current_liabilities: float | None = None
    stockholders_equity: float | None = None
    working_capital: float | None = None


@dataclass(frozen=True)
class CashFlowStatement:
    operating_cash_flow: float | None = None
    investing_cash_flow: float | None = None
    financing_cash_flow: float | None = None
    free_cash_flow: float | None = None


@dataclass(frozen=True)
class KeyMetrics:
    """Derived ratios. Margins and returns are percentages; the rest are plain ratios."""

    gross_margin: float | None = None
    operating_margin: float | None = None
    net_margin: float | None = None
    return_on_assets: float | None = None
    return_on_equity: float | None = None
    current_ratio: float | None = None
    quick_ratio: float | None = None
    debt_to_equity: float | None = None
    debt_to_assets: float | None = None
    asset_turnover: float | None = None
    book_value_per_share: float | None = None
    revenue_per_share: float | None = None


@dataclass(frozen=True)
class StatementMetadata:
    """
    Representative period of a statement.

    Taken from the revenue resolution, or from the first line item that
    resolved when revenue is absent. All None when nothing resolved.
    """

    fiscal_year: int | None = None
    period_end: datetime.date | None = None
    filed: datetime.date | None = None


@dataclass(frozen=True)
class CanonicalStatement:
    income: IncomeStatement
    balance: BalanceSheet
    cashflow: CashFlowStatement
    metrics: KeyMetrics
    metadata: StatementMetadata


@dataclass(frozen=True)
class TrendData:
    quarterly_revenue: tuple[QuarterlyPoint, ...] = ()
    quarterly_net_income: tuple[QuarterlyPoint, ...] = ()


@dataclass(frozen=True)
class DataQualityReport:
    """Score in [0, 110] plus one fixed message per failed check, in check order."""

    score: int
    issues: tuple[str, ...] = ()


# ── Request / Result types ────────────────────────────────────────────────────

@dataclass
class SnapshotRequest:
    """
    Describes which company to extract and how.

    Attributes
    ----------
    ticker:
        Equity ticker; resolved to a CIK when ``cik`` is not given.
    cik:
        Optional SEC CIK; skips ticker resolution when set.
    min_fiscal_year:
        Overrides EngineConfig.min_fiscal_year for this request.
    trend_window:
        Overrides EngineConfig.trend_window for this request.
    """

    ticker: str
    cik: str | None = None
    min_fiscal_year: int | None = None
    trend_window: int | None = None


@dataclass(frozen=True)
class SnapshotResult:
    """
    Output of one extraction.

    Attributes
    ----------
    ticker:
        Ticker the snapshot was requested for.
    statement:
        Canonical income statement, balance sheet, cash flow and metrics.
    trends:
        Quarterly revenue and net income samples.
    quality:
        Data quality score and issue list.
    company_name:
        Registrant name, when the facts document or directory supplied one.
    cik:
        Zero-padded CIK, when known.
    """

    ticker: str
    statement: CanonicalStatement
    trends: TrendData
    quality: DataQualityReport
    company_name: str | None = None
    cik: str | None = None


# ── Company directory types ───────────────────────────────────────────────────

@dataclass(frozen=True)
class CompanyMatch:
    """One hit from a company directory search."""

    ticker: str
    name: str
    cik: str


@dataclass(frozen=True)
class BusinessAddress:
    street1: str | None = None
    street2: str | None = None
    city: str | None = None
    state_or_country: str | None = None
    zip_code: str | None = None


@dataclass(frozen=True)
class CompanyProfile:
    """
    Registrant details from the EDGAR submissions endpoint.

    Attributes
    ----------
    recent_accessions:
        Most recent accession numbers, newest first.
    """

    cik: str
    name: str
    sic: str | None = None
    sic_description: str | None = None
    category: str | None = None
    fiscal_year_end: str | None = None
    state_of_incorporation: str | None = None
    phone: str | None = None
    address: BusinessAddress = field(default_factory=BusinessAddress)
    recent_accessions: tuple[str, ...] = ()
