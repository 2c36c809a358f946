"""
mapper.py – Concept alias table: canonical line item → acceptable us-gaap tags.

The mapping is intentionally verbose and explicit. Each canonical field has
a list of acceptable tag names, tried in priority order. Order encodes
preference, not chronology: the FactSelector stops at the first tag that
yields any qualifying observation.

To extend: add new tag variants to ALIAS_TABLE below. Changing the order of
an existing list changes which historical values are reported.
"""

from __future__ import annotations

from typing import NamedTuple

from xbrl_snapshot.constants import UNIT_SHARES, UNIT_USD, UNIT_USD_PER_SHARE


class TagMapping(NamedTuple):
    """
    Maps a canonical field to one or more us-gaap tag candidates.

    Attributes
    ----------
    standard_field:
        Canonical line item name.
    tags:
        us-gaap concept names in priority order (no namespace prefix).
    unit:
        Unit the observations must be reported in.
    """

    standard_field: str
    tags: tuple[str, ...]
    unit: str


# ── Concept Alias Table ───────────────────────────────────────────────────────
# Each entry = TagMapping(field, (preferred_tag, fallback1, ...), unit)
# Tags are tried in ORDER; first one with a qualifying observation wins.

ALIAS_TABLE: tuple[TagMapping, ...] = (

    # ── Income Statement ──────────────────────────────────────────────────────
    TagMapping(
        "revenue",
        (
            "RevenueFromContractWithCustomerExcludingAssessedTax",
            "Revenues",
            "RevenueFromContractWithCustomerIncludingAssessedTax",
            "SalesRevenueNet",
            "SalesRevenueGoodsNet",
            "SalesRevenueServicesNet",
            "RevenuesNetOfInterestExpense",
            "RevenueNetOfInterestExpense",
            "TotalRevenuesAndOtherIncome",
            "OperatingLeasesIncomeStatementLeaseRevenue",
            "RegulatedAndUnregulatedOperatingRevenue",
            "ElectricUtilityRevenue",
            "InterestAndDividendIncomeOperating",
        ),
        UNIT_USD,
    ),
    TagMapping(
        "cost_of_revenue",
        (
            "CostOfGoodsAndServicesSold",
            "CostOfRevenue",
            "CostOfGoodsSold",
            "CostOfServices",
            "CostOfGoodsAndServiceExcludingDepreciationDepletionAndAmortization",
            "CostOfGoodsSoldExcludingDepreciationDepletionAndAmortization",
        ),
        UNIT_USD,
    ),
    TagMapping(
        "sga",
        (
            "SellingGeneralAndAdministrativeExpense",
            "GeneralAndAdministrativeExpense",
            "SellingAndMarketingExpense",
            "SellingGeneralAndAdministrativeExpenseExcludingOtherExpense",
        ),
        UNIT_USD,
    ),
    TagMapping(
        "rd",
        (
            "ResearchAndDevelopmentExpense",
            "ResearchAndDevelopmentExpenseExcludingAcquiredInProcessCost",
            "ResearchAndDevelopmentExpenseSoftwareExcludingAcquiredInProcessCost",
        ),
        UNIT_USD,
    ),
    TagMapping(
        "operating_income",
        (
            "OperatingIncomeLoss",
        ),
        UNIT_USD,
    ),
    TagMapping(
        "net_income",
        (
            "NetIncomeLoss",
            "ProfitLoss",
            "NetIncomeLossAvailableToCommonStockholdersBasic",
            "IncomeLossFromContinuingOperations",
            "NetIncomeLossAttributableToParent",
        ),
        UNIT_USD,
    ),
    TagMapping(
        "eps_basic",
        (
            "EarningsPerShareBasic",
            "EarningsPerShareBasicAndDiluted",
            "IncomeLossFromContinuingOperationsPerBasicShare",
        ),
        UNIT_USD_PER_SHARE,
    ),
    TagMapping(
        "shares_outstanding",
        (
            "CommonStockSharesOutstanding",
            "WeightedAverageNumberOfSharesOutstandingBasic",
            "WeightedAverageNumberOfDilutedSharesOutstanding",
            "CommonStockSharesIssued",
        ),
        UNIT_SHARES,
    ),

    # ── Balance Sheet ─────────────────────────────────────────────────────────
    TagMapping(
        "total_assets",
        (
            "Assets",
            "AssetsNet",
            "LiabilitiesAndStockholdersEquity",
        ),
        UNIT_USD,
    ),
    TagMapping(
        "current_assets",
        (
            "AssetsCurrent",
        ),
        UNIT_USD,
    ),
    TagMapping(
        "cash_and_equivalents",
        (
            "CashAndCashEquivalentsAtCarryingValue",
            "CashCashEquivalentsAndShortTermInvestments",
            "Cash",
            "CashCashEquivalentsRestrictedCashAndRestrictedCashEquivalents",
            "CashAndDueFromBanks",
        ),
        UNIT_USD,
    ),
    TagMapping(
        "total_liabilities",
        (
            "Liabilities",
        ),
        UNIT_USD,
    ),
    TagMapping(
        "current_liabilities",
        (
            "LiabilitiesCurrent",
        ),
        UNIT_USD,
    ),
    TagMapping(
        "stockholders_equity",
        (
            "StockholdersEquity",
            "StockholdersEquityIncludingPortionAttributableToNoncontrollingInterest",
            "CommonStockholdersEquity",
            "PartnersCapital",
            "MembersEquity",
        ),
        UNIT_USD,
    ),

    # ── Cash Flow Statement ───────────────────────────────────────────────────
    TagMapping(
        "operating_cash_flow",
        (
            "NetCashProvidedByUsedInOperatingActivities",
            "NetCashProvidedByOperatingActivities",
            "NetCashProvidedByUsedInOperatingActivitiesContinuingOperations",
        ),
        UNIT_USD,
    ),
    TagMapping(
        "investing_cash_flow",
        (
            "NetCashProvidedByUsedInInvestingActivities",
            "NetCashProvidedByUsedInInvestingActivitiesContinuingOperations",
        ),
        UNIT_USD,
    ),
    TagMapping(
        "financing_cash_flow",
        (
            "NetCashProvidedByUsedInFinancingActivities",
            "NetCashProvidedByUsedInFinancingActivitiesContinuingOperations",
        ),
        UNIT_USD,
    ),
)

# Build lookup index: standard_field → TagMapping
FIELD_TO_MAPPING: dict[str, TagMapping] = {m.standard_field: m for m in ALIAS_TABLE}
