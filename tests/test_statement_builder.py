"""
test_statement_builder.py – Tests for statement assembly and derived fields.
"""

from __future__ import annotations

import datetime

import pytest

from xbrl_snapshot.edgar.xbrl.facts import FactsDocument
from xbrl_snapshot.snapshot.selector import FactSelector
from xbrl_snapshot.snapshot.statements import build_statement, resolve_line_items
from xbrl_snapshot.types import CanonicalStatement


def _build(raw, min_fiscal_year: int = 2022, **kwargs) -> CanonicalStatement:
    return build_statement(
        FactSelector(FactsDocument.from_payload(raw)), min_fiscal_year, **kwargs
    )


class TestCompleteStatement:
    def test_income_statement(self, complete_facts) -> None:
        income = _build(complete_facts).income
        assert income.revenue == 1000.0
        assert income.cost_of_revenue == 600.0
        assert income.gross_profit == 400.0
        assert income.operating_expenses.sga == 100.0
        assert income.operating_expenses.rd == 50.0
        assert income.operating_expenses.total == 150.0
        assert income.operating_income == 250.0
        assert income.net_income == 200.0
        assert income.eps_basic == 2.0
        assert income.shares_outstanding == 100.0

    def test_balance_sheet(self, complete_facts) -> None:
        balance = _build(complete_facts).balance
        assert balance.total_assets == 2000.0
        assert balance.current_assets == 800.0
        assert balance.cash_and_equivalents == 300.0
        assert balance.total_liabilities == 1200.0
        assert balance.current_liabilities == 400.0
        assert balance.stockholders_equity == 800.0
        assert balance.working_capital == 400.0

    def test_cash_flow_statement(self, complete_facts) -> None:
        cashflow = _build(complete_facts).cashflow
        assert cashflow.operating_cash_flow == 300.0
        assert cashflow.investing_cash_flow == -100.0
        assert cashflow.financing_cash_flow == -50.0
        assert cashflow.free_cash_flow == 200.0

    def test_key_metrics(self, complete_facts) -> None:
        metrics = _build(complete_facts).metrics
        assert metrics.gross_margin == 40.0
        assert metrics.operating_margin == 25.0
        assert metrics.net_margin == 20.0
        assert metrics.return_on_assets == 10.0
        assert metrics.return_on_equity == 25.0
        assert metrics.current_ratio == 2.0
        assert metrics.quick_ratio == 1.4
        assert metrics.debt_to_equity == 1.0
        assert metrics.debt_to_assets == 40.0
        assert metrics.asset_turnover == 0.5
        assert metrics.book_value_per_share == 8.0
        assert metrics.revenue_per_share == 10.0

    def test_metadata_anchored_on_revenue(self, complete_facts) -> None:
        meta = _build(complete_facts).metadata
        assert meta.fiscal_year == 2023
        assert meta.period_end == datetime.date(2023, 12, 31)
        assert meta.filed == datetime.date(2024, 2, 1)

    def test_floor_above_every_period_leaves_everything_absent(self, complete_facts) -> None:
        stmt = _build(complete_facts, min_fiscal_year=2030)
        assert stmt.income.revenue is None
        assert stmt.balance.total_assets is None
        assert stmt.metadata.fiscal_year is None

    def test_resolve_line_items_records_tags(self, complete_facts) -> None:
        selector = FactSelector(FactsDocument.from_payload(complete_facts))
        resolved = resolve_line_items(selector, 2022)
        assert resolved["revenue"].tag == "RevenueFromContractWithCustomerExcludingAssessedTax"
        assert resolved["total_assets"].tag == "Assets"


class TestDerivedFields:
    def test_gross_profit_needs_both_inputs(self, make_facts, make_entry) -> None:
        stmt = _build(make_facts({"Revenues": [make_entry(1000.0)]}))
        assert stmt.income.revenue == 1000.0
        assert stmt.income.gross_profit is None
        assert stmt.metrics.gross_margin is None

    def test_negative_gross_profit_kept(self, make_facts, make_entry) -> None:
        stmt = _build(make_facts({
            "Revenues": [make_entry(100.0)],
            "CostOfRevenue": [make_entry(150.0)],
        }))
        assert stmt.income.gross_profit == -50.0

    def test_working_capital_needs_both_inputs(self, make_facts, make_entry) -> None:
        stmt = _build(make_facts({"AssetsCurrent": [make_entry(800.0)]}))
        assert stmt.balance.working_capital is None

    def test_free_cash_flow_needs_both_inputs(self, make_facts, make_entry) -> None:
        stmt = _build(make_facts({
            "NetCashProvidedByUsedInOperatingActivities": [make_entry(300.0)],
        }))
        assert stmt.cashflow.free_cash_flow is None

    @pytest.mark.parametrize(
        "concepts, expected",
        [
            ({"SellingGeneralAndAdministrativeExpense": 100.0}, 100.0),
            ({"ResearchAndDevelopmentExpense": 50.0}, 50.0),
            ({}, None),
        ],
    )
    def test_operating_expense_total(self, make_facts, make_entry, concepts, expected) -> None:
        raw = make_facts({tag: [make_entry(v)] for tag, v in concepts.items()})
        assert _build(raw).income.operating_expenses.total == expected

    def test_per_share_needs_positive_shares(self, make_facts, make_entry) -> None:
        stmt = _build(make_facts({
            "Revenues": [make_entry(1000.0)],
            "StockholdersEquity": [make_entry(500.0)],
            "CommonStockSharesOutstanding": {"shares": [make_entry(0.0)]},
        }))
        assert stmt.income.shares_outstanding == 0.0
        assert stmt.metrics.book_value_per_share is None
        assert stmt.metrics.revenue_per_share is None

    def test_per_share_rounded(self, make_facts, make_entry) -> None:
        stmt = _build(make_facts({
            "Revenues": [make_entry(1000.0)],
            "CommonStockSharesOutstanding": {"shares": [make_entry(3.0)]},
        }))
        assert stmt.metrics.revenue_per_share == 333.33


class TestMetadata:
    def test_falls_back_to_first_resolved_line_item(self, make_facts, make_entry) -> None:
        stmt = _build(make_facts({
            "NetIncomeLoss": [make_entry(10.0, end="2022-12-31", filed="2023-02-10")],
            "Assets": [make_entry(99.0)],
        }))
        assert stmt.metadata.fiscal_year == 2022
        assert stmt.metadata.filed == datetime.date(2023, 2, 10)

    def test_empty_document_has_no_period(self, empty_facts) -> None:
        meta = _build(empty_facts).metadata
        assert meta.fiscal_year is None
        assert meta.period_end is None
        assert meta.filed is None


class TestMissingLiabilities:
    def test_liabilities_absent(self, complete_concepts, make_facts) -> None:
        for tag in ("Liabilities", "LiabilitiesCurrent"):
            del complete_concepts[tag]
        stmt = _build(make_facts(complete_concepts))
        assert stmt.balance.total_liabilities is None
        assert stmt.balance.current_liabilities is None
        assert stmt.balance.working_capital is None
        assert stmt.metrics.debt_to_equity is None
        assert stmt.metrics.debt_to_assets is None
        assert stmt.metrics.current_ratio is None
        assert stmt.metrics.quick_ratio is None
        # Unrelated metrics unaffected
        assert stmt.metrics.gross_margin == 40.0
