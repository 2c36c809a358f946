"""
tests/conftest.py – Shared fixtures for all tests.

Raw facts documents are built in memory in companyfacts shape:
``{"cik", "entityName", "facts": {"us-gaap": {tag: {"units": {unit: [entry]}}}}}``.
"""
from __future__ import annotations

import logging
from typing import Any, Callable

import pytest

from xbrl_snapshot.config import EngineConfig
from xbrl_snapshot.utils.logging import PACKAGE_LOGGER

FY2023_END = "2023-12-31"
FY2023_FILED = "2024-02-01"


def _entry(
    val: Any,
    end: str | None = FY2023_END,
    form: str = "10-K",
    fp: str | None = "FY",
    filed: str | None = FY2023_FILED,
) -> dict[str, Any]:
    entry: dict[str, Any] = {"val": val, "form": form}
    if end is not None:
        entry["end"] = end
    if fp is not None:
        entry["fp"] = fp
    if filed is not None:
        entry["filed"] = filed
    return entry


def _facts(
    concepts: dict[str, Any],
    entity_name: str = "Acme Corp",
    cik: int | None = 1234,
) -> dict[str, Any]:
    """
    Wrap ``{tag: [entries]}`` (USD) or ``{tag: {unit: [entries]}}`` in a
    companyfacts payload.
    """
    gaap: dict[str, Any] = {}
    for tag, entries in concepts.items():
        units = entries if isinstance(entries, dict) else {"USD": entries}
        gaap[tag] = {"label": tag, "units": units}
    return {"cik": cik, "entityName": entity_name, "facts": {"us-gaap": gaap}}


@pytest.fixture()
def make_entry() -> Callable[..., dict[str, Any]]:
    return _entry


@pytest.fixture()
def make_facts() -> Callable[..., dict[str, Any]]:
    return _facts


@pytest.fixture()
def complete_concepts() -> dict[str, Any]:
    """
    Every canonical line item reported for FY2023, plus a FY2022 comparative
    column and three 10-Q revenue points.
    """
    return {
        "RevenueFromContractWithCustomerExcludingAssessedTax": [
            _entry(900.0, end="2022-12-31", filed="2023-02-01"),
            _entry(240.0, end="2023-03-31", form="10-Q", fp="Q1", filed="2023-05-01"),
            _entry(250.0, end="2023-06-30", form="10-Q", fp="Q2", filed="2023-08-01"),
            _entry(260.0, end="2023-09-30", form="10-Q", fp="Q3", filed="2023-11-01"),
            _entry(1000.0),
        ],
        "CostOfGoodsAndServicesSold": [_entry(600.0)],
        "SellingGeneralAndAdministrativeExpense": [_entry(100.0)],
        "ResearchAndDevelopmentExpense": [_entry(50.0)],
        "OperatingIncomeLoss": [_entry(250.0)],
        "NetIncomeLoss": [
            _entry(180.0, end="2022-12-31", filed="2023-02-01"),
            _entry(200.0),
        ],
        "EarningsPerShareBasic": {"USD/shares": [_entry(2.0)]},
        "CommonStockSharesOutstanding": {"shares": [_entry(100.0)]},
        "Assets": [_entry(2000.0)],
        "AssetsCurrent": [_entry(800.0)],
        "CashAndCashEquivalentsAtCarryingValue": [_entry(300.0)],
        "Liabilities": [_entry(1200.0)],
        "LiabilitiesCurrent": [_entry(400.0)],
        "StockholdersEquity": [_entry(800.0)],
        "NetCashProvidedByUsedInOperatingActivities": [_entry(300.0)],
        "NetCashProvidedByUsedInInvestingActivities": [_entry(-100.0)],
        "NetCashProvidedByUsedInFinancingActivities": [_entry(-50.0)],
    }


@pytest.fixture()
def complete_facts(complete_concepts: dict[str, Any]) -> dict[str, Any]:
    return _facts(complete_concepts)


@pytest.fixture()
def empty_facts() -> dict[str, Any]:
    return _facts({})


@pytest.fixture()
def engine_config(tmp_path) -> EngineConfig:
    return EngineConfig(
        user_agent="SnapshotTests/1.0 tests@example.com",
        cache_dir=tmp_path / "cache",
        output_dir=tmp_path / "out",
        min_fiscal_year=2022,
    )


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Undo configure_logging() calls made by CLI tests so caplog keeps working."""
    yield
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
