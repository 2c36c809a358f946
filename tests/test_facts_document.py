"""
test_facts_document.py – Tests for raw companyfacts validation and parsing.
"""

from __future__ import annotations

import datetime

import pytest

from xbrl_snapshot.edgar.xbrl.facts import FactsDocument
from xbrl_snapshot.exceptions import MalformedFactsError
from xbrl_snapshot.types import FiscalPeriod, FormType


class TestFromPayload:
    def test_full_payload_carries_entity_and_cik(self, complete_facts) -> None:
        doc = FactsDocument.from_payload(complete_facts)
        assert doc.entity_name == "Acme Corp"
        assert doc.cik == "0000001234"
        assert len(doc.observations("Assets")) == 1

    def test_bare_namespace_mapping_accepted(self, make_entry) -> None:
        doc = FactsDocument.from_payload(
            {"us-gaap": {"Assets": {"units": {"USD": [make_entry(10.0)]}}}}
        )
        assert doc.entity_name is None
        assert doc.cik is None
        assert len(doc.observations("Assets")) == 1

    def test_missing_namespace_is_empty_not_malformed(self) -> None:
        doc = FactsDocument.from_payload({"facts": {"dei": {}}})
        assert doc.observations("Revenues") == ()

    @pytest.mark.parametrize("raw", [None, [], "facts", 42])
    def test_non_mapping_root_raises(self, raw) -> None:
        with pytest.raises(MalformedFactsError):
            FactsDocument.from_payload(raw)

    @pytest.mark.parametrize(
        "raw",
        [
            {},
            {"cik": 320193, "entityName": "Apple Inc."},
            {"message": "Not Found"},
            {"us-gaap": {}, "dei": "missing"},
        ],
    )
    def test_payload_without_facts_structure_raises(self, raw) -> None:
        with pytest.raises(MalformedFactsError):
            FactsDocument.from_payload(raw)

    def test_facts_not_a_mapping_raises(self) -> None:
        with pytest.raises(MalformedFactsError) as exc_info:
            FactsDocument.from_payload({"facts": ["us-gaap"]})
        assert exc_info.value.path == "facts"

    def test_namespace_not_a_mapping_raises(self) -> None:
        with pytest.raises(MalformedFactsError):
            FactsDocument.from_payload({"facts": {"us-gaap": []}})


class TestObservations:
    def test_fact_node_wrong_shape_raises(self) -> None:
        doc = FactsDocument.from_payload({"facts": {"us-gaap": {"Assets": [1, 2]}}})
        with pytest.raises(MalformedFactsError) as exc_info:
            doc.observations("Assets")
        assert "Assets" in exc_info.value.path

    def test_unit_list_wrong_shape_raises(self) -> None:
        doc = FactsDocument.from_payload(
            {"facts": {"us-gaap": {"Assets": {"units": {"USD": {"val": 1}}}}}}
        )
        with pytest.raises(MalformedFactsError):
            doc.observations("Assets")

    def test_absent_unit_yields_empty(self, make_facts, make_entry) -> None:
        doc = FactsDocument.from_payload(make_facts({"Assets": [make_entry(1.0)]}))
        assert doc.observations("Assets", unit="EUR") == ()

    def test_unusable_entries_dropped(self, make_facts, make_entry) -> None:
        raw = make_facts({
            "Assets": [
                make_entry(100.0),
                make_entry("not a number"),
                make_entry(None),
                make_entry(True),
                make_entry(float("inf")),
                make_entry(float("nan")),
                make_entry(5.0, end=None),
                make_entry(5.0, end="2023-13-45"),
                "garbage",
            ]
        })
        obs = FactsDocument.from_payload(raw).observations("Assets")
        assert [o.value for o in obs] == [100.0]

    def test_entry_fields_parsed(self, make_facts, make_entry) -> None:
        raw = make_facts({"Assets": [make_entry(7.0, form="10-K/A", fp="FY")]})
        (obs,) = FactsDocument.from_payload(raw).observations("Assets")
        assert obs.form_type is FormType.ANNUAL_AMENDED
        assert obs.fiscal_period is FiscalPeriod.FY
        assert obs.period_end == datetime.date(2023, 12, 31)
        assert obs.filed == datetime.date(2024, 2, 1)
        assert obs.unit == "USD"

    def test_unknown_form_and_period(self, make_facts, make_entry) -> None:
        raw = make_facts({"Assets": [make_entry(7.0, form="8-K", fp="H1", filed=None)]})
        (obs,) = FactsDocument.from_payload(raw).observations("Assets")
        assert obs.form_type is FormType.OTHER
        assert obs.fiscal_period is None
        assert obs.filed is None

    def test_document_order_preserved(self, complete_facts) -> None:
        doc = FactsDocument.from_payload(complete_facts)
        ends = [o.period_end.isoformat() for o in doc.observations("NetIncomeLoss")]
        assert ends == ["2022-12-31", "2023-12-31"]
