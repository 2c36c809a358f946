"""
facts.py – Read-only view over a raw companyfacts document.

The SEC companyfacts endpoint returns ALL historical XBRL data for a company
in one JSON blob shaped ``facts → namespace → tag → units → unit → [entry]``.
``FactsDocument`` validates that skeleton once and parses entries into
``Observation`` objects on demand, per tag and unit.

Structural violations raise ``MalformedFactsError``. Individual entries that
cannot be used (non-numeric or non-finite value, missing period end) are
dropped silently: they are data gaps, not contract violations.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from typing import Any

from xbrl_snapshot.constants import GAAP_NAMESPACE, UNIT_USD
from xbrl_snapshot.exceptions import MalformedFactsError
from xbrl_snapshot.types import FiscalPeriod, FormType, Observation
from xbrl_snapshot.utils.dates import parse_date_or_none

logger = logging.getLogger(__name__)


class FactsDocument:
    """
    Validated, immutable access to one namespace of a RawFactsDocument.

    Parameters
    ----------
    namespaces:
        Mapping of taxonomy namespace → {tag: fact}. Not copied; callers
        must not mutate it while the document is in use.
    namespace:
        Namespace consumed by lookups (default 'us-gaap').
    entity_name:
        Registrant name, when the payload carried one.
    cik:
        Zero-padded CIK, when the payload carried one.
    """

    def __init__(
        self,
        namespaces: Mapping[str, Any],
        namespace: str = GAAP_NAMESPACE,
        entity_name: str | None = None,
        cik: str | None = None,
    ) -> None:
        _require_mapping(namespaces, "facts")
        concepts = namespaces.get(namespace, {})
        _require_mapping(concepts, f"facts.{namespace}")
        self._namespace = namespace
        self._concepts: Mapping[str, Any] = concepts
        self._cache: dict[tuple[str, str], tuple[Observation, ...]] = {}
        self.entity_name = entity_name
        self.cik = cik

    @classmethod
    def from_payload(cls, raw: Any, namespace: str = GAAP_NAMESPACE) -> "FactsDocument":
        """
        Build a document from a companyfacts payload.

        Accepts either the full payload (``{"cik", "entityName", "facts"}``)
        or the bare namespace mapping (``{"us-gaap": {...}}``).

        Raises
        ------
        MalformedFactsError: if the top-level structure is not as expected.
        """
        _require_mapping(raw, "<root>")
        if not raw:
            raise MalformedFactsError("<root>", "empty document")

        if "facts" in raw:
            entity_name = raw.get("entityName")
            cik_raw = raw.get("cik")
            cik = str(cik_raw).zfill(10) if cik_raw not in (None, "") else None
            return cls(
                raw["facts"],
                namespace=namespace,
                entity_name=str(entity_name) if entity_name else None,
                cik=cik,
            )

        if "cik" in raw or "entityName" in raw:
            raise MalformedFactsError("facts", "companyfacts payload without a facts object")
        for key, value in raw.items():
            _require_mapping(value, str(key))
        return cls(raw, namespace=namespace)

    def observations(self, tag: str, unit: str = UNIT_USD) -> tuple[Observation, ...]:
        """
        Return every usable observation of ``tag`` reported in ``unit``.

        Order follows the document. An absent tag or unit yields an empty
        tuple.

        Raises
        ------
        MalformedFactsError: if the fact or its unit list has the wrong shape.
        """
        key = (tag, unit)
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        fact = self._concepts.get(tag)
        if fact is None:
            self._cache[key] = ()
            return ()

        path = f"facts.{self._namespace}.{tag}"
        _require_mapping(fact, path)
        units = fact.get("units", {})
        _require_mapping(units, f"{path}.units")

        entries = units.get(unit)
        if entries is None:
            self._cache[key] = ()
            return ()
        if not isinstance(entries, list):
            raise MalformedFactsError(f"{path}.units.{unit}", "expected a list of observations")

        parsed = tuple(
            obs for obs in (_parse_entry(entry, unit) for entry in entries)
            if obs is not None
        )
        if len(parsed) < len(entries):
            logger.debug(
                "Dropped %d unusable observations for %s [%s]",
                len(entries) - len(parsed), tag, unit,
            )
        self._cache[key] = parsed
        return parsed


def _require_mapping(value: Any, path: str) -> None:
    if not isinstance(value, Mapping):
        raise MalformedFactsError(path, f"expected an object, got {type(value).__name__}")


def _parse_entry(entry: Any, unit: str) -> Observation | None:
    """Parse one raw entry, or return None when it cannot be used."""
    if not isinstance(entry, Mapping):
        return None

    val_raw = entry.get("val")
    if isinstance(val_raw, bool) or val_raw is None:
        return None
    try:
        value = float(val_raw)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value):
        return None

    period_end = parse_date_or_none(entry.get("end"))
    if period_end is None:
        return None

    return Observation(
        value=value,
        unit=unit,
        form_type=FormType.parse(entry.get("form")),
        fiscal_period=FiscalPeriod.parse(entry.get("fp")),
        period_end=period_end,
        filed=parse_date_or_none(entry.get("filed")),
    )
