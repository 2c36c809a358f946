"""
selector.py – Resolves canonical line items from a facts document.

Implements the alias-preference walk used by every statement field:
- Tags are tried in the order the alias table lists them.
- The first tag with at least one qualifying observation is authoritative;
  later tags are never consulted, even if they hold a more recent or more
  complete record. Filings are tag-inconsistent across companies but
  internally consistent per company, and mixing tags risks double counting.
- A tag that is present but has no qualifying observation is treated
  exactly like an absent tag.
"""

from __future__ import annotations

import logging

from xbrl_snapshot.edgar.xbrl.contexts import (
    filter_annual,
    filter_trend,
    sort_most_recent_first,
)
from xbrl_snapshot.edgar.xbrl.facts import FactsDocument
from xbrl_snapshot.edgar.xbrl.mapper import TagMapping
from xbrl_snapshot.types import QuarterlyPoint, ResolvedValue

logger = logging.getLogger(__name__)


class FactSelector:
    """
    Selects observations for canonical line items out of one FactsDocument.

    Holds no state besides the document; safe to share across threads.

    Parameters
    ----------
    document:
        Validated facts document for one company.
    """

    def __init__(self, document: FactsDocument) -> None:
        self._document = document

    def select_annual(
        self,
        mapping: TagMapping,
        min_fiscal_year: int,
    ) -> ResolvedValue | None:
        """
        Resolve the most recent full-year value for one line item.

        Parameters
        ----------
        mapping:
            Alias entry for the line item.
        min_fiscal_year:
            Observations whose period ends before this year are ignored.

        Returns
        -------
        ResolvedValue, or None if no tag yields a qualifying observation.
        """
        for tag in mapping.tags:
            candidates = filter_annual(
                self._document.observations(tag, mapping.unit), min_fiscal_year
            )
            if not candidates:
                continue

            best = sort_most_recent_first(candidates)[0]
            logger.debug(
                "Resolved %s via %s: value=%s period_end=%s",
                mapping.standard_field, tag, best.value, best.period_end,
            )
            return ResolvedValue(
                value=best.value,
                fiscal_year=best.period_end.year,
                period_end=best.period_end,
                filed=best.filed,
                tag=tag,
            )

        logger.debug("No qualifying annual observation for %s", mapping.standard_field)
        return None

    def select_quarterly(
        self,
        mapping: TagMapping,
        window_size: int,
    ) -> tuple[QuarterlyPoint, ...]:
        """
        Resolve up to ``window_size`` recent periodic values for one line item.

        Same alias walk as ``select_annual`` with the trend qualification
        rules. Returns an empty tuple (never None) if nothing qualifies.
        """
        if window_size < 1:
            raise ValueError(f"window_size must be at least 1, got {window_size}")

        for tag in mapping.tags:
            candidates = filter_trend(self._document.observations(tag, mapping.unit))
            if not candidates:
                continue

            ordered = sort_most_recent_first(candidates)[:window_size]
            return tuple(
                QuarterlyPoint(
                    value=obs.value,
                    fiscal_period=obs.fiscal_period.value,  # type: ignore[union-attr]
                    period_end=obs.period_end,
                    fiscal_year=obs.period_end.year,
                )
                for obs in ordered
            )

        return ()
