"""
builder.py – Snapshot build orchestrator.

``build_snapshot()`` is the pure core: one raw facts document in, one
SnapshotResult out, no I/O, no shared state. It:
1. Validates the document skeleton (FactsDocument)
2. Resolves every canonical line item (FactSelector)
3. Assembles statements and derived fields, then key metrics
4. Scores data quality
5. Samples quarterly trends

``build_edgar_snapshot()`` wraps it with the collaborators that locate and
download the document from SEC EDGAR.
"""

from __future__ import annotations

import logging
from typing import Any

from xbrl_snapshot.config import EngineConfig, default_min_fiscal_year
from xbrl_snapshot.config_resolver import resolve_config
from xbrl_snapshot.constants import DEFAULT_RATIO_BOUND, DEFAULT_TREND_WINDOW
from xbrl_snapshot.edgar.cik_map import CIKMapper
from xbrl_snapshot.edgar.client import EdgarClient
from xbrl_snapshot.edgar.xbrl.facts import FactsDocument
from xbrl_snapshot.edgar.xbrl.fetch import XBRLFetcher
from xbrl_snapshot.snapshot.quality import score_statement
from xbrl_snapshot.snapshot.selector import FactSelector
from xbrl_snapshot.snapshot.statements import build_statement
from xbrl_snapshot.snapshot.trends import sample_trends
from xbrl_snapshot.types import SnapshotRequest, SnapshotResult

logger = logging.getLogger(__name__)


def build_snapshot(
    raw_facts: Any,
    ticker: str,
    *,
    min_fiscal_year: int | None = None,
    trend_window: int = DEFAULT_TREND_WINDOW,
    ratio_bound: float = DEFAULT_RATIO_BOUND,
    company_name: str | None = None,
    cik: str | None = None,
) -> SnapshotResult:
    """
    Build a canonical snapshot from a raw companyfacts document.

    Parameters
    ----------
    raw_facts:
        Full companyfacts payload or bare namespace mapping.
    ticker:
        Ticker recorded in the snapshot metadata.
    min_fiscal_year:
        Annual-resolution floor. Defaults to the current year minus three;
        pass it explicitly for fully reproducible output.
    trend_window:
        Number of quarterly points per trend.
    ratio_bound:
        Sanity bound for percentage ratios.
    company_name, cik:
        Override the registrant name / CIK carried by the document.

    Raises
    ------
    MalformedFactsError: if the document lacks the expected structure.
    """
    document = FactsDocument.from_payload(raw_facts)
    floor = min_fiscal_year if min_fiscal_year is not None else default_min_fiscal_year()
    selector = FactSelector(document)

    statement = build_statement(selector, floor, ratio_bound=ratio_bound)
    quality = score_statement(statement)
    trends = sample_trends(selector, trend_window)

    logger.info(
        "Snapshot built for %s: fiscal_year=%s score=%d issues=%d",
        ticker, statement.metadata.fiscal_year, quality.score, len(quality.issues),
    )

    return SnapshotResult(
        ticker=ticker.strip().upper(),
        statement=statement,
        trends=trends,
        quality=quality,
        company_name=company_name or document.entity_name,
        cik=str(cik).strip().zfill(10) if cik else document.cik,
    )


def build_edgar_snapshot(
    request: SnapshotRequest,
    config: EngineConfig | None = None,
) -> SnapshotResult:
    """
    Fetch a company's facts from SEC EDGAR and build its snapshot.

    Parameters
    ----------
    request:
        Ticker (and optional CIK / per-request overrides).
    config:
        Engine configuration. If None, loads from environment.

    Raises
    ------
    CIKLookupError: if the ticker cannot be resolved and no CIK was given.
    FactsFetchError: if the facts document cannot be downloaded.
    MalformedFactsError: if the downloaded document is malformed.
    """
    cfg = config or EngineConfig.from_env()
    resolved = resolve_config(request, cfg)

    with EdgarClient(cfg) as client:
        company_name: str | None = None
        cik = request.cik
        if cik is None:
            cik_mapper = CIKMapper(client)
            cik = cik_mapper.resolve(request.ticker)
            company_name = cik_mapper.company_name(request.ticker)
        cik = str(cik).zfill(10)

        logger.info("Processing ticker=%s cik=%s", request.ticker, cik)
        raw = XBRLFetcher(client).fetch_company_facts(cik)

    return build_snapshot(
        raw,
        request.ticker,
        min_fiscal_year=resolved.min_fiscal_year,
        trend_window=resolved.trend_window,
        ratio_bound=resolved.ratio_bound,
        company_name=company_name,
        cik=cik,
    )
