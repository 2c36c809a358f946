"""
cik_map.py – Company directory over the SEC's company_tickers.json endpoint.

Resolves tickers to CIKs and answers substring searches over tickers and
registrant names. CIKs are zero-padded to 10 digits as required by SEC API
endpoints.
"""

from __future__ import annotations

import logging

import requests

from xbrl_snapshot.constants import (
    DEFAULT_SEARCH_LIMIT,
    EDGAR_TICKER_CIK_URL,
    MIN_SEARCH_QUERY_LENGTH,
)
from xbrl_snapshot.edgar.client import EdgarClient
from xbrl_snapshot.exceptions import CIKLookupError, EdgarRequestError
from xbrl_snapshot.types import CompanyMatch

logger = logging.getLogger(__name__)


class CIKMapper:
    """
    Resolves equity tickers to their SEC CIK numbers.

    Downloads company_tickers.json once and keeps a normalized
    ticker→company index in memory. The raw JSON is cached to disk by
    EdgarClient automatically.

    Parameters
    ----------
    client:
        Configured EdgarClient instance.
    """

    def __init__(self, client: EdgarClient) -> None:
        self._client = client
        self._companies: dict[str, CompanyMatch] = {}  # ticker (upper) → match

    def load(self) -> None:
        """
        Download and parse company_tickers.json from SEC.

        Safe to call multiple times; subsequent calls are no-ops once the
        index is populated.

        Raises
        ------
        EdgarRequestError: on HTTP or decoding failure.
        """
        if self._companies:
            return

        try:
            raw: dict[str, dict[str, object]] = self._client.get_json(EDGAR_TICKER_CIK_URL)
        except (requests.RequestException, ValueError) as exc:
            raise EdgarRequestError(EDGAR_TICKER_CIK_URL, str(exc)) from exc

        # The JSON is a dict of integer index → {cik_str, ticker, title}
        for entry in raw.values():
            ticker = str(entry.get("ticker", "")).strip().upper()
            cik_raw = str(entry.get("cik_str", "")).strip()
            name = str(entry.get("title", "")).strip()

            if ticker and cik_raw and ticker not in self._companies:
                self._companies[ticker] = CompanyMatch(
                    ticker=ticker, name=name, cik=cik_raw.zfill(10)
                )

        logger.info("Company directory loaded: %d entries", len(self._companies))

    def resolve(self, ticker: str) -> str:
        """
        Resolve a ticker (case-insensitive) to a zero-padded 10-digit CIK.

        Raises
        ------
        CIKLookupError: if the ticker is not found.
        """
        self.load()
        match = self._companies.get(ticker.strip().upper())
        if match is None:
            raise CIKLookupError(ticker)
        return match.cik

    def company_name(self, ticker: str) -> str | None:
        """Return the SEC-registered company name for a ticker, or None."""
        self.load()
        match = self._companies.get(ticker.strip().upper())
        return match.name if match else None

    def search(self, query: str, limit: int = DEFAULT_SEARCH_LIMIT) -> list[CompanyMatch]:
        """
        Find companies whose ticker or name contains ``query``.

        Matching is case-insensitive. An exact ticker match is listed
        first; the rest follow in ticker order.

        Raises
        ------
        ValueError: if the query is shorter than two characters.
        """
        term = query.strip().lower()
        if len(term) < MIN_SEARCH_QUERY_LENGTH:
            raise ValueError(
                f"Search query must be at least {MIN_SEARCH_QUERY_LENGTH} characters, got {query!r}"
            )

        self.load()
        hits = [
            m for m in self._companies.values()
            if term in m.ticker.lower() or term in m.name.lower()
        ]
        hits.sort(key=lambda m: (m.ticker.lower() != term, m.ticker))
        return hits[:limit]
