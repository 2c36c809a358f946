"""
fetch.py – Fetches XBRL companyfacts from SEC EDGAR.

The companyfacts endpoint returns ALL historical XBRL data for a company
in a single JSON blob. It is handed on unparsed; ``FactsDocument`` owns
validation.
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from xbrl_snapshot.constants import EDGAR_COMPANY_FACTS_URL, GAAP_NAMESPACE
from xbrl_snapshot.edgar.client import EdgarClient
from xbrl_snapshot.exceptions import FactsFetchError

logger = logging.getLogger(__name__)


class XBRLFetcher:
    """
    Fetches the SEC companyfacts XBRL endpoint.

    Parameters
    ----------
    client:
        Configured EdgarClient instance.
    """

    def __init__(self, client: EdgarClient) -> None:
        self._client = client

    def fetch_company_facts(self, cik: str) -> dict[str, Any]:
        """
        Fetch the raw companyfacts payload for a company.

        Parameters
        ----------
        cik:
            CIK, zero-padded or not.

        Returns
        -------
        The decoded JSON payload.

        Raises
        ------
        FactsFetchError: on HTTP or decoding failure.
        """
        url = EDGAR_COMPANY_FACTS_URL.format(cik=int(cik))

        try:
            raw = self._client.get_json(url)
        except (requests.RequestException, ValueError) as exc:
            raise FactsFetchError(cik, f"HTTP failure: {exc}") from exc

        if isinstance(raw, dict):
            concepts = raw.get("facts", {})
            if isinstance(concepts, dict):
                logger.info(
                    "Fetched %d %s tags for CIK=%s",
                    len(concepts.get(GAAP_NAMESPACE, {}) or {}), GAAP_NAMESPACE, cik,
                )
        return raw
