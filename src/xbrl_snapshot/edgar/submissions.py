"""
submissions.py – Registrant profile from the EDGAR submissions endpoint.

The submissions document describes the company (name, SIC, fiscal year end,
addresses) and its filing history. Only the descriptive part and the most
recent accession numbers are kept.
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from xbrl_snapshot.constants import EDGAR_SUBMISSIONS_URL, RECENT_FILINGS_LIMIT
from xbrl_snapshot.edgar.client import EdgarClient
from xbrl_snapshot.exceptions import EdgarRequestError
from xbrl_snapshot.types import BusinessAddress, CompanyProfile

logger = logging.getLogger(__name__)


def fetch_company_profile(client: EdgarClient, cik: str) -> CompanyProfile:
    """
    Fetch and parse the submissions document for ``cik``.

    Parameters
    ----------
    client:
        Configured EdgarClient.
    cik:
        CIK, zero-padded or not.

    Raises
    ------
    EdgarRequestError: on HTTP or decoding failure.
    """
    url = EDGAR_SUBMISSIONS_URL.format(cik=int(cik))
    try:
        raw = client.get_json(url)
    except (requests.RequestException, ValueError) as exc:
        raise EdgarRequestError(url, str(exc)) from exc
    profile = parse_company_profile(raw, cik)
    logger.info("Loaded profile for CIK=%s (%s)", profile.cik, profile.name)
    return profile


def parse_company_profile(raw: dict[str, Any], cik: str) -> CompanyProfile:
    """Build a CompanyProfile from a decoded submissions document."""
    business = (raw.get("addresses") or {}).get("business") or {}
    recent = ((raw.get("filings") or {}).get("recent") or {}).get("accessionNumber") or []

    return CompanyProfile(
        cik=str(cik).zfill(10),
        name=str(raw.get("name") or ""),
        sic=_opt_str(raw.get("sic")),
        sic_description=_opt_str(raw.get("sicDescription")),
        category=_opt_str(raw.get("category")),
        fiscal_year_end=_opt_str(raw.get("fiscalYearEnd")),
        state_of_incorporation=_opt_str(raw.get("stateOfIncorporation")),
        phone=_opt_str(raw.get("phone")),
        address=BusinessAddress(
            street1=_opt_str(business.get("street1")),
            street2=_opt_str(business.get("street2")),
            city=_opt_str(business.get("city")),
            state_or_country=_opt_str(business.get("stateOrCountry")),
            zip_code=_opt_str(business.get("zipCode")),
        ),
        recent_accessions=tuple(str(a) for a in recent[:RECENT_FILINGS_LIMIT]),
    )


def _opt_str(value: Any) -> str | None:
    if value is None or value == "":
        return None
    return str(value)
