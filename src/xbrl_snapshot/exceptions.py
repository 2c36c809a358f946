"""
exceptions.py – Custom exception hierarchy for the snapshot engine.

Data-completeness gaps are never exceptions: an unresolvable line item is
None in the output. Exceptions are reserved for broken collaborator
contracts (malformed documents, transport failures, unknown tickers).
"""

from __future__ import annotations


class SnapshotEngineError(Exception):
    """Base exception for the snapshot engine. All engine errors inherit from this."""


class MalformedFactsError(SnapshotEngineError):
    """
    Raised when a raw facts document lacks the expected top-level structure.

    Attributes
    ----------
    path:
        Location of the offending node, e.g. 'facts.us-gaap.Revenues.units'.
    detail:
        What was expected there.
    """

    def __init__(self, path: str, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Malformed facts document at '{path}': {detail}")


class FactsFetchError(SnapshotEngineError):
    """
    Raised when the companyfacts document cannot be retrieved.

    Attributes
    ----------
    cik:
        CIK whose document was requested.
    detail:
        Additional diagnostic information.
    """

    def __init__(self, cik: str, detail: str) -> None:
        self.cik = cik
        self.detail = detail
        super().__init__(f"Could not fetch company facts for cik='{cik}': {detail}")


class EdgarRequestError(SnapshotEngineError):
    """
    Raised when an EDGAR directory or profile request fails in transport.

    Attributes
    ----------
    url:
        The URL that was requested.
    detail:
        Additional diagnostic information.
    """

    def __init__(self, url: str, detail: str) -> None:
        self.url = url
        self.detail = detail
        super().__init__(f"EDGAR request failed for url='{url}': {detail}")


class CIKLookupError(SnapshotEngineError):
    """
    Raised when a ticker cannot be resolved to a CIK number.

    Attributes
    ----------
    ticker:
        The ticker that was looked up.
    """

    def __init__(self, ticker: str) -> None:
        self.ticker = ticker
        super().__init__(f"CIK resolution failed for ticker='{ticker}'")


class RateLimitError(SnapshotEngineError):
    """Raised when SEC rate limit is exceeded and retries are exhausted."""


class QualityThresholdError(SnapshotEngineError):
    """
    Raised when a snapshot scores below the configured minimum quality.

    Attributes
    ----------
    ticker:
        The ticker whose snapshot was rejected.
    score:
        The score it achieved.
    minimum:
        The score that was required.
    """

    def __init__(self, ticker: str, score: int, minimum: int) -> None:
        self.ticker = ticker
        self.score = score
        self.minimum = minimum
        super().__init__(
            f"Data quality too low for ticker='{ticker}': score {score} < required {minimum}"
        )
