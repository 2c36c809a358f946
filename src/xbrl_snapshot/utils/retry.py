"""
retry.py – Retry decorator with exponential backoff for HTTP requests.

Uses tenacity under the hood. Configured specifically for SEC EDGAR
429 (too many requests) and transient 5xx errors.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, TypeVar

import requests
from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from xbrl_snapshot.exceptions import RateLimitError

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

RETRYABLE_STATUS_CODES: frozenset[int] = frozenset({429, 500, 502, 503, 504})


class RetryableHTTPError(Exception):
    """Wrapper used to signal tenacity that a retry should occur."""

    def __init__(self, response: requests.Response) -> None:
        self.response = response
        super().__init__(f"HTTP {response.status_code}: {response.url}")


def _is_retryable(exc: BaseException) -> bool:
    if isinstance(exc, RetryableHTTPError):
        return exc.response.status_code in RETRYABLE_STATUS_CODES
    if isinstance(exc, (requests.ConnectionError, requests.Timeout)):
        return True
    return False


def with_retry(
    max_attempts: int = 5,
    min_wait: float = 1.0,
    max_wait: float = 60.0,
) -> Callable[[F], F]:
    """
    Decorator factory that applies tenacity retry logic.

    Parameters
    ----------
    max_attempts:
        Maximum number of total attempts (including first).
    min_wait:
        Minimum wait between retries in seconds.
    max_wait:
        Maximum wait between retries in seconds.
    """
    return retry(  # type: ignore[return-value]
        retry=retry_if_exception(_is_retryable),
        wait=wait_exponential(multiplier=1, min=min_wait, max=max_wait),
        stop=stop_after_attempt(max_attempts),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )


def check_response(response: requests.Response) -> requests.Response:
    """
    Raise ``RetryableHTTPError`` for retryable status codes, raise
    ``requests.HTTPError`` for other failures, or return the response.

    Call this inside any function decorated with ``@with_retry``.
    """
    if response.status_code in RETRYABLE_STATUS_CODES:
        raise RetryableHTTPError(response)
    response.raise_for_status()
    return response


def translate_exhausted(exc: RetryableHTTPError) -> Exception:
    """
    Map a retryable error that outlived its retries to the error callers see.

    429 becomes ``RateLimitError``; 5xx becomes ``requests.HTTPError``.
    """
    if exc.response.status_code == 429:
        return RateLimitError(f"SEC rate limit still exceeded after retries: {exc.response.url}")
    return requests.HTTPError(str(exc), response=exc.response)
