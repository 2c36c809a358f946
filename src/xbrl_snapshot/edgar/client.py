"""
client.py – Low-level HTTP client for SEC EDGAR.

Wraps requests with:
- User-Agent injection (required by SEC)
- Rate limiting (minimum spacing between requests)
- Retry with exponential backoff
- Response caching via diskcache

Each EdgarClient instance owns its own rate limiter and cache; HTTP
sessions are pooled per user_agent so different configurations in the same
process never share a User-Agent.
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from xbrl_snapshot.config import EngineConfig
from xbrl_snapshot.utils.io import ResponseCache, request_cache_key
from xbrl_snapshot.utils.rate_limit import SECRateLimiter
from xbrl_snapshot.utils.retry import (
    RetryableHTTPError,
    check_response,
    translate_exhausted,
    with_retry,
)

logger = logging.getLogger(__name__)

_SESSION_POOL: dict[str, requests.Session] = {}

# companyfacts and submissions change as companies file; the ticker directory
# is refreshed daily by SEC.
DEFAULT_CACHE_TTL_SECONDS = 24 * 60 * 60


def _get_session(user_agent: str) -> requests.Session:
    """Return a per-user-agent requests.Session (cached at module level)."""
    if user_agent not in _SESSION_POOL:
        session = requests.Session()
        session.headers.update(
            {
                "User-Agent": user_agent,
                "Accept": "application/json",
                "Accept-Encoding": "gzip, deflate",
            }
        )
        _SESSION_POOL[user_agent] = session
        logger.debug("Created new HTTP session for user_agent=%r", user_agent)
    return _SESSION_POOL[user_agent]


class EdgarClient:
    """
    SEC EDGAR HTTP client with rate limiting, caching, and retry logic.

    Parameters
    ----------
    config:
        Engine configuration.
    cache_ttl:
        Seconds a cached response stays valid. None caches indefinitely.
    """

    def __init__(
        self,
        config: EngineConfig,
        cache_ttl: int | None = DEFAULT_CACHE_TTL_SECONDS,
    ) -> None:
        self._config = config
        self._cache_ttl = cache_ttl
        self._rate_limiter = SECRateLimiter(rps=config.sec_rate_limit_rps)
        self._cache = ResponseCache(config.cache_dir / "edgar_http")
        self._session = _get_session(config.user_agent)

    def get_json(self, url: str, params: dict[str, Any] | None = None) -> Any:
        """
        Fetch a JSON endpoint from EDGAR, returning the parsed object.

        Raises
        ------
        RateLimitError: if SEC keeps answering 429 after all retries.
        requests.RequestException: on any other transport failure.
        """
        cache_key = request_cache_key(url, params)

        cached = self._cache.get(cache_key)
        if cached is not None:
            logger.debug("Cache hit: %s", url)
            return cached

        @with_retry(max_attempts=5, min_wait=2.0, max_wait=60.0)
        def _fetch() -> Any:
            self._rate_limiter.acquire()
            resp = self._session.get(url, params=params, timeout=30)
            check_response(resp)
            return resp.json()

        try:
            data = _fetch()
        except RetryableHTTPError as exc:
            raise translate_exhausted(exc) from exc

        self._cache.set(cache_key, data, expire=self._cache_ttl)
        logger.debug("Fetched and cached: %s", url)
        return data

    def close(self) -> None:
        """Close the underlying response cache (session is shared, not closed)."""
        self._cache.close()

    def __enter__(self) -> "EdgarClient":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
