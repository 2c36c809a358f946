"""
io.py – File I/O helpers for writing tables and caching HTTP responses.

Tables go out as CSV, Excel (openpyxl) or Parquet (pyarrow). The response
cache uses diskcache so EDGAR downloads persist across sessions.
"""

from __future__ import annotations

import hashlib
import json
import logging
from pathlib import Path
from typing import Any

import diskcache
import pandas as pd

logger = logging.getLogger(__name__)


# ── Table / document output ───────────────────────────────────────────────────

def write_dataframe(
    df: pd.DataFrame,
    output_dir: Path,
    stem: str,
    fmt: str = "csv",
    sheet_name: str = "snapshot",
) -> Path:
    """
    Write a DataFrame to disk in the specified format.

    Parameters
    ----------
    df:
        DataFrame to write.
    output_dir:
        Directory to write into (created if necessary).
    stem:
        Filename without extension.
    fmt:
        'csv', 'xlsx' or 'parquet'.
    sheet_name:
        Worksheet name for 'xlsx'.

    Returns
    -------
    Path to the written file.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    if fmt == "csv":
        path = output_dir / f"{stem}.csv"
        df.to_csv(path, index=False)
    elif fmt == "xlsx":
        path = output_dir / f"{stem}.xlsx"
        df.to_excel(path, index=False, sheet_name=sheet_name, engine="openpyxl")
    elif fmt == "parquet":
        path = output_dir / f"{stem}.parquet"
        df.to_parquet(path, index=False, engine="pyarrow")
    else:
        raise ValueError(f"Unsupported output format: {fmt!r}")
    logger.debug("Wrote %d rows → %s", len(df), path)
    return path


def write_json(obj: Any, path: Path) -> None:
    """Write a JSON-serializable object to a file with stable key order."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as fh:
        json.dump(obj, fh, indent=2)
        fh.write("\n")


def read_json(path: Path) -> Any:
    """Read a JSON file and return the parsed object."""
    with path.open("r", encoding="utf-8") as fh:
        return json.load(fh)


# ── Disk-based HTTP cache ─────────────────────────────────────────────────────

def request_cache_key(url: str, params: dict[str, Any] | None = None) -> str:
    """Stable SHA-256 cache key for an HTTP GET (params order-insensitive)."""
    payload: dict[str, Any] = {"url": url}
    if params:
        payload["params"] = params
    canonical = json.dumps(payload, sort_keys=True, default=str)
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()


class ResponseCache:
    """
    Disk-backed cache for decoded HTTP responses.

    Uses `diskcache.Cache` behind the scenes for cross-session persistence.

    Parameters
    ----------
    cache_dir:
        Root directory for cache data.
    size_limit_gb:
        Maximum cache size in gigabytes.
    """

    def __init__(self, cache_dir: Path, size_limit_gb: float = 2.0) -> None:
        self._cache = diskcache.Cache(
            str(cache_dir),
            size_limit=int(size_limit_gb * 1024 ** 3),
        )

    def get(self, key: str) -> Any | None:
        """Return cached value or None."""
        return self._cache.get(key)

    def set(self, key: str, value: Any, expire: int | None = None) -> None:
        """Store value under key; ``expire`` is a TTL in seconds (None = no expiry)."""
        self._cache.set(key, value, expire=expire)

    def close(self) -> None:
        """Close the underlying cache file handles."""
        self._cache.close()
