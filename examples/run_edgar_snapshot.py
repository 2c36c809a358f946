"""
run_edgar_snapshot.py – Example: Build canonical snapshots for a few tickers.

Usage:
  python examples/run_edgar_snapshot.py

Note: Requires SEC_USER_AGENT to be set in environment or .env file.
"""

from __future__ import annotations

from pathlib import Path

from xbrl_snapshot.config import EngineConfig
from xbrl_snapshot.data.outputs import write_snapshot
from xbrl_snapshot.exceptions import SnapshotEngineError
from xbrl_snapshot.snapshot.builder import build_edgar_snapshot
from xbrl_snapshot.types import SnapshotRequest
from xbrl_snapshot.utils.logging import configure_logging

# ── Configuration ─────────────────────────────────────────────────────────────
TICKERS = ["AAPL", "MSFT", "GOOGL"]
OUTPUT_DIR = Path("out/edgar_example")
FORMAT = "csv"  # or "xlsx" / "parquet"

configure_logging("INFO")


def main() -> None:
    # Reads SEC_USER_AGENT, MIN_FISCAL_YEAR, TREND_WINDOW... from .env or environment
    config = EngineConfig(
        user_agent="ResearchProject/1.0 researcher@example.com",
        cache_dir=Path(".cache"),
    )

    print(f"\nBuilding snapshots (fiscal years >= {config.min_fiscal_year})...")

    for ticker in TICKERS:
        try:
            result = build_edgar_snapshot(SnapshotRequest(ticker=ticker), config=config)
        except SnapshotEngineError as exc:
            print(f"   {ticker}: failed ({exc})")
            continue

        income = result.statement.income
        metrics = result.statement.metrics
        print(
            f"\n{result.ticker} – {result.company_name} "
            f"(FY{result.statement.metadata.fiscal_year})"
        )
        print(f"   Revenue:      {income.revenue}")
        print(f"   Net income:   {income.net_income}")
        print(f"   Gross margin: {metrics.gross_margin}")
        print(f"   Quality:      {result.quality.score}/110 {list(result.quality.issues)}")

        written = write_snapshot(result, OUTPUT_DIR, fmt=FORMAT)
        for kind, path in written.items():
            print(f"   {kind}: {path}")


if __name__ == "__main__":
    main()
