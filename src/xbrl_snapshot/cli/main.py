"""
main.py – CLI entry points for the XBRL snapshot engine.

Commands:
  snapshot   Build the canonical snapshot for one ticker and write it to disk.
  search     Find companies by ticker or name fragment.

Usage:
  xbrl-snapshot snapshot --ticker AAPL --out out/ --user-agent "Proj/1.0 a@b.com"
  xbrl-snapshot snapshot --ticker AAPL --facts CIK0000320193.json --out out/ --fmt xlsx
  xbrl-snapshot search apple --limit 5
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import click

from xbrl_snapshot.config import EngineConfig
from xbrl_snapshot.constants import DEFAULT_SEARCH_LIMIT, MAX_QUALITY_SCORE, OUTPUT_FORMATS
from xbrl_snapshot.data.outputs import write_snapshot
from xbrl_snapshot.edgar.cik_map import CIKMapper
from xbrl_snapshot.edgar.client import EdgarClient
from xbrl_snapshot.edgar.submissions import fetch_company_profile
from xbrl_snapshot.exceptions import QualityThresholdError, SnapshotEngineError
from xbrl_snapshot.snapshot.builder import build_edgar_snapshot, build_snapshot
from xbrl_snapshot.snapshot.quality import require_min_quality
from xbrl_snapshot.types import CompanyProfile, SnapshotRequest, SnapshotResult
from xbrl_snapshot.utils.io import read_json
from xbrl_snapshot.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


def _make_config(**overrides: Any) -> EngineConfig:
    """Build an EngineConfig from env, applying only the options actually given."""
    given = {k: v for k, v in overrides.items() if v is not None}
    try:
        return EngineConfig(**given)
    except ValueError as exc:
        raise click.UsageError(str(exc))


@click.group()
def cli() -> None:
    """Canonical financial statement snapshots from SEC XBRL company facts."""


# ── snapshot ──────────────────────────────────────────────────────────────────

@cli.command("snapshot")
@click.option("--ticker", required=True, help="Ticker symbol, e.g. AAPL.")
@click.option("--cik", default=None, help="CIK to use instead of resolving the ticker.")
@click.option(
    "--facts",
    "facts_file",
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Build from a local companyfacts JSON file instead of downloading it.",
)
@click.option(
    "--out",
    default=None,
    type=click.Path(file_okay=False, path_type=Path),
    help="Output directory (defaults to OUTPUT_DIR).",
)
@click.option(
    "--fmt",
    default="csv",
    type=click.Choice(list(OUTPUT_FORMATS)),
    show_default=True,
    help="Table format written next to the JSON document.",
)
@click.option(
    "--user-agent",
    default=None,
    envvar="SEC_USER_AGENT",
    help='SEC User-Agent header. Format: "Name/1.0 email@example.com"',
)
@click.option("--min-fiscal-year", type=int, default=None, help="Oldest fiscal year usable for annual figures.")
@click.option("--trend-window", type=int, default=None, help="Quarterly points per trend.")
@click.option("--min-quality", type=int, default=None, help="Reject snapshots scoring below this.")
@click.option(
    "--with-profile/--no-profile",
    default=False,
    show_default=True,
    help="Embed the registrant profile from the submissions endpoint.",
)
@click.option("--log-level", default="INFO", show_default=True)
@click.option("--json-logs", is_flag=True, default=False, help="Emit one JSON object per log line.")
def snapshot(
    ticker: str,
    cik: str | None,
    facts_file: Path | None,
    out: Path | None,
    fmt: str,
    user_agent: str | None,
    min_fiscal_year: int | None,
    trend_window: int | None,
    min_quality: int | None,
    with_profile: bool,
    log_level: str,
    json_logs: bool,
) -> None:
    """Build the canonical financial snapshot for one ticker."""
    configure_logging(log_level, json_output=json_logs)

    if facts_file is not None and with_profile:
        raise click.UsageError("--with-profile needs EDGAR access and cannot be combined with --facts.")
    if cik is not None:
        if not cik.strip().isdigit():
            raise click.BadParameter("CIK must be numeric.", param_hint="--cik")
        cik = cik.strip().zfill(10)

    config = _make_config(
        user_agent=user_agent,
        output_dir=out,
        min_fiscal_year=min_fiscal_year,
        trend_window=trend_window,
        min_quality_score=min_quality,
        log_level=log_level,
    )
    output_dir = out or config.output_dir

    try:
        if facts_file is not None:
            click.echo(f"snapshot: {ticker.upper()} | source={facts_file}")
            result = build_snapshot(
                _read_facts_file(facts_file),
                ticker,
                min_fiscal_year=config.min_fiscal_year,
                trend_window=config.trend_window,
                ratio_bound=config.ratio_bound,
                cik=cik,
            )
        else:
            click.echo(f"snapshot: {ticker.upper()} | source=SEC EDGAR")
            request = SnapshotRequest(ticker=ticker, cik=cik)
            result = build_edgar_snapshot(request, config=config)

        require_min_quality(result, config.min_quality_score)
        profile = _load_profile(result, config) if with_profile else None
    except QualityThresholdError as exc:
        click.echo(f"ERROR: {exc}", err=True)
        for issue in result.quality.issues:
            click.echo(f"  - {issue}", err=True)
        sys.exit(2)
    except SnapshotEngineError as exc:
        click.echo(f"ERROR: {exc}", err=True)
        sys.exit(1)

    paths = write_snapshot(result, output_dir, fmt=fmt, profile=profile)

    _echo_summary(result)
    click.echo(f"\nSnapshot written to: {output_dir}/")
    for kind, path in paths.items():
        click.echo(f"  {kind}: {path.name}")


def _read_facts_file(path: Path) -> Any:
    try:
        return read_json(path)
    except (OSError, ValueError) as exc:
        click.echo(f"ERROR: Could not read company facts from {path}: {exc}", err=True)
        sys.exit(1)


def _load_profile(result: SnapshotResult, config: EngineConfig) -> CompanyProfile | None:
    if result.cik is None:
        logger.warning("No CIK known for %s; skipping profile", result.ticker)
        return None
    with EdgarClient(config) as client:
        return fetch_company_profile(client, result.cik)


def _echo_summary(result: SnapshotResult) -> None:
    meta = result.statement.metadata
    click.echo(
        f"\n{result.ticker} ({result.company_name or 'unknown'}) "
        f"fiscal_year={meta.fiscal_year if meta.fiscal_year is not None else 'N/A'}"
    )
    click.echo(f"Data quality: {result.quality.score}/{MAX_QUALITY_SCORE}")
    for issue in result.quality.issues:
        click.echo(f"  - {issue}")


# ── search ────────────────────────────────────────────────────────────────────

@cli.command("search")
@click.argument("query")
@click.option("--limit", default=DEFAULT_SEARCH_LIMIT, show_default=True, type=int)
@click.option(
    "--user-agent",
    default=None,
    envvar="SEC_USER_AGENT",
    help='SEC User-Agent header. Format: "Name/1.0 email@example.com"',
)
@click.option("--log-level", default="WARNING", show_default=True)
def search(query: str, limit: int, user_agent: str | None, log_level: str) -> None:
    """Find companies whose ticker or name contains QUERY."""
    configure_logging(log_level)
    config = _make_config(user_agent=user_agent)

    try:
        with EdgarClient(config) as client:
            matches = CIKMapper(client).search(query, limit=limit)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="QUERY")
    except SnapshotEngineError as exc:
        click.echo(f"ERROR: {exc}", err=True)
        sys.exit(1)

    if not matches:
        click.echo(f"No companies match {query!r}.")
        return
    for match in matches:
        click.echo(f"{match.ticker:<8} {match.cik}  {match.name}")


if __name__ == "__main__":
    # python -m xbrl_snapshot.cli.main
    cli()
