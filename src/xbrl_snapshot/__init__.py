"""
XBRL Snapshot
=============
Canonical financial statement snapshots built from SEC XBRL company facts:
income statement, balance sheet, cash flow, key ratios, quarterly trends
and a data-quality score.
"""

from xbrl_snapshot.config import EngineConfig
from xbrl_snapshot.data.outputs import snapshot_to_dict
from xbrl_snapshot.exceptions import (
    CIKLookupError,
    EdgarRequestError,
    FactsFetchError,
    MalformedFactsError,
    QualityThresholdError,
    RateLimitError,
    SnapshotEngineError,
)
from xbrl_snapshot.snapshot.builder import build_edgar_snapshot, build_snapshot

__version__ = "0.1.0"
__all__ = [
    "EngineConfig",
    "build_snapshot",
    "build_edgar_snapshot",
    "snapshot_to_dict",
    "SnapshotEngineError",
    "MalformedFactsError",
    "FactsFetchError",
    "EdgarRequestError",
    "CIKLookupError",
    "RateLimitError",
    "QualityThresholdError",
]
