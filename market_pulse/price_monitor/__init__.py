"""
Price change monitoring module.

This module holds the current price snapshot and compares each freshly fetched
snapshot against it, producing alert events for large moves.
"""

from .snapshot_store import SnapshotStore
from .change_evaluator import ChangeEvaluator, compute_alerts, percent_change

__all__ = ["SnapshotStore", "ChangeEvaluator", "compute_alerts", "percent_change"]
