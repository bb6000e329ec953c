"""
Change detection between two consecutive price snapshots.
"""

import logging
from typing import Iterable, List, Optional

from ..config.models import MonitorConfig
from ..models import AlertEvent, AssetId, PriceSnapshot
from .snapshot_store import SnapshotStore


logger = logging.getLogger(__name__)


def percent_change(old_price: Optional[float], new_price: Optional[float]) -> Optional[float]:
    """
    Absolute percentage move from ``old_price`` to ``new_price``.

    Returns None when either price is missing or the old price is zero, since
    no meaningful percentage exists in those cases.
    """
    if old_price is None or new_price is None or old_price == 0:
        return None
    return abs((new_price - old_price) / old_price) * 100


def compute_alerts(
    old_snapshot: PriceSnapshot,
    new_snapshot: PriceSnapshot,
    tracked_assets: Iterable[AssetId],
    threshold: float,
) -> List[AlertEvent]:
    """
    Compare two snapshots and return one AlertEvent per tracked asset whose
    price moved by ``threshold`` percent or more.

    Events follow the order of ``tracked_assets``. The comparison uses the
    unrounded percentage. Assets with an absent price on either side, or a
    zero old price, are skipped. This function has no side effects.
    """
    events = []
    for asset in tracked_assets:
        asset = AssetId(asset)
        old_price = old_snapshot.price_of(asset)
        new_price = new_snapshot.price_of(asset)

        change = percent_change(old_price, new_price)
        if change is None:
            continue

        if change >= threshold:
            events.append(AlertEvent(
                asset=asset,
                label=asset.label,
                old_price=old_price,
                new_price=new_price,
                change_percent=change,
            ))
    return events


class ChangeEvaluator:
    """Evaluates new snapshots against the store and advances the store."""

    def __init__(self, store: SnapshotStore, config: Optional[MonitorConfig] = None):
        self.store = store
        self.config = config or MonitorConfig()

    def evaluate(self, new_snapshot: PriceSnapshot) -> List[AlertEvent]:
        """
        Compare ``new_snapshot`` with the stored snapshot and return the alert
        events. The store is replaced with ``new_snapshot`` once all
        comparisons are done, whether or not any alert fired.

        Must not be called concurrently with itself.
        """
        old_snapshot = self.store.current()
        events = compute_alerts(
            old_snapshot,
            new_snapshot,
            self.config.tracked_assets,
            self.config.change_threshold,
        )
        self.store.replace(new_snapshot)

        for event in events:
            logger.info(
                f"{event.asset.value} moved {event.display_percent}% "
                f"({event.old_price} -> {event.new_price})"
            )
        return events
