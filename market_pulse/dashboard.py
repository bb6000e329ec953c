"""
Dashboard orchestration: fetch prices, detect large moves, notify, chart.
"""

import logging
from typing import List, Optional

from .config.models import MonitorConfig
from .history import PriceHistory
from .models import AlertEvent, NewsItem, PriceSnapshot
from .news import fetch_news
from .notifier import Notifier, LoggingNotifier, dispatch_alerts
from .price_monitor import ChangeEvaluator, SnapshotStore
from .price_source import PriceSource


logger = logging.getLogger(__name__)


class PriceDashboard:
    """Ties a price source, the change monitor and a notifier together."""

    def __init__(
        self,
        config: MonitorConfig,
        price_source: PriceSource,
        notifier: Optional[Notifier] = None,
        store: Optional[SnapshotStore] = None,
    ):
        """
        Initialize the dashboard.

        Args:
            config: Monitor configuration
            price_source: Supplier of fresh price snapshots
            notifier: Alert delivery channel, logs alerts if None
            store: Snapshot store shared with the evaluator, created if None
        """
        self.config = config
        self.price_source = price_source
        self.notifier = notifier or LoggingNotifier()
        self.store = store or SnapshotStore()
        self.evaluator = ChangeEvaluator(self.store, config)
        self.history = PriceHistory(config.chart_assets, config.history_length)
        self.prices = PriceSnapshot()
        self.news: List[NewsItem] = []
        self.refresh_count = 0

    def load_news(self) -> List[NewsItem]:
        """Load the news headlines shown under the chart."""
        self.news = fetch_news()
        return self.news

    def refresh(self) -> List[AlertEvent]:
        """
        Fetch a new snapshot, alert on large moves and update the displayed
        prices and chart history.

        A failed fetch is logged and leaves all state untouched.

        Returns:
            Alert events produced by this refresh
        """
        try:
            snapshot = self.price_source.fetch_snapshot()
        except Exception as e:
            logger.error(f"Error fetching prices: {e}")
            return []

        events = self.evaluator.evaluate(snapshot)
        if events:
            delivered = dispatch_alerts(self.notifier, events)
            logger.debug(f"Delivered {delivered}/{len(events)} alerts")

        self.prices = snapshot
        self.history.record(snapshot)
        self.refresh_count += 1
        return events
