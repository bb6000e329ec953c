"""
Property-based tests for price change detection.
"""

from typing import Optional

from hypothesis import given, strategies as st

from market_pulse.config.models import MonitorConfig
from market_pulse.models import AssetId, PriceSnapshot
from market_pulse.price_monitor import ChangeEvaluator, SnapshotStore, compute_alerts


prices = st.floats(min_value=0.01, max_value=1e9, allow_nan=False, allow_infinity=False)
optional_prices = st.one_of(st.none(), st.floats(min_value=0.0, max_value=1e9, allow_nan=False))
thresholds = st.floats(min_value=0.01, max_value=200.0, allow_nan=False)
asset_ids = st.sampled_from(list(AssetId))


@st.composite
def snapshots(draw):
    return PriceSnapshot(**{asset.value: draw(optional_prices) for asset in AssetId})


@st.composite
def tracked_asset_lists(draw):
    return draw(st.lists(asset_ids, min_size=1, max_size=len(AssetId), unique=True))


class TestChangeDetectionProperties:
    """Property-based tests for compute_alerts and ChangeEvaluator."""

    @given(asset=asset_ids, old_price=prices, new_price=prices, threshold=thresholds)
    def test_alert_iff_change_reaches_threshold(
        self,
        asset: AssetId,
        old_price: float,
        new_price: float,
        threshold: float
    ):
        """
        With both prices present and a non-zero old price, the change is
        abs((new - old) / old) * 100 and an alert fires exactly when it reaches
        the threshold.
        """
        old = PriceSnapshot(**{asset.value: old_price})
        new = PriceSnapshot(**{asset.value: new_price})
        expected_change = abs((new_price - old_price) / old_price) * 100

        events = compute_alerts(old, new, [asset], threshold)

        if expected_change >= threshold:
            assert len(events) == 1
            assert events[0].asset == asset
            assert events[0].change_percent == expected_change
            assert events[0].old_price == old_price
            assert events[0].new_price == new_price
        else:
            assert events == []

    @given(
        asset=asset_ids,
        old_price=st.one_of(st.none(), prices),
        new_price=st.one_of(st.none(), prices),
        threshold=thresholds
    )
    def test_absent_price_never_alerts(
        self,
        asset: AssetId,
        old_price: Optional[float],
        new_price: Optional[float],
        threshold: float
    ):
        """An asset missing a price on either side produces no alert."""
        if old_price is not None and new_price is not None:
            old_price = None

        old = PriceSnapshot(**{asset.value: old_price})
        new = PriceSnapshot(**{asset.value: new_price})

        assert compute_alerts(old, new, [asset], threshold) == []

    @given(asset=asset_ids, new_price=prices, threshold=thresholds)
    def test_zero_baseline_never_alerts(self, asset: AssetId, new_price: float, threshold: float):
        """A zero old price produces no alert however large the move."""
        old = PriceSnapshot(**{asset.value: 0.0})
        new = PriceSnapshot(**{asset.value: new_price})

        assert compute_alerts(old, new, [asset], threshold) == []

    @given(old=snapshots(), new=snapshots(), tracked=tracked_asset_lists(), threshold=thresholds)
    def test_evaluation_is_repeatable(self, old, new, tracked, threshold):
        """Identical inputs give identical event sequences."""
        first = compute_alerts(old, new, tracked, threshold)
        second = compute_alerts(old, new, tracked, threshold)

        assert first == second

    @given(old=snapshots(), new=snapshots(), tracked=tracked_asset_lists(), threshold=thresholds)
    def test_events_follow_tracked_order_and_subset(self, old, new, tracked, threshold):
        """Events only name tracked assets, in tracked order, at most once each."""
        events = compute_alerts(old, new, tracked, threshold)
        emitted = [event.asset for event in events]

        assert emitted == [asset for asset in tracked if asset in emitted]
        assert len(set(emitted)) == len(emitted)

    @given(old=snapshots(), new=snapshots(), tracked=tracked_asset_lists(), threshold=thresholds)
    def test_store_holds_new_snapshot_after_evaluate(self, old, new, tracked, threshold):
        """After evaluate() the store equals the new snapshot whatever fired."""
        store = SnapshotStore(initial=old)
        config = MonitorConfig(tracked_assets=tracked, change_threshold=threshold)
        evaluator = ChangeEvaluator(store, config)

        events = evaluator.evaluate(new)

        assert store.current() == new
        assert events == compute_alerts(old, new, tracked, threshold)
