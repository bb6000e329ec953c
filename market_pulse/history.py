"""
Rolling price history used to draw the dashboard chart.
"""

from collections import deque
from typing import Dict, Iterable, List

import pandas as pd

from .models import AssetId, PriceSnapshot


NOW_LABEL = "اکنون"


class PriceHistory:
    """Keeps the last ``length`` prices of each chart asset."""

    def __init__(self, assets: Iterable[AssetId], length: int = 5):
        if length < 1:
            raise ValueError("History length must be at least 1")
        self.length = length
        self.assets = [AssetId(asset) for asset in assets]
        self._series: Dict[AssetId, deque] = {
            asset: deque(maxlen=length) for asset in self.assets
        }

    def record(self, snapshot: PriceSnapshot) -> None:
        """Append the snapshot's prices. Absent prices are charted as 0."""
        for asset in self.assets:
            price = snapshot.price_of(asset)
            self._series[asset].append(price if price is not None else 0.0)

    def series(self, asset: AssetId) -> List[float]:
        """Recorded prices for ``asset``, oldest first."""
        return list(self._series[AssetId(asset)])

    def __len__(self) -> int:
        return max((len(values) for values in self._series.values()), default=0)

    def labels(self) -> List[str]:
        """Relative x-axis labels, e.g. -4, -3, -2, -1, now."""
        count = len(self)
        return [str(-offset) for offset in range(count - 1, 0, -1)] + ([NOW_LABEL] if count else [])

    def to_frame(self) -> pd.DataFrame:
        """
        Return the history as a DataFrame with one column per asset label,
        indexed by relative position labels.
        """
        data = {asset.label: self.series(asset) for asset in self.assets}
        return pd.DataFrame(data, index=pd.Index(self.labels(), name="position"))
