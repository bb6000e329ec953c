"""
Price source implementations.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Iterable, List, Optional

import pandas as pd
import yaml

from ..models import AssetId, PriceSnapshot


logger = logging.getLogger(__name__)


class PriceFetchError(Exception):
    """Raised when a price source cannot produce any snapshot."""


class PriceSource(ABC):
    """Supplies best-effort price snapshots on demand."""

    @abstractmethod
    def fetch_snapshot(self) -> PriceSnapshot:
        """Return the latest snapshot. Missing prices are left absent."""


class YFinancePriceSource(PriceSource):
    """Fetches crypto prices from Yahoo Finance; gold and dollar are fixed."""

    TICKERS = {
        AssetId.BITCOIN: "BTC-USD",
        AssetId.ETHEREUM: "ETH-USD",
        AssetId.TETHER: "USDT-USD",
    }

    def __init__(self, gold_price: float, dollar_price: float):
        self.gold_price = gold_price
        self.dollar_price = dollar_price
        self._yf = None

    def _get_yfinance(self):
        """Lazy import of yfinance to avoid SSL issues during package setup."""
        if self._yf is None:
            import yfinance as yf
            self._yf = yf
        return self._yf

    def get_latest_price(self, ticker: str) -> float:
        """
        Get the most recent closing price for a ticker.

        Args:
            ticker: Yahoo Finance ticker symbol

        Returns:
            Latest closing price
        """
        yf = self._get_yfinance()
        data = yf.Ticker(ticker).history(period="1d")

        if data.empty:
            raise ValueError(f"No current price data available for {ticker}")

        price = float(data["Close"].iloc[-1])
        if pd.isna(price) or price < 0:
            raise ValueError(f"Invalid closing price for {ticker}: {price}")

        return price

    def fetch_snapshot(self) -> PriceSnapshot:
        prices: Dict[str, Optional[float]] = {
            AssetId.GOLD.value: self.gold_price,
            AssetId.DOLLAR.value: self.dollar_price,
        }
        failures = []

        for asset, ticker in self.TICKERS.items():
            try:
                prices[asset.value] = self.get_latest_price(ticker)
            except Exception as e:
                logger.warning(f"Failed to fetch {asset.value} price ({ticker}): {e}")
                prices[asset.value] = None
                failures.append(asset)

        if len(failures) == len(self.TICKERS):
            raise PriceFetchError("No live prices could be fetched")

        return PriceSnapshot(**prices)


class ReplayPriceSource(PriceSource):
    """Serves a prepared sequence of snapshots, one per fetch."""

    def __init__(self, snapshots: Iterable[PriceSnapshot]):
        self._snapshots: List[PriceSnapshot] = list(snapshots)
        self._position = 0

    @classmethod
    def from_yaml(cls, file_path: str) -> "ReplayPriceSource":
        """
        Load snapshots from a YAML file holding a list of price mappings, e.g.

            - {gold: 1200000, bitcoin: 100}
            - {gold: 1260000, bitcoin: 106}
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"Replay file not found: {file_path}")

        with open(path, 'r', encoding='utf-8') as file:
            data = yaml.safe_load(file) or []

        if not isinstance(data, list):
            raise ValueError(f"Replay file must contain a list of snapshots: {file_path}")

        return cls(PriceSnapshot(**(entry or {})) for entry in data)

    @property
    def remaining(self) -> int:
        return len(self._snapshots) - self._position

    def fetch_snapshot(self) -> PriceSnapshot:
        if self._position >= len(self._snapshots):
            raise PriceFetchError("Replay source exhausted")
        snapshot = self._snapshots[self._position]
        self._position += 1
        return snapshot
