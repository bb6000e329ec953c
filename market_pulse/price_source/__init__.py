"""
Price source module for obtaining price snapshots.

Live crypto prices are fetched through yfinance; gold and dollar use fixed
reference prices. A replay source serves prepared snapshots for offline runs.
"""

from .price_source import (
    PriceSource,
    PriceFetchError,
    YFinancePriceSource,
    ReplayPriceSource,
)

__all__ = ["PriceSource", "PriceFetchError", "YFinancePriceSource", "ReplayPriceSource"]
