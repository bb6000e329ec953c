"""
Shared data models for the price dashboard.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, ConfigDict


class AssetId(str, Enum):
    """Assets shown on the dashboard."""

    GOLD = "gold"
    DOLLAR = "dollar"
    BITCOIN = "bitcoin"
    ETHEREUM = "ethereum"
    TETHER = "tether"

    @property
    def label(self) -> str:
        """Human-readable name used on cards and in notifications."""
        return ASSET_LABELS[self]

    @property
    def unit(self) -> str:
        """Currency the asset is quoted in."""
        return ASSET_UNITS[self]


ASSET_LABELS = {
    AssetId.GOLD: "طلا 18 عیار",
    AssetId.DOLLAR: "دلار",
    AssetId.BITCOIN: "بیت کوین",
    AssetId.ETHEREUM: "اتریوم",
    AssetId.TETHER: "تتر",
}

TOMAN = "تومان"
US_DOLLAR = "دلار"

ASSET_UNITS = {
    AssetId.GOLD: TOMAN,
    AssetId.DOLLAR: TOMAN,
    AssetId.BITCOIN: US_DOLLAR,
    AssetId.ETHEREUM: US_DOLLAR,
    AssetId.TETHER: US_DOLLAR,
}


class PriceSnapshot(BaseModel):
    """
    One observation of every asset price.

    A missing price means the value is not known yet. Snapshots are frozen;
    a new observation always replaces the previous snapshot as a whole.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    gold: Optional[float] = Field(default=None, ge=0.0)
    dollar: Optional[float] = Field(default=None, ge=0.0)
    bitcoin: Optional[float] = Field(default=None, ge=0.0)
    ethereum: Optional[float] = Field(default=None, ge=0.0)
    tether: Optional[float] = Field(default=None, ge=0.0)

    def price_of(self, asset: AssetId) -> Optional[float]:
        """Return the price recorded for ``asset`` or None if absent."""
        return getattr(self, AssetId(asset).value)

    def is_empty(self) -> bool:
        """True when no asset has a known price."""
        return all(self.price_of(asset) is None for asset in AssetId)


class AlertEvent(BaseModel):
    """A tracked asset moved by at least the configured threshold."""

    model_config = ConfigDict(frozen=True)

    asset: AssetId
    label: str
    old_price: float
    new_price: float
    change_percent: float = Field(ge=0.0)

    @property
    def display_percent(self) -> str:
        """Change percentage rendered with one decimal place."""
        return f"{self.change_percent:.1f}"


class NewsItem(BaseModel):
    """A market headline shown below the chart."""

    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    source: str
    date: str
