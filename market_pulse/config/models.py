"""
Configuration models using Pydantic for validation.
"""

from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import List

from ..models import AssetId


def _default_tracked_assets() -> List[AssetId]:
    return [AssetId.GOLD, AssetId.BITCOIN]


class MonitorConfig(BaseModel):
    """Configuration model for the price dashboard and its change alerts."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid"
    )

    tracked_assets: List[AssetId] = Field(
        default_factory=_default_tracked_assets,
        min_length=1,
        description="Assets eligible for change alerts, in alerting order"
    )
    change_threshold: float = Field(
        default=5.0,
        gt=0.0,
        description="Percentage move between two snapshots that triggers an alert"
    )
    poll_interval_seconds: float = Field(
        default=30.0,
        gt=0.0,
        description="Seconds between two price refreshes"
    )
    history_length: int = Field(
        default=5,
        ge=1,
        le=100,
        description="Number of recent prices kept per chart asset"
    )
    chart_assets: List[AssetId] = Field(
        default_factory=_default_tracked_assets,
        min_length=1,
        description="Assets drawn on the history chart"
    )
    gold_price: float = Field(
        default=1_200_000.0,
        gt=0.0,
        description="Reference gold price in toman (no live feed)"
    )
    dollar_price: float = Field(
        default=42_000.0,
        gt=0.0,
        description="Reference dollar price in toman (no live feed)"
    )

    @field_validator("tracked_assets", "chart_assets")
    @classmethod
    def _no_duplicates(cls, assets: List[AssetId]) -> List[AssetId]:
        if len(set(assets)) != len(assets):
            raise ValueError("asset list must not contain duplicates")
        return assets
