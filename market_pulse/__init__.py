"""
Market Pulse - a live commodity and crypto price dashboard.

This package tracks gold, dollar, bitcoin, ethereum and tether prices,
keeps a short rolling price history for charting, and raises local
notifications when a tracked asset moves by more than a configured percentage
between two consecutive price snapshots.
"""

__version__ = "0.1.0"
__author__ = "Market Pulse Team"

# Lazy imports to avoid pulling yfinance/pandas in during package setup
__all__ = [
    "ConfigurationManager",
    "MonitorConfig",
    "AssetId",
    "PriceSnapshot",
    "AlertEvent",
    "SnapshotStore",
    "ChangeEvaluator",
    "PriceDashboard",
]


def __getattr__(name):
    """Lazy import for package components."""
    if name == "ConfigurationManager":
        from .config import ConfigurationManager
        return ConfigurationManager
    elif name == "MonitorConfig":
        from .config import MonitorConfig
        return MonitorConfig
    elif name == "AssetId":
        from .models import AssetId
        return AssetId
    elif name == "PriceSnapshot":
        from .models import PriceSnapshot
        return PriceSnapshot
    elif name == "AlertEvent":
        from .models import AlertEvent
        return AlertEvent
    elif name == "SnapshotStore":
        from .price_monitor import SnapshotStore
        return SnapshotStore
    elif name == "ChangeEvaluator":
        from .price_monitor import ChangeEvaluator
        return ChangeEvaluator
    elif name == "PriceDashboard":
        from .dashboard import PriceDashboard
        return PriceDashboard
    else:
        raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
