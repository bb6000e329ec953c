"""
Property-based tests for configuration loading and validation.
"""

import tempfile
from pathlib import Path

import yaml
from hypothesis import given, strategies as st

from market_pulse.config.config_manager import ConfigurationManager
from market_pulse.config.models import MonitorConfig
from market_pulse.models import AssetId


class TestConfigurationProperties:
    """Property-based tests for configuration management."""

    @given(
        tracked_assets=st.lists(st.sampled_from([a.value for a in AssetId]), min_size=1, unique=True),
        change_threshold=st.floats(min_value=0.01, max_value=100.0),
        poll_interval_seconds=st.floats(min_value=0.1, max_value=3600.0),
        history_length=st.integers(min_value=1, max_value=100)
    )
    def test_valid_yaml_configuration_round_trips(
        self,
        tracked_assets,
        change_threshold: float,
        poll_interval_seconds: float,
        history_length: int
    ):
        """Every valid YAML configuration is loaded with its values intact."""
        config_data = {
            "tracked_assets": tracked_assets,
            "change_threshold": change_threshold,
            "poll_interval_seconds": poll_interval_seconds,
            "history_length": history_length,
        }

        with tempfile.TemporaryDirectory() as temp_dir:
            config_path = Path(temp_dir) / "config.yaml"
            with open(config_path, "w", encoding="utf-8") as f:
                yaml.safe_dump(config_data, f)

            config = ConfigurationManager().load_config(str(config_path))

        assert [a.value for a in config.tracked_assets] == tracked_assets
        assert config.change_threshold == change_threshold
        assert config.poll_interval_seconds == poll_interval_seconds
        assert config.history_length == history_length

    @given(change_threshold=st.floats(max_value=0.0, allow_nan=False))
    def test_non_positive_threshold_falls_back_to_defaults(self, change_threshold: float):
        """Invalid thresholds never reach the monitor."""
        config = ConfigurationManager().validate_config({"change_threshold": change_threshold})

        assert config == MonitorConfig()
