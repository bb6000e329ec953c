"""
Configuration management module for the price dashboard.

This module handles loading, validating, and managing YAML configuration files
using Pydantic for robust validation and type safety.
"""

from .config_manager import ConfigurationManager, ConfigurationError
from .models import MonitorConfig

__all__ = ["ConfigurationManager", "ConfigurationError", "MonitorConfig"]
