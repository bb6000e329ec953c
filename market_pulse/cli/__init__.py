"""
Command-line interface module for the price dashboard.

This module provides the CLI for running the dashboard with different
configuration files, price sources and command-line options.
"""

from .cli import main

__all__ = ["main"]
