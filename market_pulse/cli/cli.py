"""
Command-line interface implementation.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from ..config import ConfigurationError, ConfigurationManager, MonitorConfig
from ..dashboard import PriceDashboard
from ..history import PriceHistory
from ..models import AssetId, NewsItem, PriceSnapshot
from ..notifier import ConsoleNotifier
from ..price_source import PriceSource, ReplayPriceSource, YFinancePriceSource
from ..scheduler import PollingScheduler


def setup_logging(level: str = "INFO") -> None:
    """Set up logging configuration."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def log_config(logger: logging.Logger, config: MonitorConfig) -> None:
    """Log the settings the dashboard will run with."""
    logger.info(f"Tracked assets: {', '.join(a.value for a in config.tracked_assets)}")
    logger.info(f"Change threshold: {config.change_threshold:g}%")


def parse_interval(value: str) -> float:
    """Parse a positive polling interval in seconds."""
    try:
        seconds = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid interval: {value}")
    if seconds <= 0:
        raise argparse.ArgumentTypeError(f"Interval must be positive: {value}")
    return seconds


def format_price(price: Optional[float]) -> str:
    """Format a price with thousands separators, '--' when unknown."""
    if price is None:
        return "--"
    if float(price).is_integer():
        return f"{price:,.0f}"
    return f"{price:,.2f}"


def format_prices(snapshot: PriceSnapshot) -> str:
    """Render the live price cards."""
    lines = ["قیمت لحظه‌ای", "=" * 40]
    for asset in AssetId:
        lines.append(f"{asset.label}: {format_price(snapshot.price_of(asset))} {asset.unit}")
    return "\n".join(lines)


def format_history(history: PriceHistory) -> str:
    """Render the rolling price history as a table."""
    lines = ["نمودار قیمت", "=" * 40]
    if len(history) == 0:
        lines.append("(no history yet)")
        return "\n".join(lines)
    lines.append(history.to_frame().to_string(float_format=lambda v: f"{v:,.0f}"))
    return "\n".join(lines)


def format_news(news: List[NewsItem]) -> str:
    """Render the news list."""
    lines = ["اخبار بازار", "=" * 40]
    for item in news:
        lines.append(f"• {item.title}")
        lines.append(f"  {item.source} | {item.date}")
    return "\n".join(lines)


def format_dashboard(dashboard: PriceDashboard) -> str:
    """Render the whole dashboard screen."""
    sections = [format_prices(dashboard.prices), format_history(dashboard.history)]
    if dashboard.news:
        sections.append(format_news(dashboard.news))
    return "\n\n".join(sections)


def create_price_source(args, config: MonitorConfig) -> PriceSource:
    """Choose the price source from command-line options."""
    if args.replay:
        return ReplayPriceSource.from_yaml(args.replay)
    return YFinancePriceSource(config.gold_price, config.dollar_price)


def create_parser() -> argparse.ArgumentParser:
    """Create the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="market-pulse",
        description="Live gold, dollar and crypto prices with price-change alerts"
    )
    parser.add_argument(
        "--config", "-c",
        type=str,
        help="Path to configuration file (default: config.yaml)"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)"
    )
    parser.add_argument(
        "--validate-config",
        action="store_true",
        help="Validate configuration and exit"
    )
    parser.add_argument(
        "--once",
        action="store_true",
        help="Refresh prices once, print the dashboard and exit"
    )
    parser.add_argument(
        "--ticks",
        type=int,
        help="Stop after this many refreshes (default: run until interrupted)"
    )
    parser.add_argument(
        "--interval",
        type=parse_interval,
        help="Override the polling interval in seconds"
    )
    parser.add_argument(
        "--replay",
        type=str,
        help="YAML file with a list of price snapshots to replay instead of live prices"
    )
    parser.add_argument(
        "--news",
        action="store_true",
        help="Show market news under the chart"
    )
    return parser


def main(argv: Optional[list] = None) -> None:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    try:
        # Validate config file exists if specified
        if args.config:
            config_path = Path(args.config)
            if not config_path.exists():
                logger.error(f"Configuration file not found: {args.config}")
                sys.exit(1)

        config_manager = ConfigurationManager()

        if args.validate_config:
            try:
                config = config_manager.load_config(args.config, strict=True)
            except ConfigurationError as e:
                logger.error(f"Configuration validation failed: {e}")
                sys.exit(1)
            log_config(logger, config)
            logger.info("Configuration validation successful")
            return

        config = config_manager.load_config(args.config)
        log_config(logger, config)

        if args.ticks is not None and args.ticks < 1:
            logger.error("--ticks must be at least 1")
            sys.exit(1)

        price_source = create_price_source(args, config)
        dashboard = PriceDashboard(config, price_source, ConsoleNotifier())
        if args.news:
            dashboard.load_news()

        def tick() -> None:
            dashboard.refresh()
            print(format_dashboard(dashboard))
            print("")

        interval = args.interval or config.poll_interval_seconds
        max_ticks = 1 if args.once else args.ticks
        if max_ticks is None and args.replay:
            max_ticks = price_source.remaining
            if max_ticks == 0:
                logger.error(f"Replay file contains no snapshots: {args.replay}")
                sys.exit(1)

        scheduler = PollingScheduler(tick, interval)
        scheduler.run(max_ticks=max_ticks)

    except Exception as e:
        logger.error(f"Application error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
