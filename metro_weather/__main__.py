"""Entry point for running the dashboard as a module."""

import argparse
import atexit
import logging
import signal
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from pydantic import ValidationError

from .app import WeatherApp
from .models.config import Config, Settings
from .models.display import Locale, ThemeMode
from .services.locations import DISTRICTS

# Global reference for signal handlers
_app: WeatherApp | None = None
_logger = logging.getLogger(__name__)


def setup_logging(log_level: str = "INFO") -> None:
    """Configure logging with rotation support.

    Args:
        log_level: The logging level (DEBUG, INFO, WARNING, ERROR)
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    # Try to add rotating file handler
    log_dir = Path("logs")
    try:
        log_dir.mkdir(exist_ok=True)
        # Rotate at 10MB, keep 5 backup files
        file_handler = RotatingFileHandler(
            log_dir / "metro_weather.log",
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding="utf-8",
        )
        handlers.append(file_handler)
    except (PermissionError, OSError):
        pass  # Skip file logging if we can't write

    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def _signal_handler(signum: int, frame: object) -> None:
    """Handle shutdown signals gracefully.

    Args:
        signum: Signal number received
        frame: Current stack frame (unused)
    """
    signal_name = signal.Signals(signum).name
    _logger.info(f"Received {signal_name}, shutting down gracefully...")

    if _app is not None:
        _app.exit()


def _cleanup() -> None:
    """Cleanup handler called on exit."""
    _logger.info("Metro Weather shutdown complete")


def setup_signal_handlers() -> None:
    """Set up signal handlers for graceful shutdown."""
    signal.signal(signal.SIGINT, _signal_handler)
    signal.signal(signal.SIGTERM, _signal_handler)

    atexit.register(_cleanup)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Metro Weather - a terminal weather dashboard for the Tokyo districts"
    )
    parser.add_argument(
        "-l",
        "--location",
        choices=[d.id for d in DISTRICTS],
        default="shibuya",
        help="District to show first (default: shibuya)",
    )
    parser.add_argument(
        "--locale",
        choices=[loc.value for loc in Locale],
        default=Locale.JA.value,
        help="Display language (default: ja)",
    )
    parser.add_argument(
        "--theme",
        choices=[mode.value for mode in ThemeMode],
        default=ThemeMode.LIGHT.value,
        help="Colour theme (default: light)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="store_true",
        help="Show version and exit",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> Config:
    """Build the session configuration from parsed arguments."""
    return Config(
        settings=Settings(
            location=args.location,
            locale=args.locale,
            theme=args.theme,
            log_level="DEBUG" if args.verbose else "INFO",
        )
    )


def main() -> None:
    """Main entry point."""
    global _app

    args = build_parser().parse_args()

    if args.version:
        from . import __version__

        print(f"Metro Weather v{__version__}")
        sys.exit(0)

    try:
        config = config_from_args(args)
    except ValidationError as e:
        print(f"Invalid configuration: {e}")
        sys.exit(2)

    setup_logging(config.settings.log_level)
    setup_signal_handlers()

    _logger.info(f"Starting Metro Weather at {config.settings.location}")

    _app = WeatherApp(config=config)
    _app.run()


if __name__ == "__main__":
    main()
