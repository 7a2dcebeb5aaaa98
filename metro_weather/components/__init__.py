"""UI components for the weather dashboard."""

from .forecast_panel import DailyPanel, HourlyPanel
from .status_bar import StatusBar
from .weather_panel import WeatherPanel

__all__ = ["DailyPanel", "HourlyPanel", "StatusBar", "WeatherPanel"]
