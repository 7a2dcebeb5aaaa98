"""Data models for the weather dashboard."""

from .config import Config, Settings, WeatherConfig
from .display import ColorPalette, ConditionLabels, Locale, StringTable, ThemeMode
from .location import Location
from .weather import (
    ConditionCategory,
    CurrentConditions,
    DailyOutlook,
    ForecastView,
    HourlySlice,
    RawForecastPayload,
)

__all__ = [
    "ColorPalette",
    "ConditionCategory",
    "ConditionLabels",
    "Config",
    "CurrentConditions",
    "DailyOutlook",
    "ForecastView",
    "HourlySlice",
    "Locale",
    "Location",
    "RawForecastPayload",
    "Settings",
    "StringTable",
    "ThemeMode",
    "WeatherConfig",
]
