"""Locale, string table and colour palette models."""

from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from .weather import ConditionCategory


class Locale(str, Enum):
    """Supported display locales."""

    JA = "ja"
    EN = "en"


class ThemeMode(str, Enum):
    """Supported colour themes."""

    LIGHT = "light"
    DARK = "dark"


class ConditionLabels(BaseModel):
    """Localized label for every condition category."""

    model_config = ConfigDict(frozen=True)

    clear: str
    partly_cloudy: str
    cloudy: str
    rainy: str
    snowy: str
    thunderstorm: str

    def label_for(self, category: ConditionCategory) -> str:
        return getattr(self, category.value)


class StringTable(BaseModel):
    """All user-facing copy for one locale."""

    model_config = ConfigDict(frozen=True)

    loading: str
    error_title: str
    error_message: str
    today: str
    week_days: tuple[str, ...] = Field(min_length=7, max_length=7)  # Sunday first
    conditions: ConditionLabels
    high: str
    low: str
    humidity: str
    wind_speed: str
    feels_like: str
    hourly_forecast: str
    weekly_forecast: str
    footer: str
    language_toggle: str
    refreshed_just_now: str
    refreshed_one_minute: str
    refreshed_minutes: str  # {minutes} placeholder
    key_location: str
    key_theme: str
    key_refresh: str
    key_quit: str

    def refreshed_ago(self, minutes: int) -> str:
        """Return the "refreshed N minutes ago" text."""
        if minutes <= 0:
            return self.refreshed_just_now
        if minutes == 1:
            return self.refreshed_one_minute
        return self.refreshed_minutes.format(minutes=minutes)

    def weekday_name(self, day: date) -> str:
        """Return the weekday name for a date."""
        # date.weekday() is Monday-based, week_days is Sunday-based
        return self.week_days[(day.weekday() + 1) % 7]


class ColorPalette(BaseModel):
    """Semantic colours for one theme mode."""

    model_config = ConfigDict(frozen=True)

    primary: str
    secondary: str
    background: str
    card: str
    text: str
    text_secondary: str
    border: str
    header_start: str
    header_end: str
