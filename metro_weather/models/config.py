"""Configuration models using Pydantic for validation."""

from typing import Literal
from urllib.parse import urlparse
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, field_validator

from .display import Locale, ThemeMode


class WeatherConfig(BaseModel):
    """Forecast API configuration."""

    api_url: str = "https://api.open-meteo.com/v1/forecast"
    timezone: str = "Asia/Tokyo"
    timeout_seconds: float = Field(default=30.0, gt=0)
    forecast_days: int = Field(default=7, ge=7, le=16)

    @field_validator("api_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate that URL is a valid HTTP/HTTPS URL."""
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https"):
            raise ValueError(f"URL must use http or https scheme, got '{parsed.scheme}'")
        if not parsed.netloc:
            raise ValueError(f"Invalid URL '{v}': URL must have a valid host")
        return v

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate that the timezone is a known IANA name."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError):
            raise ValueError(f"Unknown timezone '{v}'")
        return v


class Settings(BaseModel):
    """Initial session settings."""

    location: str = "shibuya"
    locale: Locale = Locale.JA
    theme: ThemeMode = ThemeMode.LIGHT
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    @field_validator("location")
    @classmethod
    def validate_location(cls, v: str) -> str:
        """Validate that the location is one of the known districts."""
        from ..services.locations import DISTRICTS

        v = v.strip().lower()
        known = [d.id for d in DISTRICTS]
        if v not in known:
            raise ValueError(f"Unknown location '{v}', expected one of: {', '.join(known)}")
        return v


class Config(BaseModel):
    """Main configuration model."""

    weather: WeatherConfig = Field(default_factory=WeatherConfig)
    settings: Settings = Field(default_factory=Settings)
