"""Weather data models."""

from datetime import datetime
from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field


class ConditionCategory(str, Enum):
    """Condition category derived from a weather code."""

    CLEAR = "clear"
    PARTLY_CLOUDY = "partly_cloudy"
    CLOUDY = "cloudy"
    RAINY = "rainy"
    SNOWY = "snowy"
    THUNDERSTORM = "thunderstorm"


WeatherCode = Annotated[int, Field(ge=0)]


class CurrentReading(BaseModel):
    """Current-instant reading from the forecast API."""

    temperature: float
    windspeed: float
    weathercode: WeatherCode
    time: str | None = None


class HourlySeries(BaseModel):
    """Hourly series, index 0 is hour 0 of the reference day."""

    time: list[str] = Field(default_factory=list)
    temperature_2m: list[float | None] = Field(default_factory=list)
    relativehumidity_2m: list[float | None] = Field(default_factory=list)
    windspeed_10m: list[float | None] = Field(default_factory=list)
    weathercode: list[WeatherCode | None] = Field(default_factory=list)


class DailySeries(BaseModel):
    """Daily series, index 0 is the reference day."""

    time: list[str] = Field(default_factory=list)
    temperature_2m_max: list[float | None] = Field(default_factory=list)
    temperature_2m_min: list[float | None] = Field(default_factory=list)
    precipitation_probability_max: list[float | None] = Field(default_factory=list)
    weathercode: list[WeatherCode | None] = Field(default_factory=list)


class RawForecastPayload(BaseModel):
    """Decoded forecast response as returned by Open-Meteo."""

    latitude: float = 0.0
    longitude: float = 0.0
    timezone: str = "GMT"
    current_weather: CurrentReading
    hourly: HourlySeries = Field(default_factory=HourlySeries)
    daily: DailySeries = Field(default_factory=DailySeries)


class CurrentConditions(BaseModel):
    """Current conditions ready for display."""

    model_config = ConfigDict(frozen=True)

    temperature_c: int
    category: ConditionCategory
    icon_id: str
    high_c: int = 0
    low_c: int = 0
    humidity_pct: int = 0
    wind_kph: int = 0
    feels_like_c: int


class HourlySlice(BaseModel):
    """One entry of the hourly outlook."""

    model_config = ConfigDict(frozen=True)

    hour_label: str
    temperature_c: int
    icon_id: str


class DailyOutlook(BaseModel):
    """One entry of the daily outlook."""

    model_config = ConfigDict(frozen=True)

    day_label: str
    high_c: int
    low_c: int
    precipitation_pct: int = 0
    category: ConditionCategory
    icon_id: str


class ForecastView(BaseModel):
    """Complete view model for one location at one reference instant."""

    model_config = ConfigDict(frozen=True)

    location_id: str
    reference: datetime
    current: CurrentConditions
    hourly: tuple[HourlySlice, ...]
    daily: tuple[DailyOutlook, ...]

    @property
    def today(self) -> DailyOutlook | None:
        """Outlook for the reference day."""
        return self.daily[0] if self.daily else None

    @property
    def temperature_trend(self) -> str:
        """Get temperature trend across the hourly outlook."""
        if len(self.hourly) < 2:
            return "→"

        diff = self.hourly[-1].temperature_c - self.hourly[0].temperature_c
        if diff > 1:
            return "↑"
        elif diff < -1:
            return "↓"
        return "→"
