"""Turn a raw forecast payload into the dashboard view model."""

import math
from collections.abc import Sequence
from datetime import datetime, timedelta
from typing import Any

from ..models.display import Locale
from ..models.weather import (
    ConditionCategory,
    CurrentConditions,
    DailyOutlook,
    ForecastView,
    HourlySlice,
    RawForecastPayload,
)
from .classifier import classify, icon_for
from .localization import strings_for

HOURLY_SLICES = 6
DAILY_OUTLOOKS = 7

# Shown for hours when the payload carries no hourly weather codes
DEFAULT_HOURLY_ICON = icon_for(ConditionCategory.PARTLY_CLOUDY)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards positive infinity."""
    return math.floor(value + 0.5)


def _value_at(series: Sequence[Any], index: int, default: Any) -> Any:
    """Read a series entry, falling back to `default` when missing or null."""
    if 0 <= index < len(series):
        value = series[index]
        if value is not None:
            return value
    return default


def _clamp_index(index: int, length: int) -> int:
    """Clamp an index into [0, length - 1]."""
    return max(0, min(index, length - 1))


def _current_conditions(payload: RawForecastPayload, reference_hour: int) -> CurrentConditions:
    current = payload.current_weather
    daily = payload.daily
    category, icon_id = classify(current.weathercode)
    temperature = round_half_up(current.temperature)

    return CurrentConditions(
        temperature_c=temperature,
        category=category,
        icon_id=icon_id,
        high_c=round_half_up(_value_at(daily.temperature_2m_max, 0, 0.0)),
        low_c=round_half_up(_value_at(daily.temperature_2m_min, 0, 0.0)),
        humidity_pct=round_half_up(
            _value_at(payload.hourly.relativehumidity_2m, reference_hour, 0.0)
        ),
        wind_kph=round_half_up(current.windspeed),
        feels_like_c=temperature,
    )


def _hourly_outlook(payload: RawForecastPayload, reference_hour: int) -> tuple[HourlySlice, ...]:
    temps = payload.hourly.temperature_2m
    codes = payload.hourly.weathercode
    slices = []

    for i in range(HOURLY_SLICES):
        hour = reference_hour + i
        # Hours past the end of the series repeat the last populated hour
        index = _clamp_index(hour, len(temps))

        icon_id = DEFAULT_HOURLY_ICON
        if codes:
            code = _value_at(codes, _clamp_index(hour, len(codes)), None)
            if code is not None:
                _, icon_id = classify(code)

        slices.append(
            HourlySlice(
                hour_label=f"{hour}:00",
                temperature_c=round_half_up(_value_at(temps, index, 0.0)),
                icon_id=icon_id,
            )
        )
    return tuple(slices)


def _daily_outlook(
    payload: RawForecastPayload, reference: datetime, locale: Locale
) -> tuple[DailyOutlook, ...]:
    strings = strings_for(locale)
    daily = payload.daily
    today = reference.date()
    outlook = []

    for i in range(DAILY_OUTLOOKS):
        if i == 0:
            label = strings.today
        else:
            label = strings.weekday_name(today + timedelta(days=i))

        category, icon_id = classify(_value_at(daily.weathercode, i, 0))
        outlook.append(
            DailyOutlook(
                day_label=label,
                high_c=round_half_up(_value_at(daily.temperature_2m_max, i, 0.0)),
                low_c=round_half_up(_value_at(daily.temperature_2m_min, i, 0.0)),
                precipitation_pct=round_half_up(
                    _value_at(daily.precipitation_probability_max, i, 0.0)
                ),
                category=category,
                icon_id=icon_id,
            )
        )
    return tuple(outlook)


def normalize(
    payload: RawForecastPayload | None,
    reference: datetime,
    locale: Locale,
    location_id: str = "",
) -> ForecastView | None:
    """Build the view model for a payload at a reference instant.

    Args:
        payload: Decoded forecast, or None while it is still loading
        reference: Instant that anchors today, the current hour and day offsets.
            Expected in the location's timezone, matching the series alignment.
        locale: Locale used for day labels
        location_id: Id of the location the payload belongs to

    Returns:
        The complete view model, or None when no payload is available
    """
    if payload is None:
        return None

    return ForecastView(
        location_id=location_id,
        reference=reference,
        current=_current_conditions(payload, reference.hour),
        hourly=_hourly_outlook(payload, reference.hour),
        daily=_daily_outlook(payload, reference, locale),
    )
