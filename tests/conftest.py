"""Pytest configuration and fixtures."""

from datetime import datetime
from zoneinfo import ZoneInfo

import pytest

from metro_weather.models.weather import RawForecastPayload

TOKYO = ZoneInfo("Asia/Tokyo")


def _make_payload_data(
    current_temp: float = 18.6,
    current_code: int = 2,
    daily_codes: list[int] | None = None,
    hours: int = 7 * 24,
) -> dict:
    """Build an Open-Meteo style response body."""
    daily_codes = daily_codes if daily_codes is not None else [0, 2, 50, 80, 5, 1, 65]
    days = len(daily_codes)
    return {
        "latitude": 35.66,
        "longitude": 139.7,
        "timezone": "Asia/Tokyo",
        "current_weather": {
            "temperature": current_temp,
            "windspeed": 12.4,
            "weathercode": current_code,
            "time": "2024-01-15T10:00",
        },
        "hourly": {
            "time": [f"2024-01-{15 + h // 24:02d}T{h % 24:02d}:00" for h in range(hours)],
            # Temperature equals the hour index so reads are easy to check
            "temperature_2m": [float(h) for h in range(hours)],
            "relativehumidity_2m": [50 + h % 40 for h in range(hours)],
            "windspeed_10m": [5.0 for _ in range(hours)],
        },
        "daily": {
            "time": [f"2024-01-{15 + d}" for d in range(days)],
            "temperature_2m_max": [20.4 + d for d in range(days)],
            "temperature_2m_min": [10.5 + d for d in range(days)],
            "precipitation_probability_max": [10 * d for d in range(days)],
            "weathercode": daily_codes,
        },
    }


@pytest.fixture
def payload_data():
    """Sample forecast response body."""
    return _make_payload_data()


@pytest.fixture
def payload(payload_data):
    """Sample parsed forecast payload."""
    return RawForecastPayload.model_validate(payload_data)


@pytest.fixture
def monday_morning():
    """Reference instant on a Monday at 10:00 Tokyo time."""
    return datetime(2024, 1, 15, 10, 0, tzinfo=TOKYO)


@pytest.fixture
def make_payload_data():
    """Factory for response bodies with custom values."""
    return _make_payload_data


@pytest.fixture
def tokyo():
    """Timezone the forecast series are aligned to."""
    return TOKYO
