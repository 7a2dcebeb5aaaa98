"""Weather service using Open-Meteo API."""

import logging

import httpx
from pydantic import ValidationError

from ..models.config import WeatherConfig
from ..models.location import Location
from ..models.weather import RawForecastPayload

logger = logging.getLogger(__name__)

HOURLY_FIELDS = "temperature_2m,relativehumidity_2m,windspeed_10m,weathercode"
DAILY_FIELDS = "temperature_2m_max,temperature_2m_min,precipitation_probability_max,weathercode"


class FetchError(Exception):
    """The forecast request failed or returned an unusable response."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class WeatherService:
    """Service to fetch forecast payloads from Open-Meteo API."""

    def __init__(self, config: WeatherConfig | None = None):
        self.config = config or WeatherConfig()

    def build_params(self, location: Location) -> dict[str, str | float | int]:
        """Build query parameters for a location."""
        return {
            "latitude": location.latitude,
            "longitude": location.longitude,
            "current_weather": "true",
            "hourly": HOURLY_FIELDS,
            "daily": DAILY_FIELDS,
            "temperature_unit": "celsius",
            "windspeed_unit": "kmh",
            "timezone": self.config.timezone,
            "forecast_days": self.config.forecast_days,
        }

    async def fetch_forecast(self, location: Location) -> RawForecastPayload:
        """Fetch the forecast for a location.

        Raises:
            FetchError: If the request fails or the response cannot be parsed
        """
        params = self.build_params(location)

        try:
            async with httpx.AsyncClient(timeout=self.config.timeout_seconds) as client:
                response = await client.get(self.config.api_url, params=params)
                response.raise_for_status()
                data = response.json()

        except httpx.TimeoutException:
            logger.warning(f"Timeout fetching weather for {location.display_name}")
            raise FetchError("Request timeout")

        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.error(f"HTTP error fetching weather: {status}")
            raise FetchError(f"HTTP {status}")

        except httpx.ConnectError as e:
            logger.error(f"Connection error fetching weather: {e}")
            raise FetchError("Connection error")

        except httpx.HTTPError as e:
            logger.error(f"Error fetching weather: {e}")
            raise FetchError(str(e) or type(e).__name__)

        except ValueError as e:
            logger.error(f"Invalid JSON in weather response: {e}")
            raise FetchError("Invalid response")

        return self._parse_response(data, location)

    def _parse_response(self, data: object, location: Location) -> RawForecastPayload:
        """Validate the decoded Open-Meteo response."""
        try:
            payload = RawForecastPayload.model_validate(data)
        except ValidationError as e:
            logger.error(f"Error parsing weather response for {location.display_name}: {e}")
            raise FetchError(f"Parse error: {e.error_count()} invalid field(s)")

        logger.debug(
            f"Fetched forecast for {location.display_name}: "
            f"{len(payload.hourly.temperature_2m)} hours, "
            f"{len(payload.daily.temperature_2m_max)} days"
        )
        return payload
