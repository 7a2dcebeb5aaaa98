"""Services for classifying, localizing and fetching forecasts."""

from .classifier import classify
from .localization import strings_for
from .locations import DISTRICTS, LocationCycle
from .normalizer import normalize
from .session import WeatherSession
from .theme import palette_for
from .weather_service import FetchError, WeatherService

__all__ = [
    "DISTRICTS",
    "FetchError",
    "LocationCycle",
    "WeatherService",
    "WeatherSession",
    "classify",
    "normalize",
    "palette_for",
    "strings_for",
]
