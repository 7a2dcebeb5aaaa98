"""Session state: selected location, locale, theme and the current view."""

import logging
from collections.abc import Callable
from datetime import datetime
from typing import Protocol
from zoneinfo import ZoneInfo

from ..models.config import Config
from ..models.display import ColorPalette, Locale, StringTable, ThemeMode
from ..models.location import Location
from ..models.weather import ForecastView, RawForecastPayload
from .localization import strings_for, toggle_locale
from .locations import LocationCycle
from .normalizer import normalize
from .theme import palette_for, toggle_theme
from .weather_service import FetchError, WeatherService

logger = logging.getLogger(__name__)


class ForecastSource(Protocol):
    """Anything that can fetch a forecast payload for a location."""

    async def fetch_forecast(self, location: Location) -> RawForecastPayload: ...


class WeatherSession:
    """Owns the mutable state of one dashboard session.

    Refreshes are tagged with a generation number. A response is applied only
    if no newer refresh was started while it was in flight; older responses
    are dropped so a slow fetch for a previous location never overwrites the
    view for the current one.
    """

    def __init__(
        self,
        config: Config | None = None,
        source: ForecastSource | None = None,
        cycle: LocationCycle | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.config = config or Config()
        self.source = source or WeatherService(self.config.weather)
        self.cycle = cycle or LocationCycle()
        self._tz = ZoneInfo(self.config.weather.timezone)
        self._clock = clock or (lambda: datetime.now(self._tz))

        self.location: Location = self.cycle.get(self.config.settings.location)
        self.locale: Locale = self.config.settings.locale
        self.theme: ThemeMode = self.config.settings.theme

        self.view: ForecastView | None = None
        self.loading: bool = False
        self.error: str | None = None
        self._payload: RawForecastPayload | None = None
        self._generation = 0

    @property
    def generation(self) -> int:
        """Number of the most recently started refresh."""
        return self._generation

    @property
    def strings(self) -> StringTable:
        return strings_for(self.locale)

    @property
    def palette(self) -> ColorPalette:
        return palette_for(self.theme)

    def select_next_location(self) -> Location:
        """Advance to the next location. The caller triggers the refresh."""
        self.location = self.cycle.next(self.location)
        logger.info(f"Selected location {self.location.display_name}")
        return self.location

    def toggle_locale(self) -> Locale:
        """Switch locale and re-derive the view labels from the last payload.

        The new view keeps the reference instant of the one it replaces, so
        only the labels change.
        """
        self.locale = toggle_locale(self.locale)
        if self._payload is not None and self.view is not None:
            self.view = normalize(
                self._payload, self.view.reference, self.locale, self.view.location_id
            )
        return self.locale

    def toggle_theme(self) -> ThemeMode:
        """Switch between light and dark themes."""
        self.theme = toggle_theme(self.theme)
        return self.theme

    async def refresh(self) -> bool:
        """Fetch and normalize the forecast for the selected location.

        Returns:
            True if a new view was applied, False if the fetch failed or the
            result was superseded by a newer refresh.
        """
        self._generation += 1
        generation = self._generation
        location = self.location
        self.loading = True
        self.error = None

        try:
            payload = await self.source.fetch_forecast(location)
        except FetchError as e:
            if generation != self._generation:
                logger.debug(f"Ignoring failed stale refresh #{generation} for {location.id}")
                return False
            logger.warning(f"Refresh failed for {location.display_name}: {e.reason}")
            self.error = self.strings.error_message
            self.loading = False
            return False

        if generation != self._generation:
            logger.debug(f"Discarding stale refresh #{generation} for {location.id}")
            return False

        self._payload = payload
        self.view = normalize(payload, self._clock(), self.locale, location.id)
        self.loading = False
        logger.info(f"Weather updated for {location.display_name}")
        return True
