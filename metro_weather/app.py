"""Main Textual application."""

import logging
from zoneinfo import ZoneInfo

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll

from .components import DailyPanel, HourlyPanel, StatusBar, WeatherPanel
from .models.config import Config
from .services.session import WeatherSession
from .services.theme import TEXTUAL_THEMES

logger = logging.getLogger(__name__)


class WeatherApp(App):
    """Terminal weather dashboard for the Tokyo districts."""

    TITLE = "Metro Weather"

    CSS = """
    Screen {
        layout: vertical;
    }

    #content {
        height: 1fr;
    }

    HourlyPanel, DailyPanel {
        margin: 1 1 0 1;
    }
    """

    BINDINGS = [
        Binding("l", "next_location", "Location"),
        Binding("g", "flip_language", "Language"),
        Binding("t", "flip_theme", "Theme"),
        Binding("r", "reload", "Refresh"),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(self, config: Config | None = None, session: WeatherSession | None = None):
        super().__init__()
        self.session = session or WeatherSession(config)

    def compose(self) -> ComposeResult:
        yield WeatherPanel()
        with VerticalScroll(id="content"):
            yield HourlyPanel()
            yield DailyPanel()
        yield StatusBar(tz=ZoneInfo(self.session.config.weather.timezone))

    def on_mount(self) -> None:
        self._apply_theme()
        self._show_view()
        self._start_refresh()

    def _start_refresh(self) -> None:
        self.run_worker(self._refresh(), group="refresh")

    async def _refresh(self) -> None:
        """Run one refresh and update the panels with its outcome."""
        session = self.session
        status = self.query_one(StatusBar)
        status.set_activity(session.strings.loading)

        self._show_loading()

        # refresh() bumps the generation before its first await
        generation = session.generation + 1
        applied = await session.refresh()

        if session.generation != generation:
            # A newer refresh owns the panels now
            return

        status.clear_activity()
        if applied:
            status.set_last_refresh()
        elif session.error:
            self.notify(
                session.error,
                title=session.strings.error_title,
                severity="error",
            )
        self._show_view()

    def _show_view(self) -> None:
        """Render the session's current view, or the loading state."""
        session = self.session
        strings = session.strings
        palette = session.palette
        weather = self.query_one(WeatherPanel)
        hourly = self.query_one(HourlyPanel)
        daily = self.query_one(DailyPanel)

        self.query_one(StatusBar).set_strings(strings)

        view = session.view
        if view is None or session.loading:
            self._show_loading()
            return

        location = session.cycle.get(view.location_id)
        weather.update_weather(view, location, strings, session.locale, palette)
        hourly.update_hours(view.hourly, strings, palette)
        daily.update_days(view.daily, strings, palette)

    def _show_loading(self) -> None:
        session = self.session
        self.query_one(WeatherPanel).set_loading(session.location, session.strings, session.locale)
        self.query_one(HourlyPanel).clear()
        self.query_one(DailyPanel).clear()

    def _apply_theme(self) -> None:
        """Push the palette to the widgets and the Textual theme."""
        palette = self.session.palette
        self.theme = TEXTUAL_THEMES[self.session.theme]
        self.screen.styles.background = palette.background

        header = self.query_one(WeatherPanel)
        header.styles.background = palette.header_start
        header.styles.color = "#FFFFFF"
        header.styles.border = ("round", palette.header_end)

        for card in (self.query_one(HourlyPanel), self.query_one(DailyPanel)):
            card.styles.background = palette.card
            card.styles.color = palette.text
            card.styles.border = ("round", palette.border)

    def action_next_location(self) -> None:
        """Select the next district and fetch its forecast."""
        self.session.select_next_location()
        self._start_refresh()

    def action_flip_language(self) -> None:
        """Switch between Japanese and English."""
        locale = self.session.toggle_locale()
        logger.debug(f"Locale switched to {locale.value}")
        self._show_view()

    def action_flip_theme(self) -> None:
        """Switch between the light and dark palettes."""
        mode = self.session.toggle_theme()
        logger.debug(f"Theme switched to {mode.value}")
        self._apply_theme()
        self._show_view()

    def action_reload(self) -> None:
        """Refetch the forecast for the current district."""
        self._start_refresh()
