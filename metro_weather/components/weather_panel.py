"""Weather panel component for displaying current conditions."""

from textual.app import ComposeResult
from textual.widgets import Label, Static

from ..models.display import ColorPalette, Locale, StringTable
from ..models.location import Location
from ..models.weather import ForecastView

ICON_GLYPHS = {
    "sunny": "☀️",
    "partly-sunny": "⛅",
    "cloudy": "☁️",
    "rainy": "🌧️",
    "snow": "❄️",
    "thunderstorm": "⛈️",
}


def glyph(icon_id: str) -> str:
    """Return the terminal glyph for an icon identifier."""
    return ICON_GLYPHS.get(icon_id, "?")


class WeatherPanel(Static):
    """Header panel with location and current conditions."""

    DEFAULT_CSS = """
    WeatherPanel {
        height: auto;
        border: round $primary;
        padding: 0 1;
    }

    WeatherPanel #weather-temp {
        text-style: bold;
        padding: 1 0 0 0;
    }

    WeatherPanel #weather-details {
        padding: 1 0 0 0;
    }
    """

    def compose(self) -> ComposeResult:
        yield Static("", id="weather-location")
        yield Static("", id="weather-temp")
        yield Label("", id="weather-condition")
        yield Static("", id="weather-details")

    def set_loading(self, location: Location, strings: StringTable, locale: Locale) -> None:
        """Show the loading copy under the location header."""
        self.query_one("#weather-location", Static).update(self._location_text(location, locale))
        self.query_one("#weather-temp", Static).update(f"[dim]{strings.loading}[/dim]")
        self.query_one("#weather-condition", Label).update("")
        self.query_one("#weather-details", Static).update("")

    def _location_text(self, location: Location, locale: Locale) -> str:
        # Localized names are shown only in Japanese
        if locale == Locale.JA:
            return f"📍 [bold]{location.localized_name}[/bold]  {location.display_name}, Tokyo"
        return f"📍 [bold]{location.display_name}, Tokyo[/bold]"

    def update_weather(
        self,
        view: ForecastView,
        location: Location,
        strings: StringTable,
        locale: Locale,
        palette: ColorPalette,
    ) -> None:
        """Render the current conditions of a view."""
        current = view.current
        accent = palette.primary
        muted = palette.text_secondary

        self.query_one("#weather-location", Static).update(self._location_text(location, locale))
        rain = ""
        today = view.today
        if today and today.precipitation_pct > 30:
            rain = f"  ☔{today.precipitation_pct}%"

        self.query_one("#weather-temp", Static).update(
            f"{glyph(current.icon_id)}  [{accent}]{current.temperature_c}°[/{accent}] "
            f"{view.temperature_trend}{rain}"
        )
        self.query_one("#weather-condition", Label).update(
            f"{strings.conditions.label_for(current.category)}   "
            f"{strings.high}:{current.high_c}° {strings.low}:{current.low_c}°"
        )
        self.query_one("#weather-details", Static).update(
            f"💧 {current.humidity_pct}% [{muted}]{strings.humidity}[/{muted}]   "
            f"💨 {current.wind_kph} km/h [{muted}]{strings.wind_speed}[/{muted}]   "
            f"🌡️ {current.feels_like_c}° [{muted}]{strings.feels_like}[/{muted}]"
        )
