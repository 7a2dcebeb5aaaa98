"""Hourly and weekly forecast panels."""

from textual.app import ComposeResult
from textual.widgets import Static

from ..models.display import ColorPalette, StringTable
from ..models.weather import DailyOutlook, HourlySlice
from .weather_panel import glyph


class HourlyPanel(Static):
    """Row of hourly slices."""

    DEFAULT_CSS = """
    HourlyPanel {
        height: auto;
        border: round $primary;
        padding: 0 1;
    }
    """

    def compose(self) -> ComposeResult:
        yield Static("", id="hourly-title")
        yield Static("", id="hourly-slices")

    def update_hours(
        self, slices: tuple[HourlySlice, ...], strings: StringTable, palette: ColorPalette
    ) -> None:
        """Render the hourly outlook."""
        self.query_one("#hourly-title", Static).update(f"[bold]{strings.hourly_forecast}[/bold]")
        muted = palette.text_secondary
        parts = [
            f"[{muted}]{s.hour_label}[/{muted}] {glyph(s.icon_id)} {s.temperature_c}°"
            for s in slices
        ]
        self.query_one("#hourly-slices", Static).update("   ".join(parts))

    def clear(self) -> None:
        self.query_one("#hourly-title", Static).update("")
        self.query_one("#hourly-slices", Static).update("")


class DailyPanel(Static):
    """Seven-day outlook, one line per day."""

    DEFAULT_CSS = """
    DailyPanel {
        height: auto;
        border: round $primary;
        padding: 0 1;
    }
    """

    def compose(self) -> ComposeResult:
        yield Static("", id="daily-title")
        yield Static("", id="daily-rows")

    def update_days(
        self, days: tuple[DailyOutlook, ...], strings: StringTable, palette: ColorPalette
    ) -> None:
        """Render the weekly outlook."""
        self.query_one("#daily-title", Static).update(f"[bold]{strings.weekly_forecast}[/bold]")
        accent = palette.primary
        muted = palette.text_secondary
        rows = [
            f"{day.day_label:<12} {glyph(day.icon_id)}  "
            f"[{accent}]💧{day.precipitation_pct}%[/{accent}]  "
            f"[bold]{day.high_c}°[/bold] [{muted}]{day.low_c}°[/{muted}]  "
            f"[{muted}]{strings.conditions.label_for(day.category)}[/{muted}]"
            for day in days
        ]
        self.query_one("#daily-rows", Static).update("\n".join(rows))

    def clear(self) -> None:
        self.query_one("#daily-title", Static).update("")
        self.query_one("#daily-rows", Static).update("")
