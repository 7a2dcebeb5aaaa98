"""Status bar component showing refresh status and keyboard hints."""

from datetime import datetime, tzinfo

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Static

from ..models.display import StringTable


def format_hints(strings: StringTable) -> str:
    """Build the key hint line for a locale."""
    keys = [
        ("l", strings.key_location),
        ("g", strings.language_toggle),
        ("t", strings.key_theme),
        ("r", strings.key_refresh),
        ("q", strings.key_quit),
    ]
    return "  ".join(f"[dim]{key}[/dim] {label}" for key, label in keys)


class StatusBar(Horizontal):
    """Bottom status bar with local time, refresh info, footer and keyboard hints."""

    DEFAULT_CSS = """
    StatusBar {
        height: 1;
        background: $surface-darken-1;
        color: $text-muted;
        padding: 0 1;
        width: 100%;
    }

    StatusBar #status-time {
        width: auto;
    }

    StatusBar #status-refresh {
        width: auto;
        padding-left: 2;
    }

    StatusBar #status-activity {
        width: auto;
        padding-left: 2;
        color: $warning;
    }

    StatusBar #status-footer {
        width: 1fr;
        text-align: center;
    }

    StatusBar #status-hints {
        width: auto;
        text-align: right;
    }
    """

    def __init__(self, tz: tzinfo | None = None) -> None:
        super().__init__()
        self._tz = tz
        self._last_refresh: datetime | None = None
        self._strings: StringTable | None = None

    def compose(self) -> ComposeResult:
        yield Static("", id="status-time")
        yield Static("", id="status-refresh")
        yield Static("", id="status-activity")
        yield Static("", id="status-footer")
        yield Static("", id="status-hints")

    def on_mount(self) -> None:
        """Start clock update timer."""
        self.set_interval(1, self._update_time)

    def _update_time(self) -> None:
        """Update the current time display."""
        now = datetime.now(self._tz)
        self.query_one("#status-time", Static).update(f"[bold]{now.strftime('%H:%M:%S')}[/bold]")

        if self._last_refresh and self._strings:
            minutes = int((now - self._last_refresh).total_seconds() // 60)
            refresh_text = self._strings.refreshed_ago(minutes)
            self.query_one("#status-refresh", Static).update(f"[dim]{refresh_text}[/dim]")

    def set_last_refresh(self, time: datetime | None = None) -> None:
        """Update the last refresh timestamp."""
        self._last_refresh = time or datetime.now(self._tz)
        self._update_time()

    def set_strings(self, strings: StringTable) -> None:
        """Switch the footer, hints and refresh text to a string table."""
        self._strings = strings
        self.query_one("#status-footer", Static).update(f"[dim]{strings.footer}[/dim]")
        self.query_one("#status-hints", Static).update(format_hints(strings))
        self._update_time()

    def set_activity(self, activity: str) -> None:
        """Set current activity message (e.g., 'Loading...')."""
        self.query_one("#status-activity", Static).update(
            f"[yellow]{activity}[/yellow]" if activity else ""
        )

    def clear_activity(self) -> None:
        """Clear activity message."""
        self.set_activity("")
