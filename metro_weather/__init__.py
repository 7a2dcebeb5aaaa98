"""Metro Weather - a terminal weather dashboard for the Tokyo districts."""

__version__ = "0.1.0"
