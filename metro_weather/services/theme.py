"""Colour palettes for the light and dark themes."""

from ..models.display import ColorPalette, ThemeMode

PALETTES: dict[ThemeMode, ColorPalette] = {
    ThemeMode.LIGHT: ColorPalette(
        primary="#E91E63",
        secondary="#F06292",
        background="#FFF3F8",
        card="#FFFFFF",
        text="#1C1C1E",
        text_secondary="#8E8E93",
        border="#E5E5EA",
        header_start="#E91E63",
        header_end="#F06292",
    ),
    ThemeMode.DARK: ColorPalette(
        primary="#FF1744",
        secondary="#FF6B9D",
        background="#000000",
        card="#1C1C1E",
        text="#FFFFFF",
        text_secondary="#8E8E93",
        border="#2C2C2E",
        header_start="#1A1A2E",
        header_end="#16213E",
    ),
}

# Built-in Textual theme matching each mode
TEXTUAL_THEMES: dict[ThemeMode, str] = {
    ThemeMode.LIGHT: "textual-light",
    ThemeMode.DARK: "textual-dark",
}


def palette_for(mode: ThemeMode) -> ColorPalette:
    """Return the colour palette for a theme mode."""
    return PALETTES[mode]


def toggle_theme(mode: ThemeMode) -> ThemeMode:
    """Return the opposite theme mode."""
    return ThemeMode.DARK if mode == ThemeMode.LIGHT else ThemeMode.LIGHT
