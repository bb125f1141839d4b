"""Theme preference."""

from .context import THEME_KEY, Theme, ThemeContext, detect_system_theme

__all__ = ["THEME_KEY", "Theme", "ThemeContext", "detect_system_theme"]
