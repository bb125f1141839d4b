"""Light/dark theme preference, persisted in local storage."""

import logging
import os
from enum import Enum
from typing import Callable, Mapping, Optional

from ...common.storage import StorageBackend

logger = logging.getLogger(__name__)

THEME_KEY = "crm_theme"

# COLORFGBG background colours that mean a dark terminal
_DARK_BACKGROUNDS = {0, 1, 2, 3, 4, 5, 6, 8}


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"


def detect_system_theme(environ: Optional[Mapping[str, str]] = None) -> Theme:
    """Guess the terminal's preference from COLORFGBG ("fg;bg"), light otherwise."""
    environ = os.environ if environ is None else environ
    value = environ.get("COLORFGBG", "")
    try:
        background = int(value.split(";")[-1])
    except ValueError:
        return Theme.LIGHT
    return Theme.DARK if background in _DARK_BACKGROUNDS else Theme.LIGHT


class ThemeContext:
    """Current theme; stored preference wins over the system default."""

    def __init__(
        self,
        storage: StorageBackend,
        key: str = THEME_KEY,
        system_theme: Callable[[], Theme] = detect_system_theme,
    ):
        self.storage = storage
        self.key = key
        self.system_theme = system_theme
        self._theme = Theme.LIGHT

    def init(self) -> Theme:
        stored = self.storage.get_item(self.key)
        if stored in (Theme.LIGHT.value, Theme.DARK.value):
            self._theme = Theme(stored)
        else:
            if stored is not None:
                logger.warning(f"Ignoring unknown theme '{stored}'")
            self._theme = self.system_theme()
        return self._theme

    @property
    def theme(self) -> Theme:
        return self._theme

    @property
    def is_dark(self) -> bool:
        return self._theme is Theme.DARK

    def set_theme(self, theme: "Theme | str") -> Theme:
        self._theme = Theme(theme)
        self.storage.set_item(self.key, self._theme.value)
        return self._theme

    def toggle(self) -> Theme:
        return self.set_theme(Theme.LIGHT if self.is_dark else Theme.DARK)

    def clear(self) -> Theme:
        """Forget the stored preference and follow the system again."""
        self.storage.remove_item(self.key)
        self._theme = self.system_theme()
        return self._theme
