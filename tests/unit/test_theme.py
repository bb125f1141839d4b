"""Tests for the theme preference."""

import pytest

from freelancer_crm.common.storage import MemoryStorage
from freelancer_crm.modules.theme import THEME_KEY, Theme, ThemeContext, detect_system_theme


def dark_system():
    return Theme.DARK


class TestDetectSystemTheme:
    @pytest.mark.parametrize("value,expected", [
        ("15;0", Theme.DARK),
        ("0;15", Theme.LIGHT),
        ("default;default", Theme.LIGHT),
        ("", Theme.LIGHT),
        ("7;8", Theme.DARK),
    ])
    def test_colorfgbg(self, value, expected):
        assert detect_system_theme({"COLORFGBG": value}) is expected

    def test_unset(self):
        assert detect_system_theme({}) is Theme.LIGHT


class TestThemeContext:
    def test_defaults_to_system(self):
        storage = MemoryStorage()
        ctx = ThemeContext(storage, system_theme=dark_system)
        assert ctx.init() is Theme.DARK
        assert storage.get_item(THEME_KEY) is None

    def test_stored_preference_wins(self):
        ctx = ThemeContext(MemoryStorage({THEME_KEY: "light"}), system_theme=dark_system)
        assert ctx.init() is Theme.LIGHT

    def test_unknown_value_ignored(self):
        ctx = ThemeContext(MemoryStorage({THEME_KEY: "purple"}), system_theme=dark_system)
        assert ctx.init() is Theme.DARK

    def test_toggle_persists(self):
        storage = MemoryStorage()
        ctx = ThemeContext(storage, system_theme=lambda: Theme.LIGHT)
        ctx.init()
        assert ctx.toggle() is Theme.DARK
        assert ctx.is_dark
        assert storage.get_item(THEME_KEY) == "dark"
        assert ctx.toggle() is Theme.LIGHT
        assert storage.get_item(THEME_KEY) == "light"

    def test_set_theme_rejects_unknown(self):
        ctx = ThemeContext(MemoryStorage())
        with pytest.raises(ValueError):
            ctx.set_theme("purple")

    def test_clear_follows_system(self):
        storage = MemoryStorage({THEME_KEY: "light"})
        ctx = ThemeContext(storage, system_theme=dark_system)
        ctx.init()
        assert ctx.clear() is Theme.DARK
        assert storage.get_item(THEME_KEY) is None
