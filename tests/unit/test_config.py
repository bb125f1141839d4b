"""Tests for YAML config loading and env overrides."""

from unittest.mock import patch

import pytest
from pydantic import ValidationError

from freelancer_crm.config import ServiceConfig, load_config


class TestConfig:
    def test_defaults(self):
        config = ServiceConfig()
        assert config.api.base_url == "http://localhost:5050/api"
        assert config.storage.session_key == "crm_user"
        assert config.storage.theme_key == "crm_theme"
        assert config.dashboard.window_days == 7
        assert config.logging.level == "INFO"

    @patch.dict("os.environ", {"XDG_CONFIG_HOME": "/tmp/xdg"})
    def test_storage_path_follows_xdg(self):
        assert ServiceConfig().storage.path == "/tmp/xdg/freelancer-crm/storage.json"

    def test_yaml_file(self, tmp_path):
        path = tmp_path / "crm.yml"
        path.write_text("api:\n  base_url: https://crm.example.com/api\n  timeout: 5\n")
        config = load_config(str(path))
        assert config.api.base_url == "https://crm.example.com/api"
        assert config.api.timeout == 5

    @patch.dict("os.environ", {"CONFIG__DASHBOARD__WINDOW_DAYS": "14"})
    def test_env_override(self):
        config = load_config("/nonexistent.yml")
        assert config.dashboard.window_days == 14

    @patch.dict("os.environ", {"CRM_API_URL": "https://api.test/api"})
    def test_api_url_env(self):
        assert load_config("/nonexistent.yml").api.base_url == "https://api.test/api"

    def test_invalid_window(self, tmp_path):
        path = tmp_path / "crm.yml"
        path.write_text("dashboard:\n  window_days: 0\n")
        with pytest.raises(ValidationError):
            load_config(str(path))
