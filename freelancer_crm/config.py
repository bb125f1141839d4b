"""Configuration for the CRM client.

Loads from YAML config file with environment variable overrides.
Pattern: CONFIG__{SECTION}__{KEY} overrides nested YAML keys.
Example: CONFIG__API__TIMEOUT=10
"""

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field


def _default_storage_path() -> str:
    base = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return str(Path(base) / "freelancer-crm" / "storage.json")


class ApiConfig(BaseModel):
    base_url: str = "http://localhost:5050/api"
    timeout: float = Field(default=30.0, gt=0)


class StorageConfig(BaseModel):
    path: str = Field(default_factory=_default_storage_path)
    session_key: str = "crm_user"
    theme_key: str = "crm_theme"


class DashboardConfig(BaseModel):
    window_days: int = Field(default=7, ge=1, description="Upcoming reminder window")


class LoggingConfig(BaseModel):
    level: str = "INFO"


class ServiceConfig(BaseModel):
    api: ApiConfig = ApiConfig()
    storage: StorageConfig = Field(default_factory=StorageConfig)
    dashboard: DashboardConfig = DashboardConfig()
    logging: LoggingConfig = LoggingConfig()


def _apply_env_overrides(config_dict: dict, prefix: str = "CONFIG") -> dict:
    """Apply environment variable overrides to config dict.

    Pattern: CONFIG__SECTION__KEY=value maps to config[section][key] = value
    """
    for key, value in os.environ.items():
        if not key.startswith(f"{prefix}__"):
            continue
        parts = key[len(prefix) + 2 :].lower().split("__")
        target = config_dict
        for part in parts[:-1]:
            target = target.setdefault(part, {})
        # Type coercion for common cases
        if value.lower() in ("true", "false"):
            value = value.lower() == "true"
        elif value.isdigit():
            value = int(value)
        target[parts[-1]] = value
    return config_dict


def load_config(
    config_path: Optional[str] = None,
) -> ServiceConfig:
    """Load configuration from YAML file with env overrides.

    Priority: env vars > YAML file > defaults
    """
    config_dict = {}

    # 1. Load YAML if exists
    if config_path is None:
        config_path = os.getenv("CONFIG_PATH", "config/crm.yml")
    path = Path(config_path)
    if path.exists():
        with open(path) as f:
            config_dict = yaml.safe_load(f) or {}

    # 2. Apply env overrides
    config_dict = _apply_env_overrides(config_dict)

    # 3. API URL from dedicated env var
    api_url = os.getenv("CRM_API_URL")
    if api_url:
        config_dict.setdefault("api", {})["base_url"] = api_url

    return ServiceConfig(**config_dict)
