"""Config – 12-factor settings and their validation errors."""

from search_params.config.settings import EnvSettingsLoader, SearchSettings, Settings
from search_params.config.validation import ConfigError, InvalidSettingValueError

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "SearchSettings",
    "Settings",
]
