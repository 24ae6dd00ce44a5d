"""Config settings – 12-factor env-based configuration."""
from search_params.config.settings.base import Settings
from search_params.config.settings.loaders import EnvSettingsLoader
from search_params.config.settings.search import SearchSettings

__all__ = ["EnvSettingsLoader", "SearchSettings", "Settings"]
