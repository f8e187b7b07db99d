"""Core services for errorviews."""

from errorviews.core.app_config import ConfigManager, get_config, reload_config

__all__ = ["ConfigManager", "get_config", "reload_config"]
