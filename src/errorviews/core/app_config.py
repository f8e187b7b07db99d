"""Configuration management for errorviews."""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from errorviews.exceptions import ConfigurationError
from errorviews.models.config import AppConfig

DEFAULT_CONFIG_FILENAME = "errorviews.yaml"


def _env_flag(value: str) -> bool:
    return value.lower() in ("true", "1", "yes")


class ConfigManager:
    """Manages configuration with YAML file and environment variable support."""

    def __init__(self, config_path: Path | None = None) -> None:
        """Initialize configuration manager.

        Args:
            config_path: Path to config file. If None, uses ERRORVIEWS_CONFIG_PATH
                        environment variable or defaults to ./errorviews.yaml
        """
        if config_path is None:
            env_path = os.getenv("ERRORVIEWS_CONFIG_PATH")
            if env_path:
                config_path = Path(env_path).expanduser()
            else:
                config_path = Path.cwd() / DEFAULT_CONFIG_FILENAME

        self.config_path = config_path
        self._config: AppConfig | None = None

    def load(self) -> AppConfig:
        """Load configuration from file and apply environment variable overrides.

        A missing file yields the defaults.

        Returns:
            Loaded configuration

        Raises:
            ConfigurationError: If the file is not valid YAML or does not match the schema
        """
        config_data: dict[str, Any] = {}

        # 1. Load from YAML file if it exists
        if self.config_path.exists():
            try:
                with open(self.config_path, encoding="utf-8") as f:
                    config_data = yaml.safe_load(f) or {}
            except (OSError, yaml.YAMLError) as e:
                raise ConfigurationError(self.config_path, str(e)) from e

        if not isinstance(config_data, dict):
            raise ConfigurationError(self.config_path, "top-level document must be a mapping")

        # 2. Create config object (applies defaults)
        try:
            config = AppConfig(**config_data)
        except ValidationError as e:
            raise ConfigurationError(self.config_path, str(e)) from e

        # 3. Apply environment variable overrides
        return self._apply_env_overrides(config)

    def _apply_env_overrides(self, config: AppConfig) -> AppConfig:
        """Apply environment variable overrides.

        Environment variables use the format: ERRORVIEWS_<KEY>
        Examples:
            - ERRORVIEWS_LOG_ENABLE=true
            - ERRORVIEWS_DEFAULT_ERROR_VIEW=errors/general

        Args:
            config: Base configuration

        Returns:
            Configuration with environment overrides applied
        """
        # Resolver overrides (the resolver model is frozen, so copy it)
        resolver_updates: dict[str, Any] = {}
        if log_enable := os.getenv("ERRORVIEWS_LOG_ENABLE"):
            resolver_updates["log_enable"] = _env_flag(log_enable)
        if default_view := os.getenv("ERRORVIEWS_DEFAULT_ERROR_VIEW"):
            resolver_updates["default_error_view"] = default_view
        if category := os.getenv("ERRORVIEWS_WARN_LOG_CATEGORY"):
            resolver_updates["warn_log_category"] = category
        if resolver_updates:
            config.resolver = config.resolver.model_copy(update=resolver_updates)

        # I18n overrides
        if locale := os.getenv("ERRORVIEWS_DEFAULT_LOCALE"):
            config.i18n.default_locale = locale
        if messages_path := os.getenv("ERRORVIEWS_MESSAGES_PATH"):
            config.i18n.messages_path = Path(messages_path).expanduser()

        # Logging overrides
        if level := os.getenv("ERRORVIEWS_LOG_LEVEL"):
            if level.upper() in ("TRACE", "DEBUG", "INFO", "WARNING", "ERROR"):
                config.logging.level = level.upper()  # type: ignore

        return config

    def get_config(self) -> AppConfig:
        """Get configuration (singleton pattern).

        Returns:
            Current configuration
        """
        if self._config is None:
            self._config = self.load()
        return self._config

    def reload(self) -> AppConfig:
        """Reload configuration from file.

        Returns:
            Reloaded configuration
        """
        self._config = self.load()
        return self._config


# Global configuration manager instance
_config_manager = ConfigManager()


def get_config() -> AppConfig:
    """Get global configuration.

    Returns:
        Application configuration
    """
    return _config_manager.get_config()


def reload_config() -> AppConfig:
    """Reload global configuration from file.

    Returns:
        Reloaded configuration
    """
    return _config_manager.reload()
