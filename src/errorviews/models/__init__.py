"""Data models for errorviews."""

from errorviews.models.config import (
    AppConfig,
    ErrorCodeMapping,
    I18nConfig,
    LoggingConfig,
    ResolverConfig,
    ViewMapping,
)
from errorviews.models.resolution import ResolutionResult

__all__ = [
    "AppConfig",
    "ErrorCodeMapping",
    "I18nConfig",
    "LoggingConfig",
    "ResolutionResult",
    "ResolverConfig",
    "ViewMapping",
]
