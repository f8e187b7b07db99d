"""Exception view resolution services."""

from errorviews.models.config import AppConfig

from .error_logger import ErrorLogger, StructlogErrorLogger
from .service import (
    DEFAULT_EXCEPTION_MESSAGE,
    DEFAULT_EXCEPTION_MESSAGE_KEY,
    ExceptionViewResolver,
    MessageSource,
)


def create_resolver(
    config: AppConfig | None = None,
    message_source: MessageSource | None = None,
    error_logger: ErrorLogger | None = None,
) -> ExceptionViewResolver:
    """Build a resolver from configuration.

    Args:
        config: Configuration to use. Defaults to the global configuration.
        message_source: Message store. Defaults to the global I18nService.
        error_logger: Logging hook collaborator.

    Returns:
        Configured resolver
    """
    if config is None:
        from errorviews.core.app_config import get_config

        config = get_config()
    if message_source is None:
        from errorviews.services.i18n import get_i18n_service

        message_source = get_i18n_service()

    return ExceptionViewResolver(
        config.resolver,
        message_source,
        error_logger=error_logger,
        i18n_config=config.i18n,
    )


__all__ = [
    "DEFAULT_EXCEPTION_MESSAGE",
    "DEFAULT_EXCEPTION_MESSAGE_KEY",
    "ErrorLogger",
    "ExceptionViewResolver",
    "MessageSource",
    "StructlogErrorLogger",
    "create_resolver",
]
