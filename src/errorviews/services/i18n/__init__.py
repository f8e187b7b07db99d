"""Internationalization services."""

from .locale import negotiate_locale, normalize_locale, parse_accept_language
from .service import I18nService

_instance: I18nService | None = None


def get_i18n_service() -> I18nService:
    """Get the global I18nService instance."""
    global _instance
    if _instance is None:
        from errorviews.core.app_config import get_config
        from errorviews.utils.paths import get_messages_file

        config = get_config()
        _instance = I18nService(
            config.i18n.messages_path or get_messages_file(),
            fallback_locale=config.i18n.fallback_locale,
        )
    return _instance


__all__ = ["I18nService", "get_i18n_service", "negotiate_locale", "normalize_locale", "parse_accept_language"]
