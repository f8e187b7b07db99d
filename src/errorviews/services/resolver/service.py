"""Exception view resolver.

Maps an exception raised while handling a request to an error view, an HTTP
status code and a localized friendly message.
"""

from collections.abc import Sequence
from typing import Protocol

from starlette.requests import Request

from errorviews.exceptions import ExceptionWrapper
from errorviews.logger import get_logger
from errorviews.models.config import I18nConfig, ResolverConfig
from errorviews.models.resolution import ResolutionResult
from errorviews.services.i18n.locale import negotiate_locale
from errorviews.services.resolver.codes import find_view_by_error_code
from errorviews.services.resolver.error_logger import ErrorLogger, StructlogErrorLogger
from errorviews.services.resolver.hierarchy import find_matching_mapping, matches_any, qualified_name

logger = get_logger(__name__)

DEFAULT_EXCEPTION_MESSAGE_KEY = "exception.defaultMessage"
DEFAULT_EXCEPTION_MESSAGE = ""


class MessageSource(Protocol):
    """Locale-aware message lookup. Must return ``default`` instead of raising."""

    def get_message(
        self,
        key: str,
        args: Sequence[object] | None = None,
        default: str | None = None,
        locale: str | None = None,
    ) -> str: ...


class ExceptionViewResolver:
    """Resolves exceptions to error views.

    Two tables select the view: exception class-name patterns (closest class
    in the hierarchy wins) and error codes (first matching row wins). A class
    match takes precedence over a code match; when neither matches the
    default error view is used, if configured.

    Args:
        config: Mapping tables and resolver options
        message_source: Store used to resolve friendly messages
        error_logger: Logging hook collaborator. When omitted, a structlog
            logger under ``config.warn_log_category`` (or this module) is used
        i18n_config: Locale negotiation settings
    """

    def __init__(
        self,
        config: ResolverConfig,
        message_source: MessageSource,
        error_logger: ErrorLogger | None = None,
        i18n_config: I18nConfig | None = None,
    ) -> None:
        self.config = config
        self.message_source = message_source
        self.i18n_config = i18n_config or I18nConfig()
        if error_logger is None:
            error_logger = StructlogErrorLogger(config.warn_log_category or __name__)
        self.error_logger = error_logger

    @staticmethod
    def normalize(exc: BaseException) -> ExceptionWrapper:
        """Use an ExceptionWrapper as-is; wrap anything else without a code."""
        return ExceptionWrapper.wrap(exc)

    def resolve(self, request: Request | None, exc: BaseException) -> ResolutionResult | None:
        """
        Resolve an exception raised while handling ``request``.

        Returns:
            The view to render, or None when the exception is not handled here
        """
        wrapper = self.normalize(exc)

        if self.config.excluded_exceptions and matches_any(
            self.config.excluded_exceptions, wrapper.most_specific_cause()
        ):
            logger.debug("Exception excluded from view resolution", exception_type=qualified_name(type(exc)))
            return None

        view_name = self.resolve_view(wrapper, request)
        if view_name is None:
            return None

        result = self.build_result(view_name, wrapper, request)
        self.log_exception(exc)
        return result

    def resolve_view(self, wrapper: ExceptionWrapper, request: Request | None) -> str | None:
        """
        Pick the view name for a wrapped exception.

        Also fills ``wrapper.friendly_message``, whatever the outcome.
        """
        class_view_name: str | None = None
        code_view_name: str | None = None

        if self.config.exception_mappings is not None:
            mapping = find_matching_mapping(self.config.exception_mappings, wrapper.most_specific_cause())
            if mapping is not None:
                class_view_name = mapping.view

        if self.config.error_code_mappings is not None:
            code_view_name = find_view_by_error_code(self.config.error_code_mappings, wrapper.code)

        view_name = class_view_name if class_view_name is not None else code_view_name

        if view_name is None and self.config.default_error_view is not None:
            logger.debug(
                "Resolving to default view",
                view=self.config.default_error_view,
                exception_type=qualified_name(type(wrapper.most_specific_cause())),
            )
            view_name = self.config.default_error_view

        self.fill_friendly_message(wrapper, request)
        return view_name

    def determine_status_code(self, request: Request | None, view_name: str) -> int | None:
        """Status code configured for a view, else the default status code."""
        return self.config.status_codes.get(view_name, self.config.default_status_code)

    def build_result(self, view_name: str, wrapper: ExceptionWrapper, request: Request | None) -> ResolutionResult:
        attributes: dict[str, object] = {}
        if self.config.exception_attribute:
            attributes[self.config.exception_attribute] = wrapper

        return ResolutionResult(
            view_name=view_name,
            status_code=self.determine_status_code(request, view_name),
            friendly_message=wrapper.friendly_message or "",
            code=wrapper.code,
            attributes=attributes,
        )

    def resolve_locale(self, request: Request | None) -> str:
        return negotiate_locale(
            request,
            default_locale=self.i18n_config.default_locale,
            query_param=self.i18n_config.query_param,
        )

    def fill_friendly_message(self, wrapper: ExceptionWrapper, request: Request | None) -> None:
        """Resolve the friendly message for the request locale and store it on the wrapper."""
        locale = self.resolve_locale(request)
        wrapper.friendly_message = self.resolve_friendly_message(wrapper, locale)

    def resolve_friendly_message(
        self,
        wrapper: ExceptionWrapper,
        locale: str | None,
        message_source: MessageSource | None = None,
    ) -> str:
        """
        Look up the friendly message for an exception.

        With a code, the code is the message key and the fallback is the
        exception's own default message, or the global default message when it
        has none. Without a code, the key is the fully-qualified class name of
        the most specific cause and the fallback is the global default message.
        """
        source = message_source or self.message_source

        global_default = source.get_message(DEFAULT_EXCEPTION_MESSAGE_KEY, None, DEFAULT_EXCEPTION_MESSAGE, locale)

        if wrapper.code:
            if wrapper.default_friendly_message and wrapper.default_friendly_message.strip():
                fallback = wrapper.default_friendly_message
            else:
                fallback = global_default
            return source.get_message(wrapper.code, wrapper.message_args, fallback, locale)

        class_name = qualified_name(type(wrapper.most_specific_cause()))
        return source.get_message(class_name, None, global_default, locale)

    def log_exception(self, exc: BaseException) -> None:
        """Forward the exception to the error logger when logging is enabled."""
        if not self.config.log_enable or self.error_logger is None:
            return
        try:
            self.error_logger.log_exception(exc)
        except Exception as e:
            logger.warning("Error logger failed", exception_type=qualified_name(type(exc)), error=str(e))
