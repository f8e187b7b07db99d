"""Logging hook collaborators for resolved exceptions."""

from typing import Protocol

from errorviews.logger import get_logger
from errorviews.services.resolver.hierarchy import qualified_name


class ErrorLogger(Protocol):
    """Receives every exception the resolver handles while logging is enabled."""

    def log_exception(self, exc: BaseException) -> None: ...


class StructlogErrorLogger:
    """Logs resolved exceptions at warning level under a log category."""

    def __init__(self, category: str) -> None:
        self.category = category
        self._logger = get_logger(category)

    def log_exception(self, exc: BaseException) -> None:
        self._logger.warning(
            "Resolved exception",
            exception_type=qualified_name(type(exc)),
            exc_info=exc,
        )
