"""Exception types for errorviews.

``ExceptionWrapper`` carries the metadata the view resolver needs (error code,
default message, message arguments) and receives the localized friendly
message once the resolver has run.
"""

from collections.abc import Sequence


class ExceptionWrapper(Exception):
    """Exception with an optional error code and a localized friendly message.

    Application code can raise it (or a subclass) directly with a code; any
    other exception is wrapped by :meth:`wrap` when it reaches the resolver.
    """

    def __init__(
        self,
        code: str | None = None,
        default_friendly_message: str | None = None,
        *,
        message_args: Sequence[object] = (),
        cause: BaseException | None = None,
    ) -> None:
        """
        Initialize the error.

        Args:
            code: Error code, also used as message key (e.g., 'ORDER_NOT_FOUND')
            default_friendly_message: Message used when no resource exists for the code
            message_args: Positional values substituted into the message template
            cause: Underlying exception being wrapped
        """
        normalized_code = code.strip() if code else None
        super().__init__(normalized_code or default_friendly_message or (str(cause) if cause else ""))
        self.code = normalized_code or None
        self.default_friendly_message = default_friendly_message
        self.message_args = tuple(message_args)
        self.friendly_message: str | None = None
        if cause is not None:
            self.__cause__ = cause

    @property
    def cause(self) -> BaseException | None:
        """The directly wrapped exception, if any."""
        return self.__cause__

    @classmethod
    def wrap(cls, exc: BaseException) -> "ExceptionWrapper":
        """Return ``exc`` itself when it already is a wrapper, else wrap it."""
        if isinstance(exc, ExceptionWrapper):
            return exc
        return cls(cause=exc)

    def most_specific_cause(self) -> BaseException:
        """Return the innermost exception of the cause chain, or self."""
        root: BaseException = self
        seen = {id(self)}
        current = self.__cause__
        while current is not None and id(current) not in seen:
            seen.add(id(current))
            root = current
            current = current.__cause__
        return root

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.default_friendly_message or ''}".rstrip()
        cause = self.cause
        if cause is not None:
            return f"{type(cause).__name__}: {cause}"
        return self.default_friendly_message or ""


class ConfigurationError(Exception):
    """Raised when a configuration file cannot be read or validated."""

    def __init__(self, path: object, reason: str) -> None:
        super().__init__(f"Invalid configuration in {path}: {reason}")
        self.path = path
        self.reason = reason
