from collections.abc import Sequence

import pytest


class FakeMessageSource:
    """In-memory message store: {key: template}, one locale."""

    def __init__(self, messages: dict[str, str] | None = None) -> None:
        self.messages = messages or {}
        self.lookups: list[tuple[str, tuple[object, ...] | None, str | None, str | None]] = []

    def get_message(
        self,
        key: str,
        args: Sequence[object] | None = None,
        default: str | None = None,
        locale: str | None = None,
    ) -> str:
        self.lookups.append((key, tuple(args) if args is not None else None, default, locale))
        template = self.messages.get(key, default)
        if template is None:
            return key
        return template.format(*args) if args else template


class RecordingErrorLogger:
    def __init__(self) -> None:
        self.logged: list[BaseException] = []

    def log_exception(self, exc: BaseException) -> None:
        self.logged.append(exc)


@pytest.fixture
def messages() -> FakeMessageSource:
    return FakeMessageSource()


@pytest.fixture
def error_logger() -> RecordingErrorLogger:
    return RecordingErrorLogger()
