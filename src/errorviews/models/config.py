"""Configuration data models for errorviews."""

from collections.abc import Mapping
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _pairs_from_mapping(value: Any, key_field: str) -> Any:  # noqa: ANN401
    """Turn a ``{key: view}`` mapping into a list of row dicts, keeping order."""
    if isinstance(value, Mapping):
        return [{key_field: str(key), "view": view} for key, view in value.items()]
    return value


class ViewMapping(BaseModel):
    """Exception class-name pattern mapped to a view name."""

    model_config = ConfigDict(frozen=True)

    pattern: str
    view: str


class ErrorCodeMapping(BaseModel):
    """Comma-separated list of error codes mapped to a view name."""

    model_config = ConfigDict(frozen=True)

    codes: str
    view: str

    @property
    def code_list(self) -> list[str]:
        """Individual codes of this row, trimmed."""
        return [code.strip() for code in self.codes.split(",")]


class ResolverConfig(BaseModel):
    """Exception view resolver configuration.

    The mapping tables are ordered: the first registered row wins whenever two
    rows match equally well. ``None`` means the table is not configured at all.
    """

    model_config = ConfigDict(frozen=True)

    exception_mappings: tuple[ViewMapping, ...] | None = None
    error_code_mappings: tuple[ErrorCodeMapping, ...] | None = None
    default_error_view: str | None = None

    # View name -> HTTP status code
    status_codes: dict[str, int] = Field(default_factory=dict)
    default_status_code: int | None = None

    # Exception class-name patterns that are never handled. Matched like
    # exception_mappings: substring of the most specific cause or any ancestor,
    # not an exact class match.
    excluded_exceptions: tuple[str, ...] = ()

    # Name under which the wrapped exception is handed to the renderer
    exception_attribute: str | None = "exception"

    log_enable: bool = False
    warn_log_category: str | None = None

    @field_validator("exception_mappings", mode="before")
    @classmethod
    def coerce_exception_mappings(cls, v: Any) -> Any:  # noqa: ANN401
        """Accept ``{pattern: view}`` mappings as well as row lists."""
        return _pairs_from_mapping(v, "pattern")

    @field_validator("error_code_mappings", mode="before")
    @classmethod
    def coerce_error_code_mappings(cls, v: Any) -> Any:  # noqa: ANN401
        """Accept ``{codes: view}`` mappings as well as row lists."""
        return _pairs_from_mapping(v, "codes")


class I18nConfig(BaseModel):
    """Message resource configuration."""

    messages_path: Path | None = None
    default_locale: str = "en"
    fallback_locale: str | None = "en"
    query_param: str | None = "lang"

    @field_validator("messages_path", mode="before")
    @classmethod
    def expand_messages_path(cls, v: str | Path | None) -> Path | None:
        """Expand user path for messages_path."""
        if v is None:
            return None
        if isinstance(v, str):
            return Path(v).expanduser()
        return v


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


class AppConfig(BaseModel):
    """Root configuration model."""

    resolver: ResolverConfig = Field(default_factory=ResolverConfig)
    i18n: I18nConfig = Field(default_factory=I18nConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
