"""Resolution result model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ResolutionResult(BaseModel):
    """Outcome of resolving one exception: which view to render and how."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    view_name: str
    status_code: int | None = None
    friendly_message: str = ""
    code: str | None = None

    # Values exposed to the renderer, e.g. the wrapped exception
    attributes: dict[str, Any] = Field(default_factory=dict)
