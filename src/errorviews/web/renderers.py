"""View renderers turn a resolution result into an HTTP response."""

from typing import Protocol

from fastapi import Request, Response
from fastapi.responses import JSONResponse

from errorviews.models.resolution import ResolutionResult

# Status used before any resolved status code is applied
DEFAULT_ERROR_STATUS = 500


class ViewRenderer(Protocol):
    """Renders the chosen error view."""

    def render(self, request: Request, result: ResolutionResult) -> Response: ...


class JSONViewRenderer:
    """Renders the error view as a JSON document.

    The body names the view and carries the error code and friendly message;
    raw exception details are never included. The body has exactly the keys
    ``view`` (view name), ``code`` (trimmed error code or null) and
    ``message`` (friendly message).
    """

    def render(self, request: Request, result: ResolutionResult) -> Response:
        payload: dict[str, str | None] = {
            "view": result.view_name,
            "code": result.code,
            "message": result.friendly_message,
        }
        return JSONResponse(status_code=DEFAULT_ERROR_STATUS, content=payload)
