"""FastAPI integration."""

from .handlers import INCLUDE_SCOPE_KEY, apply_status_code_if_possible, install_exception_views, is_include_request
from .renderers import JSONViewRenderer, ViewRenderer

__all__ = [
    "INCLUDE_SCOPE_KEY",
    "JSONViewRenderer",
    "ViewRenderer",
    "apply_status_code_if_possible",
    "install_exception_views",
    "is_include_request",
]
