"""Locale middleware for FastAPI.

Negotiates the locale once per request and stores it on ``request.state`` so
that exception handlers and routes render messages in the same language.

Usage:
    app.add_middleware(LocaleMiddleware, default_locale="en")
"""

import logging
from collections.abc import Awaitable, Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from errorviews.services.i18n.locale import LOCALE_STATE_ATTR, negotiate_locale

logger = logging.getLogger(__name__)


class LocaleMiddleware(BaseHTTPMiddleware):
    """Middleware to pick the request locale from ``?lang=`` or Accept-Language.

    Args:
        app: The ASGI application
        default_locale: Locale used when the request does not ask for one
        query_param: Query parameter that overrides Accept-Language (None disables it)
    """

    def __init__(self, app: ASGIApp, default_locale: str = "en", query_param: str | None = "lang") -> None:
        super().__init__(app)
        self.default_locale = default_locale
        self.query_param = query_param

    async def dispatch(self, request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
        """Store the negotiated locale on the request and tag the response with it."""
        locale = negotiate_locale(request, default_locale=self.default_locale, query_param=self.query_param)
        setattr(request.state, LOCALE_STATE_ATTR, locale)
        logger.debug(f"Request locale: {locale} for {request.method} {request.url.path}")

        response = await call_next(request)
        response.headers.setdefault("Content-Language", locale.replace("_", "-"))
        return response
