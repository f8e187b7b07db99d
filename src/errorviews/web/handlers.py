"""FastAPI integration for the exception view resolver.

Usage:
    resolver = create_resolver()
    install_exception_views(app, resolver)
"""

from fastapi import FastAPI, Request, Response
from fastapi.responses import PlainTextResponse

from errorviews.exceptions import ExceptionWrapper
from errorviews.logger import get_logger
from errorviews.middleware import LocaleMiddleware
from errorviews.services.resolver import ExceptionViewResolver
from errorviews.services.resolver.hierarchy import qualified_name
from errorviews.web.renderers import JSONViewRenderer, ViewRenderer

logger = get_logger(__name__)

# Scope key set on sub-requests dispatched from inside another request
INCLUDE_SCOPE_KEY = "errorviews.include"


def is_include_request(request: Request) -> bool:
    """True when the request is an included/forwarded sub-request, not a top-level one."""
    return bool(request.scope.get(INCLUDE_SCOPE_KEY))


def apply_status_code_if_possible(request: Request, response: Response, status_code: int) -> None:
    """Set the response status, but only for top-level requests."""
    if is_include_request(request):
        logger.debug("Skipping status code for included request", status_code=status_code, path=request.url.path)
        return
    response.status_code = status_code


def install_exception_views(
    app: FastAPI,
    resolver: ExceptionViewResolver,
    renderer: ViewRenderer | None = None,
    negotiate_locale: bool = True,
) -> None:
    """Register the resolver as the application's exception handler.

    Exceptions the resolver does not handle get Starlette's plain
    "Internal Server Error" response.

    Args:
        app: The FastAPI application instance.
        resolver: Resolver that picks the view.
        renderer: Renderer for the chosen view. Defaults to JSONViewRenderer.
        negotiate_locale: Also install LocaleMiddleware using the resolver's i18n settings.
    """
    view_renderer = renderer or JSONViewRenderer()

    async def handle_exception(request: Request, exc: Exception) -> Response:
        """Resolve and render the error view for an exception."""
        result = resolver.resolve(request, exc)
        if result is None:
            logger.error("Unhandled exception", exception_type=qualified_name(type(exc)), path=request.url.path)
            return PlainTextResponse("Internal Server Error", status_code=500)

        response = view_renderer.render(request, result)
        if result.status_code is not None:
            apply_status_code_if_possible(request, response, result.status_code)
        return response

    # ExceptionWrapper is handled inside the routing layer; everything else
    # reaches the server error handler.
    app.add_exception_handler(ExceptionWrapper, handle_exception)
    app.add_exception_handler(Exception, handle_exception)

    if negotiate_locale:
        app.add_middleware(
            LocaleMiddleware,
            default_locale=resolver.i18n_config.default_locale,
            query_param=resolver.i18n_config.query_param,
        )
