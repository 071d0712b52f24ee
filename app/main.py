import logging

from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException
from .core.config import get_settings, Settings
from .core.logging import init_logging, request_context_middleware
from .core import errors
from .core.responses import JSONUtf8Response
from .routers import rates
from .services.auth import make_authenticator
from .services.rates.store import RateStore
from .services.routing import Router


def create_app(settings_override: Settings | None = None) -> FastAPI:
    """Application factory.

    settings_override: pass an already constructed Settings instance for tests
    to isolate environment (e.g., API token). Falls back to cached get_settings().

    Each app owns exactly one RateStore, created here and reachable only through
    the dispatcher's handlers.
    """
    settings = settings_override or get_settings()
    # Initialize logging early
    init_logging(debug=settings.debug)
    if not settings.api_token:
        logging.getLogger("app").warning(
            "API_TOKEN is not set; PUT and DELETE /rate will always be refused"
        )

    app = FastAPI(
        title=settings.app_name,
        debug=settings.debug,
        version=settings.version,
        default_response_class=JSONUtf8Response,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    store = RateStore()
    app.state.rate_store = store
    app.state.dispatcher = Router(
        rates.build_routes(store, make_authenticator(settings.api_token))
    )

    # Middleware (request id / structured logging)
    app.middleware("http")(request_context_middleware)

    # Error handlers
    app.add_exception_handler(StarletteHTTPException, errors.http_error_handler)
    app.add_exception_handler(Exception, errors.server_error_handler)

    # Routers
    app.include_router(rates.router)

    return app


app = create_app()
