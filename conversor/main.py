from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from .core.config import get_settings, Settings
from .core.logging import init_logging, request_context_middleware
from .core import errors
from .routers import health, rates, ui
from .services.rates.base import RateProvider
from .services.rates.providers import make_rate_provider
from .services.session import ConverterSession


def create_app(
    settings_override: Settings | None = None,
    rate_provider: RateProvider | None = None,
) -> FastAPI:
    """Application factory.

    settings_override: pass an already constructed Settings instance for tests
    to isolate environment. Falls back to cached get_settings().
    rate_provider: inject a provider directly (tests); otherwise one is built
    from settings.exchange_rate_provider.
    """
    settings = settings_override or get_settings()
    settings.init_post_load()
    # Initialize logging early
    init_logging(debug=settings.debug)

    session = ConverterSession(rate_provider or make_rate_provider(settings))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Single fetch per session start; a failure leaves the app usable with empty rates.
        await session.load_rates()
        yield

    app = FastAPI(
        title=settings.app_name,
        debug=settings.debug,
        version=settings.version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.session = session

    # Middleware (request id / structured logging)
    app.middleware("http")(request_context_middleware)

    # Error handlers
    app.add_exception_handler(StarletteHTTPException, errors.http_error_handler)
    app.add_exception_handler(RequestValidationError, errors.validation_error_handler)
    app.add_exception_handler(Exception, errors.server_error_handler)

    # Routers
    app.include_router(health.router)
    app.include_router(rates.router)
    app.include_router(ui.router)

    return app


app = create_app()

