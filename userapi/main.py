"""FastAPI application entry point.

Wiring only: lifespan, exception handlers, middleware, routers.
No business logic here (SRP). See userapi.core.lifespan and
userapi.core.exception_handlers.

Settings are loaded inside create_app() so that tests can set env (and
clear the get_settings cache) before calling create_app().
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from userapi.api.v1 import build_api_router
from userapi.core.config import get_settings
from userapi.core.exception_handlers import register_exception_handlers
from userapi.core.lifespan import create_lifespan
from userapi.middleware import RequestContextMiddleware


def create_app() -> FastAPI:
    """Build and return the FastAPI application. Settings are resolved here (deferred from import)."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )

    register_exception_handlers(app)

    # Last added = outermost: request context wraps CORS.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in settings.allowed_origins.split(",") if o.strip()],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[settings.request_id_header, settings.correlation_id_header, "Location"],
    )
    app.add_middleware(
        RequestContextMiddleware,
        request_id_header=settings.request_id_header,
        correlation_id_header=settings.correlation_id_header,
    )

    app.include_router(build_api_router(settings), prefix=settings.api_prefix)

    if settings.telemetry_enabled:
        _setup_telemetry(app)

    return app


def _setup_telemetry(app: FastAPI) -> None:
    """Install the tracer provider and instrument the app (before startup; adds middleware)."""
    from userapi.shared.telemetry.telemetry import TelemetryConfig, set_telemetry

    settings = get_settings()
    telemetry = TelemetryConfig(
        service_name=settings.app_name,
        service_version=settings.app_version,
        environment=settings.telemetry_environment,
    )
    telemetry.setup_telemetry(
        exporter_type=settings.telemetry_exporter,
        otlp_endpoint=settings.telemetry_otlp_endpoint,
        sample_rate=settings.telemetry_sample_rate,
    )
    telemetry.instrument_fastapi(app)
    set_telemetry(telemetry)


app = create_app()
