"""FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

from docverify.api.response import build_error_response
from docverify.api.routers import api_router
from docverify.config.constants import CORS_HEADERS
from docverify.config.settings import Settings, get_settings
from docverify.infrastructure.logging.logger import setup_logging
from docverify.infrastructure.platform.client import PlatformClient

settings = get_settings()

setup_logging(
    level=settings.log_level,
    json_output=not settings.debug,
    silence_noisy_loggers=True,
)

logger = logging.getLogger(__name__)


def _validate_startup_config(settings: Settings) -> None:
    """Validate required configuration at startup."""
    if not settings.supabase_url or not settings.supabase_anon_key:
        logger.warning("supabase_url or supabase_anon_key is empty; every request will fail auth")

    missing = settings.missing_document_ai_settings()
    if missing:
        logger.warning(
            "Document AI settings missing (%s); verify-document will reject requests",
            ", ".join(missing),
        )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Startup and shutdown lifecycle."""
    logger.info("Starting %s", settings.app_name)
    _validate_startup_config(settings)
    app.state.platform_client = PlatformClient(settings)

    yield
    logger.info("Shutting down %s", settings.app_name)
    try:
        await app.state.platform_client.close()
        logger.info("Platform client closed")
    except Exception as e:
        logger.error("Error closing platform client: %s", e, exc_info=True)


app = FastAPI(
    title=settings.app_name,
    description="Heuristic document verification for the credential marketplace",
    version=settings.app_version,
    lifespan=lifespan,
)


@app.middleware("http")
async def cors_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Allow every origin; answer preflight requests with an empty 200."""
    if request.method == "OPTIONS":
        return Response(status_code=200, headers=CORS_HEADERS)
    response = await call_next(request)
    for name, value in CORS_HEADERS.items():
        response.headers[name] = value
    return response


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.warning("Invalid request to %s: %s", request.url.path, exc.errors())
    return build_error_response("Invalid request")


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    logger.warning("Request to %s failed with %s: %s", request.url.path, exc.status_code, exc.detail)
    return build_error_response(str(exc.detail))


app.add_middleware(ProxyHeadersMiddleware, trusted_hosts=["*"])

app.include_router(api_router, prefix="/api")
