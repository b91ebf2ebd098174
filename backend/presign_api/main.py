import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from presign_api.api.routers import health as health_router
from presign_api.api.routers import presign as presign_router
from presign_api.core.config import Settings, get_settings
from presign_api.core.logging_config import configure_logging
from presign_api.schemas import ErrorResponse
from presign_api.services.presign import MISSING_PARAMETERS_MESSAGE, PresignService
from presign_api.services.storage import S3UrlSigner

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    base_url = f"http://localhost:{settings.port}"
    logger.info("Backend server running on port %s", settings.port)
    logger.info("Health check: %s/health", base_url)
    logger.info("Presigned URL endpoint: %s/api/presigned-url", base_url)
    yield


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("Malformed presign request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(error=MISSING_PARAMETERS_MESSAGE).model_dump(),
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        debug=settings.debug,
        title="Presign Upload API",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.presign_service = PresignService(S3UrlSigner(settings))

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    app.include_router(presign_router.router)
    app.include_router(health_router.router)

    return app


app = create_app()
