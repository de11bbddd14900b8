"""
Pharma marketplace auth service - account directory, signup and login
"""
from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import Settings, get_settings
from .db import init_db
from .directory.base import AccountDirectory
from .directory.selector import select_directory
from .errors import DirectoryError
from .routes import auth, health
from .service import AuthService
from .utils.event_logger import configure_logging

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, directory: Optional[AccountDirectory] = None) -> FastAPI:
    """
    Build the application.

    The account directory is chosen here, once, and shared by every request.
    Pass `directory` to bind a specific one instead of selecting from settings.
    """
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL, settings.LOG_DIR)

    if directory is None:
        directory = select_directory(settings)

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        """Create tables on startup when a database is configured"""
        if directory.is_persistent:
            init_db(directory.engine)
        yield

    app = FastAPI(
        title="PharmaApi Auth",
        description="Account directory and credential verification for the pharmacy marketplace",
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.settings = settings
    app.state.auth_service = AuthService(directory)

    # Emulators and devices on the local network call the API directly
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(DirectoryError)
    async def directory_error_handler(request: Request, exc: DirectoryError):
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.debug("Rejected request body on %s", request.url.path)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "Invalid request body."}
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Internal server error."}
        )

    app.include_router(auth.router)
    # Base path used by the mobile client
    app.include_router(auth.router, prefix="/api/auth", include_in_schema=False)
    app.include_router(health.router)

    @app.get("/")
    def root():
        return {"message": "PharmaApi running"}

    return app


app = create_app()
