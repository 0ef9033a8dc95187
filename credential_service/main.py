"""
Credential Service - user registration and token-issuing login
"""
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from typing import Optional
import logging
import time

from .config import Settings
from .db import create_db_engine, create_session_factory, init_db
from .errors import CredentialError, credential_error_handler
from .routes import credentials, health
from .service import CredentialService

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


async def log_requests(request: Request, call_next):
    """Log method, path, status and duration. Headers and bodies carry passwords and are not logged."""
    start = time.perf_counter()
    response = await call_next(request)
    elapsed = time.perf_counter() - start
    logger.info(f"{request.method} {request.url.path} - {response.status_code} - {elapsed:.4f}s")
    return response


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application with its store and signing secret bound explicitly.

    Raises pydantic ``ValidationError`` when settings are loaded from the
    environment and ``JWT_SECRET`` is missing.
    """
    if settings is None:
        settings = Settings()
    configure_logging(settings.LOG_LEVEL)

    engine = create_db_engine(settings.DATABASE_URL)

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        """Initialize database on startup, release the pool on shutdown"""
        init_db(engine)
        logger.info(f"Auth Service ready on port {settings.PORT}")
        yield
        engine.dispose()

    app = FastAPI(
        title="Credential Service",
        description="User registration and login with signed access tokens",
        version="1.0.0",
        lifespan=lifespan
    )

    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    app.state.credential_service = CredentialService.from_settings(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(log_requests)
    app.add_exception_handler(CredentialError, credential_error_handler)

    app.include_router(health.router)
    app.include_router(credentials.router)

    return app
