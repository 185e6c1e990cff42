"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers.

API Versioning:
    All API endpoints are versioned under /api/v1/ prefix.
    The health check endpoint remains unversioned at /health.

Run with uvicorn's factory mode:
    uvicorn rollcall.presentation.api.app:create_app --factory
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from rollcall import __version__
from rollcall.presentation.api.exception_handlers import setup_exception_handlers
from rollcall.presentation.api.routers import (
    accounts_router,
    auth_router,
    hods_router,
)
from rollcall_config.settings import Settings, get_settings
from rollcall_identity.application import DepartmentLockRegistry
from rollcall_identity.infrastructure.persistence.sqlalchemy import (
    build_engine,
    build_session_maker,
    create_tables,
)


@lru_cache(maxsize=1)
def _configure_logging(log_level_str: str) -> None:
    """Configure application logging.

    Sets up logging for the rollcall application with:
    - Console output with timestamps and module names
    - Configurable log level for rollcall modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)

    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    for name in ("rollcall", "rollcall_auth", "rollcall_identity"):
        logging.getLogger(name).setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = __version__
API_V1_PREFIX = "/api/v1"

OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": """Registration, login and the caller's own profile.

**Students** register with email, password, name and roll number and log in
with their email.

**Department heads** register against a head identifier an administrator
provisioned for them and log in with that identifier.

**Tokens:** every successful registration or login returns a bearer token.
Send it as `Authorization: Bearer <token>`.
""",
    },
    {
        "name": "Heads",
        "description": """Administration of head accounts (head role only).

Heads created here do not use a provisioned identity. Their identifier is
generated as `HOD_<DEPT>_<NNN>` when none is given.
""",
    },
    {
        "name": "Accounts",
        "description": "Account lookup. Students may only read their own account.",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
    {
        "name": "Info",
        "description": "API information and discovery.",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info("Starting %s API v%s...", app.state.settings.app_name, API_VERSION)
    engine = app.state.engine
    try:
        await create_tables(engine)
    except ConnectionRefusedError:
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None
    yield

    # Shutdown - dispose the shared engine and its connection pool
    logger.info("Shutting down %s API...", app.state.settings.app_name)
    await engine.dispose()
    logger.info("Database connections closed")


def create_v1_router() -> APIRouter:
    """Create the v1 API router with all endpoints.

    Returns
    -------
    APIRouter with all v1 endpoints mounted.
    """
    v1_router = APIRouter()

    v1_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
    v1_router.include_router(hods_router)
    v1_router.include_router(accounts_router)

    return v1_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing. Defaults to the settings
        loaded from the environment.

    Returns
    -------
    Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    # Configure logging on first app creation (not on module import)
    _configure_logging(settings.log_level)

    app = FastAPI(
        title=f"{settings.app_name} API",
        description=(
            "Identity and access control for students and department heads: "
            "registration, login, bearer tokens, role and ownership gates."
        ),
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    # Process-wide state, fixed for the lifetime of the app
    engine = build_engine(settings.database_url)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_maker = build_session_maker(engine)
    app.state.department_locks = DepartmentLockRegistry()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        """Health check endpoint.

        Unversioned for load balancer/monitoring compatibility.
        """
        return {
            "status": "healthy",
            "version": API_VERSION,
            "api_versions": ["v1"],
        }

    @app.get("/", tags=["Info"])
    async def root() -> dict:
        """API root endpoint with version information."""
        return {
            "name": f"{settings.app_name} API",
            "version": API_VERSION,
            "docs": "/docs" if settings.api_debug else None,
            "api_base": API_V1_PREFIX,
            "endpoints": {
                "health": "/health",
                "auth": f"{API_V1_PREFIX}/auth",
                "hods": f"{API_V1_PREFIX}/hods",
                "accounts": f"{API_V1_PREFIX}/accounts",
            },
        }

    return app
