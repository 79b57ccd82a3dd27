"""Main FastAPI application for legal-case-service."""

import logging
import sys
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from legal_case_service.api.errors import register_exception_handlers
from legal_case_service.api.routes import auth_router, cases_router
from legal_case_service.config import Settings
from legal_case_service.core import AuthManager
from legal_case_service.infrastructure.database import DatabaseClient
from legal_case_service.infrastructure.persistence import (
    InMemoryCaseRepository,
    InMemoryUserRepository,
    SQLAlchemyUserRepository,
)
from legal_case_service.infrastructure.security import PasswordHasher, TokenIssuer
from legal_case_service.models import HealthResponse

VERSION = "1.0.0"

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


async def seed_admin(app: FastAPI) -> None:
    """Create the configured bootstrap ADMIN account if it is missing."""
    state = app.state
    username = state.settings.bootstrap_admin_username
    password = state.settings.bootstrap_admin_password
    if not username or not password:
        return

    if state.db_client is None:
        manager = AuthManager(state.user_repository, state.password_hasher, state.token_issuer)
        await manager.ensure_admin(username, password)
        return

    async with state.db_client.session_scope() as session:
        manager = AuthManager(SQLAlchemyUserRepository(session), state.password_hasher, state.token_issuer)
        await manager.ensure_admin(username, password)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application and its collaborators from settings."""
    settings = settings or Settings()
    configure_logging(settings)

    app = FastAPI(
        title="Legal Case Service",
        description="Case management API with JWT authentication and role-based access",
        version=VERSION,
    )

    app.state.settings = settings
    app.state.password_hasher = PasswordHasher(settings.password_scheme)
    app.state.token_issuer = TokenIssuer(
        settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
        expire_minutes=settings.access_token_expire_minutes,
    )

    if settings.uses_sql_storage:
        app.state.db_client = DatabaseClient(settings)
        app.state.case_repository = None
        app.state.user_repository = None
    else:
        logger.info("Using in-memory storage; data is lost on restart")
        app.state.db_client = None
        app.state.case_repository = InMemoryCaseRepository()
        app.state.user_repository = InMemoryUserRepository()

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Include routers
    app.include_router(auth_router)
    app.include_router(cases_router)

    @app.on_event("startup")
    async def startup():
        """Initialize database and seed the bootstrap admin."""
        logger.info(f"Starting {settings.service_name} on port {settings.port}")
        logger.info(f"Environment: {settings.environment}")

        db_client = app.state.db_client
        if db_client is not None:
            logger.info(f"Database: {settings.database_url}")
            try:
                await db_client.verify_connection()
                # Alembic migrations are the primary schema path; create_all
                # covers local runs without them
                await db_client.create_tables()
                logger.info("Database initialized successfully")
            except Exception as e:
                logger.error(f"Failed to initialize database: {e}")
                raise

        await seed_admin(app)

    @app.on_event("shutdown")
    async def shutdown():
        """Clean up resources on shutdown."""
        logger.info("Shutting down service")
        if app.state.db_client is not None:
            await app.state.db_client.close()

    @app.get(
        "/health",
        response_model=HealthResponse,
        summary="Health Check",
        tags=["Health Check"],
        responses={200: {"description": "Service is healthy and operational"}},
    )
    async def health_check():
        """Health check endpoint."""
        return HealthResponse(
            status="healthy",
            service=settings.service_name,
            version=VERSION,
            database=settings.database_url.split("://")[0] if settings.uses_sql_storage else "inmemory",
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    _settings = app.state.settings
    uvicorn.run(
        "legal_case_service.main:app",
        host="0.0.0.0",
        port=_settings.port,
        reload=_settings.environment == "development",
    )
