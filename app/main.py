"""Main FastAPI application."""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

import sentry_sdk
import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.logging import LoggingIntegration

from app.api.v1 import api_router
from app.config import Settings, get_settings
from app.core.exceptions import register_exception_handlers
from app.core.logging import setup_logging
from app.core.security import get_password_hash
from app.db.session import create_engine, create_session_factory, init_db
from app.services.credential_store import CredentialStore
from app.services.upload_storage import UPLOAD_URL_PREFIX, UploadStorage

logger = structlog.get_logger(__name__)


def init_sentry(settings: Settings) -> None:
    """Initialize Sentry for error tracking (only if DSN is properly configured)."""
    if not (settings.SENTRY_DSN and settings.SENTRY_DSN.startswith("https://")):
        logger.info("sentry_disabled", reason="dsn_not_configured")
        return

    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        environment=settings.SENTRY_ENVIRONMENT,
        traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
        integrations=[
            FastApiIntegration(),
            LoggingIntegration(
                level=None,  # Capture all logs
                event_level="ERROR",  # Only send ERROR and above as events
            ),
        ],
        release=settings.APP_VERSION,
        attach_stacktrace=True,
        send_default_pii=False,  # Don't send personally identifiable info
    )


async def bootstrap_admin(app: FastAPI) -> None:
    """Make sure the system starts with at least one administrator."""
    settings: Settings = app.state.settings
    seed_hash = (
        get_password_hash(settings.BOOTSTRAP_ADMIN_PASSWORD)
        if settings.bootstrap_seed_configured
        else None
    )
    async with app.state.session_factory() as session:
        store = CredentialStore(session)
        await store.ensure_bootstrap_admin(
            seed_username=settings.BOOTSTRAP_ADMIN_USERNAME,
            seed_email=settings.BOOTSTRAP_ADMIN_EMAIL,
            seed_password_hash=seed_hash,
        )
        await session.commit()

        if await store.count_admins() == 0:
            logger.warning("no_admin_account", hint="the first user to register becomes admin")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    Path(app.state.settings.UPLOAD_DIR).mkdir(parents=True, exist_ok=True)
    await init_db(app.state.engine, app.state.settings)
    await bootstrap_admin(app)
    logger.info("application_started", environment=app.state.settings.ENVIRONMENT)
    yield
    # Shutdown
    await app.state.engine.dispose()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application around one settings object."""
    settings = settings or get_settings()

    setup_logging(settings)
    init_sentry(settings)

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Job board: postings, seeker profiles and admin moderation",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        swagger_ui_parameters={
            "persistAuthorization": True,  # Persist authorization after page refresh
        },
    )

    # Process-wide state, set once here and read-only afterwards
    app.state.settings = settings
    app.state.engine = create_engine(settings)
    app.state.session_factory = create_session_factory(app.state.engine)
    app.state.upload_storage = UploadStorage(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app, debug=settings.DEBUG)

    app.include_router(api_router, prefix=settings.API_PREFIX)
    app.mount(
        UPLOAD_URL_PREFIX,
        StaticFiles(directory=settings.UPLOAD_DIR, check_dir=False),
        name="uploads",
    )

    @app.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "environment": settings.ENVIRONMENT,
            "version": settings.APP_VERSION,
        }

    return app


app = create_app()
