"""
Lead Intake Portal - Main Application

FastAPI backend with:
- Relational store (PostgreSQL in production) for talents, companies, users
- Local upload directory for CVs, served under /uploads
- SendGrid welcome emails, sent after the response
- JWT authentication for user management

Run: uvicorn app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from app.api.routes import api_router
from app.core.config import get_settings
from app.core.errors import register_exception_handlers
from app.core.logging_config import configure_logging
from app.db.postgres import create_tables, test_postgres_connection
from app.services.notification_service import NotificationService
from app.services.user_service import ensure_admin_user
from app.utils.file_upload import UPLOAD_URL_PREFIX, UploadStore

settings = get_settings()
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

# Created at import so /uploads can be mounted before startup
upload_store = UploadStore(
    settings.upload_dir,
    url_prefix=UPLOAD_URL_PREFIX,
    max_bytes=settings.max_upload_bytes,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build shared resources at startup, release them at shutdown."""
    create_tables()

    if settings.admin_email and settings.admin_password:
        ensure_admin_user(settings.admin_email, settings.admin_password, settings.admin_name)

    app.state.upload_store = upload_store
    app.state.notifier = NotificationService(
        api_key=settings.sendgrid_api_key,
        from_email=settings.sendgrid_from_email,
        brand=settings.brand_name,
    )
    logger.info("Application started")
    try:
        yield
    finally:
        app.state.notifier.close()
        logger.info("Application stopped")


# Create FastAPI app
app = FastAPI(
    title="Lead Intake Portal",
    description="""
    Recruiting lead intake with a staff dashboard API.

    ## Features
    - **Talents**: Public registration with optional PDF CV upload
    - **Companies**: Public registration
    - **Dashboard**: List, update status, delete leads
    - **Users**: JWT-authenticated staff account management
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# CORS middleware (allow all for development)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include API routes
app.include_router(api_router, prefix="/api")

# Serve uploaded CVs
app.mount(UPLOAD_URL_PREFIX, StaticFiles(directory=upload_store.directory), name="uploads")


@app.get("/health", tags=["Health"])
async def health_check():
    """Detailed health check."""
    return {
        "status": "healthy",
        "database": "connected" if test_postgres_connection() else "disconnected",
        "email": "enabled" if app.state.notifier.enabled else "disabled",
    }
