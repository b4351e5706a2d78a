"""
UnoFit status dashboard - main application entry point
"""
import logging
from pathlib import Path
from urllib.parse import urlparse, urlunparse

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from unofit.api.router import api_router
from unofit.core.config import settings
from unofit.core.errors import (
    http_exception_handler,
    validation_exception_handler,
    generic_exception_handler,
)
from unofit.core.logging import setup_logging
from unofit.db.init_db import init_db
from unofit.db.session import SessionLocal

# Setup logging first
setup_logging()
logger = logging.getLogger(__name__)

SERVICE_NAME = "unofit-dashboard"
STATIC_DIR = Path(__file__).resolve().parent / "static"


def _mask_database_url(url: str) -> str:
    """Mask password in DATABASE_URL for safe logging; show full path for sqlite."""
    try:
        parsed = urlparse(url)
        if parsed.scheme.startswith("sqlite"):
            return url
        if parsed.password:
            netloc = f"{parsed.username}:****@{parsed.hostname or ''}"
            if parsed.port:
                netloc += f":{parsed.port}"
            return urlunparse(parsed._replace(netloc=netloc))
    except ValueError:
        return "***"
    return url


app = FastAPI(
    title="UnoFit Dashboard API",
    description="System status, permissions and activity for the UnoFit gym tool",
    version=settings.VERSION or "1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_allowed_origins_list(),
    allow_credentials=False,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

# Register exception handlers
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)

app.include_router(api_router, prefix="/api")
app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")


@app.on_event("startup")
def startup_log_config() -> None:
    masked = _mask_database_url(settings.DATABASE_URL)
    logger.info("DATABASE_URL (app): %s", masked)


@app.on_event("startup")
def initialize_database() -> None:
    """
    Create missing tables and seed defaults once per process.
    """
    if not settings.INIT_DB_ON_STARTUP:
        logger.info("INIT_DB_ON_STARTUP disabled, skipping database initialization")
        return

    db = SessionLocal()
    try:
        init_db(db)
    finally:
        db.close()


@app.get("/health", include_in_schema=False)
async def health_check():
    return {
        "status": "ok",
        "service": SERVICE_NAME,
        "version": settings.VERSION or "1.0.0",
        "env": settings.APP_ENV,
    }


@app.get("/", include_in_schema=False)
async def index():
    """Serve the single-page dashboard"""
    return FileResponse(STATIC_DIR / "index.html")
