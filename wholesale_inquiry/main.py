"""
FastAPI application for the wholesale inquiry form.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from wholesale_inquiry import __version__
from wholesale_inquiry.config import settings
from wholesale_inquiry.core.logging import configure_logging, get_logger
from wholesale_inquiry.routers.inquiry import inquiry_http_exception_handler, router as inquiry_router

log = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    configure_logging(settings)
    if not settings.resend_api_key:
        log.warning("resend_api_key_missing", reason="RESEND_API_KEY not configured")
    log.info("application_starting", version=__version__)

    yield

    log.info("application_stopped")


app = FastAPI(
    title="Wholesale Inquiry Service",
    description="Emails wholesale inquiry form submissions for Cosmopolis Coffee",
    version=__version__,
    lifespan=lifespan,
)

app.include_router(inquiry_router)
app.add_exception_handler(StarletteHTTPException, inquiry_http_exception_handler)


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}


# Run with: uvicorn wholesale_inquiry.main:app --host 0.0.0.0 --port 8000
