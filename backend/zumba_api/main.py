"""
Main FastAPI application for the ZumbaWithPooh website API.
"""
import asyncio
import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from zumba_api.config import Settings, get_settings
from zumba_api.database import MongoConnection
from zumba_api.routers.contact import router as contact_router
from zumba_api.routers.gallery import router as gallery_router
from zumba_api.routers.offers import router as offers_router
from zumba_api.routers.videos import router as videos_router
from zumba_api.services.mailer import ContactMailer
from zumba_api.services.media import MediaUploader

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format=settings.log_format,
)
logger = logging.getLogger(__name__)


def check_required_settings(settings: Settings):
    """Exit the process when required configuration is missing."""
    missing = settings.missing_required()
    if missing:
        logger.error(f"Missing required environment variables: {', '.join(missing)}")
        sys.exit(1)


def _log_task_failure(task: asyncio.Task):
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.error(f"Startup check {task.get_name()} failed: {exc}", exc_info=exc)


def start_background_check(coro, name: str) -> asyncio.Task:
    """Run a connectivity check without holding up startup."""
    task = asyncio.create_task(coro, name=name)
    task.add_done_callback(_log_task_failure)
    return task


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the store connection and adapters once for the whole process."""
    check_required_settings(settings)

    mongo = MongoConnection(settings.mongodb_uri, settings.mongodb_db)
    app.state.mongo = mongo
    # Connection problems are logged, requests keep going through the driver
    checks = [start_background_check(mongo.check(), "mongodb")]

    app.state.media = MediaUploader.from_settings(settings)

    mailer = ContactMailer.from_settings(settings)
    app.state.mailer = mailer
    if mailer.enabled:
        checks.append(start_background_check(mailer.verify(), "smtp"))
    else:
        logger.info("Contact email notifications disabled (missing SMTP_HOST or CONTACT_TO_EMAIL)")

    logger.info(f"Server running on port {settings.port}")
    yield

    logger.info("Shutting down...")
    for task in checks:
        if not task.done():
            task.cancel()
    mongo.close()


app = FastAPI(
    title="ZumbaWithPooh API",
    description="Offers, gallery cards, contact inquiries and video reviews for the ZumbaWithPooh website",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render every HTTP error as {"error": message}."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed requests are client errors with a short reason."""
    fields = [" -> ".join(str(x) for x in error["loc"]) for error in exc.errors()]
    logger.warning(f"Validation error on {request.url.path}: {fields}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Invalid payload"},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"Request failed: {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


# Include routers
app.include_router(gallery_router, prefix=settings.api_prefix)
app.include_router(offers_router, prefix=settings.api_prefix)
app.include_router(contact_router, prefix=settings.api_prefix)
app.include_router(videos_router, prefix=settings.api_prefix)


@app.get("/")
def root():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "app": "ZumbaWithPooh API",
        "version": "1.0.0"
    }


@app.get("/health")
def health_check(request: Request):
    mongo = getattr(request.app.state, "mongo", None)
    connected = mongo is not None and mongo.is_connected
    return {"status": "healthy", "database": "connected" if connected else "disconnected"}


def main():
    """Console entry point: validate configuration and serve with uvicorn."""
    import uvicorn

    check_required_settings(settings)
    uvicorn.run(
        "zumba_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
