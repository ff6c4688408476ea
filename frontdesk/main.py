import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logfire

from frontdesk import __version__
from frontdesk.config import settings
from frontdesk.database import init_db, close_db
from frontdesk.errors import FrontDeskError
from frontdesk.api import api_router

# Set up logging
logging.basicConfig(level=logging.INFO)
logging.getLogger("frontdesk").setLevel(logging.INFO)
logger = logging.getLogger(__name__)

# Initialize Logfire - events are only shipped when a token is configured
if settings.logfire_token:
    logfire.configure(
        token=settings.logfire_token,
        service_name="frontdesk",
        environment=settings.app_env,
        console=False,  # Disable console logging (too verbose)
    )
    logger.info("Logfire initialized")
else:
    logfire.configure(send_to_logfire=False, console=False)
    logger.warning("Logfire token not set - observability disabled")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    logger.info("Starting %s...", settings.app_name)
    await init_db()
    logger.info("Database initialized")

    yield

    # Shutdown
    logger.info("Shutting down...")
    await close_db()
    logger.info("Database connections closed")


app = FastAPI(
    title=settings.app_name,
    description="Clinic front-desk scheduling: patients, professionals and appointments",
    version=__version__,
    lifespan=lifespan,
)

# Instrument FastAPI with Logfire
if settings.logfire_token:
    logfire.instrument_fastapi(app)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(FrontDeskError)
async def frontdesk_error_handler(request: Request, exc: FrontDeskError):
    """Turn domain errors into JSON responses; the request fails, the app keeps running."""
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


# Include API routes
app.include_router(api_router, prefix="/api")


@app.get("/")
async def root():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "app": settings.app_name,
        "version": __version__,
    }


@app.get("/health")
async def health_check():
    """Detailed health check."""
    return {
        "status": "healthy",
        "environment": settings.app_env,
        "observability": "configured" if settings.logfire_token else "not_configured",
    }
