"""
FastAPI main application for the booking webhook backend
"""
import time
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from .. import __version__
from ..config import settings
from .booking_endpoints import router as booking_router
from .webhook_endpoints import router as webhook_router
from .limiter import limiter
from .models import HealthResponse

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management"""
    # Startup
    logger.info("Starting booking webhook API...")
    for directory in (settings.bookings_data_dir, settings.bookings_logs_dir):
        directory.mkdir(parents=True, exist_ok=True)
    logger.info(f"Booking data: {settings.bookings_data_dir}, Bokun logs: {settings.bookings_logs_dir}")

    yield

    # Shutdown
    logger.info("Shutting down booking webhook API...")


# Create FastAPI app
app = FastAPI(
    title="Booking Webhook API",
    description="Receives partner booking callbacks and serves filtered booking listings",
    version=__version__,
    lifespan=lifespan
)

# Add middleware
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins_list,
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(booking_router, prefix=settings.route_prefix)
app.include_router(webhook_router, prefix=settings.route_prefix)


@app.get(f"{settings.route_prefix}/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Health check endpoint"""
    return HealthResponse(
        status="healthy",
        version=__version__,
        service="Booking Webhook API",
        data_dir_exists=settings.bookings_data_dir.is_dir(),
        timestamp=int(time.time())
    )


# Static frontend goes last so API routes take precedence
if settings.public_dir.is_dir():
    app.mount(
        settings.route_prefix or "/",
        StaticFiles(directory=settings.public_dir, html=True),
        name="public"
    )
    logger.info(f"✅ Serving static files from {settings.public_dir}")
