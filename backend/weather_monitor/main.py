"""
Weather Monitor - Backend API
=============================
FastAPI application for IoT weather devices.

WHAT IT DOES:
    1. Devices get enrolled (and can be enabled/disabled later)
    2. Enrolled devices POST temperature readings
    3. Anyone can ask for today's high/low/average per device

    Everything is kept in memory. Restarting the server clears it.

HOW TO RUN:
    # Install
    pip install -e .

    # Optional: copy env.example.txt to .env and edit it

    # Run the server
    weather-monitor
    # or
    uvicorn weather_monitor.main:app --port 8000

API DOCUMENTATION:
    After starting the server, visit:
    - Swagger UI: http://localhost:8000/docs
    - ReDoc: http://localhost:8000/redoc
"""

import logging
import socket
import sys
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from weather_monitor import __version__
from weather_monitor.config import Config
from weather_monitor.models import HealthResponse
from weather_monitor.routers import devices_router, temperature_router, set_storage, get_storage
from weather_monitor.services import InMemoryStorage, Storage, SummaryReporter
from weather_monitor.utils import setup_logging


setup_logging(Config.LOG_LEVEL)
logger = logging.getLogger(__name__)


# =============================================================================
# ERROR HANDLERS
# =============================================================================

async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Turn body validation failures into a plain 400.

    FastAPI answers 422 by default. Devices expect 400 for anything
    they sent that we couldn't read: broken JSON, missing fields,
    or a temperature that isn't a number.
    """
    logger.warning(f"Bad request to {request.url.path}: {exc.errors()}")

    # The rejected input may be NaN or Infinity, which JSONResponse can't encode
    errors = [
        {key: value for key, value in error.items() if key != "input"}
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content={"detail": jsonable_encoder(errors)},
    )


# =============================================================================
# APPLICATION FACTORY
# =============================================================================

def create_app(
    storage: Optional[Storage] = None,
    summary_interval: Optional[int] = None,
) -> FastAPI:
    """
    Build the FastAPI app.

    Args:
        storage: Store to serve from. A fresh InMemoryStorage by default.
        summary_interval: Seconds between daily-summary log lines.
            Defaults to Config.SUMMARY_INTERVAL; 0 disables it.
    """
    if storage is None:
        storage = InMemoryStorage()
    if summary_interval is None:
        summary_interval = Config.SUMMARY_INTERVAL

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        STARTUP:
            1. Inject storage into routers
            2. Start the summary reporter (if enabled)

        SHUTDOWN:
            1. Stop the summary reporter
        """
        set_storage(storage)
        reporter = SummaryReporter(storage, summary_interval)
        reporter.start()
        logger.info(f"Weather Monitor {__version__} ready ({type(storage).__name__})")

        yield  # Application runs here

        reporter.shutdown()
        logger.info("Shutdown complete")

    app = FastAPI(
        title="Weather Monitor API",
        description="Device enrollment, temperature submission and daily aggregation.",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=Config.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(devices_router)
    app.include_router(temperature_router)

    @app.get("/health", response_model=HealthResponse, summary="Health Check")
    def health(store: Storage = Depends(get_storage)):
        """Health check endpoint."""
        return HealthResponse(status="healthy", device_count=len(store.list_devices()))

    return app


app = create_app()


def bind_socket(host: str, port: int) -> socket.socket:
    """
    Claim the listening address before uvicorn starts.

    Raises:
        OSError: The address is taken or can't be bound
    """
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
    except OSError:
        sock.close()
        raise
    return sock


def run():
    """Console entry point: serve `app` on Config.HOST:Config.PORT."""
    try:
        sock = bind_socket(Config.HOST, Config.PORT)
    except OSError as e:
        logger.error(f"Could not listen on {Config.HOST}:{Config.PORT}: {e}")
        sys.exit(1)

    logger.info(f"Server started at {Config.HOST}:{Config.PORT}")
    server = uvicorn.Server(uvicorn.Config(app, log_level=Config.LOG_LEVEL.lower()))
    server.run(sockets=[sock])


if __name__ == "__main__":
    run()
