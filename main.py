"""
Image Compositor - Main FastAPI Application
"""

import logging
import signal
import sys
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Add parent directory to path
sys.path.append(str(Path(__file__).parent))

from api.exceptions import register_exception_handlers  # noqa: E402

# Import routers  # noqa: E402
from api.routers import compose, metadata, system, transform  # noqa: E402

# Import configuration  # noqa: E402
from config import get_settings  # noqa: E402

# Get configuration
settings = get_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.system.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Suppress watchfiles debug messages
logging.getLogger("watchfiles").setLevel(logging.WARNING)


def install_diagnostics_hook() -> None:
    """
    Route uncaught exceptions through logging.

    Host-level plumbing only; the engine never depends on it. Safe to call
    more than once.
    """
    if getattr(sys.excepthook, "_compositor_hook", False):
        return

    previous_hook = sys.excepthook

    def log_uncaught(exc_type, exc_value, exc_traceback):
        if issubclass(exc_type, KeyboardInterrupt):
            previous_hook(exc_type, exc_value, exc_traceback)
            return
        logger.critical("Uncaught exception", exc_info=(exc_type, exc_value, exc_traceback))

    log_uncaught._compositor_hook = True
    sys.excepthook = log_uncaught


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle"""
    # Startup
    logger.info("Starting Image Compositor server...")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Debug mode: {settings.system.debug}")
    logger.info(
        f"Default output: {settings.output.format.value} "
        f"({settings.output.compression_level.value})"
    )

    install_diagnostics_hook()

    # Store settings in app state for access by routers
    app.state.settings = settings
    app.state.debug = settings.system.debug

    yield

    # Shutdown
    logger.info("Image Compositor shutdown complete")


# Create FastAPI app
app = FastAPI(
    title="Image Compositor",
    description="Stateless image transformation and compositing engine",
    version="1.0.0",
    lifespan=lifespan,
)

# Configure CORS for browser front ends
if settings.api.cors_enabled:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

# Register exception handlers
register_exception_handlers(app)

# Include routers
app.include_router(transform.router, prefix="/api/transform", tags=["Transform"])
app.include_router(compose.router, prefix="/api/compose", tags=["Compose"])
app.include_router(metadata.router, prefix="/api/metadata", tags=["Metadata"])
app.include_router(system.router, prefix="/api/system", tags=["System"])


# Root endpoint
@app.get("/")
async def root():
    return {
        "name": "Image Compositor",
        "status": "running",
        "version": "1.0.0",
        "endpoints": {
            "transform": "/api/transform",
            "compose": "/api/compose",
            "metadata": "/api/metadata",
            "system": "/api/system",
            "docs": "/docs",
        },
    }


# Health check endpoint
@app.get("/health")
async def health_check():
    return {"status": "healthy"}


# Error handler
@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    logger.error(f"Global exception: {exc}", exc_info=True)
    return JSONResponse(status_code=500, content={"detail": f"Internal server error: {str(exc)}"})


def handle_signal(signum, frame):
    """Handle shutdown signals gracefully"""
    logger.info(f"Received signal {signum}, initiating graceful shutdown...")
    raise KeyboardInterrupt


if __name__ == "__main__":
    # Register signal handlers
    signal.signal(signal.SIGTERM, handle_signal)

    reload_excludes = (
        ["*.log", "*.pyc", "__pycache__", ".git", ".venv", "venv"]
        if settings.system.debug
        else None
    )

    server_config = uvicorn.Config(
        "main:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.system.debug,
        reload_excludes=reload_excludes,
        log_level="info",
        loop="asyncio",
    )

    server = uvicorn.Server(server_config)

    try:
        server.run()
    except KeyboardInterrupt:
        logger.info("Received keyboard interrupt, shutting down...")
    except Exception as e:
        logger.error(f"Server error: {e}")
    finally:
        logger.info("Server exiting...")
