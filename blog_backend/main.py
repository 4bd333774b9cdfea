# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging
import os
import time

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

# Local application imports
from .api.error_handlers import register_exception_handlers
from .api.graphql import create_graphql_router
from .api.v1 import image_router
from .core.config import get_settings
from .core.log_config import setup_logging
from .infrastructure.db.mongo_connection import ensure_indexes, close_connection

logger = logging.getLogger(__name__)

SERVICE_NAME = "Blog Backend API"
VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.
    
    Ensures MongoDB indexes on startup (a failure is logged, not fatal)
    and closes the MongoDB client on shutdown.
    """
    if await ensure_indexes():
        logger.info("MongoDB indexes verified/created successfully")
    else:
        logger.warning("Failed to create some MongoDB indexes")
    
    yield
    
    close_connection()
    logger.info("Application shutdown complete")


async def log_requests(request: Request, call_next):
    """Log method, path, status and duration of every request"""
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        "%s %s %s %.1fms",
        request.method,
        request.url.path,
        response.status_code,
        elapsed_ms,
    )
    return response


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.
    
    This function sets up the FastAPI application with:
    - Environment variable loading and logging
    - CORS and request logging middleware
    - Error formatting
    - REST image routes, static image serving and the GraphQL endpoint
    
    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)
    
    settings = get_settings()
    setup_logging(settings.log_level)
    
    application = FastAPI(
        title=SERVICE_NAME,
        version=VERSION,
        description="Blog backend: users and posts over GraphQL, image upload over REST",
        lifespan=lifespan
    )
    
    # Credentials cannot be combined with a wildcard origin
    allow_all = settings.cors_origins == ["*"]
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=not allow_all,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.middleware("http")(log_requests)
    
    register_exception_handlers(application)
    
    application.include_router(image_router)
    application.include_router(create_graphql_router(), prefix="/graphql")
    
    image_dir = Path(settings.image_upload_dir)
    application.mount(
        f"/{image_dir.as_posix().strip('/')}",
        StaticFiles(directory=str(image_dir), check_dir=False),
        name="images",
    )
    
    @application.get("/")
    async def root():
        """Root endpoint."""
        return {
            "service": SERVICE_NAME,
            "version": VERSION,
            "status": "running",
        }
    
    return application


# Create application instance
app = create_application()


if __name__ == "__main__":
    import uvicorn
    
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=int(os.getenv("PORT", "5000")),
        access_log=False,
    )
