# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api import (
    auth_router,
    post_router,
    screenshot_router,
    contact_router,
    health_router,
    register_error_handlers,
)
from .core.config import get_settings
from .core.logging_config import setup_logging
from .di.container import get_container
from .domain.exceptions import RepositoryError
from .domain.repositories.user_repository import UserRepository
from .infrastructure.db.mongo_connection import close_database
from .infrastructure.http_client_factory import close_shared_http_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Ensures the unique username index at startup and releases the shared
    HTTP and MongoDB clients at shutdown.
    """
    container = get_container()
    try:
        await container.get(UserRepository).ensure_indexes()
    except RepositoryError as e:
        # Don't fail app startup if MongoDB is unreachable; signup still pre-checks usernames
        logger.error(f"Failed to ensure database indexes: {e}")

    yield

    await close_shared_http_client()
    close_database()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging
    - CORS middleware configuration
    - Error-to-status mapping
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    setup_logging(settings.log_level)

    application = FastAPI(
        title="Social Posts API",
        version="1.0.0",
        description="Accounts, posts and reactions",
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(application)

    application.include_router(auth_router)
    application.include_router(post_router, prefix="/posts")
    application.include_router(screenshot_router)
    application.include_router(contact_router)
    application.include_router(health_router)

    return application


# Create application instance
app = create_application()
