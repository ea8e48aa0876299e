# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.v1 import auth_router, objects_router, pictures_router, sync_router, images_router
from .infrastructure.db.mongo_connection import close_database
from .infrastructure.http_client_factory import close_shared_http_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Release pooled connections on shutdown"""
    logger.info("SnapFind API starting")
    yield

    try:
        await close_shared_http_client()
    except Exception as e:
        logger.error(f"Error closing shared HTTP client: {e}", exc_info=True)
    close_database()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure the FastAPI application: environment from .env,
    CORS for the mobile dev servers, and the v1 routers.
    """
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    application = FastAPI(
        title="SnapFind API",
        version="1.0.0",
        description="Object tagging, search and sync for the SnapFind camera app",
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:8081",
            "http://localhost:19006",
            "http://localhost:3000",
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(auth_router, prefix="/api/v1/auth")
    application.include_router(objects_router, prefix="/api/v1/objects")
    application.include_router(pictures_router, prefix="/api/v1/pictures")
    application.include_router(sync_router, prefix="/api/v1/sync")
    application.include_router(images_router, prefix="/api/v1/images")

    return application


app = create_application()
