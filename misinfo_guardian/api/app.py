"""FastAPI application for the misinformation guardian service."""

import contextlib
import logging
import os

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Load environment variables from .env file
load_dotenv()

from ..infrastructure.dependencies import get_service_container
from .endpoints import analysis, health

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@contextlib.asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the service container on startup and release it on shutdown."""
    container = get_service_container()
    logger.info("🛡️ Misinformation guardian API ready")

    yield  # Application runs here

    await container.shutdown()


# Create FastAPI application
app = FastAPI(
    title="Misinformation Guardian API",
    description="Credibility scoring of news articles from claims, style signals and fact checks",
    version=health.VERSION,
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router)
app.include_router(analysis.router)
