"""Main FastAPI application entry point."""

import sys
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from nihara import __version__
from nihara.config import settings
from nihara.routers import assistant_router
from nihara.services.gateway import AIGatewayClient, close_gateway, get_gateway
from nihara.services.prompts import CHAT_MODEL, IMAGE_MODEL


# Configure loguru
logger.remove()
logger.add(
    sys.stdout,
    format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
    level=settings.log_level,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info(f"Starting Nihara gateway v{__version__}")
    logger.info(f"Server running on {settings.host}:{settings.port}")
    logger.info(f"Chat model: {CHAT_MODEL}, image model: {IMAGE_MODEL}")

    gateway = await get_gateway()
    if await gateway.get_client() is None:
        logger.warning("Starting without a usable Gemini API key; all endpoints will answer with fallbacks")

    yield

    logger.info("Shutting down...")
    await close_gateway()
    logger.info("Shutdown complete")


# Create FastAPI application
app = FastAPI(
    title="Nihara Gateway",
    description="Chat, astrology predictions and image generation backed by Google Gemini",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Include routers
app.include_router(assistant_router, tags=["Assistant"])


@app.get("/", tags=["Health"])
async def root(gateway: AIGatewayClient = Depends(get_gateway)):
    """Root endpoint for health check, with the pinned models and key status."""
    return {
        "service": "Nihara Gateway",
        "version": __version__,
        "status": "healthy",
        "models": {"chat": CHAT_MODEL, "image": IMAGE_MODEL},
        "apiKeyConfigured": await gateway.get_client() is not None,
    }


@app.get("/health", tags=["Health"])
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


def run():
    """Run the application with uvicorn."""
    import uvicorn

    uvicorn.run(
        "nihara.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
