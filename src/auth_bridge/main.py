"""Kakao Firebase Auth Bridge

Main FastAPI application entry point.
Exchanges Kakao Login authorization codes for Firebase custom tokens.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from auth_bridge.config.settings import get_settings
from auth_bridge.api.routes import auth
from auth_bridge.core.auth import get_oauth_provider
from auth_bridge.infrastructure.firebase.client import (
    close_firebase_client,
    get_firebase_client,
    is_firebase_ready,
)

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    settings = get_settings()

    # Startup
    logger.info(f"Starting {settings.service_name} v{settings.service_version}")
    logger.info(f"Environment: {settings.environment}")

    # Initialize Firebase
    try:
        get_firebase_client()
        logger.info("Firebase app ready")
    except Exception as e:
        logger.error(f"Failed to initialize Firebase: {e}")
        raise

    provider = get_oauth_provider()
    logger.info(f"Login provider: {provider.name} (redirect uri: {provider.config.redirect_uri})")

    yield

    # Shutdown
    logger.info("Shutting down Auth Bridge")
    close_firebase_client()


# Create FastAPI application
app = FastAPI(
    title="Kakao Firebase Auth Bridge",
    version=settings.service_version,
    description="Exchanges Kakao Login authorization codes for Firebase custom tokens",
    lifespan=lifespan
)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)


# Health check endpoint
@app.get("/health")
async def root_health_check():
    """Root health check endpoint"""
    firebase_ready = is_firebase_ready()
    if not firebase_ready:
        logger.warning("Health check: Firebase app is not initialized")

    return {
        "status": "healthy" if firebase_ready else "degraded",
        "service": settings.service_name,
        "version": settings.service_version,
        "environment": settings.environment,
        "services": {
            "firebase": "healthy" if firebase_ready else "unhealthy",
        },
    }


@app.get("/")
async def root():
    """Root endpoint with service information"""
    return {
        "service": settings.service_name,
        "version": settings.service_version,
        "description": "Firebase Kakao Auth server up and running!",
        "login": f"/auth/{settings.provider_name.lower()}",
        "docs": "/docs",
        "health": "/health"
    }


app.include_router(auth.router, tags=["authentication"])


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Global exception handler for unhandled errors"""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_server_error",
            "message": "An unexpected error occurred. Please try again later."
        }
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "auth_bridge.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower()
    )
