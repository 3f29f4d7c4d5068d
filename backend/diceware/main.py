"""
Diceware Backend - passphrase generation service
Passphrases are generated per request and never stored.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from diceware.config import settings, validate_generator_settings
from diceware.logging_config import setup_logging
from diceware.middleware.rate_limit import RateLimiter
from diceware.middleware.security import SecurityMiddleware
from diceware.routers import health, passphrase
from diceware.services.generator import generator_pool


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler"""
    setup_logging(settings.LOG_LEVEL.upper())

    # Fail fast on bad configuration
    validate_generator_settings(settings)

    # Load the shared word list before the first request
    generator_pool.template(settings)

    yield

    generator_pool.clear()


def create_app(limiter: Optional[RateLimiter] = None) -> FastAPI:
    """Application factory"""
    app = FastAPI(
        title="Diceware",
        description="Diceware passphrase generator",
        version="1.0.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan
    )

    app.add_middleware(SecurityMiddleware, limiter=limiter)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.FRONTEND_URL],
        allow_credentials=False,
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type"],
    )

    app.include_router(health.router, tags=["health"])
    app.include_router(passphrase.router, prefix="/api", tags=["passphrase"])

    return app


app = create_app()
