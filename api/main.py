"""FastAPI application configuration.

Main entry point for the Password Generator REST API.
Implements rate limiting, security headers and restrictive CORS
configuration.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from core import configure_logging
from core.config import CORS_ORIGINS, RATE_LIMIT
from core.events import logger
from api.routes import health_router, tools_router
from api.routes.health import API_VERSION


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle startup and shutdown events."""
    configure_logging()
    logger.info("Password Generator API starting (rate limit %s)", app.state.rate_limit)
    yield
    logger.info("Password Generator API stopped")


async def add_security_headers(request: Request, call_next) -> Response:
    """Add security headers to all responses.

    Headers follow OWASP security recommendations:
    - X-Content-Type-Options: Prevents MIME-type sniffing
    - X-Frame-Options: Prevents clickjacking attacks
    - Content-Security-Policy: Restricts resource loading
    - Referrer-Policy: Controls referrer information leakage
    - Cache-Control: Generated passwords must never be cached
    - Permissions-Policy: Restricts browser features
    """
    response = await call_next(request)

    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Content-Security-Policy"] = "default-src 'self'; frame-ancestors 'none'"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"

    # Prevent caching of generated passwords
    response.headers["Cache-Control"] = "no-store, no-cache, must-revalidate, private"
    response.headers["Pragma"] = "no-cache"

    response.headers["Permissions-Policy"] = "geolocation=(), microphone=(), camera=()"

    return response


def create_app(
    rate_limit: str = RATE_LIMIT,
    cors_origins: Optional[list[str]] = None,
) -> FastAPI:
    """Build the API application.

    Args:
        rate_limit: Default per-client limit, e.g. '100/minute'
        cors_origins: Browser origins allowed to call the API
            (defaults to CORS_ORIGINS)

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title="Password Generator API",
        description="""
        Secure password generation API with:
        - Configurable character classes and exclusions
        - Cryptographically secure sampling (secrets)
        - Heuristic strength scoring with feedback
        - Rate limiting
        """,
        version=API_VERSION,
        lifespan=lifespan
    )

    # Rate limiter configuration
    # Uses client IP for rate limit tracking
    app.state.rate_limit = rate_limit
    app.state.limiter = Limiter(key_func=get_remote_address, default_limits=[rate_limit])
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    app.middleware("http")(add_security_headers)

    # CORS configuration - explicitly restricted
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS if cors_origins is None else cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin"],
        expose_headers=["X-RateLimit-Limit", "X-RateLimit-Remaining", "X-RateLimit-Reset"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Register routers
    app.include_router(health_router)
    app.include_router(tools_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="127.0.0.1", port=8000)
