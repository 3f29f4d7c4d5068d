"""
Security middleware for passphrase responses
"""

from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from diceware.config import settings
from diceware.logging_config import log_rate_limited
from diceware.middleware.rate_limit import RateLimitConfig, RateLimiter
from diceware.utils.network import get_client_ip


class SecurityMiddleware(BaseHTTPMiddleware):
    """
    Runs before route handlers
    - Applies per-IP rate limiting
    - Marks every response as non-cacheable
    """

    # Probes are never rate limited
    BYPASS_PATHS = {"/health", "/health/ready"}

    def __init__(self, app, limiter: Optional[RateLimiter] = None):
        super().__init__(app)
        self.limiter = limiter or RateLimiter(RateLimitConfig.from_settings(settings))

    async def dispatch(self, request: Request, call_next) -> Response:
        if request.url.path not in self.BYPASS_PATHS:
            client_ip = get_client_ip(request)
            if not self.limiter.is_allowed(client_ip):
                log_rate_limited(client_ip)
                return self._add_security_headers(
                    JSONResponse(
                        status_code=429,
                        content={"error": "rate_limited", "message": "Too many requests"},
                    )
                )

        response = await call_next(request)
        return self._add_security_headers(response)

    def _add_security_headers(self, response: Response) -> Response:
        """Passphrases must never end up in a cache"""
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "no-referrer"
        response.headers["Cache-Control"] = "no-store, no-cache, must-revalidate"
        response.headers["Pragma"] = "no-cache"
        response.headers["Content-Security-Policy"] = "default-src 'none'"
        return response
