# Diceware Middleware
from diceware.middleware.security import SecurityMiddleware
from diceware.middleware.rate_limit import RateLimitConfig, RateLimiter

__all__ = ["SecurityMiddleware", "RateLimitConfig", "RateLimiter"]
