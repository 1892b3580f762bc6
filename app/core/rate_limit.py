"""Request rate limiting"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from app.config import settings

limiter = Limiter(
    key_func=get_remote_address,
    enabled=settings.RATE_LIMIT_ENABLED,
)

# Applied to routes that write to the database
write_limit = limiter.limit(settings.rate_limit)
