"""
Rate limiter compartilhado entre o app e os endpoints.

Sem SlowAPIMiddleware: só as rotas decoradas com `@limiter.limit` são limitadas.
"""
from slowapi import Limiter
from slowapi.util import get_remote_address
from clubsite.core.config import settings

limiter = Limiter(
    key_func=get_remote_address,
    enabled=settings.RATE_LIMIT_ENABLED,
)
