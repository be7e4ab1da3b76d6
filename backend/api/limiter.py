"""Rate limiter shared by the app and the generation routes."""

from slowapi import Limiter
from slowapi.util import get_remote_address

from backend.config import settings

limiter = Limiter(key_func=get_remote_address)

# Decorator for endpoints that call the LLM provider
generation_limit = limiter.limit(settings.generation_rate_limit)
