"""
Shared rate limiter.
"""
from slowapi import Limiter
from slowapi.util import get_remote_address

from tree_planner.config import settings

RATE_LIMIT = f"{settings.rate_limit_requests}/minute"

limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)
