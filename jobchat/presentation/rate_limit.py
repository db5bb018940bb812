"""Shared slowapi limiter, registered on app.state.limiter by the app factory."""

from slowapi import Limiter
from slowapi.util import get_remote_address

from jobchat.config.settings import Config

limiter = Limiter(
    key_func=get_remote_address,
    storage_uri=Config.RATELIMIT_STORAGE_URI,
    enabled=Config.RATELIMIT_ENABLED,
)
