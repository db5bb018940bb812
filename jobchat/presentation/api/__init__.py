"""
API Routers - FastAPI endpoint definitions.
"""

from jobchat.presentation.api.conversations import router as conversations_router
from jobchat.presentation.api.messages import router as messages_router
from jobchat.presentation.api.notifications import router as notifications_router
from jobchat.presentation.api.metrics import router as metrics_router

__all__ = [
    "conversations_router",
    "messages_router",
    "notifications_router",
    "metrics_router",
]
