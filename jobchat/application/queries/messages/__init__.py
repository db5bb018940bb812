"""Message-related queries."""

from jobchat.application.queries.messages.get_thread import (
    GetThreadQuery,
    GetThreadHandler,
    GetThreadResult,
)

__all__ = [
    "GetThreadQuery",
    "GetThreadHandler",
    "GetThreadResult",
]
