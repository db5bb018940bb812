"""
In-memory storage backend.

Selected with STORAGE_BACKEND=memory. Same port contracts as the Prisma
backend, including the per-pair anchor lock.
"""

from jobchat.infrastructure.memory.store import InMemoryStore
from jobchat.infrastructure.memory.repositories import (
    InMemoryApplicationRepository,
    InMemoryMessageRepository,
    InMemoryNotificationRepository,
    InMemoryUserRepository,
    InMemoryProfileRepository,
    InMemoryJobRepository,
)
from jobchat.infrastructure.memory.unit_of_work import InMemoryUnitOfWork

__all__ = [
    "InMemoryStore",
    "InMemoryApplicationRepository",
    "InMemoryMessageRepository",
    "InMemoryNotificationRepository",
    "InMemoryUserRepository",
    "InMemoryProfileRepository",
    "InMemoryJobRepository",
    "InMemoryUnitOfWork",
]
