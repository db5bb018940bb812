"""
REPOSITORY PORTS - Data persistence interfaces

Each repository port:
- Is an abstract base class (ABC)
- Defines methods the domain needs
- Does NOT specify implementation (Prisma, in-memory, etc.)

Infrastructure layer provides implementations.
"""

from jobchat.domain.ports.repositories.application_repository import (
    ApplicationRepository,
)
from jobchat.domain.ports.repositories.message_repository import MessageRepository
from jobchat.domain.ports.repositories.notification_repository import (
    NotificationRepository,
)
from jobchat.domain.ports.repositories.user_repository import UserRepository
from jobchat.domain.ports.repositories.profile_repository import ProfileRepository
from jobchat.domain.ports.repositories.job_repository import JobRepository

__all__ = [
    "ApplicationRepository",
    "MessageRepository",
    "NotificationRepository",
    "UserRepository",
    "ProfileRepository",
    "JobRepository",
]
