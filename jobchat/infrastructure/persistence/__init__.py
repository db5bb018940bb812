"""
Persistence Layer - Database implementations.

Contains Prisma repository implementations for domain ports. Importing this
package imports the generated Prisma client.
"""

from jobchat.infrastructure.persistence.prisma_application_repository import (
    PrismaApplicationRepository,
)
from jobchat.infrastructure.persistence.prisma_message_repository import (
    PrismaMessageRepository,
)
from jobchat.infrastructure.persistence.prisma_notification_repository import (
    PrismaNotificationRepository,
)
from jobchat.infrastructure.persistence.prisma_directory_repositories import (
    PrismaUserRepository,
    PrismaProfileRepository,
    PrismaJobRepository,
)
from jobchat.infrastructure.persistence.prisma_unit_of_work import PrismaUnitOfWork

__all__ = [
    "PrismaApplicationRepository",
    "PrismaMessageRepository",
    "PrismaNotificationRepository",
    "PrismaUserRepository",
    "PrismaProfileRepository",
    "PrismaJobRepository",
    "PrismaUnitOfWork",
]
