"""
Prisma storage provider.

Kept apart from container.py because importing it imports the generated
Prisma client.
"""

import logging
from typing import AsyncIterable

from dishka import Provider, Scope, provide
from prisma import Prisma

from jobchat.domain.ports import UnitOfWork
from jobchat.domain.ports.repositories import (
    ApplicationRepository,
    JobRepository,
    MessageRepository,
    NotificationRepository,
    ProfileRepository,
    UserRepository,
)
from jobchat.infrastructure.persistence import (
    PrismaApplicationRepository,
    PrismaJobRepository,
    PrismaMessageRepository,
    PrismaNotificationRepository,
    PrismaProfileRepository,
    PrismaUnitOfWork,
    PrismaUserRepository,
)

logger = logging.getLogger(__name__)


class PrismaProvider(Provider):
    # ==================== DATABASE ====================

    @provide(scope=Scope.APP)
    async def get_prisma(self) -> AsyncIterable[Prisma]:
        """
        Provide Prisma client (singleton, app-scoped).

        - Scope.APP = created ONCE when app starts, shared across all requests
        - disconnected when the container closes
        """
        prisma = Prisma()
        await prisma.connect()
        logger.info("[Prisma] Connected")
        yield prisma
        await prisma.disconnect()
        logger.info("[Prisma] Disconnected")

    @provide(scope=Scope.APP)
    def get_unit_of_work(self, prisma: Prisma) -> UnitOfWork:
        return PrismaUnitOfWork(prisma)

    # ==================== REPOSITORIES ====================

    @provide(scope=Scope.REQUEST)
    def get_application_repository(self, prisma: Prisma) -> ApplicationRepository:
        return PrismaApplicationRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_message_repository(self, prisma: Prisma) -> MessageRepository:
        return PrismaMessageRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_notification_repository(self, prisma: Prisma) -> NotificationRepository:
        return PrismaNotificationRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, prisma: Prisma) -> UserRepository:
        return PrismaUserRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_profile_repository(self, prisma: Prisma) -> ProfileRepository:
        return PrismaProfileRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_job_repository(self, prisma: Prisma) -> JobRepository:
        return PrismaJobRepository(prisma)
