"""
Prisma Unit of Work - interactive transaction plus optional advisory lock.

The lock is pg_advisory_xact_lock on hashtext(lock_key): Postgres releases
it at commit or rollback, so nothing has to unlock it explicitly. Every
repository in the scope is bound to the transaction client.
"""

import logging
from contextlib import asynccontextmanager
from datetime import timedelta
from typing import AsyncIterator, Optional

from prisma import Prisma

from jobchat.config.settings import Config
from jobchat.domain.ports.unit_of_work import TransactionScope, UnitOfWork
from jobchat.infrastructure.persistence.prisma_application_repository import (
    PrismaApplicationRepository,
)
from jobchat.infrastructure.persistence.prisma_message_repository import (
    PrismaMessageRepository,
)
from jobchat.infrastructure.persistence.prisma_notification_repository import (
    PrismaNotificationRepository,
)

logger = logging.getLogger(__name__)

ADVISORY_LOCK_SQL = "SELECT pg_advisory_xact_lock(hashtext($1))"


class PrismaUnitOfWork(UnitOfWork):
    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    @asynccontextmanager
    async def begin(
        self, lock_key: Optional[str] = None
    ) -> AsyncIterator[TransactionScope]:
        timeout = timedelta(milliseconds=Config.ANCHOR_LOCK_TIMEOUT_MS)
        async with self._prisma.tx(timeout=timeout) as tx:
            if lock_key:
                await tx.execute_raw(ADVISORY_LOCK_SQL, lock_key)
                logger.debug(f"[UnitOfWork] Acquired advisory lock {lock_key}")
            yield TransactionScope(
                applications=PrismaApplicationRepository(tx),
                messages=PrismaMessageRepository(tx),
                notifications=PrismaNotificationRepository(tx),
            )
