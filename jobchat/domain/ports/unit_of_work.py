"""
Unit of Work Port - Transaction boundary for writes that must be atomic.

Sending the first message of a virtual conversation is a find-or-create of
the anchoring Application followed by an append to the message log. Both
steps run inside one unit of work that holds a lock keyed by the
(company, job seeker) pair, so two concurrent first sends see each other's
Application instead of creating two.

Usage:
    async with uow.begin(lock_key=anchor_lock_key(company_id, job_seeker_id)) as tx:
        application = await tx.applications.find_latest(...)
        ...
        await tx.messages.save(message)
"""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager
from dataclasses import dataclass
from typing import Optional

from jobchat.domain.ports.repositories.application_repository import (
    ApplicationRepository,
)
from jobchat.domain.ports.repositories.message_repository import MessageRepository
from jobchat.domain.ports.repositories.notification_repository import (
    NotificationRepository,
)
from jobchat.domain.value_objects.company_id import CompanyId
from jobchat.domain.value_objects.job_seeker_id import JobSeekerId


@dataclass
class TransactionScope:
    """Repositories bound to one open transaction."""

    applications: ApplicationRepository
    messages: MessageRepository
    notifications: NotificationRepository


class UnitOfWork(ABC):
    @abstractmethod
    def begin(
        self, lock_key: Optional[str] = None
    ) -> AbstractAsyncContextManager[TransactionScope]:
        """Open a transaction; commit on clean exit, roll back on exception."""
        ...


def anchor_lock_key(company_id: CompanyId, job_seeker_id: JobSeekerId) -> str:
    """Lock key shared by every anchor lookup between the same two profiles."""
    return f"anchor:{company_id.value}:{job_seeker_id.value}"
