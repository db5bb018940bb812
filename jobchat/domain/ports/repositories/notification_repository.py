"""
Notification Repository Port - Interface for notification persistence.
Implementation: jobchat/infrastructure/persistence/prisma_notification_repository.py
"""

from abc import ABC, abstractmethod

from jobchat.domain.entities.notification import Notification
from jobchat.domain.value_objects.application_id import ApplicationId
from jobchat.domain.value_objects.user_id import UserId


class NotificationRepository(ABC):
    @abstractmethod
    async def save(self, notification: Notification) -> None: ...

    @abstractmethod
    async def get_by_user(
        self, user_id: UserId, unread_only: bool = False, limit: int = 50
    ) -> list[Notification]:
        """Notifications for user_id, newest first."""
        ...

    @abstractmethod
    async def mark_read_for_conversation(
        self, user_id: UserId, application_id: ApplicationId
    ) -> int:
        """Flip unread NEW_MESSAGE notifications that link to the conversation."""
        ...
