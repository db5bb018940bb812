"""
Message Repository Port - Interface for the append-only message log.
Implementation: jobchat/infrastructure/persistence/prisma_message_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional

from jobchat.domain.entities.message import Message
from jobchat.domain.value_objects.application_id import ApplicationId
from jobchat.domain.value_objects.user_id import UserId


class MessageRepository(ABC):
    @abstractmethod
    async def get_by_application(self, application_id: ApplicationId) -> list[Message]:
        """All messages of a conversation, oldest first."""
        ...

    @abstractmethod
    async def get_latest(self, application_id: ApplicationId) -> Optional[Message]: ...

    @abstractmethod
    async def count_unread(
        self, application_id: ApplicationId, receiver_id: UserId
    ) -> int: ...

    @abstractmethod
    async def save(self, message: Message) -> None: ...

    @abstractmethod
    async def mark_read(self, application_id: ApplicationId, receiver_id: UserId) -> int:
        """Conditionally flip unread messages addressed to receiver_id. Returns rows changed."""
        ...
