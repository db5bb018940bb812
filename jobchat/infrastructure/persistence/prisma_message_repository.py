"""
Prisma Message Repository Implementation.

Prisma Message Model (from schema.prisma):
    model Message {
        id             String   @id @default(uuid())
        application_id String
        sender_id      String
        receiver_id    String
        content        String
        read           Boolean  @default(false)
        created_at     DateTime @default(now())
    }

Messages are append-only: save() only creates. The read flag changes
through mark_read(), a conditional update_many (WHERE read = false) so a
second call changes nothing.
"""

from typing import Optional
from prisma import Prisma
from prisma.models import Message as PrismaMessage
from jobchat.domain.entities.message import Message
from jobchat.domain.ports.repositories import MessageRepository
from jobchat.domain.value_objects.application_id import ApplicationId
from jobchat.domain.value_objects.message_id import MessageId
from jobchat.domain.value_objects.user_id import UserId


class PrismaMessageRepository(MessageRepository):
    """
    Prisma implementation of MessageRepository.

    Handles persistence of Message entities to PostgreSQL via Prisma.
    """

    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        """
        Initialize repository with Prisma client.

        Args:
            prisma: Connected Prisma client, or a transaction client from
                prisma.tx() when used inside a unit of work
        """
        self._prisma = prisma

    def _to_entity(self, record: PrismaMessage) -> Message:
        return Message(
            id=MessageId(record.id),
            application_id=ApplicationId(record.application_id),
            sender_id=UserId(record.sender_id),
            receiver_id=UserId(record.receiver_id),
            content=record.content,
            read=record.read,
            created_at=record.created_at,
        )

    async def get_by_application(self, application_id: ApplicationId) -> list[Message]:
        """
        Get the whole thread, oldest first.

        Args:
            application_id: The conversation's ApplicationId

        Returns:
            List of Message entities in chronological order
        """
        records = await self._prisma.message.find_many(
            where={"application_id": application_id.value},
            order={"created_at": "asc"},
        )
        return [self._to_entity(record) for record in records]

    async def get_latest(self, application_id: ApplicationId) -> Optional[Message]:
        record = await self._prisma.message.find_first(
            where={"application_id": application_id.value},
            order={"created_at": "desc"},
        )
        return self._to_entity(record) if record else None

    async def count_unread(
        self, application_id: ApplicationId, receiver_id: UserId
    ) -> int:
        return await self._prisma.message.count(
            where={
                "application_id": application_id.value,
                "receiver_id": receiver_id.value,
                "read": False,
            }
        )

    async def save(self, message: Message) -> None:
        await self._prisma.message.create(
            data={
                "id": message.id.value,
                "application_id": message.application_id.value,
                "sender_id": message.sender_id.value,
                "receiver_id": message.receiver_id.value,
                "content": message.content,
                "read": message.read,
                "created_at": message.created_at,
            }
        )

    async def mark_read(self, application_id: ApplicationId, receiver_id: UserId) -> int:
        return await self._prisma.message.update_many(
            where={
                "application_id": application_id.value,
                "receiver_id": receiver_id.value,
                "read": False,
            },
            data={"read": True},
        )
