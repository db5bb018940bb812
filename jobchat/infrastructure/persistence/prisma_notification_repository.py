"""
Prisma Notification Repository Implementation.
"""

from prisma import Prisma
from prisma.models import Notification as PrismaNotification
from jobchat.domain.entities.notification import Notification, NotificationType
from jobchat.domain.ports.repositories import NotificationRepository
from jobchat.domain.services.dashboard_routes import conversation_link_marker
from jobchat.domain.value_objects.application_id import ApplicationId
from jobchat.domain.value_objects.notification_id import NotificationId
from jobchat.domain.value_objects.user_id import UserId


class PrismaNotificationRepository(NotificationRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaNotification) -> Notification:
        return Notification(
            id=NotificationId(record.id),
            user_id=UserId(record.user_id),
            type=NotificationType(record.type),
            message=record.message,
            link=record.link,
            read=record.read,
            created_at=record.created_at,
        )

    async def save(self, notification: Notification) -> None:
        await self._prisma.notification.create(
            data={
                "id": notification.id.value,
                "user_id": notification.user_id.value,
                "type": notification.type.value,
                "message": notification.message,
                "link": notification.link,
                "read": notification.read,
                "created_at": notification.created_at,
            }
        )

    async def get_by_user(
        self, user_id: UserId, unread_only: bool = False, limit: int = 50
    ) -> list[Notification]:
        where = {"user_id": user_id.value}
        if unread_only:
            where["read"] = False
        records = await self._prisma.notification.find_many(
            where=where, order={"created_at": "desc"}, take=limit
        )
        return [self._to_entity(record) for record in records]

    async def mark_read_for_conversation(
        self, user_id: UserId, application_id: ApplicationId
    ) -> int:
        return await self._prisma.notification.update_many(
            where={
                "user_id": user_id.value,
                "type": NotificationType.NEW_MESSAGE.value,
                "read": False,
                "link": {"endswith": conversation_link_marker(application_id)},
            },
            data={"read": True},
        )
