"""List Notifications Query - rows for the notification badge."""

from dataclasses import dataclass

from jobchat.application.common.interfaces import Query, QueryHandler
from jobchat.config.settings import Config
from jobchat.domain.entities.notification import Notification
from jobchat.domain.ports.repositories import NotificationRepository
from jobchat.domain.value_objects.actor import Actor


@dataclass(frozen=True)
class ListNotificationsQuery(Query[list[Notification]]):
    actor: Actor
    unread_only: bool = False
    limit: int = Config.NOTIFICATION_LIST_LIMIT


class ListNotificationsHandler(QueryHandler[list[Notification]]):
    def __init__(self, notification_repository: NotificationRepository):
        self._notification_repository = notification_repository

    async def execute(self, query: ListNotificationsQuery) -> list[Notification]:
        return await self._notification_repository.get_by_user(
            query.actor.user_id, unread_only=query.unread_only, limit=query.limit
        )
