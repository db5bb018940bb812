"""
Notification Dispatcher - one NEW_MESSAGE notification per sent message.

Delivery is best-effort: the message is already committed when this runs,
so a failure here is logged and counted but never reaches the sender.
"""

import logging
from typing import Optional

from jobchat.domain.entities.message import Message
from jobchat.domain.entities.notification import Notification, NotificationType
from jobchat.domain.entities.user import User
from jobchat.domain.ports.repositories import NotificationRepository
from jobchat.domain.services.dashboard_routes import messages_link
from jobchat.domain.value_objects.actor import Actor
from jobchat.observability.metrics import MetricsErrorType, record_error

logger = logging.getLogger(__name__)


class NotificationDispatcher:
    def __init__(self, notification_repository: NotificationRepository):
        self._notification_repository = notification_repository

    def build(self, message: Message, sender: Actor, receiver: User) -> Notification:
        return Notification.create(
            user_id=receiver.id,
            type=NotificationType.NEW_MESSAGE,
            message=f"You have a new message from {sender.display_name}.",
            link=messages_link(receiver.role, message.application_id),
        )

    async def dispatch(
        self, message: Message, sender: Actor, receiver: User
    ) -> Optional[Notification]:
        try:
            notification = self.build(message, sender, receiver)
            await self._notification_repository.save(notification)
        except Exception as e:
            logger.exception(
                f"[NotificationDispatcher] Failed to notify {receiver.id.value} "
                f"about message {message.id.value}: {e}"
            )
            record_error(MetricsErrorType.NOTIFICATION_FAILED)
            return None

        logger.debug(
            f"[NotificationDispatcher] Notified {receiver.id.value}: {notification.link}"
        )
        return notification
