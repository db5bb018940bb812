"""Notification DTOs for API response."""

from datetime import datetime

from jobchat.application.dto.base import CamelModel
from jobchat.domain.entities.notification import Notification


class NotificationDTO(CamelModel):
    id: str
    user_id: str
    type: str
    message: str
    link: str
    read: bool
    created_at: datetime

    @classmethod
    def from_entity(cls, notification: Notification) -> "NotificationDTO":
        return cls(
            id=notification.id.value,
            user_id=notification.user_id.value,
            type=notification.type.value,
            message=notification.message,
            link=notification.link,
            read=notification.read,
            created_at=notification.created_at,
        )
