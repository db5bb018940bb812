"""
Notification Entity - A durable, per-recipient notification row.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4
from jobchat.domain.value_objects.notification_id import NotificationId
from jobchat.domain.value_objects.user_id import UserId


class NotificationType(str, Enum):
    NEW_MESSAGE = "NEW_MESSAGE"


@dataclass
class Notification:
    id: NotificationId
    user_id: UserId
    type: NotificationType
    message: str
    link: str
    created_at: datetime
    read: bool = False

    @classmethod
    def create(
        cls,
        user_id: UserId,
        type: NotificationType,
        message: str,
        link: str,
    ) -> Notification:
        return cls(
            id=NotificationId(str(uuid4())),
            user_id=user_id,
            type=type,
            message=message,
            link=link,
            created_at=datetime.now(timezone.utc),
        )
