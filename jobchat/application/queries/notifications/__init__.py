"""Notification queries."""

from jobchat.application.queries.notifications.list_notifications import (
    ListNotificationsQuery,
    ListNotificationsHandler,
)

__all__ = [
    "ListNotificationsQuery",
    "ListNotificationsHandler",
]
