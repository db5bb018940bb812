"""Notifications API Router - the current user's notifications, newest first."""

from fastapi import APIRouter, Depends, Query
from dishka.integrations.fastapi import FromDishka, inject

from jobchat.application.dto import NotificationDTO
from jobchat.application.queries.notifications import (
    ListNotificationsHandler,
    ListNotificationsQuery,
)
from jobchat.domain.value_objects.actor import Actor
from jobchat.presentation.dependencies.auth import get_current_user

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("", response_model=list[NotificationDTO])
@inject
async def list_notifications(
    handler: FromDishka[ListNotificationsHandler],
    current_user: Actor = Depends(get_current_user),
    unread: bool = Query(False),
):
    notifications = await handler.execute(
        ListNotificationsQuery(actor=current_user, unread_only=unread)
    )
    return [NotificationDTO.from_entity(n) for n in notifications]
