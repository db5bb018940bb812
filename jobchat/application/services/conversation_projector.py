"""
Conversation Projector - conversation list summaries derived from the message log.

Last message, timestamp and unread count are recomputed on every call from
Applications + Messages; nothing here is stored.
"""

import asyncio
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable, Optional

from jobchat.application.services.participants import ParticipantResolver
from jobchat.domain.entities.application import Application
from jobchat.domain.entities.message import Message
from jobchat.domain.exceptions import EntityNotFoundError
from jobchat.domain.ports.repositories import (
    JobRepository,
    MessageRepository,
    UserRepository,
)
from jobchat.domain.services.dashboard_routes import dashboard_segment
from jobchat.domain.value_objects.actor import Actor
from jobchat.domain.value_objects.user_role import UserRole

NO_MESSAGES_YET = "No messages yet."

_EARLIEST = datetime.min.replace(tzinfo=timezone.utc)


@dataclass
class JobSummary:
    id: Optional[str]
    title: str
    status: Optional[str] = None
    application_deadline: Optional[datetime] = None


@dataclass
class ConversationSummary:
    id: str
    counterparty_user_id: str
    job_seeker_user_id: str
    counterparty_name: Optional[str]
    counterparty_image: Optional[str]
    counterparty_role: str
    last_message: str
    timestamp: Optional[datetime]
    unread_count: int
    job: Optional[JobSummary] = None
    has_messages: bool = True


def sort_by_recency(summaries: Iterable[ConversationSummary]) -> list[ConversationSummary]:
    """Newest first; conversations without a timestamp sink to the bottom."""
    return sorted(summaries, key=lambda s: s.timestamp or _EARLIEST, reverse=True)


class ConversationProjector:
    def __init__(
        self,
        message_repository: MessageRepository,
        user_repository: UserRepository,
        job_repository: JobRepository,
        participant_resolver: ParticipantResolver,
    ):
        self._message_repository = message_repository
        self._user_repository = user_repository
        self._job_repository = job_repository
        self._participants = participant_resolver

    async def project(
        self,
        applications: list[Application],
        viewer: Actor,
        include_all: bool = False,
    ) -> list[ConversationSummary]:
        """
        Build summaries for the viewer.

        Applications without any message are dropped unless include_all is
        set, which hides shell anchors that were never used.
        """
        summaries = await asyncio.gather(
            *(self.summarize(application, viewer) for application in applications)
        )
        visible = [s for s in summaries if include_all or s.has_messages]
        return sort_by_recency(visible)

    async def summarize(
        self, application: Application, viewer: Actor
    ) -> ConversationSummary:
        last_message, unread_count = await asyncio.gather(
            self._message_repository.get_latest(application.id),
            self._message_repository.count_unread(application.id, viewer.user_id),
        )
        participants = await self._participants.for_application(application)

        counterparty_role = (
            UserRole.JOB_SEEKER if viewer.role == UserRole.COMPANY else UserRole.COMPANY
        )
        counterparty_id = participants.user_for(counterparty_role)
        counterparty = await self._user_repository.get_by_id(counterparty_id)
        if not counterparty:
            raise EntityNotFoundError(f"User {counterparty_id.value} not found")

        image = counterparty.image
        if counterparty_role == UserRole.COMPANY:
            image = participants.company.logo_url or counterparty.image

        return ConversationSummary(
            id=application.id.value,
            counterparty_user_id=counterparty.id.value,
            job_seeker_user_id=participants.job_seeker.user_id.value,
            counterparty_name=counterparty.name,
            counterparty_image=image,
            counterparty_role=dashboard_segment(counterparty.role),
            last_message=_preview(last_message),
            timestamp=last_message.created_at if last_message else None,
            unread_count=unread_count,
            job=await self._job_summary(application),
            has_messages=last_message is not None,
        )

    async def _job_summary(self, application: Application) -> Optional[JobSummary]:
        if not application.job_id:
            return None
        job = await self._job_repository.get_by_id(application.job_id)
        if not job:
            return None
        return JobSummary(
            id=job.id.value,
            title=job.title,
            status=job.status,
            application_deadline=job.application_deadline,
        )


def _preview(message: Optional[Message]) -> str:
    return message.content if message else NO_MESSAGES_YET
