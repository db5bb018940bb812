"""
OpenConversation Query - What a company sees when it opens a chat with a candidate.

If a persisted conversation already exists for the candidate (and the given
application or job), its summary is returned. Otherwise a virtual
conversation is returned: a placeholder keyed "virtual-<applicationId or
candidateId>" that has no backend record. The first SendMessage for it
creates the real Application.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from jobchat.application.common.interfaces import Query, QueryHandler
from jobchat.application.services.conversation_projector import (
    ConversationProjector,
    ConversationSummary,
    JobSummary,
)
from jobchat.domain.exceptions import AccessDeniedError, EntityNotFoundError
from jobchat.domain.ports.repositories import (
    ApplicationRepository,
    JobRepository,
    UserRepository,
)
from jobchat.domain.services.dashboard_routes import dashboard_segment
from jobchat.domain.services.permission_guard import check_contact
from jobchat.domain.value_objects.actor import Actor
from jobchat.domain.value_objects.application_id import ApplicationId
from jobchat.domain.value_objects.job_id import JobId
from jobchat.domain.value_objects.user_id import UserId
from jobchat.domain.value_objects.virtual_conversation_id import (
    VirtualConversationId,
)

START_CONVERSATION = "Start the conversation..."
NEW_CONVERSATION_TITLE = "New Conversation"


@dataclass(frozen=True)
class OpenConversationQuery(Query[ConversationSummary]):
    actor: Actor
    candidate_id: UserId
    application_id: Optional[ApplicationId] = None
    job_id: Optional[JobId] = None
    job_title: Optional[str] = None


class OpenConversationHandler(QueryHandler[ConversationSummary]):
    def __init__(
        self,
        application_repository: ApplicationRepository,
        user_repository: UserRepository,
        job_repository: JobRepository,
        projector: ConversationProjector,
    ):
        self._application_repository = application_repository
        self._user_repository = user_repository
        self._job_repository = job_repository
        self._projector = projector

    async def execute(self, query: OpenConversationQuery) -> ConversationSummary:
        if not query.actor.is_company:
            raise AccessDeniedError("Only companies can start a conversation.")

        candidate = await self._user_repository.get_by_id(query.candidate_id)
        if not candidate:
            raise EntityNotFoundError(f"Candidate {query.candidate_id.value} not found")
        check_contact(query.actor.role, candidate.role)

        applications = await self._application_repository.list_for_participant(
            query.actor.user_id,
            job_id=query.job_id,
            application_id=query.application_id,
            job_seeker_user_id=candidate.id,
        )
        existing = await self._projector.project(applications, query.actor)
        if existing:
            return existing[0]

        key = query.application_id.value if query.application_id else candidate.id.value
        return ConversationSummary(
            id=VirtualConversationId(key).value,
            counterparty_user_id=candidate.id.value,
            job_seeker_user_id=candidate.id.value,
            counterparty_name=candidate.name,
            counterparty_image=candidate.image,
            counterparty_role=dashboard_segment(candidate.role),
            last_message=START_CONVERSATION,
            timestamp=datetime.now(timezone.utc),
            unread_count=0,
            job=await self._virtual_job(query),
            has_messages=False,
        )

    async def _virtual_job(self, query: OpenConversationQuery) -> JobSummary:
        job = await self._job_repository.get_by_id(query.job_id) if query.job_id else None
        return JobSummary(
            id=query.job_id.value if query.job_id else None,
            title=query.job_title or (job.title if job else NEW_CONVERSATION_TITLE),
            status=job.status if job else None,
            application_deadline=job.application_deadline if job else None,
        )
