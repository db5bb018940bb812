"""List Conversations Query."""

from dataclasses import dataclass
from typing import Optional

from jobchat.application.common.interfaces import Query, QueryHandler
from jobchat.application.services.conversation_projector import (
    ConversationProjector,
    ConversationSummary,
)
from jobchat.domain.ports.repositories import ApplicationRepository
from jobchat.domain.value_objects.actor import Actor
from jobchat.domain.value_objects.application_id import ApplicationId
from jobchat.domain.value_objects.job_id import JobId
from jobchat.domain.value_objects.user_id import UserId
from jobchat.observability.metrics import observe_conversation_list_size


@dataclass(frozen=True)
class ListConversationsQuery(Query[list[ConversationSummary]]):
    actor: Actor
    include_all: bool = False
    candidate_id: Optional[UserId] = None
    job_id: Optional[JobId] = None
    application_id: Optional[ApplicationId] = None


class ListConversationsHandler(QueryHandler[list[ConversationSummary]]):
    def __init__(
        self,
        application_repository: ApplicationRepository,
        projector: ConversationProjector,
    ):
        self._application_repository = application_repository
        self._projector = projector

    async def execute(self, query: ListConversationsQuery) -> list[ConversationSummary]:
        # candidateId is a company-side filter; job seekers only ever see their own side
        candidate_id = query.candidate_id if query.actor.is_company else None
        applications = await self._application_repository.list_for_participant(
            query.actor.user_id,
            job_id=query.job_id,
            application_id=query.application_id,
            job_seeker_user_id=candidate_id,
        )
        conversations = await self._projector.project(
            applications, query.actor, include_all=query.include_all
        )
        observe_conversation_list_size(len(conversations))
        return conversations
