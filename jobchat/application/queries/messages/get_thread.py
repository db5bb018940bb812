"""
GetThread Query - All messages of one conversation, in chronological order.

Used by the dashboard chat window when a conversation is opened.
"""

from dataclasses import dataclass

from jobchat.application.common.interfaces import Query, QueryHandler
from jobchat.application.services.participants import ParticipantResolver
from jobchat.domain.entities.application import Application
from jobchat.domain.entities.message import Message
from jobchat.domain.exceptions import EntityNotFoundError
from jobchat.domain.ports.repositories import ApplicationRepository, MessageRepository
from jobchat.domain.value_objects.actor import Actor
from jobchat.domain.value_objects.application_id import ApplicationId


@dataclass
class GetThreadResult:
    """Result containing the anchoring application and its messages."""

    application: Application
    messages: list[Message]


@dataclass(frozen=True)
class GetThreadQuery(Query[GetThreadResult]):
    actor: Actor
    application_id: ApplicationId


class GetThreadHandler(QueryHandler[GetThreadResult]):
    def __init__(
        self,
        application_repository: ApplicationRepository,
        message_repository: MessageRepository,
        participant_resolver: ParticipantResolver,
    ):
        self._application_repository = application_repository
        self._message_repository = message_repository
        self._participants = participant_resolver

    async def execute(self, query: GetThreadQuery) -> GetThreadResult:
        """
        Load a conversation thread.

        Steps:
        1. Verify the application exists
        2. Verify the actor is one of its two participants
        3. Load messages, oldest first

        Raises:
            EntityNotFoundError: If the application doesn't exist
            AccessDeniedError: If the actor is not a participant
        """
        application = await self._application_repository.get_by_id(query.application_id)
        if not application:
            raise EntityNotFoundError(
                f"Application {query.application_id.value} not found"
            )

        await self._participants.require_participant(application, query.actor.user_id)

        messages = await self._message_repository.get_by_application(application.id)
        return GetThreadResult(application=application, messages=messages)
