"""Mark Conversation Read Command."""

import logging
from dataclasses import dataclass

from jobchat.application.common.interfaces import Command, CommandHandler
from jobchat.application.services.participants import ParticipantResolver
from jobchat.domain.exceptions import EntityNotFoundError
from jobchat.domain.ports.repositories import ApplicationRepository
from jobchat.domain.ports.unit_of_work import UnitOfWork
from jobchat.domain.value_objects.actor import Actor
from jobchat.domain.value_objects.application_id import ApplicationId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MarkConversationReadCommand(Command[int]):
    actor: Actor
    application_id: ApplicationId


class MarkConversationReadHandler(CommandHandler[int]):
    """
    Mark every message addressed to the actor in one conversation as read.

    Only rows with read = false are touched, so repeated calls return 0.
    The actor's NEW_MESSAGE notifications for the conversation are cleared
    in the same transaction.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        application_repository: ApplicationRepository,
        participant_resolver: ParticipantResolver,
    ):
        self._uow = uow
        self._application_repository = application_repository
        self._participants = participant_resolver

    async def execute(self, command: MarkConversationReadCommand) -> int:
        application = await self._application_repository.get_by_id(
            command.application_id
        )
        if not application:
            raise EntityNotFoundError(
                f"Application {command.application_id.value} not found"
            )
        await self._participants.require_participant(
            application, command.actor.user_id
        )

        async with self._uow.begin() as tx:
            marked = await tx.messages.mark_read(application.id, command.actor.user_id)
            cleared = await tx.notifications.mark_read_for_conversation(
                command.actor.user_id, application.id
            )

        logger.debug(
            f"[MarkRead] application={application.id.value} "
            f"user={command.actor.user_id.value} messages={marked} notifications={cleared}"
        )
        return marked
