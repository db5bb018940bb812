"""
SendMessage Command - Append a message to a conversation, creating its anchor if needed.

Handler:
1. Validate content and that a counterpart can be resolved
2. Resolve the receiver (explicit receiver id, or the counterpart in the application)
3. Permission Guard on the (sender role, receiver role) pair
4. Resolve both participants' profiles
5. In one unit of work holding the pair's anchor lock:
   find-or-create the Application, then save the Message
6. Dispatch the NEW_MESSAGE notification (best-effort, after commit)

Step 5 is what turns a virtual conversation into a real one: concurrent
first sends for the same pair serialise on the lock and share one
Application.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from jobchat.application.common.interfaces import Command, CommandHandler
from jobchat.application.services.anchor_resolver import AnchorResolver
from jobchat.application.services.notification_dispatcher import (
    NotificationDispatcher,
)
from jobchat.application.services.participants import (
    ParticipantResolver,
    Participants,
)
from jobchat.domain.entities.message import Message
from jobchat.domain.entities.user import User
from jobchat.domain.exceptions import DomainValidationError, EntityNotFoundError
from jobchat.domain.ports.repositories import ApplicationRepository, UserRepository
from jobchat.domain.ports.unit_of_work import UnitOfWork, anchor_lock_key
from jobchat.domain.services.permission_guard import check_contact
from jobchat.domain.value_objects.actor import Actor
from jobchat.domain.value_objects.application_id import ApplicationId
from jobchat.domain.value_objects.job_id import JobId
from jobchat.domain.value_objects.user_id import UserId
from jobchat.observability.metrics import (
    record_message_sent,
    record_shell_application_created,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SendMessageCommand(Command[Message]):
    actor: Actor
    content: str
    receiver_id: Optional[UserId] = None
    application_id: Optional[ApplicationId] = None
    job_id: Optional[JobId] = None


class SendMessageHandler(CommandHandler[Message]):
    def __init__(
        self,
        uow: UnitOfWork,
        application_repository: ApplicationRepository,
        user_repository: UserRepository,
        participant_resolver: ParticipantResolver,
        anchor_resolver: AnchorResolver,
        notification_dispatcher: NotificationDispatcher,
    ):
        self._uow = uow
        self._application_repository = application_repository
        self._user_repository = user_repository
        self._participants = participant_resolver
        self._anchor_resolver = anchor_resolver
        self._dispatcher = notification_dispatcher

    async def execute(self, command: SendMessageCommand) -> Message:
        if not command.content or not command.content.strip():
            raise DomainValidationError("Message content cannot be empty.")
        if not command.receiver_id and not command.application_id:
            raise DomainValidationError(
                "Receiver ID/Application ID and content are required"
            )

        sender = command.actor
        participants: Optional[Participants] = None
        receiver_id = command.receiver_id
        if not receiver_id:
            application = await self._application_repository.get_by_id(
                command.application_id
            )
            if not application:
                raise EntityNotFoundError("Application not found")
            participants = await self._participants.for_application(application)
            receiver_id = participants.counterpart_of(sender.user_id)

        receiver = await self._user_repository.get_by_id(receiver_id)
        if not receiver:
            raise EntityNotFoundError(f"Receiver {receiver_id.value} not found")

        decision = check_contact(sender.role, receiver.role)

        if participants is None:
            sender_user = User(id=sender.user_id, role=sender.role, name=sender.name)
            participants = await self._participants.for_users(sender_user, receiver)

        lock_key = anchor_lock_key(participants.company.id, participants.job_seeker.id)
        async with self._uow.begin(lock_key=lock_key) as tx:
            anchor = await self._anchor_resolver.resolve(
                tx.applications,
                participants,
                decision,
                application_id=command.application_id,
                job_id=command.job_id,
            )
            message = Message.create(
                application_id=anchor.application.id,
                sender_id=sender.user_id,
                receiver_id=receiver.id,
                content=command.content,
            )
            await tx.messages.save(message)

        record_message_sent(sender.role.value)
        if anchor.created:
            record_shell_application_created()
        logger.info(
            f"[SendMessage] {sender.user_id.value} -> {receiver.id.value} "
            f"in application {message.application_id.value}"
        )

        await self._dispatcher.dispatch(message, sender, receiver)
        return message
