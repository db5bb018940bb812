import asyncio

import pytest

from jobchat.application.commands.messages import (
    MarkConversationReadCommand,
    MarkConversationReadHandler,
    SendMessageCommand,
    SendMessageHandler,
)
from jobchat.application.services import (
    AnchorResolver,
    NotificationDispatcher,
    ParticipantResolver,
)
from jobchat.domain.entities.notification import NotificationType
from jobchat.domain.exceptions import (
    AccessDeniedError,
    DomainValidationError,
    EntityNotFoundError,
)
from jobchat.domain.ports.repositories import NotificationRepository
from jobchat.infrastructure.memory import (
    InMemoryApplicationRepository,
    InMemoryMessageRepository,
    InMemoryNotificationRepository,
    InMemoryProfileRepository,
    InMemoryUnitOfWork,
    InMemoryUserRepository,
)


class BrokenNotificationRepository(NotificationRepository):
    async def save(self, notification):
        raise RuntimeError("notification store down")

    async def get_by_user(self, user_id, unread_only=False, limit=50):
        return []

    async def mark_read_for_conversation(self, user_id, application_id):
        return 0


def send_handler(store, notifications=None):
    return SendMessageHandler(
        uow=InMemoryUnitOfWork(store),
        application_repository=InMemoryApplicationRepository(store),
        user_repository=InMemoryUserRepository(store),
        participant_resolver=ParticipantResolver(InMemoryProfileRepository(store)),
        anchor_resolver=AnchorResolver(),
        notification_dispatcher=NotificationDispatcher(
            notifications or InMemoryNotificationRepository(store)
        ),
    )


def mark_read_handler(store):
    return MarkConversationReadHandler(
        InMemoryUnitOfWork(store),
        InMemoryApplicationRepository(store),
        ParticipantResolver(InMemoryProfileRepository(store)),
    )


@pytest.mark.asyncio
async def test_first_contact_creates_anchor_message_and_notification(world):
    receiver = world.user(world.job_seeker)

    message = await send_handler(world.store).execute(
        SendMessageCommand(
            actor=world.actor(world.company), content="Hello", receiver_id=receiver.id
        )
    )

    application = world.store.applications[message.application_id]
    assert application.job_id is None
    assert not message.read
    assert message.receiver_id == receiver.id
    [notification] = world.store.notifications
    assert notification.user_id == receiver.id
    assert notification.type == NotificationType.NEW_MESSAGE
    assert notification.message == "You have a new message from Acme."
    assert notification.link == (
        f"/dashboard/job-seeker/messages?conversationId={application.id.value}"
    )


@pytest.mark.asyncio
async def test_concurrent_first_sends_share_one_application(world, monkeypatch):
    original = InMemoryApplicationRepository.find_latest

    async def slow_find_latest(self, *args, **kwargs):
        # Yield so the two sends interleave between lookup and create
        await asyncio.sleep(0)
        return await original(self, *args, **kwargs)

    monkeypatch.setattr(InMemoryApplicationRepository, "find_latest", slow_find_latest)
    receiver_id = world.user(world.job_seeker).id
    sender = world.actor(world.company)

    messages = await asyncio.gather(
        *(
            send_handler(world.store).execute(
                SendMessageCommand(actor=sender, content=f"Hello {i}", receiver_id=receiver_id)
            )
            for i in range(5)
        )
    )

    assert len(world.store.applications) == 1
    assert len({m.application_id for m in messages}) == 1
    assert len(world.store.messages) == 5


@pytest.mark.asyncio
async def test_reply_by_application_id_resolves_counterpart(world):
    application = world.store.add_application(world.company, world.job_seeker, world.job)
    world.store.add_message(
        application,
        world.company.user_id,
        world.job_seeker.user_id,
        "Are you available?",
    )

    reply = await send_handler(world.store).execute(
        SendMessageCommand(
            actor=world.actor(world.job_seeker),
            content="Yes",
            application_id=application.id,
        )
    )

    assert reply.application_id == application.id
    assert reply.receiver_id == world.company.user_id
    [notification] = world.store.notifications
    assert notification.link.startswith("/dashboard/company/messages")


@pytest.mark.asyncio
async def test_job_seeker_cannot_cold_message_company(world):
    with pytest.raises(AccessDeniedError):
        await send_handler(world.store).execute(
            SendMessageCommand(
                actor=world.actor(world.other_job_seeker),
                content="Hire me",
                receiver_id=world.company.user_id,
            )
        )
    assert world.store.applications == {}
    assert world.store.messages == []
    assert world.store.notifications == []


@pytest.mark.asyncio
async def test_same_role_is_rejected(world):
    with pytest.raises(AccessDeniedError, match="Companies cannot message"):
        await send_handler(world.store).execute(
            SendMessageCommand(
                actor=world.actor(world.company),
                content="Hi",
                receiver_id=world.other_company.user_id,
            )
        )


@pytest.mark.asyncio
async def test_non_participant_cannot_post_into_application(world):
    application = world.store.add_application(world.company, world.job_seeker)

    with pytest.raises(AccessDeniedError):
        await send_handler(world.store).execute(
            SendMessageCommand(
                actor=world.actor(world.other_job_seeker),
                content="Hi",
                application_id=application.id,
            )
        )


@pytest.mark.asyncio
async def test_requires_content_and_counterpart(world):
    handler = send_handler(world.store)
    with pytest.raises(DomainValidationError):
        await handler.execute(
            SendMessageCommand(
                actor=world.actor(world.company),
                content="  ",
                receiver_id=world.job_seeker.user_id,
            )
        )
    with pytest.raises(DomainValidationError):
        await handler.execute(
            SendMessageCommand(actor=world.actor(world.company), content="Hello")
        )


@pytest.mark.asyncio
async def test_unknown_receiver(world, stranger_id):
    with pytest.raises(EntityNotFoundError):
        await send_handler(world.store).execute(
            SendMessageCommand(
                actor=world.actor(world.company), content="Hi", receiver_id=stranger_id
            )
        )


@pytest.mark.asyncio
async def test_notification_failure_does_not_fail_send(world):
    handler = send_handler(world.store, notifications=BrokenNotificationRepository())

    message = await handler.execute(
        SendMessageCommand(
            actor=world.actor(world.company),
            content="Hello",
            receiver_id=world.job_seeker.user_id,
        )
    )

    assert world.store.messages[0].id == message.id
    assert world.store.notifications == []


@pytest.mark.asyncio
async def test_mark_read_is_idempotent_and_clears_notifications(world):
    message = await send_handler(world.store).execute(
        SendMessageCommand(
            actor=world.actor(world.company),
            content="Hello",
            receiver_id=world.job_seeker.user_id,
        )
    )
    command = MarkConversationReadCommand(
        actor=world.actor(world.job_seeker), application_id=message.application_id
    )

    assert await mark_read_handler(world.store).execute(command) == 1
    assert await mark_read_handler(world.store).execute(command) == 0
    assert all(m.read for m in world.store.messages)
    assert all(n.read for n in world.store.notifications)


@pytest.mark.asyncio
async def test_sender_marking_read_changes_nothing(world):
    message = await send_handler(world.store).execute(
        SendMessageCommand(
            actor=world.actor(world.company),
            content="Hello",
            receiver_id=world.job_seeker.user_id,
        )
    )

    marked = await mark_read_handler(world.store).execute(
        MarkConversationReadCommand(
            actor=world.actor(world.company), application_id=message.application_id
        )
    )

    assert marked == 0
    assert not world.store.messages[0].read


@pytest.mark.asyncio
async def test_outsider_cannot_mark_read(world):
    application = world.store.add_application(world.company, world.job_seeker)

    with pytest.raises(AccessDeniedError):
        await mark_read_handler(world.store).execute(
            MarkConversationReadCommand(
                actor=world.actor(world.other_job_seeker), application_id=application.id
            )
        )
