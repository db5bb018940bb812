"""
Message Entity - A single message in a conversation.

Messages are append-only. The only state change is the read flag, and only
the receiver may flip it.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import uuid4
from jobchat.domain.exceptions.access_denied import AccessDeniedError
from jobchat.domain.exceptions.validation_error import DomainValidationError
from jobchat.domain.value_objects.application_id import ApplicationId
from jobchat.domain.value_objects.message_id import MessageId
from jobchat.domain.value_objects.user_id import UserId


@dataclass
class Message:
    id: MessageId
    application_id: ApplicationId
    sender_id: UserId
    receiver_id: UserId
    content: str
    created_at: datetime
    read: bool = False

    @classmethod
    def create(
        cls,
        application_id: ApplicationId,
        sender_id: UserId,
        receiver_id: UserId,
        content: str,
    ) -> Message:
        """Factory method to create a new unread Message with a generated ID and timestamp."""
        if not content or not content.strip():
            raise DomainValidationError("Message content cannot be empty.")
        if sender_id == receiver_id:
            raise DomainValidationError("Sender and receiver must be different users.")
        return cls(
            id=MessageId(str(uuid4())),
            application_id=application_id,
            sender_id=sender_id,
            receiver_id=receiver_id,
            content=content,
            created_at=datetime.now(timezone.utc),
            read=False,
        )

    def is_addressed_to(self, user_id: UserId) -> bool:
        return self.receiver_id == user_id

    def mark_read(self, reader_id: UserId) -> bool:
        """Flip the read flag. Returns True only if the state changed."""
        if not self.is_addressed_to(reader_id):
            raise AccessDeniedError("Only the receiver can mark a message as read.")
        if self.read:
            return False
        self.read = True
        return True
