"""Message DTOs for API request/response."""

from datetime import datetime

from jobchat.application.dto.base import CamelModel
from jobchat.domain.entities.message import Message


class MessageDTO(CamelModel):
    """DTO for message data returned to the dashboard."""

    id: str
    application_id: str
    sender_id: str
    receiver_id: str
    content: str
    read: bool
    created_at: datetime

    @classmethod
    def from_entity(cls, message: Message) -> "MessageDTO":
        return cls(
            id=message.id.value,
            application_id=message.application_id.value,
            sender_id=message.sender_id.value,
            receiver_id=message.receiver_id.value,
            content=message.content,
            read=message.read,
            created_at=message.created_at,
        )
