"""
DTOs - Data Transfer Objects

DTOs for transferring data between layers:
- message.py      → MessageDTO
- conversation.py → ConversationDTO, JobSummaryDTO
- notification.py → NotificationDTO

Note: These are different from domain entities.
DTOs are for API input/output, entities are for business logic.
Field names are snake_case in Python and camelCase on the wire.
"""

from jobchat.application.dto.message import MessageDTO
from jobchat.application.dto.conversation import ConversationDTO, JobSummaryDTO
from jobchat.application.dto.notification import NotificationDTO

__all__ = [
    "MessageDTO",
    "ConversationDTO",
    "JobSummaryDTO",
    "NotificationDTO",
]
