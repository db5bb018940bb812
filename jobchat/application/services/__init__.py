"""
Application services - orchestration shared by several handlers.

- participants.py            → resolve the two profiles behind a conversation
- anchor_resolver.py         → find-or-create the Application anchoring a message
- conversation_projector.py  → derive conversation list summaries from the message log
- notification_dispatcher.py → best-effort NEW_MESSAGE notifications
"""

from jobchat.application.services.participants import (
    Participants,
    ParticipantResolver,
)
from jobchat.application.services.anchor_resolver import AnchorResolver, AnchorResult
from jobchat.application.services.conversation_projector import (
    ConversationProjector,
    ConversationSummary,
    JobSummary,
    NO_MESSAGES_YET,
)
from jobchat.application.services.notification_dispatcher import (
    NotificationDispatcher,
)

__all__ = [
    "Participants",
    "ParticipantResolver",
    "AnchorResolver",
    "AnchorResult",
    "ConversationProjector",
    "ConversationSummary",
    "JobSummary",
    "NO_MESSAGES_YET",
    "NotificationDispatcher",
]
