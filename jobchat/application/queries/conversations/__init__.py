"""Conversation-related queries."""

from jobchat.application.queries.conversations.list_conversations import (
    ListConversationsQuery,
    ListConversationsHandler,
)
from jobchat.application.queries.conversations.open_conversation import (
    OpenConversationQuery,
    OpenConversationHandler,
    START_CONVERSATION,
)

__all__ = [
    "ListConversationsQuery",
    "ListConversationsHandler",
    "OpenConversationQuery",
    "OpenConversationHandler",
    "START_CONVERSATION",
]
