"""
VALUE OBJECTS - Immutable, identity-less types

Frozen dataclasses that validate on construction and compare by value.
"""

from jobchat.domain.value_objects.user_id import UserId
from jobchat.domain.value_objects.actor import Actor
from jobchat.domain.value_objects.user_role import UserRole
from jobchat.domain.value_objects.application_id import ApplicationId
from jobchat.domain.value_objects.message_id import MessageId
from jobchat.domain.value_objects.notification_id import NotificationId
from jobchat.domain.value_objects.company_id import CompanyId
from jobchat.domain.value_objects.job_seeker_id import JobSeekerId
from jobchat.domain.value_objects.job_id import JobId
from jobchat.domain.value_objects.virtual_conversation_id import (
    VirtualConversationId,
)

__all__ = [
    "UserId",
    "Actor",
    "UserRole",
    "ApplicationId",
    "MessageId",
    "NotificationId",
    "CompanyId",
    "JobSeekerId",
    "JobId",
    "VirtualConversationId",
]
