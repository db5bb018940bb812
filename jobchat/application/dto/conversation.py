"""Conversation DTOs for API request/response."""

from datetime import datetime
from typing import Optional

from jobchat.application.dto.base import CamelModel
from jobchat.application.services.conversation_projector import (
    ConversationSummary,
    JobSummary,
)


class JobSummaryDTO(CamelModel):
    id: Optional[str] = None
    title: str
    status: Optional[str] = None
    application_deadline: Optional[datetime] = None

    @classmethod
    def from_summary(cls, job: JobSummary) -> "JobSummaryDTO":
        return cls(
            id=job.id,
            title=job.title,
            status=job.status,
            application_deadline=job.application_deadline,
        )


class ConversationDTO(CamelModel):
    """
    One entry of the conversation list.

    {
        "id": "<applicationId or virtual-...>",
        "counterpartyUserId": "...",
        "jobSeekerUserId": "...",
        "counterpartyName": "Ada",
        "counterpartyImage": "https://...",
        "counterpartyRole": "job-seeker",
        "lastMessage": "Hello",
        "timestamp": "2025-01-27T12:00:00Z",
        "unreadCount": 1,
        "job": {"id": "...", "title": "...", "status": "...", "applicationDeadline": null}
    }
    """

    id: str
    counterparty_user_id: str
    job_seeker_user_id: str
    counterparty_name: Optional[str] = None
    counterparty_image: Optional[str] = None
    counterparty_role: str
    last_message: str
    timestamp: Optional[datetime] = None
    unread_count: int
    job: Optional[JobSummaryDTO] = None

    @classmethod
    def from_summary(cls, summary: ConversationSummary) -> "ConversationDTO":
        return cls(
            id=summary.id,
            counterparty_user_id=summary.counterparty_user_id,
            job_seeker_user_id=summary.job_seeker_user_id,
            counterparty_name=summary.counterparty_name,
            counterparty_image=summary.counterparty_image,
            counterparty_role=summary.counterparty_role,
            last_message=summary.last_message,
            timestamp=summary.timestamp,
            unread_count=summary.unread_count,
            job=JobSummaryDTO.from_summary(summary.job) if summary.job else None,
        )
