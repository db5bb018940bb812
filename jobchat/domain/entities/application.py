"""
Application Entity - Links a company, a job seeker and optionally a job posting.

An Application is also the identity of a conversation: every message is
anchored to exactly one Application. Applications created by this core to
anchor cold outreach have no job and are called shell applications.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from jobchat.domain.value_objects.application_id import ApplicationId
from jobchat.domain.value_objects.company_id import CompanyId
from jobchat.domain.value_objects.job_id import JobId
from jobchat.domain.value_objects.job_seeker_id import JobSeekerId

DEFAULT_STATUS = "PENDING"


@dataclass
class Application:
    id: ApplicationId
    company_id: CompanyId
    job_seeker_id: JobSeekerId
    created_at: datetime
    job_id: Optional[JobId] = None
    status: str = DEFAULT_STATUS

    @classmethod
    def create_shell(
        cls,
        company_id: CompanyId,
        job_seeker_id: JobSeekerId,
        job_id: Optional[JobId] = None,
    ) -> Application:
        """Create an Application whose only purpose is to anchor a conversation."""
        return cls(
            id=ApplicationId(str(uuid4())),
            company_id=company_id,
            job_seeker_id=job_seeker_id,
            job_id=job_id,
            created_at=datetime.now(timezone.utc),
        )

    @property
    def is_shell(self) -> bool:
        return self.job_id is None

    def links(self, company_id: CompanyId, job_seeker_id: JobSeekerId) -> bool:
        return self.company_id == company_id and self.job_seeker_id == job_seeker_id
