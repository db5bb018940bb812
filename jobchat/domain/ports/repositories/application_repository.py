"""
Application Repository Port - Interface for application (conversation anchor) persistence.
Implementation: jobchat/infrastructure/persistence/prisma_application_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional

from jobchat.domain.entities.application import Application
from jobchat.domain.value_objects.application_id import ApplicationId
from jobchat.domain.value_objects.company_id import CompanyId
from jobchat.domain.value_objects.job_id import JobId
from jobchat.domain.value_objects.job_seeker_id import JobSeekerId
from jobchat.domain.value_objects.user_id import UserId


class ApplicationRepository(ABC):
    @abstractmethod
    async def get_by_id(self, application_id: ApplicationId) -> Optional[Application]: ...

    @abstractmethod
    async def find_latest(
        self,
        company_id: CompanyId,
        job_seeker_id: JobSeekerId,
        job_id: Optional[JobId] = None,
    ) -> Optional[Application]:
        """Most recent application for the pair; narrowed to job_id when given."""
        ...

    @abstractmethod
    async def list_for_participant(
        self,
        user_id: UserId,
        job_id: Optional[JobId] = None,
        application_id: Optional[ApplicationId] = None,
        job_seeker_user_id: Optional[UserId] = None,
    ) -> list[Application]:
        """Applications where user_id owns either the company or the job seeker profile."""
        ...

    @abstractmethod
    async def save(self, application: Application) -> None: ...
