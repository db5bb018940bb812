"""
Profile Repository Port - Read access to company and job seeker profiles.
Implementation: jobchat/infrastructure/persistence/prisma_directory_repositories.py
"""

from abc import ABC, abstractmethod
from typing import Optional
from jobchat.domain.entities.company_profile import CompanyProfile
from jobchat.domain.entities.job_seeker_profile import JobSeekerProfile
from jobchat.domain.value_objects.company_id import CompanyId
from jobchat.domain.value_objects.job_seeker_id import JobSeekerId
from jobchat.domain.value_objects.user_id import UserId


class ProfileRepository(ABC):
    @abstractmethod
    async def get_company(self, company_id: CompanyId) -> Optional[CompanyProfile]: ...

    @abstractmethod
    async def get_company_by_user(self, user_id: UserId) -> Optional[CompanyProfile]: ...

    @abstractmethod
    async def get_job_seeker(
        self, job_seeker_id: JobSeekerId
    ) -> Optional[JobSeekerProfile]: ...

    @abstractmethod
    async def get_job_seeker_by_user(
        self, user_id: UserId
    ) -> Optional[JobSeekerProfile]: ...
