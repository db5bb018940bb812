"""
Prisma read-only repositories for data owned by the marketplace:
users, company / job seeker profiles and job postings.
"""

from typing import Optional
from prisma import Prisma
from jobchat.domain.entities.company_profile import CompanyProfile
from jobchat.domain.entities.job_posting import JobPosting
from jobchat.domain.entities.job_seeker_profile import JobSeekerProfile
from jobchat.domain.entities.user import User
from jobchat.domain.ports.repositories import (
    JobRepository,
    ProfileRepository,
    UserRepository,
)
from jobchat.domain.value_objects.company_id import CompanyId
from jobchat.domain.value_objects.job_id import JobId
from jobchat.domain.value_objects.job_seeker_id import JobSeekerId
from jobchat.domain.value_objects.user_id import UserId


class PrismaUserRepository(UserRepository):
    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        record = await self._prisma.user.find_unique(where={"id": user_id.value})
        if not record:
            return None
        return User(
            id=UserId(record.id),
            role=record.role,
            name=record.name,
            image=record.image,
            email=record.email,
        )


class PrismaProfileRepository(ProfileRepository):
    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    @staticmethod
    def _company(record) -> CompanyProfile:
        return CompanyProfile(
            id=CompanyId(record.id),
            user_id=UserId(record.user_id),
            name=record.name,
            logo_url=record.logo_url,
        )

    @staticmethod
    def _job_seeker(record) -> JobSeekerProfile:
        return JobSeekerProfile(
            id=JobSeekerId(record.id), user_id=UserId(record.user_id)
        )

    async def get_company(self, company_id: CompanyId) -> Optional[CompanyProfile]:
        record = await self._prisma.company.find_unique(where={"id": company_id.value})
        return self._company(record) if record else None

    async def get_company_by_user(self, user_id: UserId) -> Optional[CompanyProfile]:
        record = await self._prisma.company.find_unique(
            where={"user_id": user_id.value}
        )
        return self._company(record) if record else None

    async def get_job_seeker(
        self, job_seeker_id: JobSeekerId
    ) -> Optional[JobSeekerProfile]:
        record = await self._prisma.jobseeker.find_unique(
            where={"id": job_seeker_id.value}
        )
        return self._job_seeker(record) if record else None

    async def get_job_seeker_by_user(
        self, user_id: UserId
    ) -> Optional[JobSeekerProfile]:
        record = await self._prisma.jobseeker.find_unique(
            where={"user_id": user_id.value}
        )
        return self._job_seeker(record) if record else None


class PrismaJobRepository(JobRepository):
    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    async def get_by_id(self, job_id: JobId) -> Optional[JobPosting]:
        record = await self._prisma.job.find_unique(where={"id": job_id.value})
        if not record:
            return None
        return JobPosting(
            id=JobId(record.id),
            company_id=CompanyId(record.company_id),
            title=record.title,
            status=record.status,
            application_deadline=record.application_deadline,
        )
