"""
Prisma Application Repository Implementation.

Mapping:
- Prisma: id, company_id, job_seeker_id, job_id (str) ←→ Domain value objects
- Prisma: status, created_at map directly

Participant filters go through the company / job_seeker relations, since an
Application stores profile ids and callers ask by user id.
"""

from typing import Optional
from prisma import Prisma
from prisma.models import Application as PrismaApplication
from jobchat.domain.entities.application import Application
from jobchat.domain.ports.repositories import ApplicationRepository
from jobchat.domain.value_objects.application_id import ApplicationId
from jobchat.domain.value_objects.company_id import CompanyId
from jobchat.domain.value_objects.job_id import JobId
from jobchat.domain.value_objects.job_seeker_id import JobSeekerId
from jobchat.domain.value_objects.user_id import UserId


class PrismaApplicationRepository(ApplicationRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaApplication) -> Application:
        """Map Prisma record to domain entity."""
        return Application(
            id=ApplicationId(record.id),
            company_id=CompanyId(record.company_id),
            job_seeker_id=JobSeekerId(record.job_seeker_id),
            job_id=JobId(record.job_id) if record.job_id else None,
            status=record.status,
            created_at=record.created_at,
        )

    async def get_by_id(self, application_id: ApplicationId) -> Optional[Application]:
        record = await self._prisma.application.find_unique(
            where={"id": application_id.value}
        )
        return self._to_entity(record) if record else None

    async def find_latest(
        self,
        company_id: CompanyId,
        job_seeker_id: JobSeekerId,
        job_id: Optional[JobId] = None,
    ) -> Optional[Application]:
        where = {"company_id": company_id.value, "job_seeker_id": job_seeker_id.value}
        if job_id:
            where["job_id"] = job_id.value
        record = await self._prisma.application.find_first(
            where=where, order={"created_at": "desc"}
        )
        return self._to_entity(record) if record else None

    async def list_for_participant(
        self,
        user_id: UserId,
        job_id: Optional[JobId] = None,
        application_id: Optional[ApplicationId] = None,
        job_seeker_user_id: Optional[UserId] = None,
    ) -> list[Application]:
        where: dict = {
            "OR": [
                {"company": {"is": {"user_id": user_id.value}}},
                {"job_seeker": {"is": {"user_id": user_id.value}}},
            ]
        }
        filters = []
        if job_id:
            filters.append({"job_id": job_id.value})
        if application_id:
            filters.append({"id": application_id.value})
        if job_seeker_user_id:
            filters.append({"job_seeker": {"is": {"user_id": job_seeker_user_id.value}}})
        if filters:
            where["AND"] = filters

        records = await self._prisma.application.find_many(
            where=where, order={"created_at": "desc"}
        )
        return [self._to_entity(record) for record in records]

    async def save(self, application: Application) -> None:
        """Create or update; only status can change after creation."""
        await self._prisma.application.upsert(
            where={"id": application.id.value},
            data={
                "create": {
                    "id": application.id.value,
                    "company_id": application.company_id.value,
                    "job_seeker_id": application.job_seeker_id.value,
                    "job_id": application.job_id.value if application.job_id else None,
                    "status": application.status,
                    "created_at": application.created_at,
                },
                "update": {
                    "status": application.status,
                },
            },
        )
