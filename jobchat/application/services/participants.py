"""
Participant resolution - maps users to the profiles an Application links.

An Application stores profile ids (company, job seeker) while messages and
the identity provider speak in user ids. Every conversation rule that asks
"is this user part of the conversation" goes through here.
"""

from dataclasses import dataclass

from jobchat.domain.entities.application import Application
from jobchat.domain.entities.company_profile import CompanyProfile
from jobchat.domain.entities.job_seeker_profile import JobSeekerProfile
from jobchat.domain.entities.user import User
from jobchat.domain.exceptions import AccessDeniedError, EntityNotFoundError
from jobchat.domain.ports.repositories import ProfileRepository
from jobchat.domain.value_objects.user_id import UserId
from jobchat.domain.value_objects.user_role import UserRole


@dataclass(frozen=True)
class Participants:
    company: CompanyProfile
    job_seeker: JobSeekerProfile

    def includes(self, user_id: UserId) -> bool:
        return user_id in (self.company.user_id, self.job_seeker.user_id)

    def counterpart_of(self, user_id: UserId) -> UserId:
        if user_id == self.job_seeker.user_id:
            return self.company.user_id
        if user_id == self.company.user_id:
            return self.job_seeker.user_id
        raise AccessDeniedError("You are not a participant of this conversation.")

    def user_for(self, role: UserRole) -> UserId:
        if role == UserRole.COMPANY:
            return self.company.user_id
        return self.job_seeker.user_id


class ParticipantResolver:
    def __init__(self, profile_repository: ProfileRepository):
        self._profile_repository = profile_repository

    async def for_application(self, application: Application) -> Participants:
        company = await self._profile_repository.get_company(application.company_id)
        job_seeker = await self._profile_repository.get_job_seeker(
            application.job_seeker_id
        )
        if not company or not job_seeker:
            raise EntityNotFoundError(
                f"Could not find associated company or job seeker profile "
                f"for application {application.id.value}."
            )
        return Participants(company=company, job_seeker=job_seeker)

    async def for_users(self, first: User, second: User) -> Participants:
        """
        Resolve profiles for a company user and a job seeker user, in any order.

        Raises:
            EntityNotFoundError: If either side has no profile
        """
        company_user, job_seeker_user = (
            (first, second) if first.role == UserRole.COMPANY else (second, first)
        )
        company = await self._profile_repository.get_company_by_user(company_user.id)
        job_seeker = await self._profile_repository.get_job_seeker_by_user(
            job_seeker_user.id
        )
        if not company or not job_seeker:
            raise EntityNotFoundError(
                "Could not find associated company or job seeker profile "
                "to create or find an application."
            )
        return Participants(company=company, job_seeker=job_seeker)

    async def require_participant(
        self, application: Application, user_id: UserId
    ) -> Participants:
        participants = await self.for_application(application)
        if not participants.includes(user_id):
            raise AccessDeniedError("You don't have access to this conversation")
        return participants
