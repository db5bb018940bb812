"""
In-memory store - plain dicts and lists behind the in-memory repositories.

The seeding helpers stand in for the marketplace, which owns users,
profiles and jobs in production.
"""

import asyncio
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from jobchat.domain.entities.application import Application
from jobchat.domain.entities.company_profile import CompanyProfile
from jobchat.domain.entities.job_posting import JobPosting
from jobchat.domain.entities.job_seeker_profile import JobSeekerProfile
from jobchat.domain.entities.message import Message
from jobchat.domain.entities.notification import Notification
from jobchat.domain.entities.user import User
from jobchat.domain.value_objects.application_id import ApplicationId
from jobchat.domain.value_objects.company_id import CompanyId
from jobchat.domain.value_objects.job_id import JobId
from jobchat.domain.value_objects.job_seeker_id import JobSeekerId
from jobchat.domain.value_objects.message_id import MessageId
from jobchat.domain.value_objects.user_id import UserId
from jobchat.domain.value_objects.user_role import UserRole


def _new_id() -> str:
    return str(uuid4())


class InMemoryStore:
    def __init__(self):
        self.users: dict[UserId, User] = {}
        self.companies: dict[CompanyId, CompanyProfile] = {}
        self.job_seekers: dict[JobSeekerId, JobSeekerProfile] = {}
        self.jobs: dict[JobId, JobPosting] = {}
        self.applications: dict[ApplicationId, Application] = {}
        self.messages: list[Message] = []
        self.notifications: list[Notification] = []
        self._locks: dict[str, asyncio.Lock] = {}

    def lock_for(self, key: str) -> asyncio.Lock:
        lock = self._locks.get(key)
        if lock is None:
            lock = self._locks[key] = asyncio.Lock()
        return lock

    # ==================== SEEDING ====================

    def add_company(
        self,
        name: Optional[str] = None,
        image: Optional[str] = None,
        logo_url: Optional[str] = None,
        email: Optional[str] = None,
    ) -> CompanyProfile:
        """Create a COMPANY user together with its company profile."""
        user = User(
            id=UserId(_new_id()),
            role=UserRole.COMPANY,
            name=name,
            image=image,
            email=email,
        )
        self.users[user.id] = user
        company = CompanyProfile(
            id=CompanyId(_new_id()), user_id=user.id, name=name, logo_url=logo_url
        )
        self.companies[company.id] = company
        return company

    def add_job_seeker(
        self,
        name: Optional[str] = None,
        image: Optional[str] = None,
        email: Optional[str] = None,
    ) -> JobSeekerProfile:
        """Create a JOB_SEEKER user together with its job seeker profile."""
        user = User(
            id=UserId(_new_id()),
            role=UserRole.JOB_SEEKER,
            name=name,
            image=image,
            email=email,
        )
        self.users[user.id] = user
        job_seeker = JobSeekerProfile(id=JobSeekerId(_new_id()), user_id=user.id)
        self.job_seekers[job_seeker.id] = job_seeker
        return job_seeker

    def add_user(self, role: UserRole, name: Optional[str] = None) -> User:
        """A user without any profile."""
        user = User(id=UserId(_new_id()), role=role, name=name)
        self.users[user.id] = user
        return user

    def add_job(
        self,
        company: CompanyProfile,
        title: str,
        status: str = "ACTIVE",
        application_deadline: Optional[datetime] = None,
    ) -> JobPosting:
        job = JobPosting(
            id=JobId(_new_id()),
            company_id=company.id,
            title=title,
            status=status,
            application_deadline=application_deadline,
        )
        self.jobs[job.id] = job
        return job

    def add_application(
        self,
        company: CompanyProfile,
        job_seeker: JobSeekerProfile,
        job: Optional[JobPosting] = None,
        created_at: Optional[datetime] = None,
    ) -> Application:
        application = Application(
            id=ApplicationId(_new_id()),
            company_id=company.id,
            job_seeker_id=job_seeker.id,
            job_id=job.id if job else None,
            created_at=created_at or datetime.now(timezone.utc),
        )
        self.applications[application.id] = application
        return application

    def add_message(
        self,
        application: Application,
        sender_id: UserId,
        receiver_id: UserId,
        content: str,
        created_at: Optional[datetime] = None,
        read: bool = False,
    ) -> Message:
        message = Message(
            id=MessageId(_new_id()),
            application_id=application.id,
            sender_id=sender_id,
            receiver_id=receiver_id,
            content=content,
            created_at=created_at or datetime.now(timezone.utc),
            read=read,
        )
        self.messages.append(message)
        return message
