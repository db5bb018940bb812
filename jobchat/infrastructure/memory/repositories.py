"""
In-memory repository implementations.

Entities are copied on the way in and out so callers never hold a reference
into the store. Writes made inside a unit of work register an undo step so
the unit of work can roll them back.
"""

from dataclasses import replace
from typing import Callable, Optional

from jobchat.domain.entities.application import Application
from jobchat.domain.entities.company_profile import CompanyProfile
from jobchat.domain.entities.job_posting import JobPosting
from jobchat.domain.entities.job_seeker_profile import JobSeekerProfile
from jobchat.domain.entities.message import Message
from jobchat.domain.entities.notification import Notification, NotificationType
from jobchat.domain.entities.user import User
from jobchat.domain.ports.repositories import (
    ApplicationRepository,
    JobRepository,
    MessageRepository,
    NotificationRepository,
    ProfileRepository,
    UserRepository,
)
from jobchat.domain.services.dashboard_routes import conversation_link_marker
from jobchat.domain.value_objects.application_id import ApplicationId
from jobchat.domain.value_objects.company_id import CompanyId
from jobchat.domain.value_objects.job_id import JobId
from jobchat.domain.value_objects.job_seeker_id import JobSeekerId
from jobchat.domain.value_objects.user_id import UserId
from jobchat.infrastructure.memory.store import InMemoryStore

UndoLog = list[Callable[[], None]]


class _StoreRepository:
    def __init__(self, store: InMemoryStore, undo_log: Optional[UndoLog] = None):
        self._store = store
        self._undo_log = undo_log

    def _on_rollback(self, step: Callable[[], None]) -> None:
        if self._undo_log is not None:
            self._undo_log.append(step)


class InMemoryApplicationRepository(_StoreRepository, ApplicationRepository):
    async def get_by_id(self, application_id: ApplicationId) -> Optional[Application]:
        application = self._store.applications.get(application_id)
        return replace(application) if application else None

    async def find_latest(
        self,
        company_id: CompanyId,
        job_seeker_id: JobSeekerId,
        job_id: Optional[JobId] = None,
    ) -> Optional[Application]:
        candidates = [
            a
            for a in self._store.applications.values()
            if a.links(company_id, job_seeker_id) and (not job_id or a.job_id == job_id)
        ]
        if not candidates:
            return None
        return replace(max(candidates, key=lambda a: a.created_at))

    async def list_for_participant(
        self,
        user_id: UserId,
        job_id: Optional[JobId] = None,
        application_id: Optional[ApplicationId] = None,
        job_seeker_user_id: Optional[UserId] = None,
    ) -> list[Application]:
        companies = {c.id for c in self._store.companies.values() if c.user_id == user_id}
        job_seekers = {
            j.id for j in self._store.job_seekers.values() if j.user_id == user_id
        }
        if job_seeker_user_id:
            narrowed = {
                j.id
                for j in self._store.job_seekers.values()
                if j.user_id == job_seeker_user_id
            }
        else:
            narrowed = None

        results = []
        for application in self._store.applications.values():
            if (
                application.company_id not in companies
                and application.job_seeker_id not in job_seekers
            ):
                continue
            if job_id and application.job_id != job_id:
                continue
            if application_id and application.id != application_id:
                continue
            if narrowed is not None and application.job_seeker_id not in narrowed:
                continue
            results.append(replace(application))
        results.sort(key=lambda a: a.created_at, reverse=True)
        return results

    async def save(self, application: Application) -> None:
        previous = self._store.applications.get(application.id)
        self._store.applications[application.id] = replace(application)

        def undo():
            if previous is None:
                self._store.applications.pop(application.id, None)
            else:
                self._store.applications[application.id] = previous

        self._on_rollback(undo)


class InMemoryMessageRepository(_StoreRepository, MessageRepository):
    def _thread(self, application_id: ApplicationId) -> list[Message]:
        # sorted() is stable, so equal timestamps keep insertion order
        return sorted(
            (m for m in self._store.messages if m.application_id == application_id),
            key=lambda m: m.created_at,
        )

    async def get_by_application(self, application_id: ApplicationId) -> list[Message]:
        return [replace(m) for m in self._thread(application_id)]

    async def get_latest(self, application_id: ApplicationId) -> Optional[Message]:
        thread = self._thread(application_id)
        return replace(thread[-1]) if thread else None

    async def count_unread(
        self, application_id: ApplicationId, receiver_id: UserId
    ) -> int:
        return sum(
            1
            for m in self._store.messages
            if m.application_id == application_id
            and m.receiver_id == receiver_id
            and not m.read
        )

    async def save(self, message: Message) -> None:
        stored = replace(message)
        self._store.messages.append(stored)
        self._on_rollback(lambda: self._store.messages.remove(stored))

    async def mark_read(self, application_id: ApplicationId, receiver_id: UserId) -> int:
        flipped = []
        for message in self._store.messages:
            if message.application_id == application_id and message.receiver_id == receiver_id:
                if message.mark_read(receiver_id):
                    flipped.append(message)

        def undo():
            for message in flipped:
                message.read = False

        self._on_rollback(undo)
        return len(flipped)


class InMemoryNotificationRepository(_StoreRepository, NotificationRepository):
    async def save(self, notification: Notification) -> None:
        stored = replace(notification)
        self._store.notifications.append(stored)
        self._on_rollback(lambda: self._store.notifications.remove(stored))

    async def get_by_user(
        self, user_id: UserId, unread_only: bool = False, limit: int = 50
    ) -> list[Notification]:
        matches = [
            n
            for n in self._store.notifications
            if n.user_id == user_id and not (unread_only and n.read)
        ]
        matches.sort(key=lambda n: n.created_at, reverse=True)
        return [replace(n) for n in matches[:limit]]

    async def mark_read_for_conversation(
        self, user_id: UserId, application_id: ApplicationId
    ) -> int:
        marker = conversation_link_marker(application_id)
        flipped = [
            n
            for n in self._store.notifications
            if n.user_id == user_id
            and n.type == NotificationType.NEW_MESSAGE
            and not n.read
            and n.link.endswith(marker)
        ]
        for notification in flipped:
            notification.read = True

        def undo():
            for notification in flipped:
                notification.read = False

        self._on_rollback(undo)
        return len(flipped)


class InMemoryUserRepository(_StoreRepository, UserRepository):
    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        user = self._store.users.get(user_id)
        return replace(user) if user else None


class InMemoryProfileRepository(_StoreRepository, ProfileRepository):
    async def get_company(self, company_id: CompanyId) -> Optional[CompanyProfile]:
        return self._store.companies.get(company_id)

    async def get_company_by_user(self, user_id: UserId) -> Optional[CompanyProfile]:
        return next(
            (c for c in self._store.companies.values() if c.user_id == user_id), None
        )

    async def get_job_seeker(
        self, job_seeker_id: JobSeekerId
    ) -> Optional[JobSeekerProfile]:
        return self._store.job_seekers.get(job_seeker_id)

    async def get_job_seeker_by_user(
        self, user_id: UserId
    ) -> Optional[JobSeekerProfile]:
        return next(
            (j for j in self._store.job_seekers.values() if j.user_id == user_id), None
        )


class InMemoryJobRepository(_StoreRepository, JobRepository):
    async def get_by_id(self, job_id: JobId) -> Optional[JobPosting]:
        return self._store.jobs.get(job_id)
