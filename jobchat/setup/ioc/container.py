"""
Dishka DI Container Setup.

Two kinds of providers:
- AppProvider: handlers and application services, storage agnostic
- a storage provider: PrismaProvider (prisma_provider.py) or InMemoryProvider,
  registering the repository ports and the UnitOfWork

Dishka concepts:
- Provider: Class that defines how to create dependencies
- @provide: Decorator to mark factory methods
- Scope: Lifecycle of dependency (APP = singleton, REQUEST = per-request)

Flow:
  Container → provides → InMemoryMessageRepository → to → SendMessageHandler
                                    ↓
                            uses MessageRepository interface
"""

from typing import Optional

from dishka import AsyncContainer, Provider, Scope, make_async_container, provide

from jobchat.application.commands.messages import (
    MarkConversationReadHandler,
    SendMessageHandler,
)
from jobchat.application.queries.conversations import (
    ListConversationsHandler,
    OpenConversationHandler,
)
from jobchat.application.queries.messages import GetThreadHandler
from jobchat.application.queries.notifications import ListNotificationsHandler
from jobchat.application.services import (
    AnchorResolver,
    ConversationProjector,
    NotificationDispatcher,
    ParticipantResolver,
)
from jobchat.config.settings import Config
from jobchat.domain.ports import UnitOfWork
from jobchat.domain.ports.repositories import (
    ApplicationRepository,
    JobRepository,
    MessageRepository,
    NotificationRepository,
    ProfileRepository,
    UserRepository,
)
from jobchat.infrastructure.memory import (
    InMemoryApplicationRepository,
    InMemoryJobRepository,
    InMemoryMessageRepository,
    InMemoryNotificationRepository,
    InMemoryProfileRepository,
    InMemoryStore,
    InMemoryUnitOfWork,
    InMemoryUserRepository,
)


class AppProvider(Provider):
    """
    Application dependency provider.

    Registers services and command/query handlers. Parameters ask for the
    abstract ports; whichever storage provider is installed resolves them.
    """

    # ==================== SERVICES ====================

    @provide(scope=Scope.REQUEST)
    def get_participant_resolver(
        self, profile_repository: ProfileRepository
    ) -> ParticipantResolver:
        return ParticipantResolver(profile_repository)

    @provide(scope=Scope.APP)
    def get_anchor_resolver(self) -> AnchorResolver:
        return AnchorResolver()

    @provide(scope=Scope.REQUEST)
    def get_conversation_projector(
        self,
        message_repository: MessageRepository,
        user_repository: UserRepository,
        job_repository: JobRepository,
        participant_resolver: ParticipantResolver,
    ) -> ConversationProjector:
        return ConversationProjector(
            message_repository=message_repository,
            user_repository=user_repository,
            job_repository=job_repository,
            participant_resolver=participant_resolver,
        )

    @provide(scope=Scope.REQUEST)
    def get_notification_dispatcher(
        self, notification_repository: NotificationRepository
    ) -> NotificationDispatcher:
        return NotificationDispatcher(notification_repository)

    # ==================== COMMAND HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_send_message_handler(
        self,
        uow: UnitOfWork,
        application_repository: ApplicationRepository,
        user_repository: UserRepository,
        participant_resolver: ParticipantResolver,
        anchor_resolver: AnchorResolver,
        notification_dispatcher: NotificationDispatcher,
    ) -> SendMessageHandler:
        return SendMessageHandler(
            uow=uow,
            application_repository=application_repository,
            user_repository=user_repository,
            participant_resolver=participant_resolver,
            anchor_resolver=anchor_resolver,
            notification_dispatcher=notification_dispatcher,
        )

    @provide(scope=Scope.REQUEST)
    def get_mark_read_handler(
        self,
        uow: UnitOfWork,
        application_repository: ApplicationRepository,
        participant_resolver: ParticipantResolver,
    ) -> MarkConversationReadHandler:
        return MarkConversationReadHandler(
            uow, application_repository, participant_resolver
        )

    # ==================== QUERY HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_list_conversations_handler(
        self,
        application_repository: ApplicationRepository,
        projector: ConversationProjector,
    ) -> ListConversationsHandler:
        return ListConversationsHandler(application_repository, projector)

    @provide(scope=Scope.REQUEST)
    def get_open_conversation_handler(
        self,
        application_repository: ApplicationRepository,
        user_repository: UserRepository,
        job_repository: JobRepository,
        projector: ConversationProjector,
    ) -> OpenConversationHandler:
        return OpenConversationHandler(
            application_repository, user_repository, job_repository, projector
        )

    @provide(scope=Scope.REQUEST)
    def get_thread_handler(
        self,
        application_repository: ApplicationRepository,
        message_repository: MessageRepository,
        participant_resolver: ParticipantResolver,
    ) -> GetThreadHandler:
        return GetThreadHandler(
            application_repository, message_repository, participant_resolver
        )

    @provide(scope=Scope.REQUEST)
    def get_list_notifications_handler(
        self, notification_repository: NotificationRepository
    ) -> ListNotificationsHandler:
        return ListNotificationsHandler(notification_repository)


class InMemoryProvider(Provider):
    """Storage provider backed by a process-local InMemoryStore."""

    def __init__(self, store: Optional[InMemoryStore] = None):
        super().__init__()
        self._store = store or InMemoryStore()

    @provide(scope=Scope.APP)
    def get_store(self) -> InMemoryStore:
        return self._store

    @provide(scope=Scope.APP)
    def get_unit_of_work(self, store: InMemoryStore) -> UnitOfWork:
        return InMemoryUnitOfWork(store)

    @provide(scope=Scope.REQUEST)
    def get_application_repository(self, store: InMemoryStore) -> ApplicationRepository:
        return InMemoryApplicationRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_message_repository(self, store: InMemoryStore) -> MessageRepository:
        return InMemoryMessageRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_notification_repository(
        self, store: InMemoryStore
    ) -> NotificationRepository:
        return InMemoryNotificationRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, store: InMemoryStore) -> UserRepository:
        return InMemoryUserRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_profile_repository(self, store: InMemoryStore) -> ProfileRepository:
        return InMemoryProfileRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_job_repository(self, store: InMemoryStore) -> JobRepository:
        return InMemoryJobRepository(store)


def storage_provider(backend: Optional[str] = None) -> Provider:
    """Storage provider for the configured backend."""
    backend = (backend or Config.STORAGE_BACKEND).lower()
    if backend == "memory":
        return InMemoryProvider()
    if backend == "prisma":
        # Imported here so the memory backend never needs a generated Prisma client
        from jobchat.setup.ioc.prisma_provider import PrismaProvider

        return PrismaProvider()
    raise ValueError(f"Unknown STORAGE_BACKEND: {backend!r}")


def create_container(storage: Optional[Provider] = None) -> AsyncContainer:
    """
    Create and configure the DI container.

    - make_async_container() creates the container with all providers
    - Call this ONCE at app startup
    """
    return make_async_container(AppProvider(), storage or storage_provider())
