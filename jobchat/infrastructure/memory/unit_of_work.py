"""
In-memory Unit of Work.

The anchor lock is an asyncio.Lock per key, held for the whole scope.
Rollback replays the undo steps the repositories registered, newest first.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from jobchat.domain.ports.unit_of_work import TransactionScope, UnitOfWork
from jobchat.infrastructure.memory.repositories import (
    InMemoryApplicationRepository,
    InMemoryMessageRepository,
    InMemoryNotificationRepository,
    UndoLog,
)
from jobchat.infrastructure.memory.store import InMemoryStore

logger = logging.getLogger(__name__)


class InMemoryUnitOfWork(UnitOfWork):
    def __init__(self, store: InMemoryStore):
        self._store = store

    @asynccontextmanager
    async def begin(
        self, lock_key: Optional[str] = None
    ) -> AsyncIterator[TransactionScope]:
        if lock_key:
            async with self._store.lock_for(lock_key):
                async with self._transaction() as scope:
                    yield scope
        else:
            async with self._transaction() as scope:
                yield scope

    @asynccontextmanager
    async def _transaction(self) -> AsyncIterator[TransactionScope]:
        undo_log: UndoLog = []
        scope = TransactionScope(
            applications=InMemoryApplicationRepository(self._store, undo_log),
            messages=InMemoryMessageRepository(self._store, undo_log),
            notifications=InMemoryNotificationRepository(self._store, undo_log),
        )
        try:
            yield scope
        except BaseException:
            logger.debug(f"[UnitOfWork] Rolling back {len(undo_log)} write(s)")
            for step in reversed(undo_log):
                step()
            raise
