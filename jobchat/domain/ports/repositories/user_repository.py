"""
User Repository Port - Read access to accounts owned by the identity store.
Implementation: jobchat/infrastructure/persistence/prisma_directory_repositories.py
"""

from abc import ABC, abstractmethod
from typing import Optional
from jobchat.domain.entities.user import User
from jobchat.domain.value_objects.user_id import UserId


class UserRepository(ABC):
    @abstractmethod
    async def get_by_id(self, user_id: UserId) -> Optional[User]: ...
