"""
Actor Value Object - The authenticated user performing an operation.

Passed explicitly into every command and query so the core never reads
ambient session state.
"""

from dataclasses import dataclass
from typing import Optional
from jobchat.domain.value_objects.user_id import UserId
from jobchat.domain.value_objects.user_role import UserRole


@dataclass(frozen=True)
class Actor:
    user_id: UserId
    role: UserRole
    name: Optional[str] = None

    @property
    def is_company(self) -> bool:
        return self.role == UserRole.COMPANY

    @property
    def display_name(self) -> str:
        return self.name or "a user"
