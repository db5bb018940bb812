"""
User Entity - A marketplace account, read from the identity store.
"""

from dataclasses import dataclass
from typing import Optional
from jobchat.domain.value_objects.user_id import UserId
from jobchat.domain.value_objects.user_role import UserRole


@dataclass
class User:
    id: UserId
    role: UserRole
    name: Optional[str] = None
    image: Optional[str] = None
    email: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.role, UserRole):
            self.role = UserRole.parse(self.role)
