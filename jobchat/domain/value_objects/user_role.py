"""
UserRole Value Object - The two sides of the marketplace.

Roles are a closed set. Anything that branches on a role (permission
matrix, dashboard routes) keys a table by this enum and is checked for
exhaustiveness.
"""

from enum import Enum


class UserRole(str, Enum):
    COMPANY = "COMPANY"
    JOB_SEEKER = "JOB_SEEKER"

    @classmethod
    def parse(cls, value: str) -> "UserRole":
        """Parse a role claim, accepting any casing."""
        if not value:
            raise ValueError("Role cannot be empty")
        try:
            return cls(value.strip().upper())
        except ValueError:
            raise ValueError(
                f"Invalid role: {value}. Must be one of {[r.value for r in cls]}."
            ) from None

    def __str__(self) -> str:
        return self.value
