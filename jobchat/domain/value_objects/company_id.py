"""
CompanyId Value Object - id of a company profile (not of its owning user).
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class CompanyId:
    value: str

    def __post_init__(self):
        if not self.value:
            raise ValueError("CompanyId cannot be empty")
        UUID(self.value)

    def __str__(self) -> str:
        return self.value
