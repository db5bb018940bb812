"""
JobId Value Object - reference to an externally owned job posting.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class JobId:
    value: str

    def __post_init__(self):
        if not self.value:
            raise ValueError("JobId cannot be empty")
        UUID(self.value)

    def __str__(self) -> str:
        return self.value
