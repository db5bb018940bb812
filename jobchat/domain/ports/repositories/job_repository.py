"""
Job Repository Port - Read access to job postings.
Implementation: jobchat/infrastructure/persistence/prisma_directory_repositories.py
"""

from abc import ABC, abstractmethod
from typing import Optional
from jobchat.domain.entities.job_posting import JobPosting
from jobchat.domain.value_objects.job_id import JobId


class JobRepository(ABC):
    @abstractmethod
    async def get_by_id(self, job_id: JobId) -> Optional[JobPosting]: ...
