"""
JobPosting Entity - Referenced only, for the job summary of a conversation.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from jobchat.domain.value_objects.company_id import CompanyId
from jobchat.domain.value_objects.job_id import JobId


@dataclass
class JobPosting:
    id: JobId
    company_id: CompanyId
    title: str
    status: str
    application_deadline: Optional[datetime] = None
