"""
JobSeekerProfile Entity - The candidate-side profile owned 1:1 by a JOB_SEEKER user.
"""

from dataclasses import dataclass
from jobchat.domain.value_objects.job_seeker_id import JobSeekerId
from jobchat.domain.value_objects.user_id import UserId


@dataclass
class JobSeekerProfile:
    id: JobSeekerId
    user_id: UserId
