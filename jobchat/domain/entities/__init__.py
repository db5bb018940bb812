"""
ENTITIES - Business objects with identity

Each entity:
- Has a unique identifier
- Has behavior (methods)
- Can change state over time
- Pure Python dataclasses (no ORM, no Pydantic)

User, CompanyProfile, JobSeekerProfile and JobPosting are owned by other
parts of the product and are only read here.
"""

from jobchat.domain.entities.user import User
from jobchat.domain.entities.company_profile import CompanyProfile
from jobchat.domain.entities.job_seeker_profile import JobSeekerProfile
from jobchat.domain.entities.job_posting import JobPosting
from jobchat.domain.entities.application import Application
from jobchat.domain.entities.message import Message
from jobchat.domain.entities.notification import Notification, NotificationType

__all__ = [
    "User",
    "CompanyProfile",
    "JobSeekerProfile",
    "JobPosting",
    "Application",
    "Message",
    "Notification",
    "NotificationType",
]
