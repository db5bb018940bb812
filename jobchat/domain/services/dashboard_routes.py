"""
Dashboard Routes - Role to URL path segment mapping for deep links.

Role spellings (JOB_SEEKER) differ from path segments (job-seeker), so the
mapping is an explicit table instead of a string transform.
"""

from jobchat.domain.exceptions.validation_error import DomainValidationError
from jobchat.domain.value_objects.application_id import ApplicationId
from jobchat.domain.value_objects.user_role import UserRole

DASHBOARD_SEGMENTS: dict[UserRole, str] = {
    UserRole.COMPANY: "company",
    UserRole.JOB_SEEKER: "job-seeker",
}


def dashboard_segment(role: UserRole) -> str:
    try:
        return DASHBOARD_SEGMENTS[role]
    except KeyError:
        raise DomainValidationError(f"No dashboard route for role {role}.") from None


def conversation_link_marker(application_id: ApplicationId) -> str:
    """Query fragment that identifies a conversation inside a notification link."""
    return f"conversationId={application_id.value}"


def messages_link(role: UserRole, application_id: ApplicationId) -> str:
    """Deep link to the messages view of role's dashboard, opened on one conversation."""
    return (
        f"/dashboard/{dashboard_segment(role)}/messages"
        f"?{conversation_link_marker(application_id)}"
    )
