"""
Permission Guard - Who may message whom.

The matrix is keyed by (sender role, receiver role) and must cover every
pair of UserRole members. A company may start a conversation with a job
seeker; a job seeker may only reply inside an Application that already
links the two; same-role pairs are rejected.
"""

from dataclasses import dataclass

from jobchat.domain.exceptions.access_denied import AccessDeniedError
from jobchat.domain.exceptions.validation_error import DomainValidationError
from jobchat.domain.value_objects.user_role import UserRole


@dataclass(frozen=True)
class ContactDecision:
    allowed: bool
    may_initiate: bool
    reason: str = ""


CONTACT_MATRIX: dict[tuple[UserRole, UserRole], ContactDecision] = {
    (UserRole.COMPANY, UserRole.JOB_SEEKER): ContactDecision(
        allowed=True, may_initiate=True
    ),
    (UserRole.JOB_SEEKER, UserRole.COMPANY): ContactDecision(
        allowed=True, may_initiate=False
    ),
    (UserRole.COMPANY, UserRole.COMPANY): ContactDecision(
        allowed=False,
        may_initiate=False,
        reason="Companies cannot message other companies.",
    ),
    (UserRole.JOB_SEEKER, UserRole.JOB_SEEKER): ContactDecision(
        allowed=False,
        may_initiate=False,
        reason="Job seekers cannot message other job seekers.",
    ),
}


def check_contact(sender_role: UserRole, receiver_role: UserRole) -> ContactDecision:
    """
    Validate a sender/receiver role pair before any write.

    Returns:
        ContactDecision telling the caller whether the sender may create a
        new conversation anchor.

    Raises:
        AccessDeniedError: If the pair is not allowed to exchange messages
        DomainValidationError: If the pair has no rule (unknown role)
    """
    decision = CONTACT_MATRIX.get((sender_role, receiver_role))
    if decision is None:
        raise DomainValidationError(
            f"No contact rule for {sender_role} -> {receiver_role}."
        )
    if not decision.allowed:
        raise AccessDeniedError(decision.reason)
    return decision
