"""
DOMAIN SERVICES - Pure business rules with no I/O.
"""

from jobchat.domain.services.permission_guard import (
    CONTACT_MATRIX,
    ContactDecision,
    check_contact,
)
from jobchat.domain.services.dashboard_routes import (
    DASHBOARD_SEGMENTS,
    conversation_link_marker,
    dashboard_segment,
    messages_link,
)

__all__ = [
    "CONTACT_MATRIX",
    "ContactDecision",
    "check_contact",
    "DASHBOARD_SEGMENTS",
    "conversation_link_marker",
    "dashboard_segment",
    "messages_link",
]
