import itertools

import pytest

from jobchat.domain.exceptions import AccessDeniedError
from jobchat.domain.services.dashboard_routes import (
    DASHBOARD_SEGMENTS,
    conversation_link_marker,
    dashboard_segment,
    messages_link,
)
from jobchat.domain.services.permission_guard import CONTACT_MATRIX, check_contact
from jobchat.domain.value_objects.application_id import ApplicationId
from jobchat.domain.value_objects.user_role import UserRole

APP_ID = ApplicationId("11111111-1111-4111-8111-111111111111")


def test_contact_matrix_covers_every_role_pair():
    expected = set(itertools.product(UserRole, UserRole))
    assert set(CONTACT_MATRIX) == expected


def test_dashboard_segments_cover_every_role():
    assert set(DASHBOARD_SEGMENTS) == set(UserRole)


def test_company_may_initiate_with_job_seeker():
    decision = check_contact(UserRole.COMPANY, UserRole.JOB_SEEKER)
    assert decision.allowed
    assert decision.may_initiate


def test_job_seeker_may_only_reply_to_company():
    decision = check_contact(UserRole.JOB_SEEKER, UserRole.COMPANY)
    assert decision.allowed
    assert not decision.may_initiate


@pytest.mark.parametrize(
    "role, reason",
    [
        (UserRole.COMPANY, "Companies cannot message other companies."),
        (UserRole.JOB_SEEKER, "Job seekers cannot message other job seekers."),
    ],
)
def test_same_role_pairs_are_rejected(role, reason):
    with pytest.raises(AccessDeniedError, match=reason):
        check_contact(role, role)


def test_dashboard_segment_spelling():
    assert dashboard_segment(UserRole.COMPANY) == "company"
    assert dashboard_segment(UserRole.JOB_SEEKER) == "job-seeker"


def test_messages_link_points_at_receiver_dashboard():
    assert (
        messages_link(UserRole.JOB_SEEKER, APP_ID)
        == f"/dashboard/job-seeker/messages?conversationId={APP_ID.value}"
    )
    assert messages_link(UserRole.COMPANY, APP_ID).startswith("/dashboard/company/")
    assert messages_link(UserRole.COMPANY, APP_ID).endswith(
        conversation_link_marker(APP_ID)
    )
