from datetime import datetime, timedelta, timezone

import pytest

from jobchat.application.services import AnchorResolver, ParticipantResolver
from jobchat.domain.exceptions import AccessDeniedError, EntityNotFoundError
from jobchat.domain.services.permission_guard import check_contact
from jobchat.domain.value_objects.application_id import ApplicationId
from jobchat.domain.value_objects.user_role import UserRole
from jobchat.infrastructure.memory import (
    InMemoryApplicationRepository,
    InMemoryProfileRepository,
)

COMPANY_TO_SEEKER = check_contact(UserRole.COMPANY, UserRole.JOB_SEEKER)
SEEKER_TO_COMPANY = check_contact(UserRole.JOB_SEEKER, UserRole.COMPANY)
MISSING = ApplicationId("99999999-9999-4999-8999-999999999999")


async def _participants(world, company, job_seeker):
    resolver = ParticipantResolver(InMemoryProfileRepository(world.store))
    return await resolver.for_users(world.user(company), world.user(job_seeker))


@pytest.mark.asyncio
async def test_company_creates_shell_application(world):
    applications = InMemoryApplicationRepository(world.store)
    participants = await _participants(world, world.company, world.job_seeker)

    result = await AnchorResolver().resolve(
        applications, participants, COMPANY_TO_SEEKER
    )

    assert result.created
    assert result.application.is_shell
    assert result.application.links(world.company.id, world.job_seeker.id)
    assert result.application.id in world.store.applications


@pytest.mark.asyncio
async def test_reuses_most_recent_application_for_pair(world):
    now = datetime.now(timezone.utc)
    world.store.add_application(
        world.company, world.job_seeker, created_at=now - timedelta(days=2)
    )
    latest = world.store.add_application(
        world.company, world.job_seeker, world.job, created_at=now
    )
    participants = await _participants(world, world.job_seeker, world.company)

    result = await AnchorResolver().resolve(
        InMemoryApplicationRepository(world.store), participants, SEEKER_TO_COMPANY
    )

    assert not result.created
    assert result.application.id == latest.id
    assert len(world.store.applications) == 2


@pytest.mark.asyncio
async def test_job_id_narrows_lookup(world):
    shell = world.store.add_application(world.company, world.job_seeker)
    participants = await _participants(world, world.company, world.job_seeker)

    result = await AnchorResolver().resolve(
        InMemoryApplicationRepository(world.store),
        participants,
        COMPANY_TO_SEEKER,
        job_id=world.job.id,
    )

    assert result.created
    assert result.application.id != shell.id
    assert result.application.job_id == world.job.id


@pytest.mark.asyncio
async def test_job_seeker_cannot_initiate(world):
    participants = await _participants(world, world.job_seeker, world.company)

    with pytest.raises(AccessDeniedError, match="associated job application"):
        await AnchorResolver().resolve(
            InMemoryApplicationRepository(world.store), participants, SEEKER_TO_COMPANY
        )
    assert world.store.applications == {}


@pytest.mark.asyncio
async def test_explicit_application_must_exist(world):
    participants = await _participants(world, world.company, world.job_seeker)

    with pytest.raises(EntityNotFoundError):
        await AnchorResolver().resolve(
            InMemoryApplicationRepository(world.store),
            participants,
            COMPANY_TO_SEEKER,
            application_id=MISSING,
        )


@pytest.mark.asyncio
async def test_explicit_application_must_link_the_pair(world):
    other = world.store.add_application(world.company, world.other_job_seeker)
    participants = await _participants(world, world.company, world.job_seeker)

    with pytest.raises(AccessDeniedError):
        await AnchorResolver().resolve(
            InMemoryApplicationRepository(world.store),
            participants,
            COMPANY_TO_SEEKER,
            application_id=other.id,
        )


@pytest.mark.asyncio
async def test_profiles_are_required(world):
    resolver = ParticipantResolver(InMemoryProfileRepository(world.store))
    orphan = world.store.add_user(UserRole.JOB_SEEKER, name="No profile")

    with pytest.raises(EntityNotFoundError, match="profile"):
        await resolver.for_users(world.user(world.company), orphan)
