import os
import time
from dataclasses import dataclass

# Must be set before jobchat.config.settings is imported
os.environ["SERVICE_AUTH_SECRET"] = "test-secret"
os.environ["SERVICE_AUTH_ISSUER"] = "marketplace-auth"
os.environ["SERVICE_AUTH_AUDIENCE"] = "jobchat"
os.environ["STORAGE_BACKEND"] = "memory"
os.environ["RATELIMIT_ENABLED"] = "false"
os.environ["LOG_PATH"] = ""

import jwt
import pytest
from fastapi.testclient import TestClient

from jobchat.domain.entities.company_profile import CompanyProfile
from jobchat.domain.entities.job_posting import JobPosting
from jobchat.domain.entities.job_seeker_profile import JobSeekerProfile
from jobchat.domain.value_objects.actor import Actor
from jobchat.domain.value_objects.user_id import UserId
from jobchat.domain.value_objects.user_role import UserRole
from jobchat.fastapi_app import create_fastapi_app
from jobchat.infrastructure.memory import InMemoryStore
from jobchat.setup.ioc import InMemoryProvider, create_container

SERVICE_AUTH_SECRET = "test-secret"
AUD = "jobchat"
ISS = "marketplace-auth"


def service_token(user_id, role, name=None, secret=SERVICE_AUTH_SECRET, ttl=300):
    now = int(time.time())
    claims = {
        "sub": str(user_id),
        "role": str(role),
        "iat": now,
        "exp": now + ttl,
        "iss": ISS,
        "aud": AUD,
    }
    if name:
        claims["name"] = name
    return jwt.encode(claims, secret, algorithm="HS256")


@dataclass
class World:
    store: InMemoryStore
    company: CompanyProfile
    job_seeker: JobSeekerProfile
    other_job_seeker: JobSeekerProfile
    other_company: CompanyProfile
    job: JobPosting

    def user(self, profile):
        return self.store.users[profile.user_id]

    def actor(self, profile) -> Actor:
        user = self.user(profile)
        return Actor(user_id=user.id, role=user.role, name=user.name)

    def headers(self, profile):
        user = self.user(profile)
        return {"Authorization": f"Bearer {service_token(user.id, user.role, user.name)}"}


@pytest.fixture()
def store():
    return InMemoryStore()


@pytest.fixture()
def world(store):
    company = store.add_company(
        name="Acme", image="https://img/acme-user.png", logo_url="https://img/acme.png"
    )
    return World(
        store=store,
        company=company,
        job_seeker=store.add_job_seeker(name="Ada", image="https://img/ada.png"),
        other_job_seeker=store.add_job_seeker(name="Bob"),
        other_company=store.add_company(name="Globex"),
        job=store.add_job(company, title="Backend Engineer"),
    )


@pytest.fixture()
def app(store):
    """A fresh app over the test's store."""
    return create_fastapi_app(create_container(InMemoryProvider(store)))


@pytest.fixture()
def client(app):
    return TestClient(app)


@pytest.fixture()
def company_headers(world):
    return world.headers(world.company)


@pytest.fixture()
def seeker_headers(world):
    return world.headers(world.job_seeker)


@pytest.fixture()
def stranger_id():
    return UserId("00000000-0000-4000-8000-000000000000")
