import pytest

from conftest import service_token


@pytest.mark.parametrize(
    "method, url",
    [
        ("get", "/conversations"),
        ("get", "/conversations/open"),
        ("get", "/conversations/11111111-1111-4111-8111-111111111111/messages"),
        ("put", "/conversations/11111111-1111-4111-8111-111111111111/messages"),
        ("post", "/messages"),
        ("get", "/notifications"),
    ],
)
def test_missing_token_is_unauthorized(client, method, url):
    # Checked before the body or query is validated
    res = getattr(client, method)(url)
    assert res.status_code == 401
    assert "error" in res.json()


def test_wrong_secret(client, world):
    token = service_token(world.job_seeker.user_id, "JOB_SEEKER", secret="other")
    res = client.get("/conversations", headers={"Authorization": f"Bearer {token}"})
    assert res.status_code == 401


def test_expired_token(client, world):
    token = service_token(world.job_seeker.user_id, "JOB_SEEKER", ttl=-60)
    res = client.get("/conversations", headers={"Authorization": f"Bearer {token}"})
    assert res.status_code == 401
    assert res.json() == {"error": "Token has expired"}


def test_unknown_role_claim(client, world):
    token = service_token(world.job_seeker.user_id, "ADMIN")
    res = client.get("/conversations", headers={"Authorization": f"Bearer {token}"})
    assert res.status_code == 401
    assert res.json() == {"error": "Missing required claims in token"}


def test_non_uuid_subject(client):
    token = service_token("someone@example.com", "COMPANY")
    res = client.get("/conversations", headers={"Authorization": f"Bearer {token}"})
    assert res.status_code == 401
