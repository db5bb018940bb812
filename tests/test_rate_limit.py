import pytest

from jobchat.presentation.rate_limit import limiter


@pytest.fixture()
def rate_limited():
    limiter.reset()
    limiter.enabled = True
    yield limiter
    limiter.enabled = False
    limiter.reset()


def test_send_message_rate_limit(rate_limited, client, world, company_headers):
    payload = {"receiverId": world.job_seeker.user_id.value, "content": "ping"}
    status_codes = []
    for _ in range(40):
        res = client.post("/messages", headers=company_headers, json=payload)
        status_codes.append(res.status_code)

    assert status_codes[0] == 200
    assert any(code == 429 for code in status_codes), "Expected at least one 429 Too Many Requests response"
