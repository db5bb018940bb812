"""End-to-end messaging flows over HTTP against the in-memory backend."""


def _send(client, headers, **body):
    return client.post("/messages", headers=headers, json=body)


def test_scenarios_first_contact_read_and_reply(client, world, company_headers, seeker_headers):
    seeker_id = world.job_seeker.user_id.value

    # A: company cold-messages a job seeker
    res = _send(client, company_headers, receiverId=seeker_id, content="Hello")
    assert res.status_code == 200
    sent = res.json()
    assert sent["content"] == "Hello"
    assert sent["read"] is False
    assert sent["receiverId"] == seeker_id
    application_id = sent["applicationId"]
    [application] = world.store.applications.values()
    assert application.id.value == application_id
    assert application.job_id is None

    notifications = client.get("/notifications", headers=seeker_headers).json()
    assert len(notifications) == 1
    assert notifications[0]["type"] == "NEW_MESSAGE"
    assert notifications[0]["link"] == (
        f"/dashboard/job-seeker/messages?conversationId={application_id}"
    )

    # B: job seeker sees one unread conversation, then reads it
    [conversation] = client.get("/conversations", headers=seeker_headers).json()
    assert conversation["id"] == application_id
    assert conversation["unreadCount"] == 1
    assert conversation["lastMessage"] == "Hello"
    assert conversation["counterpartyName"] == "Acme"
    assert conversation["counterpartyImage"] == "https://img/acme.png"
    assert conversation["counterpartyRole"] == "company"

    res = client.put(f"/conversations/{application_id}/messages", headers=seeker_headers)
    assert res.status_code == 200
    assert res.json() == {"markedRead": 1}
    [conversation] = client.get("/conversations", headers=seeker_headers).json()
    assert conversation["unreadCount"] == 0
    assert client.get("/notifications?unread=true", headers=seeker_headers).json() == []

    # C: job seeker replies inside the existing application
    res = _send(client, seeker_headers, applicationId=application_id, content="Hi")
    assert res.status_code == 200
    assert res.json()["applicationId"] == application_id
    assert res.json()["receiverId"] == world.company.user_id.value
    assert len(world.store.applications) == 1

    thread = client.get(
        f"/conversations/{application_id}/messages", headers=company_headers
    ).json()
    assert [m["content"] for m in thread] == ["Hello", "Hi"]


def test_scenario_job_seeker_without_application_is_forbidden(client, world):
    headers = world.headers(world.other_job_seeker)

    res = _send(
        client, headers, receiverId=world.company.user_id.value, content="Hire me"
    )

    assert res.status_code == 403
    assert "associated job application" in res.json()["error"]
    assert world.store.messages == []


def test_mark_read_twice_returns_zero(client, world, company_headers, seeker_headers):
    sent = _send(
        client, company_headers, receiverId=world.job_seeker.user_id.value, content="Hi"
    ).json()
    url = f"/conversations/{sent['applicationId']}/messages"

    assert client.put(url, headers=seeker_headers).json() == {"markedRead": 1}
    assert client.put(url, headers=seeker_headers).json() == {"markedRead": 0}


def test_virtual_application_id_is_reconciled(client, world, company_headers):
    seeker_id = world.job_seeker.user_id.value

    first = _send(
        client,
        company_headers,
        receiverId=seeker_id,
        applicationId=f"virtual-{seeker_id}",
        content="Hello",
    ).json()
    second = _send(
        client,
        company_headers,
        receiverId=seeker_id,
        applicationId=f"virtual-{seeker_id}",
        content="Still there?",
    ).json()

    assert first["applicationId"] == second["applicationId"]
    assert len(world.store.applications) == 1


def test_send_validation_errors(client, world, company_headers):
    res = _send(client, company_headers, content="Hello")
    assert res.status_code == 400

    res = _send(
        client, company_headers, receiverId=world.job_seeker.user_id.value, content=""
    )
    assert res.status_code == 400

    res = _send(client, company_headers, receiverId="not-a-uuid", content="Hello")
    assert res.status_code == 400

    res = client.post("/messages", headers=company_headers, json={"receiverId": "x"})
    assert res.status_code == 400
    assert res.json()["error"] == "Validation error"


def test_company_to_company_is_forbidden(client, world, company_headers):
    res = _send(
        client,
        company_headers,
        receiverId=world.other_company.user_id.value,
        content="Partnership?",
    )

    assert res.status_code == 403
    assert res.json() == {"error": "Companies cannot message other companies."}


def test_unknown_receiver_is_not_found(client, company_headers, stranger_id):
    res = _send(client, company_headers, receiverId=stranger_id.value, content="Hi")
    assert res.status_code == 404


def test_thread_is_private_to_participants(client, world):
    application = world.store.add_application(world.company, world.job_seeker)
    url = f"/conversations/{application.id.value}/messages"
    outsider = world.headers(world.other_job_seeker)

    assert client.get(url, headers=outsider).status_code == 403
    assert client.put(url, headers=outsider).status_code == 403


def test_thread_of_unknown_application(client, company_headers, stranger_id):
    res = client.get(
        f"/conversations/{stranger_id.value}/messages", headers=company_headers
    )
    assert res.status_code == 404


def test_virtual_thread_is_empty(client, world, company_headers):
    url = f"/conversations/virtual-{world.job_seeker.user_id.value}/messages"

    assert client.get(url, headers=company_headers).json() == []
    assert client.put(url, headers=company_headers).json() == {"markedRead": 0}
