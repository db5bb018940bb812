from datetime import datetime, timedelta, timezone


def _seed_conversation(world, job_seeker, content, minutes_ago, job=None, read=False):
    application = world.store.add_application(world.company, job_seeker, job)
    world.store.add_message(
        application,
        world.company.user_id,
        job_seeker.user_id,
        content,
        created_at=datetime.now(timezone.utc) - timedelta(minutes=minutes_ago),
        read=read,
    )
    return application


def test_list_is_sorted_by_latest_message(client, world, company_headers):
    older = _seed_conversation(world, world.job_seeker, "old", minutes_ago=30)
    newer = _seed_conversation(world, world.other_job_seeker, "new", minutes_ago=1)

    conversations = client.get("/conversations", headers=company_headers).json()

    assert [c["id"] for c in conversations] == [newer.id.value, older.id.value]
    assert conversations[0]["counterpartyName"] == "Bob"
    assert conversations[0]["counterpartyRole"] == "job-seeker"
    assert conversations[0]["jobSeekerUserId"] == world.other_job_seeker.user_id.value
    # the company sent these, so nothing is unread on its side
    assert all(c["unreadCount"] == 0 for c in conversations)


def test_applications_without_messages_need_include_all(client, world, company_headers):
    empty = world.store.add_application(world.company, world.job_seeker, world.job)

    assert client.get("/conversations", headers=company_headers).json() == []

    [conversation] = client.get(
        "/conversations?include=all", headers=company_headers
    ).json()
    assert conversation["id"] == empty.id.value
    assert conversation["lastMessage"] == "No messages yet."
    assert conversation["timestamp"] is None
    assert conversation["job"]["title"] == "Backend Engineer"
    assert conversation["job"]["status"] == "ACTIVE"


def test_filters(client, world, company_headers):
    with_job = _seed_conversation(
        world, world.job_seeker, "about the job", minutes_ago=5, job=world.job
    )
    other = _seed_conversation(world, world.other_job_seeker, "hi", minutes_ago=3)

    def ids(query):
        res = client.get(f"/conversations?{query}", headers=company_headers)
        assert res.status_code == 200
        return [c["id"] for c in res.json()]

    assert ids(f"candidateId={world.job_seeker.user_id.value}") == [with_job.id.value]
    assert ids(f"jobId={world.job.id.value}") == [with_job.id.value]
    assert ids(f"applicationId={other.id.value}") == [other.id.value]


def test_candidate_filter_is_ignored_for_job_seekers(client, world, seeker_headers):
    application = _seed_conversation(world, world.job_seeker, "hello", minutes_ago=1)

    conversations = client.get(
        f"/conversations?candidateId={world.other_job_seeker.user_id.value}",
        headers=seeker_headers,
    ).json()

    assert [c["id"] for c in conversations] == [application.id.value]
    assert conversations[0]["unreadCount"] == 1


def test_users_only_see_their_own_conversations(client, world):
    _seed_conversation(world, world.job_seeker, "hello", minutes_ago=1)

    for profile in (world.other_job_seeker, world.other_company):
        assert client.get("/conversations", headers=world.headers(profile)).json() == []


def test_invalid_filter_is_bad_request(client, company_headers):
    res = client.get("/conversations?jobId=nope", headers=company_headers)
    assert res.status_code == 400

    res = client.get("/conversations?include=everything", headers=company_headers)
    assert res.status_code == 400


def test_open_returns_virtual_conversation(client, world, company_headers):
    seeker_id = world.job_seeker.user_id.value

    res = client.get(
        f"/conversations/open?candidateId={seeker_id}&jobTitle=Data%20Engineer",
        headers=company_headers,
    )

    assert res.status_code == 200
    conversation = res.json()
    assert conversation["id"] == f"virtual-{seeker_id}"
    assert conversation["counterpartyUserId"] == seeker_id
    assert conversation["counterpartyName"] == "Ada"
    assert conversation["lastMessage"] == "Start the conversation..."
    assert conversation["unreadCount"] == 0
    assert conversation["job"]["title"] == "Data Engineer"


def test_open_virtual_defaults(client, world, company_headers):
    application = world.store.add_application(world.company, world.job_seeker)

    conversation = client.get(
        f"/conversations/open?candidateId={world.job_seeker.user_id.value}"
        f"&applicationId={application.id.value}",
        headers=company_headers,
    ).json()

    assert conversation["id"] == f"virtual-{application.id.value}"
    assert conversation["job"]["title"] == "New Conversation"


def test_open_returns_existing_conversation(client, world, company_headers):
    application = _seed_conversation(world, world.job_seeker, "hello", minutes_ago=1)

    conversation = client.get(
        f"/conversations/open?candidateId={world.job_seeker.user_id.value}",
        headers=company_headers,
    ).json()

    assert conversation["id"] == application.id.value
    assert conversation["lastMessage"] == "hello"


def test_open_after_first_send_is_real(client, world, company_headers):
    seeker_id = world.job_seeker.user_id.value
    sent = client.post(
        "/messages",
        headers=company_headers,
        json={"receiverId": seeker_id, "content": "Hello"},
    ).json()

    conversation = client.get(
        f"/conversations/open?candidateId={seeker_id}", headers=company_headers
    ).json()

    assert conversation["id"] == sent["applicationId"]


def test_open_is_company_only(client, world, seeker_headers):
    res = client.get(
        f"/conversations/open?candidateId={world.job_seeker.user_id.value}",
        headers=seeker_headers,
    )
    assert res.status_code == 403


def test_open_unknown_candidate(client, company_headers, stranger_id):
    res = client.get(
        f"/conversations/open?candidateId={stranger_id.value}", headers=company_headers
    )
    assert res.status_code == 404


def test_open_requires_candidate(client, company_headers):
    assert client.get("/conversations/open", headers=company_headers).status_code == 400
