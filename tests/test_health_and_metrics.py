def test_health(client):
    assert client.get("/").status_code == 200
    assert client.get("/health").json() == {"status": "healthy"}


def test_correlation_id_is_echoed(client):
    res = client.get("/health", headers={"X-Correlation-ID": "abc-123"})
    assert res.headers["X-Correlation-ID"] == "abc-123"


def test_metrics_exposes_messaging_counters(client, world, company_headers):
    client.post(
        "/messages",
        headers=company_headers,
        json={"receiverId": world.job_seeker.user_id.value, "content": "Hello"},
    )
    client.get("/conversations", headers=company_headers)

    res = client.get("/metrics")

    assert res.status_code == 200
    body = res.text
    assert "jobchat_messages_sent_total" in body
    assert "jobchat_shell_applications_created_total" in body
    assert "jobchat_conversation_list_size" in body
    assert 'route="/conversations"' in body
