def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "API is running"}


def test_slack_flips_text(client):
    response = client.post(
        "/slack",
        data={"token": "tok-a", "trigger_word": "flip", "text": "flip hello"},
    )
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/json")
    assert response.json() == {
        "response_type": "in_channel",
        "text": "   (╯°□°）╯ ollǝɥ ┻━┻",
    }


def test_slack_empty_text(client):
    response = client.post(
        "/slack", data={"token": "tok-a", "trigger_word": "flip", "text": "flip"}
    )
    assert response.json()["text"] == "   (╯°□°）╯  ┻━┻"


def test_slack_auth_mismatch_still_responds(client):
    response = client.post(
        "/slack", data={"token": "unknown", "trigger_word": "other", "text": "A"}
    )
    assert response.status_code == 200
    assert response.json() == {"response_type": "in_channel", "text": "   (╯°□°）╯ ∀ ┻━┻"}


def test_slack_auth_mismatch_strict_mode(client_factory):
    client = client_factory(strict_auth=True)
    response = client.post(
        "/slack", data={"token": "unknown", "trigger_word": "flip", "text": "A"}
    )
    assert response.status_code == 403
    assert response.content == b""


def test_slack_malformed_body_is_not_found(client):
    response = client.post(
        "/slack",
        content=b'{"token": "tok-a"}',
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 404
    assert response.content == b""


def test_slack_missing_field_is_not_found(client):
    response = client.post("/slack", data={"token": "tok-a", "text": "hi"})
    assert response.status_code == 404
    assert response.content == b""


def test_slack_get_is_not_allowed(client):
    assert client.get("/slack").status_code == 405


def test_slack_broken_multipart_is_not_found(client):
    response = client.post(
        "/slack",
        content=b"--x\r\nbroken",
        headers={"Content-Type": "multipart/form-data"},
    )
    assert response.status_code == 404
    assert response.content == b""


def test_slack_bad_percent_escape_is_not_found(client):
    response = client.post(
        "/slack",
        content=b"token=tok-a&trigger_word=flip&text=flip%zzhi",
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )
    assert response.status_code == 404
    assert response.content == b""


def test_slack_valid_percent_escapes(client):
    response = client.post(
        "/slack",
        content=b"token=tok-a&trigger_word=flip&text=flip+%22hi%22%21",
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )
    assert response.status_code == 200
    assert response.json()["text"] == "   (╯°□°）╯ ¡,,ᴉɥ,, ┻━┻"
