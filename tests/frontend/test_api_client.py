import json

import pytest
import requests

from frontend.utils.api_client import (
    GENERIC_ERROR, ApiClient, AuthFailure, NetworkFailure, ServerFailure, ValidationFailure,
)
from frontend.utils.api_content import ProjectsApi, SkillsApi


class FakeResponse:
    def __init__(self, status_code, data=None, raw=None):
        self.status_code = status_code
        if raw is not None:
            self.content = raw.encode()
        elif data is not None:
            self.content = json.dumps(data).encode()
        else:
            self.content = b""

    def json(self):
        return json.loads(self.content)


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response or FakeResponse(200, [])
        self.error = error
        self.sent = []

    def request(self, method, url, json=None, headers=None, timeout=None):
        self.sent.append({"method": method, "url": url, "json": json, "headers": headers})
        if self.error:
            raise self.error
        return self.response


def _client(session, token=None):
    return ApiClient("http://api.local/", token_provider=lambda: token, session=session)


def test_bearer_attached_only_with_token():
    session = FakeSession()
    _client(session).request("/api/skills")
    _client(session, "tok").request("/api/skills")
    assert "Authorization" not in session.sent[0]["headers"]
    assert session.sent[1]["headers"]["Authorization"] == "Bearer tok"
    assert session.sent[0]["url"] == "http://api.local/api/skills"


def test_body_sets_content_type():
    session = FakeSession(FakeResponse(201, {"id": "1"}))
    assert _client(session).request("/api/contact", "POST", {"a": 1}) == {"id": "1"}
    sent = session.sent[0]
    assert sent["json"] == {"a": 1}
    assert sent["headers"]["Content-Type"] == "application/json"


def test_empty_success_body_is_none():
    assert _client(FakeSession(FakeResponse(204))).request("/x", "DELETE") is None


@pytest.mark.parametrize("status,cls", [
    (401, AuthFailure),
    (403, AuthFailure),
    (404, ValidationFailure),
    (422, ValidationFailure),
    (500, ServerFailure),
])
def test_status_maps_to_error_class(status, cls):
    session = FakeSession(FakeResponse(status, {"error": "boom"}))
    with pytest.raises(cls) as exc:
        _client(session).request("/x")
    assert exc.value.message == "boom"
    assert exc.value.status_code == status


def test_detail_used_when_no_error_key():
    session = FakeSession(FakeResponse(404, {"detail": "Not Found"}))
    with pytest.raises(ValidationFailure) as exc:
        _client(session).request("/x")
    assert exc.value.message == "Not Found"


def test_non_json_error_gets_generic_message():
    session = FakeSession(FakeResponse(502, raw="<html>bad gateway</html>"))
    with pytest.raises(ServerFailure) as exc:
        _client(session).request("/x")
    assert exc.value.message == GENERIC_ERROR


def test_network_error():
    session = FakeSession(error=requests.ConnectionError("refused"))
    with pytest.raises(NetworkFailure) as exc:
        _client(session).request("/x")
    assert exc.value.status_code is None


def test_401_with_token_notifies_listeners():
    seen = []
    client = _client(FakeSession(FakeResponse(401, {"error": "Token expired"})), "tok")
    client.add_auth_failure_listener(seen.append)
    with pytest.raises(AuthFailure):
        client.request("/api/skills", "POST", {})
    assert [e.message for e in seen] == ["Token expired"]


def test_401_without_token_does_not_notify():
    seen = []
    client = _client(FakeSession(FakeResponse(401, {"error": "Invalid credentials"})))
    client.add_auth_failure_listener(seen.append)
    with pytest.raises(AuthFailure):
        client.request("/api/auth/login", "POST", {})
    assert seen == []


def test_403_does_not_notify():
    seen = []
    client = _client(FakeSession(FakeResponse(403, {"error": "Insufficient role"})), "tok")
    client.add_auth_failure_listener(seen.append)
    with pytest.raises(AuthFailure):
        client.request("/api/skills", "POST", {})
    assert seen == []


def test_facades_build_paths_and_methods():
    session = FakeSession(FakeResponse(200, {"id": "p1"}))
    client = _client(session, "tok")
    ProjectsApi(client).get_by_id("p1")
    SkillsApi(client).update("s1", {"name": "Go"})
    SkillsApi(client).delete("s1")
    assert [(s["method"], s["url"]) for s in session.sent] == [
        ("GET", "http://api.local/api/projects/p1"),
        ("PUT", "http://api.local/api/skills/s1"),
        ("DELETE", "http://api.local/api/skills/s1"),
    ]
