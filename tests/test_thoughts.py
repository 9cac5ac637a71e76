import pytest
from fastapi.testclient import TestClient
from server.main import create_app
from server.models.thought import Thought

from conftest import make_settings


@pytest.fixture
def headers(alice):
    return {"Authorization": alice["accessToken"]}


def post(client, message, username="alice", headers=None):
    return client.post("/thoughts", json={"username": username, "message": message}, headers=headers)


def test_index_lists_routes(client):
    res = client.get("/")
    assert res.status_code == 200
    routes = res.json()["routes"][0]
    assert {"/register", "/login", "/thoughts"} <= set(routes)


def test_post_thought_echoes_record(client):
    res = post(client, "Sunny day")
    assert res.status_code == 201
    body = res.json()
    assert body["success"] is True
    thought = body["response"]
    assert thought["message"] == "Sunny day"
    assert thought["username"] == "alice"
    assert thought["hearts"] == 0
    assert thought["createdAt"]
    assert "accessToken" not in thought


def test_post_thought_without_username(client):
    res = client.post("/thoughts", json={"message": "anonymous joy"})
    assert res.status_code == 201
    assert res.json()["response"]["username"] is None


@pytest.mark.parametrize("payload", [{"username": "alice"}, {"username": "alice", "message": ""}])
def test_post_thought_requires_message(client, payload):
    res = client.post("/thoughts", json=payload)
    assert res.status_code == 400
    body = res.json()
    assert body["success"] is False
    assert body["response"] == "Can't post new thoughts"
    assert "message" in body["error"]


def test_post_thought_keeps_authorization_header_unchecked(client, db):
    res = post(client, "hello", headers={"Authorization": "whatever-was-sent"})
    assert res.status_code == 201
    stored = db.get(Thought, res.json()["response"]["id"])
    assert stored.access_token == "whatever-was-sent"


def test_post_thought_can_require_a_token():
    app = create_app(make_settings(REQUIRE_AUTH_TO_POST=True))
    with TestClient(app) as client:
        assert post(client, "no token").status_code == 401
        token = client.post(
            "/register", json={"username": "frank", "password": "password1"}
        ).json()["response"]["accessToken"]
        res = post(client, "with token", username="frank", headers={"Authorization": token})
        assert res.status_code == 201


def test_list_returns_twenty_newest_first(client, headers):
    for i in range(25):
        assert post(client, f"thought {i}").status_code == 201

    res = client.get("/thoughts", headers=headers)
    assert res.status_code == 201
    thoughts = res.json()
    assert len(thoughts) == 20
    assert [t["message"] for t in thoughts] == [f"thought {i}" for i in range(24, 4, -1)]


def test_like_increments_by_one_per_call(client, headers, db):
    thought_id = post(client, "like me").json()["response"]["id"]

    for expected in range(1, 4):
        res = client.post(f"/thoughts/{thought_id}/like", headers=headers)
        assert res.status_code == 200
        body = res.json()
        assert body["success"] is True
        assert body["response"]["id"] == thought_id
        assert body["response"]["hearts"] == expected

    assert db.get(Thought, thought_id).hearts == 3


def test_like_requires_token(client):
    thought_id = post(client, "like me").json()["response"]["id"]
    res = client.post(f"/thoughts/{thought_id}/like")
    assert res.status_code == 401
    assert res.json() == {"success": False, "response": "Please log in"}


@pytest.mark.parametrize("thought_id", ["9999", "not-an-id", "99999999999999999999999"])
def test_like_unknown_thought(client, headers, thought_id):
    res = client.post(f"/thoughts/{thought_id}/like", headers=headers)
    assert res.status_code == 400
    body = res.json()
    assert body["success"] is False
    assert body["response"] == "Can't update Likes"
    assert thought_id in body["error"]


def test_register_login_and_read_feed(client):
    registered = client.post("/register", json={"username": "alice", "password": "password1"})
    assert registered.status_code == 201
    token = registered.json()["response"]["accessToken"]

    logged_in = client.post("/login", json={"username": "alice", "password": "password1"})
    assert logged_in.json()["response"]["accessToken"] == token

    post(client, "first!", headers={"Authorization": token})
    res = client.get("/thoughts", headers={"Authorization": token})
    assert res.status_code == 201
    assert [t["message"] for t in res.json()] == ["first!"]


def test_post_thought_store_failure(client, app):
    Thought.__table__.drop(bind=app.state.engine)
    res = post(client, "into the void")
    assert res.status_code == 400
    body = res.json()
    assert body["success"] is False
    assert body["response"] == "Can't post new thoughts"
    assert "thoughts" in body["error"]


def test_like_store_failure(client, app, headers):
    thought_id = post(client, "like me").json()["response"]["id"]
    Thought.__table__.drop(bind=app.state.engine)

    res = client.post(f"/thoughts/{thought_id}/like", headers=headers)
    assert res.status_code == 400
    body = res.json()
    assert body["response"] == "Can't update Likes"
    assert "thoughts" in body["error"]
