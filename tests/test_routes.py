from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from barkeep.app import create_app
from barkeep.core.config import get_settings
from barkeep.repositories.repo_registry import RepoRegistry
from barkeep.services.account_service import AccountContext
from barkeep.services.session_service import current_account


@pytest.fixture()
def app(temp_db):
    return create_app(get_settings(), registry=RepoRegistry.from_names(["barkeep"]))


@pytest.fixture()
def client(app):
    return TestClient(app)


def test_requires_login(client):
    assert client.get("/users/me").status_code == 401
    assert client.get("/saved_searches").status_code == 401


def test_demo_login_seeds_session(client):
    res = client.post("/auth/demo")
    assert res.status_code == 200
    body = res.json()
    assert body["permission"] == "demo"
    assert body["avatar_url"] == "/assets/images/demo_avatar.png"
    assert body["saved_search_time_period"] == 365

    searches = client.get("/saved_searches").json()
    assert len(searches) == 1
    assert searches[0]["repos"] == "barkeep"
    assert searches[0]["id"] == 1


def test_demo_saved_search_flow(client):
    client.post("/auth/demo")

    res = client.post("/saved_searches", json={"authors": "alice"})
    assert res.status_code == 201
    created = res.json()
    assert created["id"] == 2
    assert created["user_order"] == 1

    assert [s["id"] for s in client.get("/saved_searches").json()] == [2, 1]

    res = client.patch("/saved_searches/2", json={"paths": "lib/"})
    assert res.status_code == 200
    assert res.json()["paths"] == "lib/"
    listed = client.get("/saved_searches").json()
    assert len(listed) == 2
    assert client.get("/saved_searches/2").json()["paths"] == "lib/"

    assert client.delete("/saved_searches/1").status_code == 204
    assert [s["id"] for s in client.get("/saved_searches").json()] == [2]
    assert client.delete("/saved_searches/1").status_code == 404
    assert client.get("/saved_searches/1").status_code == 404


def test_demo_preferences(client):
    client.post("/auth/demo")
    res = client.put("/users/me/preferences", json={"saved_search_time_period": 7})
    assert res.status_code == 200
    assert res.json()["saved_search_time_period"] == 7
    assert client.get("/users/me").json()["saved_search_time_period"] == 7

    res = client.put("/users/me/preferences", json={"saved_search_time_period": 5})
    assert res.status_code == 422
    assert res.json() == {"errors": {"saved_search_time_period": ["is invalid"]}}
    assert client.get("/users/me").json()["saved_search_time_period"] == 7


def test_logout_clears_session(client):
    client.post("/auth/demo")
    assert client.post("/auth/logout").json() == {"ok": True}
    assert client.get("/users/me").status_code == 401


def test_demo_login_without_barkeep_repo(temp_db):
    app = create_app(get_settings(), registry=RepoRegistry.from_names([]))
    client = TestClient(app)
    client.post("/auth/demo")
    assert client.get("/saved_searches").json() == []


def test_persisted_account_uses_database(app, client, repo, normal_user):
    app.dependency_overrides[current_account] = lambda: AccountContext(normal_user, {}, repo)

    res = client.post("/saved_searches", json={"repos": "barkeep", "unapproved_only": True})
    assert res.status_code == 201
    created = res.json()
    assert created["user_order"] == 0
    assert [s.id for s in repo.list_saved_searches(normal_user.id)] == [created["id"]]

    res = client.patch(f"/saved_searches/{created['id']}", json={"time_period": 4})
    assert res.status_code == 422
    assert "time_period" in res.json()["errors"]

    other = repo.create_user("eve@example.com")
    foreign = AccountContext(other, {}, repo).saved_searches
    theirs = foreign.save(foreign.create({"repos": "secret"}))
    assert client.delete(f"/saved_searches/{theirs.id}").status_code == 404
    assert repo.get_saved_search(other.id, theirs.id) is not None

    assert client.delete(f"/saved_searches/{created['id']}").status_code == 204
    assert repo.list_saved_searches(normal_user.id) == []

    res = client.put("/users/me/preferences", json={"saved_search_time_period": 30})
    assert res.status_code == 200
    assert repo.get_user(normal_user.id).saved_search_time_period == 30
    app.dependency_overrides.clear()


def test_oversized_id_is_not_found(app, client, repo, normal_user):
    huge = "99999999999999999999999"
    client.post("/auth/demo")
    assert client.get(f"/saved_searches/{huge}").status_code == 404
    assert client.delete(f"/saved_searches/{huge}").status_code == 404

    app.dependency_overrides[current_account] = lambda: AccountContext(normal_user, {}, repo)
    assert client.get(f"/saved_searches/{huge}").status_code == 404
    assert client.patch(f"/saved_searches/{huge}", json={"paths": "x"}).status_code == 404
    assert client.delete(f"/saved_searches/{huge}").status_code == 404
    app.dependency_overrides.clear()


def test_boolean_time_periods_are_rejected(client):
    client.post("/auth/demo")
    res = client.put("/users/me/preferences", json={"saved_search_time_period": True})
    assert res.status_code == 422
    assert client.get("/users/me").json()["saved_search_time_period"] == 365

    assert client.post("/saved_searches", json={"time_period": True}).status_code == 422
    assert client.patch("/saved_searches/1", json={"time_period": True}).status_code == 422
    assert len(client.get("/saved_searches").json()) == 1
