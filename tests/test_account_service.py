from __future__ import annotations

import hashlib

import pytest

from barkeep.domain.validation import ValidationError
from barkeep.repositories.repo_registry import RepoRegistry
from barkeep.services.account_service import AccountContext, avatar_url, ensure_demo_user, init_demo_session
from barkeep.services.saved_search_store import DatabaseSavedSearchStore, SessionSavedSearchStore


def test_avatar_for_demo_is_static_asset(demo_user):
    assert avatar_url(demo_user) == "/assets/images/demo_avatar.png"


def test_avatar_hashes_lowercased_email(normal_user):
    digest = hashlib.md5(b"alice@example.com").hexdigest()
    assert avatar_url(normal_user) == f"https://gravatar.test/avatar/{digest}"


def test_ensure_demo_user_is_idempotent(repo):
    first = ensure_demo_user(repo)
    second = ensure_demo_user(repo)
    assert first.id == second.id
    assert first.is_demo
    assert first.email == "demo@barkeep.test"
    assert first.api_key


def test_fresh_demo_session_seeds_barkeep_search(demo_user, repo):
    session: dict = {}
    init_demo_session(session, demo_user, RepoRegistry.from_names(["barkeep", "other"]), repo)

    assert session["last_demo_saved_search_id"] == 1
    assert session["saved_search_time_period"] == 365
    assert len(session["saved_searches"]) == 1
    entry = session["saved_searches"][0]
    assert entry["repos"] == "barkeep"
    assert entry["id"] == 1
    assert entry["user_order"] == 0


def test_fresh_demo_session_without_barkeep_repo_is_empty(demo_user, repo):
    session: dict = {}
    init_demo_session(session, demo_user, RepoRegistry.from_names(["other"]), repo)
    assert session["saved_searches"] == []
    assert session["last_demo_saved_search_id"] == 0


def test_existing_demo_session_is_left_alone(demo_user, repo):
    session = {
        "last_demo_saved_search_id": 7,
        "saved_search_time_period": 3,
        "saved_searches": [{"id": 7, "user_id": demo_user.id, "user_order": 0}],
    }
    init_demo_session(session, demo_user, RepoRegistry.from_names(["barkeep"]), repo)
    assert session["last_demo_saved_search_id"] == 7
    assert session["saved_search_time_period"] == 3
    assert [e["id"] for e in session["saved_searches"]] == [7]


def test_non_demo_session_untouched(normal_user, repo):
    session: dict = {}
    init_demo_session(session, normal_user, RepoRegistry.from_names(["barkeep"]), repo)
    assert session == {}


def test_demo_time_period_lives_in_session(demo_user, repo):
    session: dict = {}
    init_demo_session(session, demo_user, RepoRegistry.from_names([]), repo)
    account = AccountContext(demo_user, session, repo)
    assert account.saved_search_time_period == 365
    account.saved_search_time_period = 30
    assert session["saved_search_time_period"] == 30
    assert repo.get_user(demo_user.id).saved_search_time_period is None


def test_normal_time_period_persists(normal_user, repo):
    account = AccountContext(normal_user, {}, repo)
    assert account.saved_search_time_period is None
    account.saved_search_time_period = 7
    assert account.saved_search_time_period == 7
    assert repo.get_user(normal_user.id).saved_search_time_period == 7


@pytest.mark.parametrize("value", [2, 100, 0])
def test_invalid_time_period_rejected_before_write(normal_user, demo_user, repo, value):
    session: dict = {"saved_search_time_period": 365}
    for account in (AccountContext(normal_user, {}, repo), AccountContext(demo_user, session, repo)):
        with pytest.raises(ValidationError) as exc:
            account.saved_search_time_period = value
        assert "saved_search_time_period" in exc.value.errors
    assert session["saved_search_time_period"] == 365
    assert repo.get_user(normal_user.id).saved_search_time_period is None


def test_account_context_selects_store(normal_user, demo_user, repo):
    assert isinstance(AccountContext(demo_user, {}, repo).saved_searches, SessionSavedSearchStore)
    assert isinstance(AccountContext(normal_user, {}, repo).saved_searches, DatabaseSavedSearchStore)
