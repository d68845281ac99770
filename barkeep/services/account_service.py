"""
Account use cases: demo account bootstrap, avatars and per-account preferences.
"""

from __future__ import annotations

import logging
from typing import Optional

from barkeep.core.config import get_settings
from barkeep.core.security import email_hash
from barkeep.db.models import User
from barkeep.domain.accounts import DEMO_AVATAR_PATH, ONE_YEAR, PERMISSION_DEMO, validate_time_period
from barkeep.repositories import session_storage
from barkeep.repositories.repo_registry import RepoRegistry
from barkeep.repositories.session_storage import SessionData
from barkeep.repositories.sql_repository import SQLRepository
from barkeep.services.saved_search_store import SavedSearchStore, saved_search_store_for

logger = logging.getLogger(__name__)

DEFAULT_DEMO_REPO = "barkeep"


def avatar_url(user: User) -> str:
    if user.is_demo:
        return DEMO_AVATAR_PATH
    return f"{get_settings().gravatar_base_url}/{email_hash(user.email)}"


def ensure_demo_user(repository: Optional[SQLRepository] = None) -> User:
    """Return the shared demo account, creating it on first use."""
    repo = repository or SQLRepository()
    email = get_settings().demo_email
    user = repo.get_user_by_email(email)
    if user is None:
        user = repo.create_user(email, username="demo", permission=PERMISSION_DEMO)
    return user


def init_demo_session(
    session: SessionData,
    user: User,
    registry: RepoRegistry,
    repository: Optional[SQLRepository] = None,
) -> None:
    """Prepare the session of a demo account; no-op for everyone else.

    Demo users default to a one-year time period so they see plenty of
    commits even on an idle install. A brand new session gets one saved
    search on the "barkeep" repository when that repository is available.
    """
    if not user.is_demo:
        return
    session_storage.session_defaults(session, time_period=ONE_YEAR)
    if session_storage.has_saved_searches(session):
        return
    session_storage.store_entries(session, [])
    if registry.has_repo(DEFAULT_DEMO_REPO):
        store = saved_search_store_for(user, session, repository)
        store.create({"repos": DEFAULT_DEMO_REPO})
        logger.debug("Seeded demo session with a saved search on %s", DEFAULT_DEMO_REPO)


class AccountContext:
    """An account bound to the session of the current request."""

    def __init__(
        self,
        user: User,
        session: Optional[SessionData] = None,
        repository: Optional[SQLRepository] = None,
    ) -> None:
        self.user = user
        self.session = session if user.is_demo else None
        self.repository = repository or SQLRepository()
        self.saved_searches: SavedSearchStore = saved_search_store_for(user, session, self.repository)

    @property
    def is_demo(self) -> bool:
        return self.user.is_demo

    @property
    def is_admin(self) -> bool:
        return self.user.is_admin

    @property
    def avatar_url(self) -> str:
        return avatar_url(self.user)

    @property
    def saved_search_time_period(self) -> int | None:
        if self.session is not None:
            return self.session.get(session_storage.TIME_PERIOD_KEY)
        return self.user.saved_search_time_period

    @saved_search_time_period.setter
    def saved_search_time_period(self, value: int | None) -> None:
        validate_time_period(value)
        if self.session is not None:
            self.session[session_storage.TIME_PERIOD_KEY] = value
            return
        self.repository.update_user_time_period(self.user.id, value)
        self.user.saved_search_time_period = value

    def to_dict(self) -> dict:
        return {
            "id": self.user.id,
            "email": self.user.email,
            "username": self.user.username,
            "permission": self.user.permission,
            "avatar_url": self.avatar_url,
            "saved_search_time_period": self.saved_search_time_period,
        }
