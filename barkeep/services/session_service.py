"""Session helpers (log in/out, resolve the current account)."""
from __future__ import annotations

import logging
from typing import Optional

from fastapi import HTTPException, Request

from barkeep.db.models import User
from barkeep.repositories.repo_registry import RepoRegistry
from barkeep.repositories.sql_repository import SQLRepository
from barkeep.services.account_service import AccountContext, ensure_demo_user, init_demo_session

logger = logging.getLogger(__name__)

SESSION_EMAIL_KEY = "email"

_repo = SQLRepository()


def get_registry(request: Request) -> RepoRegistry:
    registry = getattr(getattr(request.app, "state", None), "repo_registry", None)
    if registry is None:
        raise RuntimeError("RepoRegistry not configured")
    return registry


def current_user(request: Request) -> Optional[User]:
    """Return the account whose email is stored in the session cookie, if any."""
    email = request.session.get(SESSION_EMAIL_KEY)
    if not email:
        return None
    return _repo.get_user_by_email(email)


def login(request: Request, user: User) -> AccountContext:
    request.session.clear()
    request.session[SESSION_EMAIL_KEY] = user.email
    init_demo_session(request.session, user, get_registry(request), _repo)
    logger.info("User %s logged in", user.email)
    return AccountContext(user, request.session, _repo)


def login_demo(request: Request) -> AccountContext:
    return login(request, ensure_demo_user(_repo))


def logout(request: Request) -> None:
    request.session.clear()


def current_account(request: Request) -> AccountContext:
    """FastAPI dependency: the logged-in account bound to this request's session."""
    user = current_user(request)
    if user is None:
        raise HTTPException(401, "Login required")
    # Cookies from before a deploy may predate the demo keys.
    init_demo_session(request.session, user, get_registry(request), _repo)
    return AccountContext(user, request.session, _repo)
