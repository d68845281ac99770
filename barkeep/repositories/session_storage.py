"""
Client-held session blob used as the saved-search store of demo accounts.

The mapping is the request's ``request.session``; the session middleware
serializes it back into the signed cookie after the response, so every value
kept here has to stay JSON friendly (ints, strings, lists and dicts).
"""

from __future__ import annotations

from typing import Any, MutableMapping

LAST_ID_KEY = "last_demo_saved_search_id"
SAVED_SEARCHES_KEY = "saved_searches"
TIME_PERIOD_KEY = "saved_search_time_period"

SessionData = MutableMapping[str, Any]


def session_defaults(session: SessionData, *, time_period: int | None) -> SessionData:
    """Fill the counter and time period keys without touching existing values."""
    if session.get(LAST_ID_KEY) is None:
        session[LAST_ID_KEY] = 0
    if session.get(TIME_PERIOD_KEY) is None:
        session[TIME_PERIOD_KEY] = time_period
    return session


def has_saved_searches(session: SessionData) -> bool:
    return session.get(SAVED_SEARCHES_KEY) is not None


def saved_search_entries(session: SessionData) -> list[dict]:
    entries = session.get(SAVED_SEARCHES_KEY)
    if entries is None:
        entries = []
        session[SAVED_SEARCHES_KEY] = entries
    return entries


def next_saved_search_id(session: SessionData) -> int:
    """Increment and return the session's last assigned saved-search id."""
    value = int(session.get(LAST_ID_KEY) or 0) + 1
    session[LAST_ID_KEY] = value
    return value


def store_entries(session: SessionData, entries: list[dict]) -> None:
    """Write the list back under its session key."""
    session[SAVED_SEARCHES_KEY] = entries
