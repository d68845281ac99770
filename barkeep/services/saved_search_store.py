"""
Saved-search stores.

Real accounts keep their saved searches in the ``saved_searches`` table.
Demo accounts share a single database row, so their searches live in the
client-held session instead. Both stores expose the same operations and the
right one is picked once per account by ``saved_search_store_for``.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass, fields
from typing import Any, Mapping, Optional, Sequence, Union

from barkeep.db.models import SavedSearch, User
from barkeep.domain.accounts import (
    check_saved_search_options,
    coerce_id,
    next_user_order,
    validate_time_period,
)
from barkeep.domain.validation import ValidationError
from barkeep.repositories import session_storage
from barkeep.repositories.session_storage import SessionData
from barkeep.repositories.sql_repository import SQLRepository

logger = logging.getLogger(__name__)


@dataclass
class SessionSavedSearch:
    """Saved search of a demo account, kept as a dict in the session list."""

    id: int
    user_id: Optional[int]
    user_order: int = 0
    repos: Optional[str] = None
    authors: Optional[str] = None
    paths: Optional[str] = None
    messages: Optional[str] = None
    branches: Optional[str] = None
    unapproved_only: bool = False
    email_changes: bool = False
    email_comments: bool = False
    time_period: Optional[int] = None

    @classmethod
    def from_entry(cls, entry: Mapping[str, Any]) -> "SessionSavedSearch":
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in entry.items() if key in known})

    def to_entry(self) -> dict:
        return asdict(self)


AnySavedSearch = Union[SavedSearch, SessionSavedSearch]


class SavedSearchStore(ABC):
    """Operations on one account's saved searches."""

    def __init__(self, user: User) -> None:
        self.user = user

    @abstractmethod
    def list_all(self) -> Sequence[AnySavedSearch]:
        """Every saved search of the account, highest rank first."""

    @abstractmethod
    def create(self, options: Mapping[str, Any]) -> AnySavedSearch:
        """Build a saved search for the account from query options."""

    @abstractmethod
    def find(self, saved_search_id: Any) -> Optional[AnySavedSearch]:
        """The account's saved search with this id, or None."""

    @abstractmethod
    def delete(self, saved_search_id: Any) -> int:
        """Delete the account's saved search with this id; returns how many were removed."""

    @abstractmethod
    def save(self, search: AnySavedSearch) -> AnySavedSearch:
        """Write a new or modified saved search back to the backend."""

    def _prepare_options(self, options: Mapping[str, Any]) -> dict:
        values = dict(options)
        values.pop("id", None)
        check_saved_search_options(values)
        values["user_id"] = self.user.id
        if values.get("user_order") is None:
            values["user_order"] = next_user_order(search.user_order for search in self.list_all())
        return values


class DatabaseSavedSearchStore(SavedSearchStore):
    """Saved searches of a persisted account, one row each."""

    def __init__(self, user: User, repository: Optional[SQLRepository] = None) -> None:
        super().__init__(user)
        self.repository = repository or SQLRepository()

    def list_all(self) -> list[SavedSearch]:
        return self.repository.list_saved_searches(self.user.id)

    def create(self, options: Mapping[str, Any]) -> SavedSearch:
        # Unsaved on purpose: callers persist it through save().
        return SavedSearch(**self._prepare_options(options))

    def find(self, saved_search_id: Any) -> Optional[SavedSearch]:
        key = coerce_id(saved_search_id)
        if key is None:
            return None
        return self.repository.get_saved_search(self.user.id, key)

    def delete(self, saved_search_id: Any) -> int:
        key = coerce_id(saved_search_id)
        if key is None:
            return 0
        removed = self.repository.delete_saved_search(self.user.id, key)
        logger.debug("Deleted %d saved search(es) id=%s for user %s", removed, key, self.user.id)
        return removed

    def save(self, search: SavedSearch) -> SavedSearch:
        if search.id is not None and self.find(search.id) is None:
            raise ValidationError("id", "is not a saved search of this account")
        search.user_id = self.user.id
        return self.repository.save_saved_search(search)


class SessionSavedSearchStore(SavedSearchStore):
    """Saved searches of a demo account, kept in the request session."""

    def __init__(self, user: User, session: SessionData) -> None:
        super().__init__(user)
        self.session = session

    def _entries(self) -> list[dict]:
        return session_storage.saved_search_entries(self.session)

    def list_all(self) -> list[SessionSavedSearch]:
        searches = [SessionSavedSearch.from_entry(entry) for entry in self._entries()]
        searches.sort(key=lambda search: search.user_order, reverse=True)
        return searches

    def create(self, options: Mapping[str, Any]) -> SessionSavedSearch:
        values = self._prepare_options(options)
        values["id"] = session_storage.next_saved_search_id(self.session)
        search = SessionSavedSearch.from_entry(values)
        entries = self._entries()
        entries.append(search.to_entry())
        session_storage.store_entries(self.session, entries)
        return search

    def find(self, saved_search_id: Any) -> Optional[SessionSavedSearch]:
        key = coerce_id(saved_search_id)
        entry = next((entry for entry in self._entries() if entry.get("id") == key), None)
        return SessionSavedSearch.from_entry(entry) if entry is not None else None

    def delete(self, saved_search_id: Any) -> int:
        key = coerce_id(saved_search_id)
        entries = self._entries()
        for index, entry in enumerate(entries):
            if entry.get("id") == key:
                del entries[index]
                session_storage.store_entries(self.session, entries)
                return 1
        return 0

    def save(self, search: SessionSavedSearch) -> SessionSavedSearch:
        validate_time_period(search.time_period, field="time_period")
        search.user_id = self.user.id
        entry = search.to_entry()
        entries = self._entries()
        for index, existing in enumerate(entries):
            if existing.get("id") == search.id:
                entries[index] = entry
                break
        else:
            entries.append(entry)
        session_storage.store_entries(self.session, entries)
        return search


def saved_search_store_for(
    user: User,
    session: Optional[SessionData] = None,
    repository: Optional[SQLRepository] = None,
) -> SavedSearchStore:
    """Pick the backend for ``user``: the session for demo accounts, the database otherwise."""
    if user.is_demo:
        if session is None:
            raise ValueError("Demo accounts need a session to hold their saved searches.")
        return SessionSavedSearchStore(user, session)
    return DatabaseSavedSearchStore(user, repository)
