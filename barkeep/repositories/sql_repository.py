"""High-level data access helpers backed by SQLAlchemy."""
from __future__ import annotations

import logging
from typing import Callable, Optional

from sqlalchemy import select, update, delete

from barkeep.core.security import generate_user_key
from barkeep.db.models import User, SavedSearch
from barkeep.db.session import get_session
from barkeep.domain.accounts import PERMISSION_NORMAL, validate_time_period

logger = logging.getLogger(__name__)


class SQLRepository:
    """CRUD helpers wrapping the SQLAlchemy session."""

    # -------------------------- users --------------------------
    def get_user(self, user_id: int) -> Optional[User]:
        with get_session() as session:
            return session.get(User, user_id)

    def get_user_by_email(self, email: str) -> Optional[User]:
        email_value = (email or "").strip().lower()
        if not email_value:
            return None
        with get_session() as session:
            stmt = select(User).where(User.email == email_value)
            return session.execute(stmt).scalar_one_or_none()

    def list_users(self) -> list[User]:
        with get_session() as session:
            return session.execute(select(User).order_by(User.id)).scalars().all()

    def create_user(
        self,
        email: str,
        username: str | None = None,
        permission: str = PERMISSION_NORMAL,
        *,
        key_generator: Callable[[], str] = generate_user_key,
    ) -> User:
        """Insert a new account; API credentials are issued before the insert."""
        entity = User(
            email=(email or "").strip().lower(),
            username=username,
            permission=permission,
        )
        entity.api_key = key_generator()
        entity.api_secret = key_generator()
        with get_session() as session:
            session.add(entity)
            session.commit()
        logger.info("Created user %s (id=%s, permission=%s)", entity.email, entity.id, entity.permission)
        return entity

    def update_user_time_period(self, user_id: int, value: int | None) -> None:
        validate_time_period(value)
        with get_session() as session:
            stmt = update(User).where(User.id == user_id).values(saved_search_time_period=value)
            session.execute(stmt)
            session.commit()

    def delete_user(self, user_id: int) -> None:
        with get_session() as session:
            session.execute(delete(SavedSearch).where(SavedSearch.user_id == user_id))
            session.execute(delete(User).where(User.id == user_id))
            session.commit()
        logger.info("Deleted user id=%s", user_id)

    # -------------------------- saved searches --------------------------
    def list_saved_searches(self, user_id: int) -> list[SavedSearch]:
        with get_session() as session:
            stmt = (
                select(SavedSearch)
                .where(SavedSearch.user_id == user_id)
                .order_by(SavedSearch.user_order.desc(), SavedSearch.id.desc())
            )
            return session.execute(stmt).scalars().all()

    def get_saved_search(self, user_id: int, saved_search_id: int) -> Optional[SavedSearch]:
        with get_session() as session:
            stmt = select(SavedSearch).where(
                SavedSearch.user_id == user_id,
                SavedSearch.id == saved_search_id,
            )
            return session.execute(stmt).scalar_one_or_none()

    def save_saved_search(self, entity: SavedSearch) -> SavedSearch:
        """Insert a new saved search or write back changes to an existing one."""
        with get_session() as session:
            merged = session.merge(entity)
            session.commit()
            return merged

    def delete_saved_search(self, user_id: int, saved_search_id: int) -> int:
        """Delete a saved search owned by ``user_id``; returns the number of rows removed."""
        with get_session() as session:
            result = session.execute(
                delete(SavedSearch).where(
                    SavedSearch.user_id == user_id,
                    SavedSearch.id == saved_search_id,
                )
            )
            session.commit()
            return result.rowcount or 0
