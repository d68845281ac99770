"""SQLAlchemy models for accounts and their saved searches."""
from __future__ import annotations

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    func,
)
from sqlalchemy.orm import relationship, validates

from barkeep.domain.accounts import (
    PERMISSION_ADMIN,
    PERMISSION_DEMO,
    PERMISSION_NORMAL,
    validate_permission,
    validate_time_period,
)

from .session import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), unique=True, nullable=False)
    username = Column(String(255), nullable=True)
    permission = Column(String(16), default=PERMISSION_NORMAL, nullable=False)
    api_key = Column(String(64), unique=True, nullable=True)
    api_secret = Column(String(64), nullable=True)
    saved_search_time_period = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    saved_searches = relationship(
        "SavedSearch",
        back_populates="user",
        order_by="SavedSearch.user_order.desc()",
        cascade="all,delete-orphan",
        passive_deletes=True,
    )
    __mapper_args__ = {"eager_defaults": True}

    @validates("saved_search_time_period")
    def _validate_time_period(self, _key, value):
        return validate_time_period(value)

    @validates("permission")
    def _validate_permission(self, _key, value):
        return validate_permission(value)

    @property
    def is_demo(self) -> bool:
        return self.permission == PERMISSION_DEMO

    @property
    def is_admin(self) -> bool:
        return self.permission == PERMISSION_ADMIN

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email!r} permission={self.permission!r}>"


class SavedSearch(Base):
    __tablename__ = "saved_searches"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    user_order = Column(Integer, nullable=False, default=0)
    repos = Column(Text, nullable=True)
    authors = Column(Text, nullable=True)
    paths = Column(Text, nullable=True)
    messages = Column(Text, nullable=True)
    branches = Column(Text, nullable=True)
    unapproved_only = Column(Boolean, nullable=False, default=False)
    email_changes = Column(Boolean, nullable=False, default=False)
    email_comments = Column(Boolean, nullable=False, default=False)
    time_period = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    user = relationship("User", back_populates="saved_searches")
    __mapper_args__ = {"eager_defaults": True}

    @validates("time_period")
    def _validate_time_period(self, key, value):
        return validate_time_period(value, field=key)

    def __repr__(self) -> str:
        return f"<SavedSearch id={self.id} user_id={self.user_id} user_order={self.user_order}>"
